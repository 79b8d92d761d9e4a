"""預設設定值。"""

DEFAULT_CONFIG = {
    "scan": {
        "max_files_per_source": 5000,
        "max_file_size_bytes": 15 * 1024 * 1024,
        "min_file_size_bytes": 1,
        "image_extensions": [".png", ".jpg", ".jpeg", ".gif", ".webp", ".bmp"],
        "special_extensions": [".dat", ".tmp", ".rdb", ""],
    },
    "decode": {
        "max_probe_bytes": 12 * 1024 * 1024,
    },
    "staging": {
        "dir_prefix": "emoji-scan-",
        "base_dir": None,
    },
    "retry": {
        "max_retries": 2,
        "backoff_base_sec": 0.2,
        "backoff_cap_sec": 2.0,
    },
    "hash": {
        "chunk_size_kb": 1024,
    },
    "settings": {
        "scanner_key": "scannerConfig",
    },
}
