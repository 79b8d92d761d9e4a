"""設定檔驗證邏輯。"""

from __future__ import annotations

from typing import Any

SCANNER_CONFIG_LIST_FIELDS = ("enabled_sources", "custom_paths")
SCANNER_CONFIG_MAP_FIELDS = ("target_category_map", "source_overrides")
SCANNER_CONFIG_BOOL_FIELDS = (
    "auto_scan_on_launch",
    "merge_into_default_category",
    "auto_tag_platform",
)


def validate_config(config: dict[str, Any]) -> list[str]:
    errors: list[str] = []

    def add_error(path: str, message: str) -> None:
        errors.append(f"{path}: {message}")

    scan = config.get("scan", {})
    max_files = scan.get("max_files_per_source")
    max_size = scan.get("max_file_size_bytes")
    min_size = scan.get("min_file_size_bytes", 1)
    if not isinstance(max_files, int) or max_files <= 0:
        add_error("scan.max_files_per_source", "必須是正整數")
    if not isinstance(max_size, int) or max_size <= 0:
        add_error("scan.max_file_size_bytes", "必須是正整數")
    if not isinstance(min_size, int) or min_size < 1:
        add_error("scan.min_file_size_bytes", "必須是大於等於 1 的整數")
    if isinstance(max_size, int) and isinstance(min_size, int) and min_size > max_size:
        add_error("scan", "min_file_size_bytes 不可大於 max_file_size_bytes")

    for key in ("image_extensions", "special_extensions"):
        value = scan.get(key, [])
        if not isinstance(value, list) or any(not isinstance(item, str) for item in value):
            add_error(f"scan.{key}", "必須是字串清單")
        elif any(item and not item.startswith(".") for item in value):
            add_error(f"scan.{key}", "副檔名必須以 . 開頭")

    decode = config.get("decode", {})
    max_probe = decode.get("max_probe_bytes")
    if not isinstance(max_probe, int) or max_probe <= 0:
        add_error("decode.max_probe_bytes", "必須是正整數")

    staging = config.get("staging", {})
    prefix = staging.get("dir_prefix", "")
    base_dir = staging.get("base_dir")
    if not isinstance(prefix, str) or not prefix.strip():
        add_error("staging.dir_prefix", "必須是非空字串")
    if base_dir is not None and not isinstance(base_dir, str):
        add_error("staging.base_dir", "必須是字串或 null")

    retry = config.get("retry", {})
    max_retries = retry.get("max_retries", 2)
    backoff_base_sec = retry.get("backoff_base_sec", 0.2)
    backoff_cap_sec = retry.get("backoff_cap_sec", 2.0)
    if not isinstance(max_retries, int) or max_retries < 0:
        add_error("retry.max_retries", "必須是大於等於 0 的整數")
    if not isinstance(backoff_base_sec, (int, float)) or backoff_base_sec <= 0:
        add_error("retry.backoff_base_sec", "必須是大於 0 的數值")
    if not isinstance(backoff_cap_sec, (int, float)) or backoff_cap_sec <= 0:
        add_error("retry.backoff_cap_sec", "必須是大於 0 的數值")
    if (
        isinstance(backoff_base_sec, (int, float))
        and isinstance(backoff_cap_sec, (int, float))
        and backoff_base_sec > backoff_cap_sec
    ):
        add_error("retry", "backoff_base_sec 不可大於 backoff_cap_sec")

    chunk_size_kb = config.get("hash", {}).get("chunk_size_kb")
    if not isinstance(chunk_size_kb, int) or chunk_size_kb <= 0:
        add_error("hash.chunk_size_kb", "必須是正整數")

    scanner_key = config.get("settings", {}).get("scanner_key")
    if not isinstance(scanner_key, str) or not scanner_key.strip():
        add_error("settings.scanner_key", "必須是非空字串")

    return errors


def validate_scanner_config(partial: dict[str, Any]) -> list[str]:
    """驗證 save_config 收到的部分掃描設定。"""

    errors: list[str] = []
    known = (
        set(SCANNER_CONFIG_LIST_FIELDS)
        | set(SCANNER_CONFIG_MAP_FIELDS)
        | set(SCANNER_CONFIG_BOOL_FIELDS)
        | {"last_scan_at"}
    )

    for key, value in partial.items():
        if key not in known:
            errors.append(f"{key}: 未知的設定欄位")
            continue
        if key in SCANNER_CONFIG_LIST_FIELDS:
            if not isinstance(value, (list, tuple, set)) or any(
                not isinstance(item, str) or not item.strip() for item in value
            ):
                errors.append(f"{key}: 必須是非空字串清單")
        elif key in SCANNER_CONFIG_MAP_FIELDS:
            if not isinstance(value, dict) or any(
                not isinstance(k, str) or (v is not None and not isinstance(v, str))
                for k, v in value.items()
            ):
                errors.append(f"{key}: 必須是字串對字串的對照表")
        elif key in SCANNER_CONFIG_BOOL_FIELDS:
            if not isinstance(value, bool):
                errors.append(f"{key}: 必須是布林值")
        elif value is not None and not isinstance(value, str):
            errors.append(f"{key}: 必須是 ISO 時間字串或 null")

    return errors
