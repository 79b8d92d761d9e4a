"""日誌工具。"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

LOG_FILE_ENV = "EMOJI_SCANNER_LOG_FILE"


def _resolve_log_path(log_file: Optional[Path]) -> Path:
    if log_file is not None:
        return log_file
    from_env = os.environ.get(LOG_FILE_ENV)
    if from_env:
        return Path(from_env)
    return Path.cwd() / "error.log"


def get_logger(name: str, log_file: Optional[Path] = None) -> logging.Logger:
    logger = logging.getLogger(f"emoji_cache_scanner.{name}")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    formatter = logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")

    log_path = _resolve_log_path(log_file)
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8", delay=True)
    except OSError:
        file_handler = None
    if file_handler is not None:
        file_handler.setLevel(logging.WARNING)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.INFO)
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    return logger
