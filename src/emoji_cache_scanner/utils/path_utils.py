"""路徑處理工具。"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, os.PathLike]


def normalize_path(target: PathLike) -> Path:
    """展開 ~ 並轉為絕對路徑，不解析 symlink。"""

    return Path(os.path.abspath(os.path.expanduser(os.fspath(target))))


def unique_normalized(paths: Iterable[PathLike]) -> list[str]:
    seen: set[str] = set()
    result: list[str] = []
    for item in paths:
        normalized = str(normalize_path(item))
        if normalized in seen:
            continue
        seen.add(normalized)
        result.append(normalized)
    return result


def is_symlinked_dir(path: Path, logger=None) -> bool:
    """無法判斷時回傳 False，交由後續的 stat/listdir 產生失敗紀錄。"""

    try:
        linked = path.is_symlink() and path.is_dir()
    except OSError:
        return False
    if linked and logger is not None:
        logger.info(f"SKIPPED_SYMLINK: {path}")
    return linked
