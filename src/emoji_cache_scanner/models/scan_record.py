"""單一檔案的掃描紀錄。"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class RecordStatus(str, Enum):
    COPIED = "copied"
    DECODED = "decoded"
    SKIPPED = "skipped"
    FAILED = "failed"


class RecordReason:
    PATH_NOT_FOUND = "路径不存在"
    UNREADABLE_PATH = "无法读取路径"
    DIRECTORY_INACCESSIBLE = "目录不可访问"
    SIZE_MISMATCH = "文件大小不匹配"
    COPY_FAILED = "复制失败"
    DECODE_WRITE_FAILED = "解码缓存失败"
    UNRECOGNIZED_CACHE = "无法识别的缓存格式"
    UNSUPPORTED_TYPE = "不支持的文件类型"
    DUPLICATE = "已存在相同文件"


@dataclass(frozen=True)
class ScannerFileRecord:
    original_path: Path
    status: RecordStatus
    staged_path: Optional[Path] = None
    reason: Optional[str] = None
    platform: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "original_path": str(self.original_path),
            "staged_path": str(self.staged_path) if self.staged_path else None,
            "status": self.status.value,
            "reason": self.reason,
            "platform": self.platform,
        }
