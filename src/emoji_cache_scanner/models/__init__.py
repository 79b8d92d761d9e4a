"""資料模型模組。"""

from .detected_source import DetectedSource
from .error_record import ErrorCode, ErrorLevel, ProcessError
from .library import Category, EmojiItem, ImportStats
from .platform import CUSTOM_PLATFORM, DEFAULT_CATEGORY, PLATFORM_LABELS, PlatformLabel, label_for
from .scan_record import RecordReason, RecordStatus, ScannerFileRecord
from .scan_result import PreparedAsset, ScanRunOptions, ScanRunResult
from .scanner_config import ScannerConfig, default_category_map

__all__ = [
    "Category",
    "CUSTOM_PLATFORM",
    "DEFAULT_CATEGORY",
    "DetectedSource",
    "EmojiItem",
    "ErrorCode",
    "ErrorLevel",
    "ImportStats",
    "PLATFORM_LABELS",
    "PlatformLabel",
    "PreparedAsset",
    "ProcessError",
    "RecordReason",
    "RecordStatus",
    "ScanRunOptions",
    "ScanRunResult",
    "ScannerConfig",
    "ScannerFileRecord",
    "default_category_map",
    "label_for",
]
