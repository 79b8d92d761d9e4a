"""掃描執行的選項、結果與暫存資產。"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .error_record import ProcessError
from .scan_record import ScannerFileRecord


@dataclass
class ScanRunOptions:
    source_ids: List[str] = field(default_factory=list)
    additional_paths: List[str] = field(default_factory=list)
    skip_duplicates: bool = True
    auto_tag_platform: Optional[bool] = None
    target_category: Optional[str] = None


@dataclass
class PreparedAsset:
    platform: str
    original_path: Path
    staged_path: Path
    record: ScannerFileRecord


@dataclass
class ScanRunResult:
    total_found: int = 0
    imported: int = 0
    skipped: int = 0
    duplicates: int = 0
    failed: int = 0
    records: List[ScannerFileRecord] = field(default_factory=list)
    truncated: bool = False
    errors: List[ProcessError] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "total_found": self.total_found,
            "imported": self.imported,
            "skipped": self.skipped,
            "duplicates": self.duplicates,
            "failed": self.failed,
            "truncated": self.truncated,
            "records": [record.to_dict() for record in self.records],
            "errors": [error.to_dict() for error in self.errors],
        }
