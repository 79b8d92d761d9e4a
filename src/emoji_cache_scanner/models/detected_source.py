"""來源偵測結果模型。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class DetectedSource:
    id: str
    platform: str
    label: str
    description: Optional[str]
    path: Path
    exists: bool
    recommended: bool
    default_path: Path
    is_override: bool = False
    last_modified: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "platform": self.platform,
            "label": self.label,
            "description": self.description,
            "path": str(self.path),
            "exists": self.exists,
            "recommended": self.recommended,
            "last_modified": self.last_modified,
            "default_path": str(self.default_path),
            "is_override": self.is_override,
        }
