"""表情庫的分類與項目模型。"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class Category:
    id: str
    name: str
    description: str = ""
    color: str = "#6c757d"
    parent_id: Optional[str] = None

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "color": self.color,
            "parent_id": self.parent_id,
        }


@dataclass
class EmojiItem:
    id: str
    filename: str
    original_path: str
    storage_path: str
    format: str
    size: int
    category_id: str
    width: int = 0
    height: int = 0
    hash_sha256: Optional[str] = None
    tags: List[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, object]:
        return {
            "id": self.id,
            "filename": self.filename,
            "original_path": self.original_path,
            "storage_path": self.storage_path,
            "format": self.format,
            "size": self.size,
            "category_id": self.category_id,
            "width": self.width,
            "height": self.height,
            "hash_sha256": self.hash_sha256,
            "tags": list(self.tags),
        }


@dataclass
class ImportStats:
    success: int = 0
    failed: int = 0
    duplicates: int = 0
