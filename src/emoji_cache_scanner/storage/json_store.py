"""以單一 JSON 檔保存設定、分類與表情索引。"""

from __future__ import annotations

import copy
import json
import threading
from pathlib import Path
from typing import Any

from ..models import Category, EmojiItem, label_for
from ..models.platform import DEFAULT_CATEGORY
from ..utils.logger import get_logger


def _empty_document() -> dict[str, Any]:
    default = label_for("custom")
    return {
        "settings": {},
        "categories": [
            Category(id=DEFAULT_CATEGORY, name="默认", color=default.color).to_dict(),
        ],
        "emojis": [],
    }


class JsonLibraryStore:
    def __init__(self, path: Path, logger=None) -> None:
        self.path = path
        self.logger = logger or get_logger(self.__class__.__name__)
        self._lock = threading.Lock()
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        if not self.path.exists():
            return _empty_document()
        with self.path.open("r", encoding="utf-8") as handle:
            raw = json.load(handle)
        document = _empty_document()
        document.update({key: raw[key] for key in document if key in raw})
        return document

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with temp_path.open("w", encoding="utf-8") as handle:
            json.dump(self._data, handle, ensure_ascii=False, indent=2)
        temp_path.replace(self.path)

    def get_setting(self, key: str) -> Any:
        with self._lock:
            return copy.deepcopy(self._data["settings"].get(key))

    def set_setting(self, key: str, value: Any) -> None:
        with self._lock:
            self._data["settings"][key] = copy.deepcopy(value)
            self._flush()

    def get_categories(self) -> list[Category]:
        with self._lock:
            return [Category(**item) for item in self._data["categories"]]

    def add_category(self, category: Category) -> None:
        with self._lock:
            if any(item["id"] == category.id for item in self._data["categories"]):
                raise ValueError(f"分類已存在: {category.id}")
            self._data["categories"].append(category.to_dict())
            self._flush()
        self.logger.info(f"新增分類: {category.id} ({category.name})")

    def list_emojis(self) -> list[EmojiItem]:
        with self._lock:
            return [EmojiItem(**item) for item in self._data["emojis"]]

    def add_emoji(self, item: EmojiItem) -> None:
        with self._lock:
            self._data["emojis"].append(item.to_dict())
            self._flush()
