"""將暫存檔正式匯入表情庫目錄。"""

from __future__ import annotations

import re
import uuid
from pathlib import Path
from typing import Optional, Sequence

from ..config import ConfigManager
from ..models import EmojiItem, ImportStats
from ..utils import file_ops, hash_calc, image_utils
from ..utils.logger import get_logger
from .json_store import JsonLibraryStore


def generate_tags(filename: str) -> list[str]:
    words = re.split(r"[\s_\-]+", Path(filename).stem)
    tags: list[str] = []
    for word in words:
        tag = word.lower()
        if len(tag) > 1 and tag not in tags:
            tags.append(tag)
    return tags


class LibraryImporter:
    def __init__(
        self,
        library_dir: Path,
        store: JsonLibraryStore,
        config: Optional[ConfigManager] = None,
        logger=None,
    ) -> None:
        self.library_dir = library_dir
        self.store = store
        self.config = config or ConfigManager()
        self.logger = logger or get_logger(self.__class__.__name__)

    def _sha256(self, path: Path) -> Optional[str]:
        hashes = hash_calc.compute_hashes(
            path,
            ["sha256"],
            chunk_size_kb=int(self.config.get("hash.chunk_size_kb", 1024)),
            logger=self.logger,
        )
        return hashes.get("sha256")

    def is_duplicate(self, staged_path: Path) -> bool:
        """內容 hash 相同，或檔名與大小都相同時視為重複。"""

        try:
            size = staged_path.stat().st_size
        except OSError:
            return False
        digest = self._sha256(staged_path)
        for item in self.store.list_emojis():
            if digest and item.hash_sha256 == digest:
                return True
            if item.filename == staged_path.name and item.size == size:
                return True
        return False

    def import_from_prepared_files(
        self,
        paths: Sequence[Path],
        *,
        target_category: str,
        skip_duplicates: bool = False,
        auto_generate_tags: bool = True,
        extra_tags: Optional[Sequence[str]] = None,
    ) -> ImportStats:
        stats = ImportStats()
        file_ops.safe_makedirs(self.library_dir, config=self.config, logger=self.logger)

        for path in paths:
            if skip_duplicates and self.is_duplicate(path):
                stats.duplicates += 1
                continue
            try:
                item = self._import_one(path, target_category, auto_generate_tags, extra_tags or [])
            except OSError as exc:
                self.logger.warning(f"匯入失敗: {path} ({exc})")
                stats.failed += 1
                continue
            self.store.add_emoji(item)
            stats.success += 1

        self.logger.info(
            f"匯入至分類 {target_category}: 成功 {stats.success}，失敗 {stats.failed}，重複 {stats.duplicates}"
        )
        return stats

    def _import_one(
        self,
        path: Path,
        category_id: str,
        auto_generate_tags: bool,
        extra_tags: Sequence[str],
    ) -> EmojiItem:
        size = path.stat().st_size
        ext = path.suffix.lower()
        emoji_id = uuid.uuid4().hex
        storage_path = self.library_dir / f"{emoji_id}{ext}"

        copy_result = file_ops.safe_copy(path, storage_path, config=self.config, logger=self.logger)
        if not copy_result.success:
            raise OSError(copy_result.error_message)

        resolution = image_utils.get_image_resolution(storage_path, self.logger)
        width, height = resolution if resolution else (0, 0)

        tags = generate_tags(path.name) if auto_generate_tags else []
        for tag in extra_tags:
            if tag not in tags:
                tags.append(tag)

        return EmojiItem(
            id=emoji_id,
            filename=path.name,
            original_path=str(path),
            storage_path=str(storage_path),
            format=ext.lstrip("."),
            size=size,
            category_id=category_id or "default",
            width=width,
            height=height,
            hash_sha256=self._sha256(storage_path),
            tags=tags,
        )
