"""掃描器依賴的外部協作者介面。"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional, Protocol, Sequence

from ..models import Category, ImportStats


class SettingsStore(Protocol):
    def get_setting(self, key: str) -> Any: ...

    def set_setting(self, key: str, value: Any) -> None: ...


class CategoryStore(Protocol):
    def get_categories(self) -> list[Category]: ...

    def add_category(self, category: Category) -> None: ...


class DuplicateChecker(Protocol):
    def is_duplicate(self, staged_path: Path) -> bool: ...


class PreparedImporter(Protocol):
    def import_from_prepared_files(
        self,
        paths: Sequence[Path],
        *,
        target_category: str,
        skip_duplicates: bool = False,
        auto_generate_tags: bool = True,
        extra_tags: Optional[Sequence[str]] = None,
    ) -> ImportStats: ...
