"""表情庫儲存與匯入協作者。"""

from .importer import LibraryImporter, generate_tags
from .interfaces import CategoryStore, DuplicateChecker, PreparedImporter, SettingsStore
from .json_store import JsonLibraryStore

__all__ = [
    "CategoryStore",
    "DuplicateChecker",
    "JsonLibraryStore",
    "LibraryImporter",
    "PreparedImporter",
    "SettingsStore",
    "generate_tags",
]
