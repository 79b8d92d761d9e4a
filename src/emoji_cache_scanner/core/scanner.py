"""對外提供的掃描操作：偵測來源、讀寫設定、執行掃描。"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Mapping, Optional

from ..config import ConfigManager
from ..models import DetectedSource, ScannerConfig, ScanRunOptions, ScanRunResult
from ..storage import CategoryStore, JsonLibraryStore, LibraryImporter, PreparedImporter, SettingsStore
from ..utils.cancel import CancellationToken
from ..utils.logger import get_logger
from .config_store import ScannerConfigStore
from .orchestrator import ScanOrchestrator
from .source_catalog import SourceCatalog
from .xor_codec import XorSignatureCodec


class EmojiScanner:
    def __init__(
        self,
        settings: SettingsStore,
        categories: CategoryStore,
        importer: PreparedImporter,
        *,
        duplicate_checker=None,
        config: Optional[ConfigManager] = None,
        catalog: Optional[SourceCatalog] = None,
        logger=None,
    ) -> None:
        self.config = config or ConfigManager()
        self.logger = logger or get_logger(self.__class__.__name__)
        self.catalog = catalog or SourceCatalog(logger=self.logger)
        self.config_store = ScannerConfigStore(
            settings,
            key=str(self.config.get("settings.scanner_key", "scannerConfig")),
            logger=self.logger,
        )
        if duplicate_checker is None and callable(getattr(importer, "is_duplicate", None)):
            duplicate_checker = importer
        self.orchestrator = ScanOrchestrator(
            self.config,
            self.config_store,
            self.catalog,
            importer,
            categories,
            duplicate_checker=duplicate_checker,
            codec=XorSignatureCodec(
                max_probe_bytes=int(self.config.get("decode.max_probe_bytes", 12 * 1024 * 1024))
            ),
            logger=self.logger,
        )

    @classmethod
    def for_library(
        cls,
        library_dir: Path,
        config: Optional[ConfigManager] = None,
        catalog: Optional[SourceCatalog] = None,
    ) -> "EmojiScanner":
        config = config or ConfigManager()
        store = JsonLibraryStore(library_dir / "library.json")
        importer = LibraryImporter(library_dir / "emojis", store, config)
        return cls(store, store, importer, config=config, catalog=catalog)

    def detect_sources(self) -> list[DetectedSource]:
        return self.catalog.detect_sources(self.config_store.get_config())

    def get_config(self) -> ScannerConfig:
        return self.config_store.get_config()

    def save_config(self, partial: Mapping[str, Any]) -> ScannerConfig:
        return self.config_store.save_config(partial)

    def run_scan(
        self,
        options: Optional[ScanRunOptions] = None,
        *,
        cancel_token: Optional[CancellationToken] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> ScanRunResult:
        return self.orchestrator.run_scan(
            options or ScanRunOptions(),
            cancel_token=cancel_token,
            progress_callback=progress_callback,
        )
