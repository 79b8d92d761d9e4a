"""掃描流程：解析來源、走訪、依平台匯入並清除暫存。"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from ..config import ConfigManager
from ..models import (
    CUSTOM_PLATFORM,
    DEFAULT_CATEGORY,
    Category,
    ErrorCode,
    PreparedAsset,
    RecordReason,
    RecordStatus,
    ScannerConfig,
    ScannerFileRecord,
    ScanRunOptions,
    ScanRunResult,
    label_for,
)
from ..storage.interfaces import CategoryStore, DuplicateChecker, PreparedImporter
from ..utils import path_utils
from ..utils.cancel import CancellationToken
from ..utils.error_handler import ErrorHandler
from ..utils.logger import get_logger
from .config_store import ScannerConfigStore
from .source_catalog import SourceCatalog
from .staging import StagingArea
from .walker import DirectoryWalker
from .xor_codec import XorSignatureCodec


def resolve_target_category(
    platform: str, options: ScanRunOptions, scanner_config: ScannerConfig
) -> str:
    if scanner_config.merge_into_default_category:
        return DEFAULT_CATEGORY
    category_map = scanner_config.target_category_map
    return (
        options.target_category
        or category_map.get(platform)
        or category_map.get(CUSTOM_PLATFORM)
        or DEFAULT_CATEGORY
    )


class ScanOrchestrator:
    def __init__(
        self,
        config: ConfigManager,
        config_store: ScannerConfigStore,
        catalog: SourceCatalog,
        importer: PreparedImporter,
        categories: CategoryStore,
        duplicate_checker: Optional[DuplicateChecker] = None,
        codec: Optional[XorSignatureCodec] = None,
        logger=None,
    ) -> None:
        self.config = config
        self.config_store = config_store
        self.catalog = catalog
        self.importer = importer
        self.categories = categories
        self.duplicate_checker = duplicate_checker
        self.codec = codec
        self.logger = logger or get_logger(self.__class__.__name__)

    def run_scan(
        self,
        options: ScanRunOptions,
        *,
        cancel_token: Optional[CancellationToken] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> ScanRunResult:
        scanner_config = self.config_store.get_config()
        result = ScanRunResult()
        errors = ErrorHandler()

        working = self._resolve_working_sources(options, scanner_config, result)
        if not working:
            self.logger.info("沒有可掃描的來源")
            return result

        base_dir = self.config.get("staging.base_dir")
        staging = StagingArea(
            prefix=str(self.config.get("staging.dir_prefix", "emoji-scan-")),
            base_dir=Path(base_dir) if base_dir else None,
            logger=self.logger,
        )
        try:
            with staging:
                prepared = self._walk_sources(
                    working, staging, options, result, cancel_token, progress_callback
                )
                self._import_platforms(prepared, options, scanner_config, result, errors)
                self.config_store.save_config(
                    {"last_scan_at": datetime.now(timezone.utc).isoformat()}
                )
        except BaseException as exc:
            self.logger.error(f"掃描中止，暫存目錄已清除: {exc!r}")
            raise
        finally:
            if staging.teardown_error is not None:
                errors.add_warning(ErrorCode.TEARDOWN, str(staging.teardown_error))

        result.errors = errors.errors
        self.logger.info(
            f"掃描完成: 找到 {result.total_found}，匯入 {result.imported}，"
            f"略過 {result.skipped}，重複 {result.duplicates}，失敗 {result.failed}"
        )
        return result

    def _resolve_working_sources(
        self,
        options: ScanRunOptions,
        scanner_config: ScannerConfig,
        result: ScanRunResult,
    ) -> list[tuple[Path, str]]:
        working: list[tuple[Path, str]] = []
        seen: set[Path] = set()

        def add(path: Path, platform: str) -> None:
            if path not in seen:
                seen.add(path)
                working.append((path, platform))

        selected = set(options.source_ids)
        for source in self.catalog.detect_sources(scanner_config):
            if source.id in selected and source.exists:
                add(source.path, source.platform)

        for custom in scanner_config.custom_paths:
            path = path_utils.normalize_path(custom)
            if self.catalog.probe(path)[0]:
                add(path, CUSTOM_PLATFORM)

        for extra in path_utils.unique_normalized(options.additional_paths):
            path = Path(extra)
            if self.catalog.probe(path)[0]:
                add(path, CUSTOM_PLATFORM)
                continue
            self.logger.warning(f"{RecordReason.PATH_NOT_FOUND}: {path}")
            result.records.append(
                ScannerFileRecord(
                    original_path=path,
                    status=RecordStatus.FAILED,
                    reason=RecordReason.PATH_NOT_FOUND,
                )
            )
            result.total_found += 1
            result.failed += 1

        return working

    def _walk_sources(
        self,
        working: list[tuple[Path, str]],
        staging: StagingArea,
        options: ScanRunOptions,
        result: ScanRunResult,
        cancel_token: Optional[CancellationToken],
        progress_callback: Optional[Callable[[int], None]],
    ) -> dict[str, list[PreparedAsset]]:
        walker = DirectoryWalker(
            self.config,
            staging,
            codec=self.codec,
            duplicate_checker=self.duplicate_checker,
            logger=self.logger,
        )
        prepared: dict[str, list[PreparedAsset]] = {}

        for path, platform in working:
            offset = result.total_found
            walk_result = walker.walk(
                path,
                platform,
                result.records,
                skip_duplicates=options.skip_duplicates,
                cancel_token=cancel_token,
                progress_callback=(
                    (lambda count, base=offset: progress_callback(base + count))
                    if progress_callback is not None
                    else None
                ),
            )
            result.total_found += walk_result.total
            result.duplicates += walk_result.duplicates
            result.skipped += walk_result.skipped
            result.failed += walk_result.failed
            result.truncated = result.truncated or walk_result.truncated
            if walk_result.prepared:
                prepared.setdefault(platform, []).extend(walk_result.prepared)

        return prepared

    def _import_platforms(
        self,
        prepared: dict[str, list[PreparedAsset]],
        options: ScanRunOptions,
        scanner_config: ScannerConfig,
        result: ScanRunResult,
        errors: ErrorHandler,
    ) -> None:
        auto_tag = (
            options.auto_tag_platform
            if options.auto_tag_platform is not None
            else scanner_config.auto_tag_platform
        )

        for platform, assets in prepared.items():
            category = resolve_target_category(platform, options, scanner_config)
            if category != DEFAULT_CATEGORY:
                self._ensure_category(platform, category, errors)

            paths = [asset.staged_path for asset in assets]
            stats = self.importer.import_from_prepared_files(
                paths,
                target_category=category,
                skip_duplicates=False,
                auto_generate_tags=True,
                extra_tags=[platform] if auto_tag else [],
            )
            result.imported += stats.success
            unaccounted = max(0, len(paths) - stats.success)
            if unaccounted != stats.failed:
                errors.add_warning(
                    ErrorCode.IMPORT_PARTIAL,
                    f"{platform}: 匯入回報成功 {stats.success}、失敗 {stats.failed}，共 {len(paths)} 個檔案",
                )
            result.failed += unaccounted

    def _ensure_category(self, platform: str, category_id: str, errors: ErrorHandler) -> None:
        if any(category.id == category_id for category in self.categories.get_categories()):
            return
        label = label_for(platform)
        self.categories.add_category(
            Category(
                id=category_id,
                name=label.name,
                description=f"{label.name} 自动扫描",
                color=label.color,
            )
        )
        errors.add_info(ErrorCode.CATEGORY_CREATED, f"已建立分類 {category_id}")
