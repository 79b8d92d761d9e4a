"""單一來源的目錄走訪、分類與暫存。"""

from __future__ import annotations

import os
import stat
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional

from ..config import ConfigManager
from ..models import PreparedAsset, RecordReason, RecordStatus, ScannerFileRecord
from ..utils import file_ops, path_utils
from ..utils.cancel import CancellationToken, raise_if_cancelled
from ..utils.hash_calc import hash_bytes
from ..utils.logger import get_logger
from .staging import StagingArea
from .xor_codec import DecodeResult, XorSignatureCodec


@dataclass
class WalkResult:
    prepared: List[PreparedAsset] = field(default_factory=list)
    total: int = 0
    duplicates: int = 0
    skipped: int = 0
    failed: int = 0
    truncated: bool = False


class DirectoryWalker:
    def __init__(
        self,
        config: ConfigManager,
        staging: StagingArea,
        codec: Optional[XorSignatureCodec] = None,
        duplicate_checker=None,
        logger=None,
    ) -> None:
        self.config = config
        self.staging = staging
        self.codec = codec or XorSignatureCodec(
            max_probe_bytes=int(config.get("decode.max_probe_bytes", 12 * 1024 * 1024))
        )
        self.duplicate_checker = duplicate_checker
        self.logger = logger or get_logger(self.__class__.__name__)
        self.max_files = int(config.get("scan.max_files_per_source", 5000))
        self.min_size = int(config.get("scan.min_file_size_bytes", 1))
        self.max_size = int(config.get("scan.max_file_size_bytes", 15 * 1024 * 1024))
        self.image_exts = {str(item).lower() for item in config.get("scan.image_extensions", [])}
        self.special_exts = {str(item).lower() for item in config.get("scan.special_extensions", [])}

    def walk(
        self,
        root: Path,
        platform: str,
        records: List[ScannerFileRecord],
        *,
        skip_duplicates: bool = True,
        cancel_token: Optional[CancellationToken] = None,
        progress_callback: Optional[Callable[[int], None]] = None,
    ) -> WalkResult:
        """以明確的堆疊走訪 root，每個造訪到的檔案恰好寫入一筆紀錄。"""

        result = WalkResult()
        stack: list[Path] = [root]

        def add(record: ScannerFileRecord) -> None:
            records.append(record)
            result.total += 1
            if record.status == RecordStatus.SKIPPED:
                result.skipped += 1
            elif record.status == RecordStatus.FAILED:
                result.failed += 1
            if progress_callback is not None:
                progress_callback(result.total)

        def at_ceiling() -> bool:
            if result.total < self.max_files:
                return False
            result.truncated = True
            self.logger.warning(f"來源已達走訪上限 {self.max_files}，其餘檔案略過: {root}")
            return True

        while stack:
            raise_if_cancelled(cancel_token, f"已取消掃描: {root}")
            current = stack.pop()
            try:
                info = os.stat(current)
            except (OSError, ValueError):
                if at_ceiling():
                    break
                add(self._record(current, RecordStatus.FAILED, RecordReason.UNREADABLE_PATH, platform))
                continue

            if stat.S_ISDIR(info.st_mode):
                if current != root and path_utils.is_symlinked_dir(current, self.logger):
                    continue
                try:
                    names = sorted(os.listdir(current))
                except OSError:
                    if at_ceiling():
                        break
                    add(
                        self._record(
                            current, RecordStatus.FAILED, RecordReason.DIRECTORY_INACCESSIBLE, platform
                        )
                    )
                    continue
                stack.extend(current / name for name in reversed(names))
                continue

            if not stat.S_ISREG(info.st_mode):
                continue
            if at_ceiling():
                break

            if info.st_size < self.min_size or info.st_size > self.max_size:
                add(self._record(current, RecordStatus.SKIPPED, RecordReason.SIZE_MISMATCH, platform))
                continue

            ext = current.suffix.lower()
            if ext in self.image_exts:
                asset = self._stage_copy(current, platform)
            elif ext in self.special_exts:
                decoded = self._try_decode(current)
                if decoded is None:
                    add(
                        self._record(
                            current, RecordStatus.SKIPPED, RecordReason.UNRECOGNIZED_CACHE, platform
                        )
                    )
                    continue
                asset = self._stage_decoded(current, decoded, platform)
            else:
                add(self._record(current, RecordStatus.SKIPPED, RecordReason.UNSUPPORTED_TYPE, platform))
                continue

            if isinstance(asset, ScannerFileRecord):
                add(asset)
                continue

            if skip_duplicates and self._is_duplicate(asset.staged_path):
                result.duplicates += 1
                add(
                    ScannerFileRecord(
                        original_path=current,
                        status=RecordStatus.SKIPPED,
                        staged_path=asset.staged_path,
                        reason=RecordReason.DUPLICATE,
                        platform=platform,
                    )
                )
                continue

            add(asset.record)
            result.prepared.append(asset)

        return result

    def _record(
        self, path: Path, status: RecordStatus, reason: str, platform: str
    ) -> ScannerFileRecord:
        if status == RecordStatus.FAILED:
            self.logger.warning(f"{reason}: {path}")
        return ScannerFileRecord(original_path=path, status=status, reason=reason, platform=platform)

    def _is_duplicate(self, staged_path: Path) -> bool:
        if self.duplicate_checker is None:
            return False
        return bool(self.duplicate_checker.is_duplicate(staged_path))

    def _stage_copy(self, path: Path, platform: str) -> PreparedAsset | ScannerFileRecord:
        try:
            target_dir = self.staging.allocate(platform)
        except OSError as exc:
            self.logger.warning(f"無法配置暫存目錄: {path} ({exc})")
            return self._record(path, RecordStatus.FAILED, RecordReason.COPY_FAILED, platform)

        target = target_dir / path.name
        copy_result = file_ops.safe_copy(path, target, config=self.config, logger=self.logger)
        if not copy_result.success:
            return self._record(path, RecordStatus.FAILED, RecordReason.COPY_FAILED, platform)

        record = ScannerFileRecord(
            original_path=path, status=RecordStatus.COPIED, staged_path=target, platform=platform
        )
        return PreparedAsset(platform=platform, original_path=path, staged_path=target, record=record)

    def _try_decode(self, path: Path) -> Optional[DecodeResult]:
        try:
            content = file_ops.read_bounded(path, self.codec.max_probe_bytes)
        except OSError as exc:
            self.logger.warning(f"無法讀取快取檔: {path} ({exc})")
            return None
        return self.codec.decode(content)

    def _stage_decoded(
        self, path: Path, decoded: DecodeResult, platform: str
    ) -> PreparedAsset | ScannerFileRecord:
        filename = f"{path.stem or hash_bytes(decoded.data)}{decoded.ext}"
        try:
            target_dir = self.staging.allocate(platform)
        except OSError as exc:
            self.logger.warning(f"無法配置暫存目錄: {path} ({exc})")
            return self._record(path, RecordStatus.FAILED, RecordReason.DECODE_WRITE_FAILED, platform)

        target = target_dir / filename
        write_result = file_ops.safe_write_bytes(target, decoded.data, config=self.config, logger=self.logger)
        if not write_result.success:
            return self._record(path, RecordStatus.FAILED, RecordReason.DECODE_WRITE_FAILED, platform)

        self.logger.info(f"DECODED: {path} -> {target} (key=0x{decoded.key:02X})")
        record = ScannerFileRecord(
            original_path=path, status=RecordStatus.DECODED, staged_path=target, platform=platform
        )
        return PreparedAsset(platform=platform, original_path=path, staged_path=target, record=record)
