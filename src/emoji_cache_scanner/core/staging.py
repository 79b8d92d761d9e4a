"""單次掃描的暫存目錄。"""

from __future__ import annotations

import shutil
import tempfile
import uuid
from pathlib import Path
from typing import Optional

from ..utils.logger import get_logger


class StagingError(OSError):
    """無法建立暫存根目錄。"""


class StagingArea:
    """每次掃描擁有一個暫存根目錄，結束時整棵移除。

    以 context manager 使用；離開區塊時無論是否發生例外都會 teardown。
    """

    def __init__(
        self,
        prefix: str = "emoji-scan-",
        base_dir: Optional[Path] = None,
        logger=None,
    ) -> None:
        self.prefix = prefix
        self.base_dir = base_dir
        self.logger = logger or get_logger(self.__class__.__name__)
        self.root: Optional[Path] = None
        self.teardown_error: Optional[OSError] = None

    def __enter__(self) -> "StagingArea":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.teardown()
        return False

    def open(self) -> Path:
        if self.root is not None:
            return self.root
        try:
            base = str(self.base_dir) if self.base_dir is not None else None
            self.root = Path(tempfile.mkdtemp(prefix=self.prefix, dir=base))
        except OSError as exc:
            raise StagingError(f"無法建立暫存目錄: {exc}") from exc
        self.logger.info(f"建立暫存目錄: {self.root}")
        return self.root

    def allocate(self, platform: str) -> Path:
        """為單一資產建立唯一的子目錄，避免不同來源的同名檔案互相覆蓋。"""

        if self.root is None:
            raise StagingError("暫存目錄尚未建立")
        target = self.root / platform / uuid.uuid4().hex
        target.mkdir(parents=True)
        return target

    def teardown(self) -> None:
        if self.root is None:
            return
        root, self.root = self.root, None
        try:
            shutil.rmtree(root)
        except FileNotFoundError:
            return
        except OSError as exc:
            self.teardown_error = exc
            self.logger.warning(f"無法清除暫存目錄: {root} ({exc})")
            shutil.rmtree(root, ignore_errors=True)
