"""暫存與匯入用的檔案操作，失敗時依設定重試並指數退避。"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
import shutil
import time
from pathlib import Path
from typing import Any, Callable, Optional

from ..config.manager import ConfigManager
from .logger import get_logger


@dataclass
class OperationResult:
    success: bool
    error_message: Optional[str] = None
    retry_count: int = 0
    elapsed_time: float = 0.0
    value: Any = None


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 2
    backoff_base_sec: float = 0.2
    backoff_cap_sec: float = 2.0

    @classmethod
    def from_config(
        cls,
        config,
        max_retries: Optional[int] = None,
        backoff_base_sec: Optional[float] = None,
        backoff_cap_sec: Optional[float] = None,
    ) -> "RetryPolicy":
        cfg_get = getattr(config, "get", None)
        if not callable(cfg_get):
            raise TypeError("config 必須提供 get(key, default) 方法")

        def pick(explicit, key: str, fallback):
            return explicit if explicit is not None else cfg_get(key, fallback)

        return cls(
            max_retries=int(pick(max_retries, "retry.max_retries", cls.max_retries)),
            backoff_base_sec=float(pick(backoff_base_sec, "retry.backoff_base_sec", cls.backoff_base_sec)),
            backoff_cap_sec=float(pick(backoff_cap_sec, "retry.backoff_cap_sec", cls.backoff_cap_sec)),
        )

    def wait_for(self, attempt: int) -> float:
        return min(self.backoff_base_sec * (2**attempt), self.backoff_cap_sec)


def safe_op(
    *,
    config,
    max_retries: Optional[int] = None,
    backoff_base_sec: Optional[float] = None,
    backoff_cap_sec: Optional[float] = None,
    exceptions: tuple[type[BaseException], ...] = (OSError,),
    logger=None,
) -> Callable:
    """把可能失敗的檔案操作包成回傳 OperationResult 的函式。"""

    policy = RetryPolicy.from_config(config, max_retries, backoff_base_sec, backoff_cap_sec)
    op_logger = logger or get_logger("FileOps")

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args, **kwargs) -> OperationResult:
            started = time.time()
            last_error: BaseException | None = None

            for attempt in range(policy.max_retries + 1):
                try:
                    value = func(*args, **kwargs)
                except exceptions as exc:
                    last_error = exc
                    if attempt >= policy.max_retries:
                        break
                    wait_time = policy.wait_for(attempt)
                    op_logger.warning(
                        f"{func.__name__} 重試 {attempt + 1}/{policy.max_retries}，等待 {wait_time:.2f}s: {exc}"
                    )
                    time.sleep(wait_time)
                    continue
                return OperationResult(
                    success=True,
                    retry_count=attempt,
                    elapsed_time=time.time() - started,
                    value=value,
                )

            op_logger.error(f"{func.__name__} 最終失敗（重試 {policy.max_retries} 次）: {last_error}")
            return OperationResult(
                success=False,
                error_message=str(last_error) if last_error is not None else "Unknown error",
                retry_count=policy.max_retries,
                elapsed_time=time.time() - started,
            )

        return wrapper

    return decorator


def _resolve_config(config) -> ConfigManager:
    if config is None:
        return ConfigManager()
    return config


def safe_copy(
    src_path: Path,
    dst_path: Path,
    *,
    config=None,
    max_retries: Optional[int] = None,
    backoff_base_sec: Optional[float] = None,
    backoff_cap_sec: Optional[float] = None,
    logger=None,
) -> OperationResult:
    """複製檔案內容到暫存位置，不保留原始權限與時間戳。"""

    cfg = _resolve_config(config)

    @safe_op(
        config=cfg,
        max_retries=max_retries,
        backoff_base_sec=backoff_base_sec,
        backoff_cap_sec=backoff_cap_sec,
        logger=logger or get_logger("FileOps"),
    )
    def _copy() -> Path:
        shutil.copyfile(src_path, dst_path)
        return dst_path

    return _copy()


def safe_write_bytes(
    dst_path: Path,
    data: bytes,
    *,
    config=None,
    max_retries: Optional[int] = None,
    logger=None,
) -> OperationResult:
    cfg = _resolve_config(config)

    @safe_op(config=cfg, max_retries=max_retries, logger=logger or get_logger("FileOps"))
    def _write() -> int:
        return dst_path.write_bytes(data)

    return _write()


def safe_makedirs(
    path: Path,
    *,
    config=None,
    max_retries: Optional[int] = None,
    logger=None,
) -> OperationResult:
    cfg = _resolve_config(config)

    @safe_op(config=cfg, max_retries=max_retries, logger=logger or get_logger("FileOps"))
    def _makedirs() -> None:
        path.mkdir(parents=True, exist_ok=True)

    return _makedirs()


def read_bounded(path: Path, limit: int) -> bytes:
    """最多讀取 limit + 1 個位元組，讓呼叫端可判斷是否超出上限。"""

    with path.open("rb") as handle:
        return handle.read(limit + 1)
