"""可協作取消工具。"""

from __future__ import annotations

import threading
from typing import Optional


class CancelledError(Exception):
    """表示掃描已由呼叫端取消。"""


class CancellationToken:
    def __init__(self) -> None:
        self._event = threading.Event()

    def set(self) -> None:
        self._event.set()

    def is_cancelled(self) -> bool:
        return self._event.is_set()


def raise_if_cancelled(token: Optional[CancellationToken], message: str) -> None:
    if token is not None and token.is_cancelled():
        raise CancelledError(message)
