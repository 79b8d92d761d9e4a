"""工具模組。"""

from . import file_ops, hash_calc, path_utils, reporting
from .cancel import CancelledError, CancellationToken

__all__ = ["file_ops", "hash_calc", "path_utils", "reporting", "CancelledError", "CancellationToken"]
