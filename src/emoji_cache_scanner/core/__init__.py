"""核心流程模組。"""

from .config_store import ScannerConfigStore
from .orchestrator import ScanOrchestrator, resolve_target_category
from .scanner import EmojiScanner
from .source_catalog import BUILTIN_CANDIDATES, SourceCandidate, SourceCatalog
from .staging import StagingArea, StagingError
from .walker import DirectoryWalker, WalkResult
from .xor_codec import DECODE_SIGNATURES, DecodeResult, Signature, XorSignatureCodec, xor_bytes

__all__ = [
    "BUILTIN_CANDIDATES",
    "DECODE_SIGNATURES",
    "DecodeResult",
    "DirectoryWalker",
    "EmojiScanner",
    "ScanOrchestrator",
    "ScannerConfigStore",
    "Signature",
    "SourceCandidate",
    "SourceCatalog",
    "StagingArea",
    "StagingError",
    "WalkResult",
    "XorSignatureCodec",
    "resolve_target_category",
    "xor_bytes",
]
