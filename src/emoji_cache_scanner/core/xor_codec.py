"""單位元組 XOR 混淆快取的特徵碼辨識與還原。

部分聊天軟體會把快取圖片的每個位元組與同一個 key 做 XOR。
由於目標格式的 magic bytes 已知，可由檔頭第一個位元組反推 key，
再驗證其餘特徵位元組是否一致。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

DEFAULT_MAX_PROBE_BYTES = 12 * 1024 * 1024


@dataclass(frozen=True)
class Signature:
    ext: str
    magic: bytes
    offset: int = 0

    @property
    def end(self) -> int:
        return self.offset + len(self.magic)


@dataclass(frozen=True)
class DecodeResult:
    data: bytes
    ext: str
    key: int


DECODE_SIGNATURES: tuple[Signature, ...] = (
    Signature(".png", b"\x89PNG\r\n\x1a\n"),
    Signature(".gif", b"GIF89a"),
    Signature(".gif", b"GIF87a"),
    Signature(".jpg", b"\xff\xd8\xff"),
    Signature(".webp", b"RIFF"),
)


def xor_bytes(data: bytes, key: int) -> bytes:
    """以同一個 key 對整段資料做 XOR；編碼與解碼是同一個操作。"""

    if not 0 <= key <= 0xFF:
        raise ValueError(f"XOR key 必須介於 0 到 255: {key}")
    if key == 0:
        return bytes(data)
    return bytes(data).translate(bytes(value ^ key for value in range(256)))


def derive_key(data: bytes, signature: Signature) -> Optional[int]:
    if len(data) < signature.end:
        return None
    key = data[signature.offset] ^ signature.magic[0]
    for index, expected in enumerate(signature.magic[1:], start=signature.offset + 1):
        if data[index] ^ key != expected:
            return None
    return key


class XorSignatureCodec:
    def __init__(
        self,
        signatures: Sequence[Signature] = DECODE_SIGNATURES,
        max_probe_bytes: int = DEFAULT_MAX_PROBE_BYTES,
    ) -> None:
        self.signatures = tuple(signatures)
        self.max_probe_bytes = max_probe_bytes

    def decode(self, data: bytes) -> Optional[DecodeResult]:
        """依優先順序比對特徵碼，回傳第一個完整吻合的還原結果。"""

        if not data or len(data) > self.max_probe_bytes:
            return None

        for signature in self.signatures:
            key = derive_key(data, signature)
            if key is None:
                continue
            return DecodeResult(data=xor_bytes(data, key), ext=signature.ext, key=key)
        return None
