import pytest

from emoji_cache_scanner.core import XorSignatureCodec, xor_bytes
from emoji_cache_scanner.core.xor_codec import Signature, derive_key

from conftest import PNG_MAGIC, png_bytes


def test_decode_recovers_obfuscated_png() -> None:
    original = png_bytes()
    codec = XorSignatureCodec()

    result = codec.decode(xor_bytes(original, 0x5A))

    assert result is not None
    assert result.ext == ".png"
    assert result.key == 0x5A
    assert result.data == original


def test_decode_header_only_xor_with_arbitrary_payload() -> None:
    header = bytes(value ^ 0x5A for value in PNG_MAGIC)
    payload = bytes((index * 37) & 0xFF for index in range(64))

    result = XorSignatureCodec().decode(header + payload)

    assert result is not None
    assert result.ext == ".png"
    assert result.data[:8] == PNG_MAGIC
    assert result.data[8:] == xor_bytes(payload, 0x5A)


@pytest.mark.parametrize(
    ("magic", "ext"),
    [
        (b"GIF89a", ".gif"),
        (b"GIF87a", ".gif"),
        (b"\xff\xd8\xff\xe0", ".jpg"),
        (b"RIFF\x24\x00\x00\x00WEBPVP8 ", ".webp"),
    ],
)
def test_decode_other_signatures(magic: bytes, ext: str) -> None:
    original = magic + b"\x00\x10payload-bytes"
    encoded = xor_bytes(original, 0xA7)

    result = XorSignatureCodec().decode(encoded)

    assert result is not None
    assert result.ext == ext
    assert result.data == original


def test_plain_image_decodes_with_zero_key() -> None:
    original = png_bytes()

    result = XorSignatureCodec().decode(original)

    assert result is not None
    assert result.key == 0
    assert result.data == original


def test_short_buffer_is_not_recognized() -> None:
    codec = XorSignatureCodec()

    assert codec.decode(b"") is None
    assert codec.decode(b"\x00\x01") is None
    assert derive_key(PNG_MAGIC[:7], Signature(".png", PNG_MAGIC)) is None


def test_oversized_buffer_is_not_recognized() -> None:
    codec = XorSignatureCodec(max_probe_bytes=16)
    data = PNG_MAGIC + b"\x00" * 9

    assert len(data) == 17
    assert codec.decode(data) is None
    assert codec.decode(data[:16]) is not None


def test_unknown_bytes_are_not_recognized() -> None:
    assert XorSignatureCodec().decode(b"hello world, plain text!") is None


def test_signature_offset_is_respected() -> None:
    codec = XorSignatureCodec(signatures=[Signature(".bin", b"MAGIC", offset=4)])
    data = xor_bytes(b"\x00\x00\x00\x00MAGIC-tail", 0x11)

    result = codec.decode(data)

    assert result is not None
    assert result.ext == ".bin"
    assert result.data.startswith(b"\x00\x00\x00\x00MAGIC")
    assert codec.decode(data[:8]) is None


def test_xor_bytes_is_self_inverse() -> None:
    data = bytes(range(256))

    assert xor_bytes(xor_bytes(data, 0x3C), 0x3C) == data


def test_xor_bytes_rejects_invalid_key() -> None:
    with pytest.raises(ValueError):
        xor_bytes(b"abc", 256)
