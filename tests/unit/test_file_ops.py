from pathlib import Path
from unittest.mock import patch

from emoji_cache_scanner.utils import file_ops


def test_safe_copy(tmp_path: Path) -> None:
    src = tmp_path / "source.png"
    dst = tmp_path / "dest.png"
    src.write_bytes(b"hello")

    result = file_ops.safe_copy(src, dst)

    assert result.success is True
    assert result.value == dst
    assert dst.read_bytes() == b"hello"


def test_safe_copy_retry_success(tmp_path: Path) -> None:
    src = tmp_path / "source.png"
    dst = tmp_path / "dest.png"
    src.write_bytes(b"hello")

    with patch("emoji_cache_scanner.utils.file_ops.time.sleep", return_value=None), patch(
        "emoji_cache_scanner.utils.file_ops.shutil.copyfile",
        side_effect=[OSError("Busy"), OSError("Busy"), None],
    ):
        result = file_ops.safe_copy(
            src,
            dst,
            max_retries=5,
            backoff_base_sec=0.01,
            backoff_cap_sec=0.01,
        )

    assert result.success is True
    assert result.retry_count == 2


def test_safe_copy_retry_failed(tmp_path: Path) -> None:
    src = tmp_path / "source.png"
    dst = tmp_path / "dest.png"
    src.write_bytes(b"hello")

    with patch("emoji_cache_scanner.utils.file_ops.time.sleep", return_value=None), patch(
        "emoji_cache_scanner.utils.file_ops.shutil.copyfile",
        side_effect=OSError("Busy"),
    ):
        result = file_ops.safe_copy(
            src,
            dst,
            max_retries=2,
            backoff_base_sec=0.01,
            backoff_cap_sec=0.01,
        )

    assert result.success is False
    assert result.retry_count == 2
    assert result.error_message is not None
    assert "Busy" in result.error_message


def test_safe_write_bytes_and_read_bounded(tmp_path: Path) -> None:
    target = tmp_path / "decoded.png"

    result = file_ops.safe_write_bytes(target, b"0123456789")

    assert result.success is True
    assert file_ops.read_bounded(target, 4) == b"01234"
    assert file_ops.read_bounded(target, 100) == b"0123456789"


def test_safe_makedirs(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b"

    assert file_ops.safe_makedirs(target).success is True
    assert target.is_dir()
