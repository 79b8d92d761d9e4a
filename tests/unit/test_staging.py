from pathlib import Path
from unittest.mock import patch

import pytest

from emoji_cache_scanner.core import StagingArea, StagingError


def test_staging_allocates_unique_dirs_and_cleans_up(staging_base: Path) -> None:
    with StagingArea(prefix="emoji-scan-", base_dir=staging_base) as staging:
        root = staging.root
        assert root is not None
        assert root.parent == staging_base
        assert root.name.startswith("emoji-scan-")

        first = staging.allocate("qq")
        second = staging.allocate("qq")
        assert first != second
        assert first.parent == root / "qq"
        (first / "a.png").write_bytes(b"x")
        (second / "a.png").write_bytes(b"y")

    assert not root.exists()
    assert list(staging_base.iterdir()) == []


def test_staging_cleans_up_on_exception(staging_base: Path) -> None:
    with pytest.raises(RuntimeError):
        with StagingArea(base_dir=staging_base) as staging:
            staging.allocate("wechat")
            raise RuntimeError("boom")

    assert list(staging_base.iterdir()) == []


def test_staging_teardown_swallows_errors(staging_base: Path) -> None:
    staging = StagingArea(base_dir=staging_base)
    staging.open()

    with patch(
        "emoji_cache_scanner.core.staging.shutil.rmtree",
        side_effect=[PermissionError("busy"), None],
    ):
        staging.teardown()

    assert isinstance(staging.teardown_error, PermissionError)
    assert staging.root is None


def test_staging_open_failure_raises(tmp_path: Path) -> None:
    staging = StagingArea(base_dir=tmp_path / "missing" / "deeper")

    with pytest.raises(StagingError):
        staging.open()


def test_allocate_requires_open_root() -> None:
    with pytest.raises(StagingError):
        StagingArea().allocate("qq")
