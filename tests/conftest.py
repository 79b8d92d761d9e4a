from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Optional, Sequence

import pytest
from PIL import Image

from emoji_cache_scanner.config import ConfigManager
from emoji_cache_scanner.core import EmojiScanner, SourceCatalog
from emoji_cache_scanner.models import Category, ImportStats
from emoji_cache_scanner.utils.platform_paths import AppDataRoots

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def png_bytes(size=(8, 8), color=(255, 0, 0)) -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", size, color=color).save(buffer, "png")
    return buffer.getvalue()


def create_png(path: Path, size=(8, 8)) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(png_bytes(size))
    return path


class FakeSettings:
    def __init__(self) -> None:
        self.data: dict[str, object] = {}

    def get_setting(self, key: str):
        return self.data.get(key)

    def set_setting(self, key: str, value) -> None:
        self.data[key] = value


class FakeCategories:
    def __init__(self) -> None:
        self.categories: list[Category] = [Category(id="default", name="默认")]

    def get_categories(self) -> list[Category]:
        return list(self.categories)

    def add_category(self, category: Category) -> None:
        self.categories.append(category)


class FakeImporter:
    def __init__(
        self,
        duplicate_predicate: Optional[Callable[[Path], bool]] = None,
        fail_on: Optional[str] = None,
        stats: Optional[ImportStats] = None,
    ) -> None:
        self.calls: list[dict[str, object]] = []
        self.duplicate_checks: list[Path] = []
        self.duplicate_predicate = duplicate_predicate
        self.fail_on = fail_on
        self.stats = stats

    def is_duplicate(self, staged_path: Path) -> bool:
        self.duplicate_checks.append(staged_path)
        if self.duplicate_predicate is None:
            return False
        return self.duplicate_predicate(staged_path)

    def import_from_prepared_files(
        self,
        paths: Sequence[Path],
        *,
        target_category: str,
        skip_duplicates: bool = False,
        auto_generate_tags: bool = True,
        extra_tags: Optional[Sequence[str]] = None,
    ) -> ImportStats:
        platform = Path(paths[0]).parent.parent.name
        self.calls.append(
            {
                "platform": platform,
                "names": [Path(path).name for path in paths],
                "contents": [Path(path).read_bytes() for path in paths],
                "target_category": target_category,
                "skip_duplicates": skip_duplicates,
                "auto_generate_tags": auto_generate_tags,
                "extra_tags": list(extra_tags or []),
            }
        )
        if self.fail_on == platform:
            raise RuntimeError(f"import exploded for {platform}")
        if self.stats is not None:
            return self.stats
        return ImportStats(success=len(paths))


@pytest.fixture
def app_roots(tmp_path: Path) -> AppDataRoots:
    home = tmp_path / "home"
    return AppDataRoots(home=home, roaming=home / "roaming", local=home / "local")


@pytest.fixture
def staging_base(tmp_path: Path) -> Path:
    base = tmp_path / "staging"
    base.mkdir()
    return base


@pytest.fixture
def scanner_config(staging_base: Path) -> ConfigManager:
    config = ConfigManager()
    config.set("staging.base_dir", str(staging_base))
    config.set("retry.max_retries", 0)
    return config


@pytest.fixture
def make_scanner(app_roots: AppDataRoots, scanner_config: ConfigManager):
    def _make(importer: Optional[FakeImporter] = None, **kwargs):
        settings = kwargs.pop("settings", None) or FakeSettings()
        categories = kwargs.pop("categories", None) or FakeCategories()
        importer = importer or FakeImporter()
        scanner = EmojiScanner(
            settings,
            categories,
            importer,
            config=scanner_config,
            catalog=SourceCatalog(roots=app_roots),
            **kwargs,
        )
        return scanner, settings, categories, importer

    return _make
