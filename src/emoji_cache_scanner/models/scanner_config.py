"""持久化的掃描設定。"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Optional

from .platform import PLATFORM_LABELS


def default_category_map() -> dict[str, str]:
    return {platform: platform for platform in PLATFORM_LABELS}


@dataclass
class ScannerConfig:
    enabled_sources: list[str] = field(default_factory=list)
    custom_paths: list[str] = field(default_factory=list)
    auto_scan_on_launch: bool = False
    target_category_map: dict[str, str] = field(default_factory=default_category_map)
    source_overrides: dict[str, str] = field(default_factory=dict)
    merge_into_default_category: bool = True
    auto_tag_platform: bool = False
    last_scan_at: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "ScannerConfig":
        known = {item.name for item in fields(cls)}
        config = cls(**{key: value for key, value in raw.items() if key in known})
        config.target_category_map = {**default_category_map(), **config.target_category_map}
        return config

    def to_dict(self) -> dict[str, object]:
        return {
            "enabled_sources": list(self.enabled_sources),
            "custom_paths": list(self.custom_paths),
            "auto_scan_on_launch": self.auto_scan_on_launch,
            "target_category_map": dict(self.target_category_map),
            "source_overrides": dict(self.source_overrides),
            "merge_into_default_category": self.merge_into_default_category,
            "auto_tag_platform": self.auto_tag_platform,
            "last_scan_at": self.last_scan_at,
        }
