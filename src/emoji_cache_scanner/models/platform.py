"""平台標籤與顏色。"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PlatformLabel:
    name: str
    color: str


PLATFORM_LABELS: dict[str, PlatformLabel] = {
    "wechat": PlatformLabel("微信", "#07C160"),
    "qq": PlatformLabel("QQ", "#0099FF"),
    "douyin": PlatformLabel("抖音", "#FF0050"),
    "telegram": PlatformLabel("Telegram", "#0088CC"),
    "discord": PlatformLabel("Discord", "#5865F2"),
    "slack": PlatformLabel("Slack", "#4A154B"),
    "teams": PlatformLabel("Teams", "#6264A7"),
    "browser": PlatformLabel("浏览器", "#8C54FF"),
    "custom": PlatformLabel("自定义", "#6c757d"),
}

CUSTOM_PLATFORM = "custom"
DEFAULT_CATEGORY = "default"


def label_for(platform: str) -> PlatformLabel:
    return PLATFORM_LABELS.get(platform, PLATFORM_LABELS[CUSTOM_PLATFORM])
