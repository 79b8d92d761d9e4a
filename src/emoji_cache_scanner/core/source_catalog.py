"""內建候選來源目錄與存在性探測。"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Optional

from ..models import DetectedSource, ScannerConfig
from ..utils import path_utils
from ..utils.logger import get_logger
from ..utils.platform_paths import AppDataRoots, resolve_app_data_roots


@dataclass(frozen=True)
class SourceCandidate:
    id: str
    platform: str
    label: str
    description: str
    path_factory: Callable[[AppDataRoots], Path]
    recommended: bool = False


BUILTIN_CANDIDATES: tuple[SourceCandidate, ...] = (
    SourceCandidate(
        "wechat-appdata", "wechat", "微信缓存目录", "默认聊天资源位置",
        lambda roots: roots.roaming / "Tencent" / "WeChat" / "WeChat Files", True,
    ),
    SourceCandidate(
        "wechat-documents", "wechat", "微信文档目录", "部分版本存储在文档目录",
        lambda roots: roots.documents / "WeChat Files",
    ),
    SourceCandidate(
        "qq-appdata", "qq", "QQ 缓存目录", "包含好友/群图片缓存",
        lambda roots: roots.roaming / "Tencent" / "QQ", True,
    ),
    SourceCandidate(
        "qq-documents", "qq", "QQ 公共文件夹", "公共文档中的 QQ 表情",
        lambda roots: roots.documents / "Tencent Files",
    ),
    SourceCandidate(
        "douyin-cache", "douyin", "抖音缓存目录", "Douyin PC 版默认缓存",
        lambda roots: roots.local / "Douyin" / "livecache",
    ),
    SourceCandidate(
        "telegram-desktop", "telegram", "Telegram Desktop", "Telegram 桌面版缓存目录",
        lambda roots: roots.roaming / "Telegram Desktop" / "tdata", True,
    ),
    SourceCandidate(
        "discord-cache", "discord", "Discord 缓存", "Discord 表情和图片缓存",
        lambda roots: roots.roaming / "discord" / "Cache", True,
    ),
    SourceCandidate(
        "discord-local", "discord", "Discord 本地存储", "Discord 本地存储目录",
        lambda roots: roots.local / "Discord" / "Cache",
    ),
    SourceCandidate(
        "slack-cache", "slack", "Slack 缓存", "Slack 表情和图片缓存",
        lambda roots: roots.local / "Slack" / "Cache", True,
    ),
    SourceCandidate(
        "teams-cache", "teams", "Microsoft Teams", "Teams 表情和贴纸缓存",
        lambda roots: roots.roaming / "Microsoft" / "Teams" / "Cache", True,
    ),
    SourceCandidate(
        "teams-backgrounds", "teams", "Teams 背景图片", "Teams 自定义背景图片",
        lambda roots: roots.roaming / "Microsoft" / "Teams" / "Backgrounds",
    ),
    SourceCandidate(
        "browser-downloads", "browser", "浏览器下载目录", "常见的下载保存位置",
        lambda roots: roots.downloads,
    ),
    SourceCandidate(
        "browser-chrome-cache", "browser", "Chrome 缓存", "Chrome 浏览器图片缓存",
        lambda roots: roots.local / "Google" / "Chrome" / "User Data" / "Default" / "Cache",
    ),
    SourceCandidate(
        "browser-edge-cache", "browser", "Edge 缓存", "Edge 浏览器图片缓存",
        lambda roots: roots.local / "Microsoft" / "Edge" / "User Data" / "Default" / "Cache",
    ),
)


class SourceCatalog:
    def __init__(
        self,
        roots: Optional[AppDataRoots] = None,
        candidates: tuple[SourceCandidate, ...] = BUILTIN_CANDIDATES,
        logger=None,
    ) -> None:
        self.roots = roots or resolve_app_data_roots()
        self.candidates = candidates
        self.logger = logger or get_logger(self.__class__.__name__)

    def detect_sources(self, config: ScannerConfig) -> list[DetectedSource]:
        overrides = config.source_overrides or {}
        detected: list[DetectedSource] = []

        for candidate in self.candidates:
            default_path = path_utils.normalize_path(candidate.path_factory(self.roots))
            override = overrides.get(candidate.id)
            path = path_utils.normalize_path(override) if override else default_path
            exists, last_modified = self.probe(path)
            detected.append(
                DetectedSource(
                    id=candidate.id,
                    platform=candidate.platform,
                    label=candidate.label,
                    description=candidate.description,
                    path=path,
                    exists=exists,
                    recommended=candidate.recommended,
                    default_path=default_path,
                    is_override=bool(override),
                    last_modified=last_modified,
                )
            )

        return detected

    def probe(self, path: Path) -> tuple[bool, Optional[str]]:
        try:
            stat = path.stat()
        except FileNotFoundError:
            return False, None
        except (OSError, ValueError) as exc:
            self.logger.warning(f"無法探測來源: {path} ({exc})")
            return False, None
        modified = datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
        return True, modified.isoformat()
