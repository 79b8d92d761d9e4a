"""各作業系統的應用程式資料根目錄。

Windows 以 APPDATA / LOCALAPPDATA 為準，macOS 使用 Library 底下的目錄，
其他系統依 XDG 規範。環境變數缺少時一律退回家目錄下的固定位置。
"""

from __future__ import annotations

import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional


@dataclass(frozen=True)
class AppDataRoots:
    home: Path
    roaming: Path
    local: Path

    @property
    def documents(self) -> Path:
        return self.home / "Documents"

    @property
    def downloads(self) -> Path:
        return self.home / "Downloads"


def _env_path(env: Mapping[str, str], key: str, fallback: Path) -> Path:
    value = env.get(key)
    if value:
        return Path(value)
    return fallback


def resolve_app_data_roots(
    env: Optional[Mapping[str, str]] = None,
    system: Optional[str] = None,
    home: Optional[Path] = None,
) -> AppDataRoots:
    env = os.environ if env is None else env
    system = (system or platform.system()).lower()
    home = home or Path.home()

    if system == "windows":
        roaming = _env_path(env, "APPDATA", home / "AppData" / "Roaming")
        local = _env_path(env, "LOCALAPPDATA", home / "AppData" / "Local")
    elif system == "darwin":
        roaming = home / "Library" / "Application Support"
        local = home / "Library" / "Caches"
    else:
        roaming = _env_path(env, "XDG_CONFIG_HOME", home / ".config")
        local = _env_path(env, "XDG_CACHE_HOME", home / ".cache")

    return AppDataRoots(home=home, roaming=roaming, local=local)
