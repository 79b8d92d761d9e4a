"""掃描調校設定：內建預設、使用者 JSON 檔、執行期覆寫。"""

from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any, Optional

from . import defaults
from .schema import validate_config

CONFIG_PATH_ENV = "EMOJI_SCANNER_CONFIG"


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


def _lookup(config: dict[str, Any], dotted_key: str, default: Any = None) -> Any:
    node: Any = config
    for part in dotted_key.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def _assign(config: dict[str, Any], dotted_key: str, value: Any) -> None:
    *parents, leaf = dotted_key.split(".")
    node = config
    for part in parents:
        node = node.setdefault(part, {})
    node[leaf] = value


class ConfigManager:
    """優先序由低到高：預設、使用者檔案、set() 覆寫。

    未指定使用者檔案時讀取環境變數 EMOJI_SCANNER_CONFIG 指向的路徑。
    """

    def __init__(self, user_config_path: Optional[Path] = None) -> None:
        if user_config_path is None and os.environ.get(CONFIG_PATH_ENV):
            user_config_path = Path(os.environ[CONFIG_PATH_ENV])
        self.user_config_path = user_config_path
        self._defaults = copy.deepcopy(defaults.DEFAULT_CONFIG)
        self._user = self._read_user_file(user_config_path)
        self._runtime: dict[str, Any] = {}
        self._config = _deep_merge(self._defaults, self._user)

    @staticmethod
    def _read_user_file(path: Optional[Path]) -> dict[str, Any]:
        if path is None or not path.exists():
            return {}
        with path.open("r", encoding="utf-8") as handle:
            loaded = json.load(handle)
        if not isinstance(loaded, dict):
            raise ValueError(f"設定檔頂層必須是物件: {path}")
        return loaded

    def get(self, key: str, default: Any = None) -> Any:
        return _lookup(self._config, key, default)

    def set(self, key: str, value: Any) -> None:
        _assign(self._runtime, key, value)
        self._config = _deep_merge(_deep_merge(self._defaults, self._user), self._runtime)

    def validate_config(self) -> list[str]:
        return validate_config(self._config)
