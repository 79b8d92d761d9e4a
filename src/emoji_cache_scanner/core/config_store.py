"""掃描設定的讀取與部分合併儲存。"""

from __future__ import annotations

from typing import Any, Mapping

from ..config.schema import (
    SCANNER_CONFIG_LIST_FIELDS,
    SCANNER_CONFIG_MAP_FIELDS,
    validate_scanner_config,
)
from ..models import ScannerConfig
from ..utils import path_utils
from ..utils.logger import get_logger


class ScannerConfigStore:
    """整份 ScannerConfig 以單一設定鍵存放於 key/value 儲存。"""

    def __init__(self, settings, key: str = "scannerConfig", logger=None) -> None:
        self.settings = settings
        self.key = key
        self.logger = logger or get_logger(self.__class__.__name__)

    def get_config(self) -> ScannerConfig:
        raw = self.settings.get_setting(self.key)
        if not isinstance(raw, dict):
            return ScannerConfig()
        return ScannerConfig.from_dict(raw)

    def save_config(self, partial: Mapping[str, Any]) -> ScannerConfig:
        """清單欄位整個取代，對照表欄位逐鍵合併。"""

        errors = validate_scanner_config(dict(partial))
        if errors:
            raise ValueError("掃描設定不合法: " + "; ".join(errors))

        data = self.get_config().to_dict()
        for key, value in partial.items():
            if key == "custom_paths":
                data[key] = path_utils.unique_normalized(value)
            elif key in SCANNER_CONFIG_LIST_FIELDS:
                data[key] = list(dict.fromkeys(value))
            elif key == "source_overrides":
                overrides = dict(data[key])
                for source_id, path in value.items():
                    if path:
                        overrides[source_id] = str(path_utils.normalize_path(path))
                    else:
                        overrides.pop(source_id, None)
                data[key] = overrides
            elif key in SCANNER_CONFIG_MAP_FIELDS:
                merged = dict(data[key])
                merged.update({k: v for k, v in value.items() if v})
                data[key] = merged
            else:
                data[key] = value

        self.settings.set_setting(self.key, data)
        return ScannerConfig.from_dict(data)
