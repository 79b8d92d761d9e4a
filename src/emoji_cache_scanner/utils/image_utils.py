"""影像資訊讀取工具。"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


def get_image_resolution(
    path: Path, logger=None
) -> Optional[Tuple[int, int]]:
    try:
        with Image.open(path) as image:
            return image.size
    except Exception as exc:
        if logger is not None:
            logger.warning(f"無法讀取解析度: {path} ({exc})")
        return None
