"""表情快取掃描與找回工具。"""

__version__ = "0.1.0"
