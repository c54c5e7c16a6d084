from __future__ import annotations

from enum import Enum


class WarningLevel(str, Enum):
    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"
