from __future__ import annotations

from enum import Enum


class AncestryRole(str, Enum):
    SELF = "self"
    SIRE = "sire"
    DAM = "dam"
