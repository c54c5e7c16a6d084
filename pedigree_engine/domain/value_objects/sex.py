from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"

    def opposite(self) -> Sex:
        return Sex.FEMALE if self is Sex.MALE else Sex.MALE
