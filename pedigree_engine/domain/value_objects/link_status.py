from __future__ import annotations

from enum import Enum


class LinkStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"

    def is_followed(self) -> bool:
        return self is not LinkStatus.REJECTED
