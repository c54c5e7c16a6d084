from __future__ import annotations

from enum import Enum


class OwnershipStatus(str, Enum):
    VERIFIED = "verified"
    WAITING_OWNER = "waiting_owner"
    PENDING_CLAIM = "pending_claim"
    DISPUTED = "disputed"
