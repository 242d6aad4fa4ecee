"""Domain Types: rich types that replace bare primitives across the codebase.

Invariants:
    - ModelId wraps the integer primary key; never use a bare int in domain logic
    - Ids outside MODEL_ID_MIN..MODEL_ID_MAX never reach the store (rejected as 400)
    - Every domain failure the service can return is one ErrorKind member

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: serializes to JSON and log extras without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ModelId = NewType("ModelId", int)

# Signed 32-bit range accepted for ids in request paths
MODEL_ID_MIN: int = -(2**31)
MODEL_ID_MAX: int = 2**31 - 1


# ─── Enums ───────────────────────────────────────────────────────

class ErrorKind(str, Enum):
    """Failure kinds returned by the service layer, mapped to HTTP at the boundary."""
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
