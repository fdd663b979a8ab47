"""Operation results — success/failure values returned instead of raising.

Every mutating ledger operation reports its outcome through an
``OperationResult`` so callers (a console menu, a dialog, a test) can branch on
it without exception-based control flow.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(str, Enum):
    """Why an operation was rejected."""

    VALIDATION = "validation"  # out-of-range price/rate/day, duplicate name, bad range
    CONFLICT = "conflict"  # reserved day, unlisted day, property with reservations
    NOT_FOUND = "not_found"  # bad property/reservation index, unknown day


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a ledger operation. Truthy iff the operation succeeded."""

    ok: bool
    value: Any = None
    error: str | None = None
    kind: ErrorKind | None = None

    def __bool__(self) -> bool:
        return self.ok

    @classmethod
    def success(cls, value: Any = None) -> "OperationResult":
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, error: str) -> "OperationResult":
        return cls(ok=False, error=error, kind=kind)
