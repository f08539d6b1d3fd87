# liftlog/actions/result.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

from pydantic import ValidationError

T = TypeVar("T")

class FailureKind(str, Enum):
    validation = "validation"
    not_found = "not_found"
    unauthenticated = "unauthenticated"
    unavailable = "unavailable"

@dataclass(slots=True)
class ActionResult(Generic[T]):
    """Outcome of a mutation. Either ``data`` or ``errors`` is meaningful, per ``success``."""
    success: bool
    data: T | None = None
    errors: dict[str, list[str]] | str | None = None
    kind: FailureKind | None = None

    @classmethod
    def ok(cls, data: T | None = None) -> "ActionResult[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, errors: dict[str, list[str]] | str, kind: FailureKind) -> "ActionResult[T]":
        return cls(success=False, errors=errors, kind=kind)

def field_errors(exc: ValidationError) -> dict[str, list[str]]:
    """Flatten pydantic errors to {field: [message, ...]}."""
    out: dict[str, list[str]] = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "__root__"
        if err["type"] == "value_error":
            msg = str(err["ctx"]["error"])
        elif err["type"] == "missing":
            msg = "Required"
        else:
            msg = err["msg"]
        out.setdefault(field, []).append(msg)
    return out
