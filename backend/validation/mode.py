from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Create:
    pass


@dataclass(frozen=True)
class Update:
    record_id: int


OperationMode = Union[Create, Update]


def mode_from_method(method: str, record_id: int | None = None) -> OperationMode:
    """POST creates; PUT and PATCH update the record addressed by ``record_id``."""

    verb = (method or "").upper()
    if verb in ("PUT", "PATCH"):
        if record_id is None:
            raise ValueError(f"{verb} requires a record id")
        return Update(record_id=int(record_id))
    if verb == "POST":
        return Create()
    raise ValueError(f"No operation mode for HTTP method {method!r}")


def is_update(mode: OperationMode) -> bool:
    return isinstance(mode, Update)


def excluded_id(mode: OperationMode) -> int | None:
    return mode.record_id if isinstance(mode, Update) else None
