from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, ClassVar

from pydantic import AnyUrl, EmailStr, TypeAdapter, ValidationError
from sqlalchemy.orm import Session
from starlette.datastructures import UploadFile

from validation.mode import OperationMode, excluded_id
from validation.queries import exists_conflicting, record_exists


TODAY = "today"

_INTEGER_RE = re.compile(r"^[+-]?\d+$")
_URL_ADAPTER = TypeAdapter(AnyUrl)
_EMAIL_ADAPTER = TypeAdapter(EmailStr)

_TRUE_STRINGS = {"1", "true", "yes", "on"}
_FALSE_STRINGS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Failure:
    rule: str
    params: dict[str, Any] = field(default_factory=dict)


@dataclass
class RuleContext:
    db: Session
    mode: OperationMode
    key: str
    kind: str | None
    sibling: Callable[[str], Any]
    label: Callable[[str], str]


class Rule:
    name: ClassVar[str] = ""

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        raise NotImplementedError


# Presence. Handled by the validator before any other rule of the field.


@dataclass(frozen=True)
class Required(Rule):
    name: ClassVar[str] = "required"


@dataclass(frozen=True)
class Sometimes(Rule):
    name: ClassVar[str] = "sometimes"


@dataclass(frozen=True)
class Nullable(Rule):
    name: ClassVar[str] = "nullable"


def presence(mode: OperationMode) -> list[Rule]:
    """Required when creating, optional-but-checked when updating."""

    return [Sometimes()] if excluded_id(mode) is not None else [Required()]


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    if isinstance(value, (list, tuple, dict)) and not value:
        return True
    if isinstance(value, UploadFile) and not value.filename:
        return True
    return False


# Types. A type rule converts the raw value; failure stops the field.


class TypeRule(Rule):
    kind: ClassVar[str] = "string"

    def coerce(self, value: Any) -> Any:
        raise NotImplementedError

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        try:
            self.coerce(value)
        except (TypeError, ValueError):
            return Failure(self.name)
        return None


@dataclass(frozen=True)
class String(TypeRule):
    name: ClassVar[str] = "string"
    kind: ClassVar[str] = "string"

    def coerce(self, value: Any) -> str:
        if not isinstance(value, str):
            raise TypeError("not a string")
        return value


@dataclass(frozen=True)
class Integer(TypeRule):
    name: ClassVar[str] = "integer"
    kind: ClassVar[str] = "numeric"

    def coerce(self, value: Any) -> int:
        if isinstance(value, bool):
            raise TypeError("booleans are not integers")
        if isinstance(value, int):
            return value
        if isinstance(value, float) and value.is_integer():
            return int(value)
        if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
            return int(value.strip())
        raise ValueError("not an integer")


@dataclass(frozen=True)
class Numeric(TypeRule):
    name: ClassVar[str] = "numeric"
    kind: ClassVar[str] = "numeric"

    def coerce(self, value: Any) -> Decimal:
        if isinstance(value, bool):
            raise TypeError("booleans are not numbers")
        if isinstance(value, (int, float, Decimal)):
            return Decimal(str(value))
        if isinstance(value, str):
            try:
                number = Decimal(value.strip())
            except InvalidOperation:
                raise ValueError("not a number") from None
            if not number.is_finite():
                raise ValueError("not a finite number")
            return number
        raise TypeError("not a number")


@dataclass(frozen=True)
class Boolean(TypeRule):
    name: ClassVar[str] = "boolean"
    kind: ClassVar[str] = "numeric"

    def coerce(self, value: Any) -> bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, int) and value in (0, 1):
            return bool(value)
        if isinstance(value, str):
            lowered = value.strip().lower()
            if lowered in _TRUE_STRINGS:
                return True
            if lowered in _FALSE_STRINGS:
                return False
        raise ValueError("not a boolean")


@dataclass(frozen=True)
class Date(TypeRule):
    name: ClassVar[str] = "date"
    kind: ClassVar[str] = "date"

    def coerce(self, value: Any) -> date:
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value
        if not isinstance(value, str):
            raise TypeError("not a date")
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            return datetime.fromisoformat(text).date()


@dataclass(frozen=True)
class Array(TypeRule):
    name: ClassVar[str] = "array"
    kind: ClassVar[str] = "array"

    def coerce(self, value: Any) -> list:
        if isinstance(value, (list, tuple)):
            return list(value)
        raise TypeError("not an array")


@dataclass(frozen=True)
class File(TypeRule):
    name: ClassVar[str] = "file"
    kind: ClassVar[str] = "file"

    def coerce(self, value: Any) -> UploadFile:
        if isinstance(value, UploadFile) and value.filename:
            return value
        raise TypeError("not an uploaded file")


# Bounds.


def file_size_kb(upload: UploadFile) -> float:
    size = upload.size
    if size is None:
        handle = upload.file
        position = handle.tell()
        handle.seek(0, 2)
        size = handle.tell()
        handle.seek(position)
    return size / 1024


def measure(value: Any, kind: str | None) -> Any:
    if kind is None:
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            kind = "numeric"
        elif isinstance(value, (list, tuple)):
            kind = "array"
        elif isinstance(value, UploadFile):
            kind = "file"
        else:
            kind = "string"
    if kind == "numeric":
        return value
    if kind == "array":
        return len(value)
    if kind == "file":
        return file_size_kb(value)
    return len(str(value))


@dataclass(frozen=True)
class Min(Rule):
    bound: int | float | Decimal
    name: ClassVar[str] = "min"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if measure(value, ctx.kind) < self.bound:
            return Failure(self.name, {"min": self.bound})
        return None


@dataclass(frozen=True)
class Max(Rule):
    bound: int | float | Decimal
    name: ClassVar[str] = "max"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if measure(value, ctx.kind) > self.bound:
            return Failure(self.name, {"max": self.bound})
        return None


# Formats.


@dataclass(frozen=True)
class Regex(Rule):
    pattern: str
    name: ClassVar[str] = "regex"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if not isinstance(value, str) or re.search(self.pattern, value) is None:
            return Failure(self.name)
        return None


@dataclass(frozen=True)
class Email(Rule):
    name: ClassVar[str] = "email"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if not isinstance(value, str):
            return Failure(self.name)
        try:
            _EMAIL_ADAPTER.validate_python(value)
        except ValidationError:
            return Failure(self.name)
        return None


@dataclass(frozen=True)
class Url(Rule):
    name: ClassVar[str] = "url"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if not isinstance(value, str):
            return Failure(self.name)
        try:
            _URL_ADAPTER.validate_python(value)
        except ValidationError:
            return Failure(self.name)
        return None


@dataclass(frozen=True)
class In(Rule):
    values: tuple[Any, ...]
    name: ClassVar[str] = "in"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        allowed = {str(v) for v in self.values}
        if isinstance(value, (list, dict)) or str(value) not in allowed:
            return Failure(self.name, {"values": ", ".join(str(v) for v in self.values)})
        return None


@dataclass(frozen=True)
class OneOf(Rule):
    enum: type[Enum]
    name: ClassVar[str] = "enum"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        values = [m.value for m in self.enum]
        if isinstance(value, Enum):
            value = value.value
        if value not in values:
            return Failure(self.name, {"values": ", ".join(values)})
        return None


@dataclass(frozen=True)
class Mimes(Rule):
    extensions: tuple[str, ...]
    name: ClassVar[str] = "mimes"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        filename = getattr(value, "filename", None) or ""
        extension = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
        if extension not in self.extensions:
            return Failure(self.name, {"values": ", ".join(self.extensions)})
        return None


# Relational.


@dataclass(frozen=True)
class Exists(Rule):
    table: str
    column: str = "id"
    name: ClassVar[str] = "exists"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        if isinstance(value, (list, dict)) or not record_exists(ctx.db, self.table, self.column, value):
            return Failure(self.name)
        return None


@dataclass(frozen=True)
class Unique(Rule):
    table: str
    column: str | None = None
    scope: str | None = None
    name: ClassVar[str] = "unique"

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        column = self.column or ctx.key
        scope_value = ctx.sibling(self.scope) if self.scope else None
        taken = exists_conflicting(
            ctx.db,
            self.table,
            column,
            value,
            exclude_id=excluded_id(ctx.mode),
            scope_column=self.scope,
            scope_value=scope_value,
        )
        return Failure(self.name) if taken else None


# Comparisons. Against "today" they run with the field; against a sibling they
# run once every single-field rule has been evaluated.


class Comparison(Rule):
    other: str

    @property
    def deferred(self) -> bool:
        return self.other != TODAY

    def holds(self, value: Any, bound: Any) -> bool:
        raise NotImplementedError

    def params(self, ctx: RuleContext) -> dict[str, Any]:
        return {"other": ctx.label(self.other)}

    def compare(self, value: Any, bound: Any, ctx: RuleContext) -> Failure | None:
        try:
            ok = self.holds(value, bound)
        except (TypeError, ArithmeticError):
            ok = False
        return None if ok else Failure(self.name, self.params(ctx))

    def check(self, value: Any, ctx: RuleContext) -> Failure | None:
        return self.compare(value, date.today(), ctx)


class DateComparison(Comparison):
    def params(self, ctx: RuleContext) -> dict[str, Any]:
        target = TODAY if self.other == TODAY else ctx.label(self.other)
        return {"date": target, "other": target}


@dataclass(frozen=True)
class After(DateComparison):
    other: str
    name: ClassVar[str] = "after"

    def holds(self, value: Any, bound: Any) -> bool:
        return value > bound


@dataclass(frozen=True)
class AfterOrEqual(DateComparison):
    other: str
    name: ClassVar[str] = "after_or_equal"

    def holds(self, value: Any, bound: Any) -> bool:
        return value >= bound


@dataclass(frozen=True)
class Before(DateComparison):
    other: str
    name: ClassVar[str] = "before"

    def holds(self, value: Any, bound: Any) -> bool:
        return value < bound


@dataclass(frozen=True)
class Gte(Comparison):
    other: str
    name: ClassVar[str] = "gte"

    def holds(self, value: Any, bound: Any) -> bool:
        return Decimal(str(value)) >= Decimal(str(bound))


@dataclass(frozen=True)
class Lte(Comparison):
    other: str
    name: ClassVar[str] = "lte"

    def holds(self, value: Any, bound: Any) -> bool:
        return Decimal(str(value)) <= Decimal(str(bound))


@dataclass(frozen=True)
class FieldRules:
    """Ordered constraints for one payload key (``programs.*`` targets array elements)."""

    field: str
    rules: tuple[Rule, ...]

    @property
    def is_wildcard(self) -> bool:
        return self.field.endswith(".*")

    @property
    def parent(self) -> str:
        return self.field[:-2] if self.is_wildcard else self.field


def rules_for(field_name: str, *rules: Rule) -> FieldRules:
    return FieldRules(field=field_name, rules=tuple(rules))
