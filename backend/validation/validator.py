from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from sqlalchemy.orm import Session

from validation.messages import attribute_label, resolve_message
from validation.mode import Create, OperationMode, is_update
from validation.queries import fetch_row
from validation.rules import (
    Comparison,
    Failure,
    FieldRules,
    Nullable,
    Required,
    RuleContext,
    Sometimes,
    TypeRule,
    is_blank,
)


logger = logging.getLogger(__name__)

_MISSING = object()


class ValidationFailed(Exception):
    def __init__(self, errors: dict[str, list[str]]):
        super().__init__("Validation failed")
        self.errors = errors


@dataclass
class ValidationResult:
    data: dict[str, Any]
    errors: dict[str, list[str]]

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass
class HookContext:
    """What a post-validation hook sees: cleaned values plus the stored row on update."""

    db: Session
    mode: OperationMode
    data: dict[str, Any]
    payload: Mapping[str, Any]
    stored: Mapping[str, Any] | None
    _fail: Callable[[str, Failure], None]

    def value(self, name: str) -> Any:
        if name in self.data:
            return self.data[name]
        if self.stored is not None:
            return self.stored.get(name)
        return None

    def passed(self, name: str) -> bool:
        """False when the field was sent and rejected by its own rules."""

        return name in self.data or name not in self.payload

    def fail(self, key: str, rule: str, **params: Any) -> None:
        self._fail(key, Failure(rule, params))


Hook = Callable[[HookContext], None]


@dataclass(frozen=True)
class RequestDefinition:
    """Everything needed to validate one kind of write request."""

    name: str
    table: str | None
    rules: Callable[[OperationMode], list[FieldRules]]
    messages: Mapping[str, str] = field(default_factory=dict)
    attributes: Mapping[str, str] = field(default_factory=dict)
    defaults: Mapping[str, Any] = field(default_factory=dict)
    audited: bool = False
    hooks: Sequence[Hook] = ()
    derive: Callable[[dict[str, Any], OperationMode], None] | None = None


def build_rules(definition: RequestDefinition, mode: OperationMode) -> list[FieldRules]:
    return definition.rules(mode)


class _Run:
    def __init__(self, db: Session, definition: RequestDefinition, payload: Mapping[str, Any], mode: OperationMode):
        self.db = db
        self.definition = definition
        self.payload = payload
        self.mode = mode
        self.stored: dict[str, Any] | None = None
        if is_update(mode) and definition.table:
            self.stored = fetch_row(db, definition.table, mode.record_id)
        self.cleaned: dict[str, Any] = {}
        self.errors: dict[str, list[str]] = {}
        self.deferred: list[tuple[str, Comparison, str | None]] = []
        # Comparisons whose own field was not sent; checked against its stored value.
        self.stored_deferred: list[tuple[str, Comparison, str | None]] = []

    def label(self, name: str) -> str:
        return attribute_label(name, self.definition.attributes)

    def sibling(self, name: str) -> Any:
        if name in self.cleaned:
            return self.cleaned[name]
        if name in self.payload:
            return self.payload[name]
        if self.stored is not None:
            return self.stored.get(name)
        return None

    def fail(self, key: str, failure: Failure, kind: str | None = None) -> None:
        message = resolve_message(
            key,
            failure.rule,
            kind=kind,
            params=failure.params,
            messages=self.definition.messages,
            attributes=self.definition.attributes,
        )
        self.errors.setdefault(key, []).append(message)

    def check_field(self, key: str, value: Any, rules: Sequence) -> Any:
        """Run one field's rules; returns the cast value or ``_MISSING`` when it failed or is absent."""

        required = any(isinstance(r, Required) for r in rules)
        nullable = any(isinstance(r, Nullable) for r in rules)

        if value is _MISSING:
            if required:
                self.fail(key, Failure("required"))
            return _MISSING

        if is_blank(value):
            if required:
                self.fail(key, Failure("required"))
                return _MISSING
            if nullable:
                return None
            if isinstance(value, str):
                value = None

        ctx = RuleContext(
            db=self.db,
            mode=self.mode,
            key=key,
            kind=None,
            sibling=self.sibling,
            label=self.label,
        )
        failed = False
        for rule in rules:
            if isinstance(rule, (Required, Sometimes, Nullable)):
                continue
            if isinstance(rule, TypeRule):
                try:
                    value = rule.coerce(value)
                except (TypeError, ValueError):
                    self.fail(key, Failure(rule.name))
                    return _MISSING
                ctx.kind = rule.kind
                continue
            if isinstance(rule, Comparison) and rule.deferred:
                self.deferred.append((key, rule, ctx.kind))
                continue
            failure = rule.check(value, ctx)
            if failure is not None:
                failed = True
                self.fail(key, failure, ctx.kind)
        return _MISSING if failed else value

    def run_fields(self, field_rules: list[FieldRules]) -> None:
        for fr in field_rules:
            if not fr.is_wildcard:
                if fr.field not in self.payload and self.stored is not None:
                    self.defer_stored(fr)
                result = self.check_field(fr.field, self.payload.get(fr.field, _MISSING), fr.rules)
                if result is not _MISSING:
                    self.cleaned[fr.field] = result
                continue

            items = self.payload.get(fr.parent)
            if not isinstance(items, (list, tuple)):
                continue
            cast_items = list(items)
            for index, item in enumerate(items):
                result = self.check_field(f"{fr.parent}.{index}", item, fr.rules)
                if result is not _MISSING:
                    cast_items[index] = result
            if isinstance(self.cleaned.get(fr.parent), list):
                self.cleaned[fr.parent] = cast_items

    def defer_stored(self, fr: FieldRules) -> None:
        kind = next((r.kind for r in fr.rules if isinstance(r, TypeRule)), None)
        for rule in fr.rules:
            if isinstance(rule, Comparison) and rule.deferred:
                self.stored_deferred.append((fr.field, rule, kind))

    def run_comparisons(self) -> None:
        for key, rule, kind in self.deferred:
            if key not in self.cleaned or self.cleaned[key] is None:
                continue
            if rule.other in self.payload:
                # The sibling was sent: compare only if it survived its own rules.
                bound = self.cleaned.get(rule.other)
            elif self.stored is not None:
                bound = self.stored.get(rule.other)
            else:
                bound = None
            if bound is None:
                continue
            ctx = RuleContext(self.db, self.mode, key, kind, self.sibling, self.label)
            failure = rule.compare(self.cleaned[key], bound, ctx)
            if failure is not None:
                self.fail(key, failure, kind)
                del self.cleaned[key]

        for key, rule, kind in self.stored_deferred:
            # Only the sibling changed: the stored value must still satisfy the rule.
            bound = self.cleaned.get(rule.other)
            value = self.stored.get(key)
            if bound is None or value is None:
                continue
            ctx = RuleContext(self.db, self.mode, key, kind, self.sibling, self.label)
            failure = rule.compare(value, bound, ctx)
            if failure is not None:
                self.fail(key, failure, kind)

    def run_hooks(self) -> None:
        ctx = HookContext(
            db=self.db,
            mode=self.mode,
            data=self.cleaned,
            payload=self.payload,
            stored=self.stored,
            _fail=self.fail,
        )
        for hook in self.definition.hooks:
            hook(ctx)


def validate(
    db: Session,
    definition: RequestDefinition,
    payload: Mapping[str, Any] | None,
    mode: OperationMode,
    *,
    actor_id: int | None = None,
) -> ValidationResult:
    """Validate ``payload`` for ``definition`` under ``mode``.

    Every field is checked; the error map holds all failures at once. On
    success the returned data holds only declared fields, cast to their types,
    with create defaults and audit columns filled in.
    """

    run = _Run(db, definition, dict(payload or {}), mode)
    run.run_fields(build_rules(definition, mode))
    run.run_comparisons()
    run.run_hooks()

    if run.errors:
        logger.debug("Validation failed for %s: %s", definition.name, sorted(run.errors))
        return ValidationResult(data=run.cleaned, errors=run.errors)

    data = run.cleaned
    if isinstance(mode, Create):
        for key, default in definition.defaults.items():
            if data.get(key) is None:
                data[key] = default
    if definition.derive is not None:
        definition.derive(data, mode)
    if definition.audited:
        if isinstance(mode, Create):
            data["created_by"] = actor_id
        data["updated_by"] = actor_id
    return ValidationResult(data=data, errors={})


def validate_or_raise(
    db: Session,
    definition: RequestDefinition,
    payload: Mapping[str, Any] | None,
    mode: OperationMode,
    *,
    actor_id: int | None = None,
) -> dict[str, Any]:
    result = validate(db, definition, payload, mode, actor_id=actor_id)
    if not result.ok:
        raise ValidationFailed(result.errors)
    return result.data
