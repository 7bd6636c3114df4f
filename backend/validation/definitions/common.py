from __future__ import annotations

import re
from typing import Any

from validation.mode import OperationMode, excluded_id
from validation.queries import exists_conflicting
from validation.rules import (
    Array,
    Exists,
    FieldRules,
    Integer,
    Min,
    Nullable,
    OneOf,
    Sometimes,
    String,
    rules_for,
)
from validation.validator import Hook, HookContext


_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(text: str) -> str:
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def slug_from(source: str):
    """Derive ``slug`` from ``source`` whenever the source field is written."""

    def derive(data: dict[str, Any], _mode: OperationMode) -> None:
        if data.get(source):
            data["slug"] = slugify(data[source])

    return derive


def unique_slug(table: str, source: str) -> Hook:
    """Reject a ``source`` value whose derived slug another live row already holds."""

    def check(ctx: HookContext) -> None:
        value = ctx.data.get(source)
        if not value:
            return
        if exists_conflicting(ctx.db, table, "slug", slugify(value), exclude_id=excluded_id(ctx.mode)):
            ctx.fail(source, "slug")

    return check


def status_rules(enum) -> FieldRules:
    # Optional on both create and update; create falls back to the declared default.
    return rules_for("status", Sometimes(), String(), OneOf(enum))


def sort_order_rules() -> FieldRules:
    return rules_for("sort_order", Nullable(), Integer(), Min(0))


def id_list_rules(field: str, table: str) -> list[FieldRules]:
    return [
        rules_for(field, Nullable(), Array()),
        rules_for(f"{field}.*", Integer(), Exists(table)),
    ]
