from __future__ import annotations

from enum import Enum

from validation.mode import OperationMode
from validation.rules import Array, Exists, FieldRules, Integer, Min, OneOf, Required, String, rules_for
from validation.validator import RequestDefinition


_MESSAGES = {
    "ids.required": "Please select at least one record.",
    "ids.min": "Please select at least one record.",
    "ids.*.exists": "One or more selected records do not exist.",
}


def _ids(table: str) -> list[FieldRules]:
    return [
        rules_for("ids", Required(), Array(), Min(1)),
        rules_for("ids.*", Integer(), Exists(table)),
    ]


def bulk_status_definition(table: str, enum: type[Enum]) -> RequestDefinition:
    def rules(_mode: OperationMode) -> list[FieldRules]:
        return [*_ids(table), rules_for("status", Required(), String(), OneOf(enum))]

    return RequestDefinition(
        name=f"{table}_bulk_status",
        table=None,
        rules=rules,
        messages=_MESSAGES,
        attributes={"ids.*": "record"},
    )


def bulk_ids_definition(table: str) -> RequestDefinition:
    def rules(_mode: OperationMode) -> list[FieldRules]:
        return _ids(table)

    return RequestDefinition(
        name=f"{table}_bulk_ids",
        table=None,
        rules=rules,
        messages=_MESSAGES,
        attributes={"ids.*": "record"},
    )
