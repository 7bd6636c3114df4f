from __future__ import annotations

import re
from typing import Any, Mapping


# Keyed by rule name, or "rule.kind" for size rules whose wording depends on the field type.
DEFAULT_MESSAGES: dict[str, str] = {
    "required": "The {attribute} field is required.",
    "string": "The {attribute} must be a string.",
    "integer": "The {attribute} must be an integer.",
    "numeric": "The {attribute} must be a number.",
    "boolean": "The {attribute} field must be true or false.",
    "date": "The {attribute} must be a valid date.",
    "array": "The {attribute} must be an array.",
    "file": "The {attribute} must be a file.",
    "mimes": "The {attribute} must be a file of type: {values}.",
    "min.string": "The {attribute} must be at least {min} characters.",
    "min.numeric": "The {attribute} must be at least {min}.",
    "min.array": "The {attribute} must have at least {min} items.",
    "min.file": "The {attribute} must be at least {min} kilobytes.",
    "max.string": "The {attribute} may not be greater than {max} characters.",
    "max.numeric": "The {attribute} may not be greater than {max}.",
    "max.array": "The {attribute} may not have more than {max} items.",
    "max.file": "The {attribute} may not be greater than {max} kilobytes.",
    "email": "The {attribute} must be a valid email address.",
    "url": "The {attribute} must be a valid URL.",
    "regex": "The {attribute} format is invalid.",
    "in": "The selected {attribute} is invalid.",
    "enum": "The selected {attribute} is invalid.",
    "exists": "The selected {attribute} is invalid.",
    "unique": "The {attribute} has already been taken.",
    "slug": "A record with a similar {attribute} already exists.",
    "after": "The {attribute} must be a date after {date}.",
    "after_or_equal": "The {attribute} must be a date after or equal to {date}.",
    "before": "The {attribute} must be a date before {date}.",
    "gte": "The {attribute} must be greater than or equal to {other}.",
    "lte": "The {attribute} must be less than or equal to {other}.",
}

DEFAULT_ATTRIBUTES: dict[str, str] = {
    "email": "email address",
    "first_name": "first name",
    "last_name": "last name",
    "phone": "phone number",
    "dob": "date of birth",
    "student_id": "student ID",
    "program_id": "program",
    "batch_id": "batch",
    "faculty_id": "faculty",
    "subject_id": "subject",
    "category_id": "category",
}

_INDEX_RE = re.compile(r"\.\d+(?=\.|$)")


class _Params(dict):
    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def wildcard_key(key: str) -> str:
    """``programs.3`` -> ``programs.*``"""

    return _INDEX_RE.sub(".*", key)


def attribute_label(key: str, attributes: Mapping[str, str]) -> str:
    for candidate in (key, wildcard_key(key)):
        if candidate in attributes:
            return attributes[candidate]
        if candidate in DEFAULT_ATTRIBUTES:
            return DEFAULT_ATTRIBUTES[candidate]
    return key.replace("_", " ")


def resolve_message(
    key: str,
    rule: str,
    *,
    kind: str | None = None,
    params: Mapping[str, Any] | None = None,
    messages: Mapping[str, str],
    attributes: Mapping[str, str],
) -> str:
    pattern = wildcard_key(key)
    candidates = [f"{key}.{rule}", f"{pattern}.{rule}", rule]
    template = next((messages[c] for c in candidates if c in messages), None)
    if template is None:
        if kind is not None and f"{rule}.{kind}" in DEFAULT_MESSAGES:
            template = DEFAULT_MESSAGES[f"{rule}.{kind}"]
        else:
            template = DEFAULT_MESSAGES.get(rule, "The {attribute} is invalid.")

    values = _Params(params or {})
    values.setdefault("attribute", attribute_label(key, attributes))
    return template.format_map(values)
