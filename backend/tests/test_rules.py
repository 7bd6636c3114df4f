from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from models.enums import BloodGroup, DegreeType, Gender, Status
from validation import Create, Update, mode_from_method
from validation.definitions import REGISTRY, get_definition
from validation.definitions.common import slugify
from validation.messages import attribute_label, resolve_message, wildcard_key
from validation.mode import excluded_id, is_update
from validation.rules import (
    TODAY,
    After,
    AfterOrEqual,
    Before,
    Boolean,
    Date,
    Gte,
    Integer,
    Lte,
    Numeric,
    Required,
    RuleContext,
    Sometimes,
    String,
    presence,
)


def test_mode_from_method():
    assert mode_from_method("POST") == Create()
    assert mode_from_method("put", 7) == Update(record_id=7)
    assert mode_from_method("PATCH", "3") == Update(record_id=3)
    with pytest.raises(ValueError):
        mode_from_method("PATCH")
    with pytest.raises(ValueError):
        mode_from_method("GET")


def test_excluded_id_only_for_updates():
    assert excluded_id(Create()) is None
    assert excluded_id(Update(record_id=4)) == 4
    assert is_update(Update(record_id=1))
    assert not is_update(Create())


def test_presence_depends_on_mode():
    assert presence(Create()) == [Required()]
    assert presence(Update(record_id=1)) == [Sometimes()]


@pytest.mark.parametrize(
    "raw, expected",
    [(5, 5), ("12", 12), (" -3 ", -3), (4.0, 4)],
)
def test_integer_coercion(raw, expected):
    assert Integer().coerce(raw) == expected


@pytest.mark.parametrize("raw", [True, "1.5", "abc", 2.5, None])
def test_integer_rejects(raw):
    with pytest.raises((TypeError, ValueError)):
        Integer().coerce(raw)


def test_numeric_boolean_date_string_coercion():
    assert Numeric().coerce("10.50") == Decimal("10.50")
    assert Numeric().coerce(3) == Decimal("3")
    with pytest.raises(ValueError):
        Numeric().coerce("NaN")
    assert Boolean().coerce("yes") is True
    assert Boolean().coerce(0) is False
    with pytest.raises(ValueError):
        Boolean().coerce("maybe")
    assert Date().coerce("2024-02-29") == date(2024, 2, 29)
    assert Date().coerce("2024-02-29T10:00:00") == date(2024, 2, 29)
    with pytest.raises(ValueError):
        Date().coerce("2024-02-30")
    with pytest.raises(TypeError):
        String().coerce(12)


def test_wildcard_key_and_labels():
    assert wildcard_key("programs.3") == "programs.*"
    assert wildcard_key("programs.3.name") == "programs.*.name"
    assert attribute_label("programs.2", {"programs.*": "program"}) == "program"
    assert attribute_label("program_id", {}) == "program"
    assert attribute_label("max_students", {}) == "max students"


def test_message_resolution_order():
    messages = {"name.required": "Name please.", "required": "Generic required.", "programs.*.exists": "Bad program."}
    assert resolve_message("name", "required", messages=messages, attributes={}) == "Name please."
    assert resolve_message("code", "required", messages=messages, attributes={}) == "Generic required."
    assert resolve_message("programs.1", "exists", messages=messages, attributes={}) == "Bad program."
    assert (
        resolve_message("code", "unique", messages={}, attributes={"code": "batch code"})
        == "The batch code has already been taken."
    )


def test_size_messages_depend_on_field_kind():
    common = {"messages": {}, "attributes": {}}
    assert resolve_message("name", "max", kind="string", params={"max": 5}, **common) == (
        "The name may not be greater than 5 characters."
    )
    assert resolve_message("seat", "max", kind="numeric", params={"max": 5}, **common) == (
        "The seat may not be greater than 5."
    )
    assert resolve_message("ids", "min", kind="array", params={"min": 1}, **common) == (
        "The ids must have at least 1 items."
    )


def test_unknown_placeholders_are_left_alone():
    msg = resolve_message("x", "custom", messages={"custom": "{attribute} vs {missing}"}, attributes={})
    assert msg == "x vs {missing}"


def test_registry_covers_every_request_kind():
    expected = {
        "faculty",
        "program",
        "batch",
        "section",
        "semester",
        "subject",
        "academic_session",
        "class_room",
        "enroll_subject",
        "book_category",
        "book",
        "book_request",
        "issue_book",
        "return_book",
        "fee",
        "mail_setting",
        "sms_setting",
        "print_setting",
        "tax_setting",
        "schedule_setting",
        "topbar_setting",
        "social_setting",
        "library_setting",
        "application_setting",
        "id_card_setting",
    }
    assert expected <= set(REGISTRY)
    assert get_definition("batch").table == "batches"
    with pytest.raises(LookupError):
        get_definition("nope")


def test_slugify():
    assert slugify("Faculty of Arts & Science") == "faculty-of-arts-science"
    assert slugify("  Computer  Science ") == "computer-science"


def test_choice_enum_helpers():
    assert Status.values() == ["active", "inactive"]
    assert Status.ACTIVE == "active"
    assert Status.has_value("inactive")
    assert Status.has_value(Status.ACTIVE)
    assert not Status.has_value("archived")
    assert not Status.has_value(None)
    assert DegreeType.PHD.label == "PhD"
    assert BloodGroup.AB_NEGATIVE.label == "AB-"
    assert Gender.options()[0] == {"value": "male", "label": "Male"}


def _ctx():
    return RuleContext(db=None, mode=Create(), key="d", kind="date", sibling=lambda name: None, label=lambda name: name)


def test_date_comparisons():
    jan1, jan2 = date(2024, 1, 1), date(2024, 1, 2)
    assert After("start").compare(jan2, jan1, _ctx()) is None
    assert After("start").compare(jan1, jan1, _ctx()).rule == "after"
    assert AfterOrEqual("start").compare(jan1, jan1, _ctx()) is None
    assert Before("end").compare(jan1, jan2, _ctx()) is None
    failure = Before("end").compare(jan2, jan1, _ctx())
    assert failure.params == {"date": "end", "other": "end"}


def test_comparisons_against_today_are_not_deferred():
    assert not After(TODAY).deferred
    assert After("start_date").deferred
    assert After(TODAY).check(date(1999, 1, 1), _ctx()).params["date"] == "today"


def test_numeric_comparison_with_incomparable_value_fails():
    assert Gte("min").compare(Decimal("5"), "abc", _ctx()).rule == "gte"
    assert Lte("max").compare(Decimal("5"), Decimal("5"), _ctx()) is None
