from __future__ import annotations

from models.enums import Status
from validation.mode import OperationMode
from validation.rules import (
    Boolean,
    Email,
    FieldRules,
    File,
    Gte,
    In,
    Integer,
    Max,
    Mimes,
    Min,
    Nullable,
    Numeric,
    OneOf,
    Regex,
    Required,
    String,
    Unique,
    Url,
    presence,
    rules_for,
)
from validation.validator import RequestDefinition


_IMAGE_TYPES = ("jpeg", "png", "jpg", "gif", "svg", "webp")
_ACTIVE_INACTIVE = ("active", "inactive")
_WEEKDAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"
_SETTING_SLUG_MESSAGES = {
    "slug.required": "Setting slug is required.",
    "slug.unique": "This setting slug is already taken.",
}


def _optional_text(field: str, limit: int | None = 255) -> FieldRules:
    if limit is None:
        return rules_for(field, Nullable(), String())
    return rules_for(field, Nullable(), String(), Max(limit))


def _image(field: str, limit_kb: int) -> FieldRules:
    return rules_for(field, Nullable(), File(), Mimes(_IMAGE_TYPES), Max(limit_kb))


def _flag(field: str) -> FieldRules:
    return rules_for(field, Nullable(), Boolean())


def _mail_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("driver", *presence(mode), String(), In(("smtp", "mailgun", "ses", "postmark", "sendmail", "log"))),
        rules_for("host", *presence(mode), String(), Max(255)),
        rules_for("port", *presence(mode), String(), Max(10)),
        rules_for("username", *presence(mode), String(), Max(255)),
        rules_for("password", *presence(mode), String(), Max(255)),
        rules_for("encryption", *presence(mode), String(), In(("tls", "ssl", "null"))),
        rules_for("sender_email", Nullable(), Email(), Max(255)),
        _optional_text("sender_name"),
        rules_for("reply_email", Nullable(), Email(), Max(255)),
        rules_for("status", Nullable(), String(), In(tuple(Status.values()))),
    ]


MAIL = RequestDefinition(
    name="mail_setting",
    table="mail_settings",
    rules=_mail_rules,
    messages={
        "driver.in": "The mail driver must be one of: smtp, mailgun, ses, postmark, sendmail, log.",
        "encryption.in": "The encryption must be tls, ssl or null.",
        "sender_email.email": "The sender email must be a valid email address.",
        "reply_email.email": "The reply email must be a valid email address.",
    },
    attributes={"sender_email": "sender email", "sender_name": "sender name", "reply_email": "reply email"},
    defaults={"status": Status.ACTIVE.value},
)


def _sms_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        _optional_text("nexmo_key"),
        _optional_text("nexmo_secret"),
        _optional_text("nexmo_sender_name"),
        _optional_text("twilio_sid"),
        _optional_text("twilio_auth_token"),
        _optional_text("twilio_number", 20),
        rules_for("status", Nullable(), String(), In(("nexmo", "twilio", "inactive"))),
    ]


SMS = RequestDefinition(
    name="sms_setting",
    table="sms_settings",
    rules=_sms_rules,
    messages={"status.in": "The SMS provider must be nexmo, twilio or inactive."},
    attributes={"twilio_number": "Twilio number", "twilio_sid": "Twilio SID"},
    defaults={"status": "twilio"},
)


def _print_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        _optional_text("title"),
        _optional_text("header_left", 500),
        _optional_text("header_center", 500),
        _optional_text("header_right", 500),
        _optional_text("body", None),
        _optional_text("footer_left", 500),
        _optional_text("footer_center", 500),
        _optional_text("footer_right", 500),
        _image("logo_left_file", 2048),
        _image("logo_right_file", 2048),
        _image("background_file", 5120),
        rules_for("width", Nullable(), Integer(), Min(100), Max(2000)),
        rules_for("height", Nullable(), Integer(), Min(100), Max(2000)),
        _optional_text("prefix", 10),
        _flag("student_photo"),
        _flag("barcode"),
        rules_for("status", Nullable(), String(), In(tuple(Status.values()))),
    ]


PRINT = RequestDefinition(
    name="print_setting",
    table="print_settings",
    rules=_print_rules,
    attributes={"logo_left_file": "left logo", "logo_right_file": "right logo", "background_file": "background"},
    defaults={"status": Status.ACTIVE.value},
)


def _tax_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("min_amount", *presence(mode), Numeric(), Min(0), Max(999999.99)),
        rules_for("max_amount", *presence(mode), Numeric(), Min(0), Max(999999.99), Gte("min_amount")),
        rules_for("percentange", *presence(mode), Numeric(), Min(0), Max(100)),
        rules_for("max_no_taxable_amount", *presence(mode), Numeric(), Min(0), Max(999999.99)),
        _flag("status"),
    ]


TAX = RequestDefinition(
    name="tax_setting",
    table="tax_settings",
    rules=_tax_rules,
    messages={
        "max_amount.gte": "The maximum amount must be greater than or equal to the minimum amount.",
        "percentange.max": "The tax percentage cannot exceed 100.",
    },
    attributes={
        "min_amount": "minimum amount",
        "max_amount": "maximum amount",
        "percentange": "tax percentage",
        "max_no_taxable_amount": "maximum non-taxable amount",
    },
    defaults={"status": True},
)


def _schedule_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("slug", *presence(mode), String(), Max(255), Regex(r"^[a-z0-9\-_]+$"), Unique("schedule_settings")),
        rules_for("day", *presence(mode), String(), In(_WEEKDAYS)),
        rules_for("time", *presence(mode), String(), Regex(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")),
        _flag("email"),
        _flag("sms"),
        _flag("status"),
    ]


SCHEDULE = RequestDefinition(
    name="schedule_setting",
    table="schedule_settings",
    rules=_schedule_rules,
    messages={
        "slug.regex": "The slug may only contain lowercase letters, numbers, dashes and underscores.",
        "slug.unique": "A schedule with this slug already exists.",
        "day.in": "The day must be a day of the week.",
        "time.regex": "The time must be in HH:MM format.",
    },
    defaults={"email": False, "sms": False, "status": True},
)


def _topbar_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        _optional_text("logo"),
        _optional_text("title"),
        _optional_text("subtitle"),
        rules_for("background_color", Nullable(), String(), Regex(_HEX_COLOR)),
        rules_for("text_color", Nullable(), String(), Regex(_HEX_COLOR)),
        rules_for("link_color", Nullable(), String(), Regex(_HEX_COLOR)),
        _flag("status"),
    ]


TOPBAR = RequestDefinition(
    name="topbar_setting",
    table="topbar_settings",
    rules=_topbar_rules,
    messages={"regex": "The {attribute} must be a valid hex color code (e.g. #ffffff)."},
    defaults={"status": True},
)


def _social_rules(_mode: OperationMode) -> list[FieldRules]:
    return [
        *(
            rules_for(f"{network}_url", Nullable(), Url(), Max(255))
            for network in ("facebook", "twitter", "instagram", "linkedin", "youtube")
        ),
        _flag("status"),
    ]


SOCIAL = RequestDefinition(
    name="social_setting",
    table="social_settings",
    rules=_social_rules,
    messages={"url": "The {attribute} must be a valid URL."},
    attributes={
        "facebook_url": "Facebook URL",
        "twitter_url": "Twitter URL",
        "instagram_url": "Instagram URL",
        "linkedin_url": "LinkedIn URL",
        "youtube_url": "YouTube URL",
    },
    defaults={"status": True},
)


def _library_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("slug", *presence(mode), String(), Max(255), Unique("library_settings")),
        _optional_text("title"),
        _optional_text("library_name"),
        _optional_text("library_code", 50),
        _optional_text("address", 500),
        _optional_text("phone", 20),
        rules_for("email", Nullable(), Email(), Max(255)),
        rules_for("website", Nullable(), Url(), Max(255)),
        _image("logo_file", 2048),
        _image("background_file", 5120),
        rules_for("fine_per_day", Nullable(), Numeric(), Min(0), Max(999.99)),
        rules_for("max_books_per_student", Nullable(), Integer(), Min(1), Max(50)),
        rules_for("max_borrow_days", Nullable(), Integer(), Min(1), Max(365)),
        _flag("auto_approve_requests"),
        _flag("require_approval"),
        _flag("send_notifications"),
        rules_for("status", Nullable(), String(), In(_ACTIVE_INACTIVE)),
    ]


LIBRARY = RequestDefinition(
    name="library_setting",
    table="library_settings",
    rules=_library_rules,
    messages={
        **_SETTING_SLUG_MESSAGES,
        "max_books_per_student.integer": "Max books per student must be an integer.",
        "max_books_per_student.min": "Max books per student must be at least 1.",
        "max_books_per_student.max": "Max books per student cannot exceed 50.",
        "max_borrow_days.integer": "Max borrow days must be an integer.",
        "max_borrow_days.min": "Max borrow days must be at least 1.",
        "max_borrow_days.max": "Max borrow days cannot exceed 365.",
    },
    attributes={
        "fine_per_day": "fine per day",
        "max_books_per_student": "maximum books per student",
        "max_borrow_days": "maximum borrow days",
    },
    defaults={
        "status": "active",
        "auto_approve_requests": False,
        "require_approval": True,
        "send_notifications": True,
    },
)


def _application_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("slug", *presence(mode), String(), Max(255), Unique("application_settings")),
        _optional_text("title"),
        _optional_text("header_left", None),
        _optional_text("header_center", None),
        _optional_text("header_right", None),
        _optional_text("body", None),
        _optional_text("footer_left", None),
        _optional_text("footer_center", None),
        _optional_text("footer_right", None),
        _optional_text("logo_left"),
        _optional_text("logo_right"),
        _optional_text("background"),
        rules_for("fee_amount", Nullable(), Numeric(), Min(0)),
        _flag("pay_online"),
        rules_for("status", Nullable(), String(), In(_ACTIVE_INACTIVE)),
    ]


APPLICATION = RequestDefinition(
    name="application_setting",
    table="application_settings",
    rules=_application_rules,
    messages=dict(_SETTING_SLUG_MESSAGES),
    attributes={"fee_amount": "application fee", "pay_online": "online payment"},
    defaults={"status": "active", "pay_online": True},
)


def _id_card_rules(mode: OperationMode) -> list[FieldRules]:
    return [
        rules_for("title", *presence(mode), String(), Max(255)),
        _optional_text("subtitle"),
        rules_for("website_url", Nullable(), Url(), Max(255)),
        _optional_text("validity"),
        _optional_text("address", 500),
        _optional_text("prefix", 10),
        _flag("student_photo"),
        _flag("signature"),
        _flag("barcode"),
        rules_for("status", Required(), String(), OneOf(Status)),
    ]


ID_CARD = RequestDefinition(
    name="id_card_setting",
    table="id_card_settings",
    rules=_id_card_rules,
    messages={
        "title.required": "The ID card title is required.",
        "status.required": "The status is required.",
        "status.enum": "The status must be either active or inactive.",
    },
    attributes={"website_url": "website URL"},
    defaults={"slug": "id-card", "student_photo": False, "signature": False, "barcode": False},
)


DEFINITIONS = (MAIL, SMS, PRINT, TAX, SCHEDULE, TOPBAR, SOCIAL, LIBRARY, APPLICATION, ID_CARD)
