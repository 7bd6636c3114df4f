from __future__ import annotations

from decimal import Decimal

from schemas.common import RecordOut


class MailSettingOut(RecordOut):
    driver: str
    host: str
    port: str
    username: str
    encryption: str | None = None
    sender_email: str | None = None
    sender_name: str | None = None
    reply_email: str | None = None
    status: str


class SmsSettingOut(RecordOut):
    nexmo_key: str | None = None
    nexmo_sender_name: str | None = None
    twilio_sid: str | None = None
    twilio_number: str | None = None
    status: str


class PrintSettingOut(RecordOut):
    title: str | None = None
    header_left: str | None = None
    header_center: str | None = None
    header_right: str | None = None
    body: str | None = None
    footer_left: str | None = None
    footer_center: str | None = None
    footer_right: str | None = None
    logo_left: str | None = None
    logo_right: str | None = None
    background: str | None = None
    width: int | None = None
    height: int | None = None
    prefix: str | None = None
    student_photo: bool
    barcode: bool
    status: str


class TaxSettingOut(RecordOut):
    min_amount: Decimal
    max_amount: Decimal
    percentange: Decimal
    max_no_taxable_amount: Decimal
    status: bool


class ScheduleSettingOut(RecordOut):
    slug: str
    day: str
    time: str
    email: bool
    sms: bool
    status: bool


class TopbarSettingOut(RecordOut):
    logo: str | None = None
    title: str | None = None
    subtitle: str | None = None
    background_color: str | None = None
    text_color: str | None = None
    link_color: str | None = None
    status: bool


class SocialSettingOut(RecordOut):
    facebook_url: str | None = None
    twitter_url: str | None = None
    instagram_url: str | None = None
    linkedin_url: str | None = None
    youtube_url: str | None = None
    status: bool


class LibrarySettingOut(RecordOut):
    slug: str
    title: str | None = None
    library_name: str | None = None
    library_code: str | None = None
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    website: str | None = None
    logo: str | None = None
    background: str | None = None
    fine_per_day: Decimal | None = None
    max_books_per_student: int | None = None
    max_borrow_days: int | None = None
    auto_approve_requests: bool
    require_approval: bool
    send_notifications: bool
    status: str


class ApplicationSettingOut(RecordOut):
    slug: str
    title: str | None = None
    header_left: str | None = None
    header_center: str | None = None
    header_right: str | None = None
    body: str | None = None
    footer_left: str | None = None
    footer_center: str | None = None
    footer_right: str | None = None
    logo_left: str | None = None
    logo_right: str | None = None
    background: str | None = None
    fee_amount: Decimal | None = None
    pay_online: bool
    status: str


class IdCardSettingOut(RecordOut):
    slug: str
    title: str | None = None
    subtitle: str | None = None
    logo: str | None = None
    background: str | None = None
    website_url: str | None = None
    validity: str | None = None
    address: str | None = None
    prefix: str | None = None
    student_photo: bool
    signature: bool
    barcode: bool
    status: str
