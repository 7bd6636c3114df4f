"""Singleton configuration tables; each holds at most one row in practice."""

from __future__ import annotations

from sqlalchemy import Boolean, Column, Index, Integer, Numeric, String, Text

from models.base import Base, TimestampMixin, id_column
from models.enums import Status


class MailSetting(TimestampMixin, Base):
    __tablename__ = "mail_settings"

    id = id_column()
    driver = Column(String(20), nullable=False)
    host = Column(String(255), nullable=False)
    port = Column(String(10), nullable=False)
    username = Column(String(255), nullable=False)
    password = Column(String(255), nullable=False)
    encryption = Column(String(10), nullable=True)
    sender_email = Column(String(255), nullable=True)
    sender_name = Column(String(255), nullable=True)
    reply_email = Column(String(255), nullable=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


class SmsSetting(TimestampMixin, Base):
    __tablename__ = "sms_settings"

    id = id_column()
    nexmo_key = Column(String(255), nullable=True)
    nexmo_secret = Column(String(255), nullable=True)
    nexmo_sender_name = Column(String(255), nullable=True)
    twilio_sid = Column(String(255), nullable=True)
    twilio_auth_token = Column(String(255), nullable=True)
    twilio_number = Column(String(20), nullable=True)
    # Active provider: nexmo, twilio or inactive.
    status = Column(String(20), nullable=False, default="twilio", index=True)


class PrintSetting(TimestampMixin, Base):
    __tablename__ = "print_settings"

    id = id_column()
    title = Column(String(255), nullable=True)
    header_left = Column(String(500), nullable=True)
    header_center = Column(String(500), nullable=True)
    header_right = Column(String(500), nullable=True)
    body = Column(Text, nullable=True)
    footer_left = Column(String(500), nullable=True)
    footer_center = Column(String(500), nullable=True)
    footer_right = Column(String(500), nullable=True)
    logo_left = Column(Text, nullable=True)
    logo_right = Column(Text, nullable=True)
    background = Column(Text, nullable=True)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    prefix = Column(String(10), nullable=True)
    student_photo = Column(Boolean, nullable=False, default=False)
    barcode = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


class TaxSetting(TimestampMixin, Base):
    __tablename__ = "tax_settings"

    id = id_column()
    min_amount = Column(Numeric(10, 2), nullable=False)
    max_amount = Column(Numeric(10, 2), nullable=False)
    percentange = Column(Numeric(5, 2), nullable=False)
    max_no_taxable_amount = Column(Numeric(10, 2), nullable=False, default=0)
    status = Column(Boolean, nullable=False, default=True, index=True)


class ScheduleSetting(TimestampMixin, Base):
    __tablename__ = "schedule_settings"

    id = id_column()
    slug = Column(String(255), nullable=False, unique=True)
    day = Column(String(10), nullable=False)
    time = Column(String(5), nullable=False)
    email = Column(Boolean, nullable=False, default=False)
    sms = Column(Boolean, nullable=False, default=False)
    status = Column(Boolean, nullable=False, default=True, index=True)


class TopbarSetting(TimestampMixin, Base):
    __tablename__ = "topbar_settings"

    id = id_column()
    logo = Column(String(255), nullable=True)
    title = Column(String(255), nullable=True)
    subtitle = Column(String(255), nullable=True)
    background_color = Column(String(7), nullable=True)
    text_color = Column(String(7), nullable=True)
    link_color = Column(String(7), nullable=True)
    status = Column(Boolean, nullable=False, default=True, index=True)


class SocialSetting(TimestampMixin, Base):
    __tablename__ = "social_settings"

    id = id_column()
    facebook_url = Column(String(255), nullable=True)
    twitter_url = Column(String(255), nullable=True)
    instagram_url = Column(String(255), nullable=True)
    linkedin_url = Column(String(255), nullable=True)
    youtube_url = Column(String(255), nullable=True)
    status = Column(Boolean, nullable=False, default=True, index=True)


class LibrarySetting(TimestampMixin, Base):
    __tablename__ = "library_settings"

    id = id_column()
    slug = Column(String(255), nullable=False, unique=True)
    title = Column(String(255), nullable=True)
    library_name = Column(String(255), nullable=True)
    library_code = Column(String(50), nullable=True)
    address = Column(String(500), nullable=True)
    phone = Column(String(20), nullable=True)
    email = Column(String(255), nullable=True)
    website = Column(String(255), nullable=True)
    logo = Column(String(255), nullable=True)
    background = Column(String(255), nullable=True)
    fine_per_day = Column(Numeric(8, 2), nullable=True)
    max_books_per_student = Column(Integer, nullable=True)
    max_borrow_days = Column(Integer, nullable=True)
    auto_approve_requests = Column(Boolean, nullable=False, default=False)
    require_approval = Column(Boolean, nullable=False, default=True)
    send_notifications = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


class ApplicationSetting(TimestampMixin, Base):
    __tablename__ = "application_settings"

    id = id_column()
    slug = Column(String(255), nullable=False, unique=True)
    title = Column(String(255), nullable=True)
    header_left = Column(Text, nullable=True)
    header_center = Column(Text, nullable=True)
    header_right = Column(Text, nullable=True)
    body = Column(Text, nullable=True)
    footer_left = Column(Text, nullable=True)
    footer_center = Column(Text, nullable=True)
    footer_right = Column(Text, nullable=True)
    logo_left = Column(Text, nullable=True)
    logo_right = Column(Text, nullable=True)
    background = Column(String(255), nullable=True)
    fee_amount = Column(Numeric(10, 2), nullable=True)
    pay_online = Column(Boolean, nullable=False, default=True)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value, index=True)


class IdCardSetting(TimestampMixin, Base):
    __tablename__ = "id_card_settings"

    id = id_column()
    slug = Column(String(255), nullable=False, unique=True)
    title = Column(String(255), nullable=True)
    subtitle = Column(String(255), nullable=True)
    logo = Column(Text, nullable=True)
    background = Column(Text, nullable=True)
    website_url = Column(String(255), nullable=True)
    validity = Column(String(255), nullable=True)
    address = Column(String(500), nullable=True)
    prefix = Column(String(10), nullable=True)
    student_photo = Column(Boolean, nullable=False, default=False)
    signature = Column(Boolean, nullable=False, default=False)
    barcode = Column(Boolean, nullable=False, default=False)
    status = Column(String(20), nullable=False, default=Status.ACTIVE.value)

    __table_args__ = (
        Index("ix_id_card_settings_status", "status"),
    )
