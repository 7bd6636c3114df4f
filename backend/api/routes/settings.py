from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from api.deps import read_payload
from core.database import get_db
from core.responses import success
from models import settings as models
from schemas import settings as schemas
from services import settings_service
from validation import RequestDefinition, validate_or_raise
from validation.definitions import settings as definitions


router = APIRouter()

# path, model, request definition, response schema, display name
SETTINGS = (
    ("mail", models.MailSetting, definitions.MAIL, schemas.MailSettingOut, "Mail settings"),
    ("sms", models.SmsSetting, definitions.SMS, schemas.SmsSettingOut, "SMS settings"),
    ("print", models.PrintSetting, definitions.PRINT, schemas.PrintSettingOut, "Print settings"),
    ("tax", models.TaxSetting, definitions.TAX, schemas.TaxSettingOut, "Tax settings"),
    ("schedule", models.ScheduleSetting, definitions.SCHEDULE, schemas.ScheduleSettingOut, "Schedule settings"),
    ("topbar", models.TopbarSetting, definitions.TOPBAR, schemas.TopbarSettingOut, "Topbar settings"),
    ("social", models.SocialSetting, definitions.SOCIAL, schemas.SocialSettingOut, "Social settings"),
    ("library", models.LibrarySetting, definitions.LIBRARY, schemas.LibrarySettingOut, "Library settings"),
    ("application", models.ApplicationSetting, definitions.APPLICATION, schemas.ApplicationSettingOut, "Application settings"),
    ("id-card", models.IdCardSetting, definitions.ID_CARD, schemas.IdCardSettingOut, "ID card settings"),
)


def _register(path: str, model, definition: RequestDefinition, out: type[BaseModel], title: str) -> None:
    def dump(row) -> dict | None:
        if row is None:
            return None
        return out.model_validate(row).model_dump(mode="json")

    def read_setting(db: Session = Depends(get_db)) -> dict:
        return success(dump(settings_service.current_row(db, model)), f"{title} retrieved successfully")

    def save_setting(payload: dict = Depends(read_payload), db: Session = Depends(get_db)) -> dict:
        row = settings_service.current_row(db, model)
        data = validate_or_raise(db, definition, payload, settings_service.upsert_mode(row))
        row = settings_service.save(db, model, row, data)
        return success(dump(row), f"{title} saved successfully")

    router.add_api_route(f"/{path}", read_setting, methods=["GET"], name=f"read_{definition.name}")
    router.add_api_route(f"/{path}", save_setting, methods=["POST", "PUT"], name=f"save_{definition.name}")


for _entry in SETTINGS:
    _register(*_entry)
