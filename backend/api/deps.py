from __future__ import annotations

import json
from typing import Any

from fastapi import Depends, HTTPException, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session

from core.config import settings
from core.database import get_db
from core.security import TokenNotConfiguredError, decode_token
from models.user import User


bearer_scheme = HTTPBearer(auto_error=False)

_FORM_TYPES = ("multipart/form-data", "application/x-www-form-urlencoded")


async def read_payload(request: Request) -> dict[str, Any]:
    """Request body as a plain dict, from JSON or form data (uploads stay UploadFile)."""

    content_type = (request.headers.get("content-type") or "").lower()
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        payload: dict[str, Any] = {}
        for key in form.keys():
            values = form.getlist(key)
            if key.endswith("[]"):
                payload[key[:-2]] = list(values)
            elif len(values) > 1:
                payload[key] = list(values)
            else:
                payload[key] = values[0]
        return payload

    body = await request.body()
    if not body.strip():
        return {}
    try:
        data = json.loads(body)
    except ValueError:
        raise HTTPException(status_code=400, detail="INVALID_JSON")
    if not isinstance(data, dict):
        raise HTTPException(status_code=400, detail="INVALID_JSON")
    return data


def get_actor_id(
    creds: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> int | None:
    """User id written to created_by / updated_by.

    Without a bearer token (or without a configured secret) the configured
    default actor is used, which may be None.
    """

    if creds is None or not creds.credentials:
        return settings.default_actor_id
    try:
        payload = decode_token(creds.credentials)
    except TokenNotConfiguredError:
        return settings.default_actor_id
    except JWTError:
        raise HTTPException(status_code=401, detail="INVALID_TOKEN")

    try:
        user_id = int(payload.get("sub"))
    except (TypeError, ValueError):
        raise HTTPException(status_code=401, detail="INVALID_TOKEN")

    if db.get(User, user_id) is None:
        raise HTTPException(status_code=401, detail="INVALID_TOKEN")
    return user_id
