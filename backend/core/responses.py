from __future__ import annotations

import math
from typing import Any


def success(data: Any = None, message: str = "Success") -> dict:
    return {"success": True, "message": message, "data": data}


def validation_error(errors: dict[str, list[str]], message: str = "Validation failed") -> dict:
    return {"success": False, "message": message, "errors": errors}


def error(code: str, message: str) -> dict:
    return {"success": False, "message": message, "code": code}


def paginated(items: list[Any], *, total: int, page: int, per_page: int, message: str) -> dict:
    last_page = max(1, math.ceil(total / per_page)) if per_page else 1
    first = (page - 1) * per_page + 1 if items else None
    return {
        "success": True,
        "message": message,
        "data": items,
        "meta": {
            "current_page": page,
            "last_page": last_page,
            "per_page": per_page,
            "total": total,
            "from": first,
            "to": (first + len(items) - 1) if first is not None else None,
        },
    }
