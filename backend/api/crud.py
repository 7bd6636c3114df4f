from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from pydantic import BaseModel
from sqlalchemy.orm import Session

from api.deps import get_actor_id, read_payload
from models.scoping import get_by_id
from core.config import settings
from core.database import get_db
from core.responses import paginated, success
from models.enums import Status
from schemas.common import BulkResult
from services import crud_service
from services.crud_service import AfterWrite
from validation import Create, RequestDefinition, mode_from_method, validate_or_raise
from validation.definitions.bulk import bulk_ids_definition, bulk_status_definition


@dataclass(frozen=True)
class Resource:
    """One soft-deletable entity exposed as a CRUD collection."""

    model: Any
    definition: RequestDefinition
    out: type[BaseModel]
    noun: str
    search_columns: tuple[str, ...] = ()
    filters: tuple[str, ...] = ("status",)
    order_by: tuple[str, ...] = ("id",)
    status_enum: type[Enum] = Status
    after_write: AfterWrite | None = None
    # (method, path) or None to leave the endpoint out.
    bulk_status: tuple[str, str] | None = ("POST", "/bulk-status")
    bulk_delete: tuple[str, str] | None = ("DELETE", "/bulk-delete")
    bulk_force_delete: tuple[str, str] | None = None
    force_delete: bool = False

    @property
    def code(self) -> str:
        return self.noun.upper().replace(" ", "_")


def page_params(
    page: int = Query(default=1, ge=1),
    per_page: int | None = Query(default=None, ge=1),
) -> tuple[int, int]:
    size = min(per_page or settings.default_per_page, settings.max_per_page)
    return page, size


def build_router(resource: Resource) -> APIRouter:
    router = APIRouter()
    model = resource.model
    table = model.__tablename__

    def dump(obj) -> dict:
        return resource.out.model_validate(obj).model_dump(mode="json")

    def load(db: Session, record_id: int):
        obj = get_by_id(db, model, record_id)
        if obj is None:
            raise HTTPException(status_code=404, detail=f"{resource.code}_NOT_FOUND")
        return obj

    # Fixed bulk paths are registered before "/{record_id}" so they are never
    # captured by the id route.
    if resource.bulk_status is not None:
        status_definition = bulk_status_definition(table, resource.status_enum)
        method, path = resource.bulk_status

        def bulk_status(
            payload: dict = Depends(read_payload),
            db: Session = Depends(get_db),
            actor_id: int | None = Depends(get_actor_id),
        ) -> dict:
            data = validate_or_raise(db, status_definition, payload, Create())
            affected = crud_service.bulk_update_status(db, model, data["ids"], data["status"], actor_id=actor_id)
            return success(BulkResult(affected=affected).model_dump(), f"{affected} {resource.noun.lower()} record(s) updated")

        router.add_api_route(path, bulk_status, methods=[method])

    ids_definition = bulk_ids_definition(table)

    if resource.bulk_delete is not None:
        method, path = resource.bulk_delete

        def bulk_delete(
            payload: dict = Depends(read_payload),
            db: Session = Depends(get_db),
            actor_id: int | None = Depends(get_actor_id),
        ) -> dict:
            data = validate_or_raise(db, ids_definition, payload, Create())
            affected = crud_service.bulk_soft_delete(db, model, data["ids"], actor_id=actor_id)
            return success(BulkResult(affected=affected).model_dump(), f"{affected} {resource.noun.lower()} record(s) deleted")

        router.add_api_route(path, bulk_delete, methods=[method])

    if resource.bulk_force_delete is not None:
        method, path = resource.bulk_force_delete

        def bulk_force_delete(
            payload: dict = Depends(read_payload),
            db: Session = Depends(get_db),
        ) -> dict:
            data = validate_or_raise(db, ids_definition, payload, Create())
            affected = crud_service.bulk_force_delete(db, model, data["ids"])
            return success(BulkResult(affected=affected).model_dump(), f"{affected} {resource.noun.lower()} record(s) permanently deleted")

        router.add_api_route(path, bulk_force_delete, methods=[method])

    @router.get("/")
    def list_records(
        request: Request,
        search: str | None = None,
        paging: tuple[int, int] = Depends(page_params),
        db: Session = Depends(get_db),
    ) -> dict:
        page, per_page = paging
        filters = {name: request.query_params.get(name) for name in resource.filters}
        items, total = crud_service.list_records(
            db,
            model,
            page=page,
            per_page=per_page,
            search=search,
            search_columns=resource.search_columns,
            filters=filters,
            order_by=resource.order_by,
        )
        return paginated(
            [dump(o) for o in items],
            total=total,
            page=page,
            per_page=per_page,
            message=f"{resource.noun} list retrieved successfully",
        )

    @router.post("/", status_code=201)
    def create_record(
        payload: dict = Depends(read_payload),
        db: Session = Depends(get_db),
        actor_id: int | None = Depends(get_actor_id),
    ) -> dict:
        data = validate_or_raise(db, resource.definition, payload, Create(), actor_id=actor_id)
        obj = crud_service.create_record(db, model, data, after_write=resource.after_write)
        return success(dump(obj), f"{resource.noun} created successfully")

    @router.get("/{record_id}")
    def get_record(record_id: int, db: Session = Depends(get_db)) -> dict:
        return success(dump(load(db, record_id)), f"{resource.noun} retrieved successfully")

    def update_record(
        record_id: int,
        request: Request,
        payload: dict = Depends(read_payload),
        db: Session = Depends(get_db),
        actor_id: int | None = Depends(get_actor_id),
    ) -> dict:
        obj = load(db, record_id)
        data = validate_or_raise(
            db, resource.definition, payload, mode_from_method(request.method, record_id), actor_id=actor_id
        )
        obj = crud_service.update_record(db, obj, data, after_write=resource.after_write)
        return success(dump(obj), f"{resource.noun} updated successfully")

    router.add_api_route("/{record_id}", update_record, methods=["PUT", "PATCH"])

    @router.delete("/{record_id}")
    def delete_record(
        record_id: int,
        db: Session = Depends(get_db),
        actor_id: int | None = Depends(get_actor_id),
    ) -> dict:
        crud_service.soft_delete(db, load(db, record_id), actor_id=actor_id)
        return success(None, f"{resource.noun} deleted successfully")

    if resource.force_delete:

        @router.delete("/{record_id}/force")
        def force_delete_record(record_id: int, db: Session = Depends(get_db)) -> dict:
            crud_service.force_delete(db, load(db, record_id))
            return success(None, f"{resource.noun} permanently deleted")

    return router
