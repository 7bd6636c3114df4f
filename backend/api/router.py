from __future__ import annotations

from fastapi import APIRouter

from api.routes import academic, fees, library, settings, utility


api_router = APIRouter()
api_router.include_router(academic.router, prefix="/academic", tags=["academic"])
api_router.include_router(library.router, prefix="/library", tags=["library"])
api_router.include_router(fees.router, prefix="/fees", tags=["fees"])
api_router.include_router(settings.router, prefix="/settings", tags=["settings"])
api_router.include_router(utility.router, prefix="/utility", tags=["utility"])
