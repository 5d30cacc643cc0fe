from __future__ import annotations

from fastapi import APIRouter

from app.core.config import settings
from app.services.roster_store import roster_store

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health_check():
    services: dict[str, str] = {
        "roster_store": "ok" if roster_store.initialized else "not_initialized",
    }

    all_ok = all(v == "ok" for v in services.values())

    return {
        "status": "healthy" if all_ok else "degraded",
        "version": settings.APP_VERSION,
        "services": services,
        "employees": len(roster_store.snapshot),
    }


@router.get("/ready")
async def readiness_probe():
    return {"ready": roster_store.initialized}
