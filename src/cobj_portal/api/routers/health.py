"""
cobj_portal.api.routers.health

Liveness endpoint (`/healthz`). Does not contact the CRM.
"""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}
