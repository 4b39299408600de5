from fastapi import APIRouter, Request

from app.core.config import get_settings
from app.core.errors import ok

router = APIRouter()


@router.get("/health")
async def health(request: Request):
    rid = getattr(request.state, "request_id", None)
    return ok({"status": "ok", "service": get_settings().app_name, "request_id": rid})
