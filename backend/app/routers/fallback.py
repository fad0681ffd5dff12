# app/routers/fallback.py
from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from app.core.rate_limit import api_rate_limit

router = APIRouter(prefix="/api", tags=["fallback"])

# Registered last so unknown /api/* paths still spend the caller's budget
@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"])
@api_rate_limit()
async def api_not_found(request: Request, path: str):
    return JSONResponse(status_code=404, content={"ok": False, "error": "Not found"})
