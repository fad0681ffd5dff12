# app/routers/health.py
import time

from fastapi import APIRouter, Request

from app.core.rate_limit import api_rate_limit

router = APIRouter(prefix="/api", tags=["health"])

@router.get("/health")
@api_rate_limit()
async def health(request: Request):
    return {"ok": True, "ts": int(time.time() * 1000)}
