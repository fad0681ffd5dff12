# app/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from app.core.rate_limit import limiter
from app.core.security import SecurityHeadersMiddleware
from app.core.settings import settings
from app.routers.contact import router as contact_router
from app.routers.fallback import router as fallback_router
from app.routers.health import router as health_router

log = logging.getLogger("uvicorn.error")

@asynccontextmanager
async def lifespan(_app: FastAPI):
    log.info(f"[main] Mailer backend listening on http://localhost:{settings.port}")
    yield

# JSON API only; the security headers CSP would block the Swagger UI anyway
app = FastAPI(
    title=settings.api_title,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
    lifespan=lifespan,
)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Starlette runs the last added middleware first: headers, then CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=["POST", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.add_middleware(SecurityHeadersMiddleware)

# Routers
app.include_router(health_router)
app.include_router(contact_router)
app.include_router(fallback_router)


def serve():
    import uvicorn

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        proxy_headers=True,
        forwarded_allow_ips=settings.forwarded_allow_ips,
    )


if __name__ == "__main__":
    serve()
