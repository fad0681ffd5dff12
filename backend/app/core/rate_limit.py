# app/core/rate_limit.py
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.settings import settings

# Every /api/* route draws from this one bucket per caller address
API_SCOPE = "api"

limiter = Limiter(key_func=get_remote_address)


def api_rate_limit():
    """Shared limit decorator for routes mounted under /api."""
    return limiter.shared_limit(settings.rate_limit, scope=API_SCOPE)
