"""
Rate limiting para a API
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings

# Limites por IP; desligado quando RATE_LIMIT_ENABLED=false (testes)
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.RATE_LIMIT_PER_MINUTE}/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)

LOGIN_LIMIT = settings.LOGIN_RATE_LIMIT
UPLOAD_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
