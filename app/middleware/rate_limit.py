"""
Rate limiting para endpoints concretos usando slowapi
"""
from fastapi import Request, HTTPException
from limits import parse
from slowapi.util import get_remote_address

from ..config import get_settings

def apply_rate_limit(request: Request, limit: str, scope: str = "default"):
    """
    Aplica rate limiting a un endpoint específico.
    Uso: apply_rate_limit(request, "5/minute")

    Si el limiter no está configurado (por ejemplo, en tests), la función no hace nada.
    """
    limiter = getattr(request.app.state, "limiter", None)
    if limiter is None:
        return

    key = get_remote_address(request)

    # hit() cuenta la petición y devuelve False si ya se superó el límite
    if not limiter.limiter.hit(parse(limit), scope, key):
        raise HTTPException(
            status_code=429,
            detail=f"Too many requests. Limit: {limit}. Try again later."
        )

def write_rate_limit(request: Request):
    """Dependencia para POST/PUT/DELETE."""
    apply_rate_limit(request, get_settings().write_rate_limit, scope="write")
