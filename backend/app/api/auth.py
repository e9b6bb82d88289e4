"""API Key Guard — optional shared-secret protection for write endpoints.

Invariants:
    - No api_key configured => every request passes
    - Key accepted from x-api-key or Authorization: Bearer <key>
    - Wrong or missing key => UnauthorizedError (401 envelope)
"""

import hmac

from fastapi import Depends, Request

from app.config import Settings, get_settings
from app.core.errors import ErrorContext, UnauthorizedError


def extract_api_key(request: Request) -> str:
    key = request.headers.get("x-api-key", "")
    if key:
        return key
    authorization = request.headers.get("authorization", "")
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() == "bearer":
        return token.strip()
    return ""


async def require_api_key(
    request: Request, settings: Settings = Depends(get_settings),
) -> None:
    """FastAPI dependency for routes that change state."""
    if not settings.auth_enabled:
        return
    key = extract_api_key(request)
    if not key or not hmac.compare_digest(key, settings.api_key):
        raise UnauthorizedError(ErrorContext(path=request.url.path))
