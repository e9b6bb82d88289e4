"""Google OAuth — connection status, consent URL and redirect callback.

Invariants:
    - /status and /auth-url never touch the Calendar API
    - /callback answers with a small HTML page (the user lands there in a browser)
    - A failed code exchange never leaks a stack trace into the page

Design Decisions:
    - Callback is the only route that renders HTML; errors are caught here
      instead of going through the JSON error handlers
"""

import logging
from html import escape

from fastapi import APIRouter, Depends, Query, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import HTMLResponse

from app.core.errors import CalendarApiError
from app.infrastructure.google_calendar import (
    GoogleCalendarGateway, get_google_calendar,
)
from app.schemas.google import AuthUrlResponse, GoogleStatus, GoogleStatusResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/google", tags=["google"])

_SUCCESS_PAGE = (
    "<h2>✅ Google verbunden</h2>"
    "<p>Tokens gespeichert.</p>"
    "<p>Du kannst dieses Fenster schließen.</p>"
)


def _error_page(message: str) -> str:
    return f"<h2>❌ Fehler</h2><pre>{escape(message or 'unknown')}</pre>"


@router.get("/status", response_model=GoogleStatusResponse)
async def google_status(
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
):
    """Configured/connected flags plus the calendar settings in use."""
    return GoogleStatusResponse(google=GoogleStatus(**gateway.status()))


@router.get("/auth-url", response_model=AuthUrlResponse)
async def google_auth_url(
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
):
    """Consent URL for offline access; 400 when OAuth is not configured."""
    return AuthUrlResponse(url=gateway.authorization_url())


@router.get("/callback", response_class=HTMLResponse)
async def google_callback(
    code: str = Query(""),
    gateway: GoogleCalendarGateway = Depends(get_google_calendar),
):
    """Google redirects here with ?code=...; exchange it and store the tokens."""
    try:
        has_refresh = await run_in_threadpool(gateway.exchange_code, code)
    except CalendarApiError as e:
        logger.warning(
            f"Google callback failed: {e.message}", extra={"error_code": e.code},
        )
        return HTMLResponse(_error_page(e.message), status_code=e.http_status)
    except Exception as e:
        logger.error(f"Google callback crashed: {e}", exc_info=True)
        return HTMLResponse(
            _error_page("unexpected error"),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    if not has_refresh:
        logger.warning("Google returned no refresh token; reconnect will be needed on expiry")
    return HTMLResponse(_SUCCESS_PAGE)
