"""Google Calendar Gateway — OAuth consent, token storage and event CRUD.

Invariants:
    - Tokens live in a JSON file (settings.google_tokens_path), never in the DB
    - Every event is written with timeZone = settings.google_timezone on both ends,
      so zone-naive local timestamps are interpreted in the configured zone
    - Google API failures surface as GoogleCalendarError; missing config or
      tokens as GoogleNotConfiguredError / GoogleNotConnectedError

Design Decisions:
    - Web-server OAuth flow (redirect to /api/google/callback) over InstalledAppFlow:
      the API runs headless
    - Sync google-api-python-client wrapped by the routes in run_in_threadpool
    - Refreshed credentials are written back immediately
"""

import json
import logging
import os

from fastapi import Depends
from google.auth.exceptions import RefreshError
from google.auth.transport.requests import Request
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import Flow
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from app.config import Settings, get_settings
from app.core.errors import (
    GoogleCalendarError, GoogleNotConfiguredError, GoogleNotConnectedError,
    MissingFieldsError,
)

logger = logging.getLogger(__name__)

AUTH_URI = "https://accounts.google.com/o/oauth2/auth"
TOKEN_URI = "https://oauth2.googleapis.com/token"
API_VERSION = "v3"


class TokenStore:
    """OAuth tokens persisted as a JSON file."""

    def __init__(self, path: str):
        self.path = path

    def load(self) -> dict | None:
        if not os.path.exists(self.path):
            return None
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f) or None
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Unreadable token file {self.path}: {e}")
            return None

    def save(self, tokens: dict) -> None:
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(tokens, f, indent=2)


def build_event_resource(
    title: str, start: str, end: str, location: str, notes: str, timezone: str,
) -> dict:
    """Google event body for local start/end timestamps in `timezone`."""
    return {
        "summary": str(title),
        "location": str(location or ""),
        "description": str(notes or ""),
        "start": {"dateTime": str(start), "timeZone": timezone},
        "end": {"dateTime": str(end), "timeZone": timezone},
    }


class GoogleCalendarGateway:
    """Thin wrapper around the Calendar v3 API for one configured calendar."""

    def __init__(self, settings: Settings, token_store: TokenStore | None = None):
        self.settings = settings
        self.tokens = token_store or TokenStore(settings.google_tokens_path)

    # ─── Status ──────────────────────────────────────────────────

    def is_configured(self) -> bool:
        s = self.settings
        return bool(
            s.google_client_id and s.google_client_secret and s.google_redirect_uri
        )

    def is_connected(self) -> bool:
        t = self.tokens.load()
        return bool(t and (t.get("token") or t.get("refresh_token")))

    def status(self) -> dict:
        s = self.settings
        return {
            "configured": self.is_configured(),
            "connected": self.is_connected(),
            "scopes": s.google_scopes,
            "calendarId": s.google_calendar_id,
            "timezone": s.google_timezone,
        }

    # ─── OAuth ───────────────────────────────────────────────────

    def authorization_url(self) -> str:
        """Consent URL asking for offline access (refresh token)."""
        flow = self._flow()
        url, _state = flow.authorization_url(
            access_type="offline", prompt="consent",
        )
        return url

    def exchange_code(self, code: str) -> bool:
        """Trade the callback code for tokens; returns True if a refresh token came back."""
        if not code:
            raise MissingFieldsError(["code"])
        flow = self._flow()
        try:
            flow.fetch_token(code=code)
        except Exception as e:
            logger.error(f"OAuth code exchange failed: {e}")
            raise GoogleCalendarError(str(e), "token exchange")
        credentials = flow.credentials
        self.tokens.save(json.loads(credentials.to_json()))
        logger.info("Google tokens saved")
        return bool(credentials.refresh_token)

    # ─── Events ──────────────────────────────────────────────────

    def create_event(
        self, title: str, start: str, end: str, location: str = "", notes: str = "",
    ) -> dict:
        if not title or not start or not end:
            raise MissingFieldsError(["title", "start", "end"])
        resource = build_event_resource(
            title, start, end, location, notes, self.settings.google_timezone,
        )
        calendar_id = self.settings.google_calendar_id
        try:
            created = self._service().events().insert(
                calendarId=calendar_id, body=resource,
            ).execute()
        except HttpError as e:
            raise GoogleCalendarError(_http_error_message(e), "insert")
        logger.info(
            "Google event created",
            extra={"google_event_id": created.get("id"), "calendar_id": calendar_id},
        )
        return created

    def list_events(self, time_min: str, time_max: str) -> list[dict]:
        if not time_min or not time_max:
            raise MissingFieldsError(["timeMin", "timeMax"])
        try:
            result = self._service().events().list(
                calendarId=self.settings.google_calendar_id,
                timeMin=str(time_min),
                timeMax=str(time_max),
                singleEvents=True,
                orderBy="startTime",
            ).execute()
        except HttpError as e:
            raise GoogleCalendarError(_http_error_message(e), "list")
        return result.get("items", [])

    def delete_event(self, event_id: str) -> None:
        if not event_id:
            raise MissingFieldsError(["eventId"])
        try:
            self._service().events().delete(
                calendarId=self.settings.google_calendar_id,
                eventId=str(event_id),
            ).execute()
        except HttpError as e:
            raise GoogleCalendarError(_http_error_message(e), "delete")
        logger.info("Google event deleted", extra={"google_event_id": event_id})

    # ─── Internals ───────────────────────────────────────────────

    def _flow(self) -> Flow:
        if not self.is_configured():
            raise GoogleNotConfiguredError()
        s = self.settings
        client_config = {
            "web": {
                "client_id": s.google_client_id,
                "client_secret": s.google_client_secret,
                "auth_uri": AUTH_URI,
                "token_uri": TOKEN_URI,
                "redirect_uris": [s.google_redirect_uri],
            },
        }
        return Flow.from_client_config(
            client_config,
            scopes=s.google_scope_list,
            redirect_uri=s.google_redirect_uri,
            autogenerate_code_verifier=False,
        )

    def _credentials(self) -> Credentials:
        if not self.is_configured():
            raise GoogleNotConfiguredError()
        info = self.tokens.load()
        if not info or not (info.get("token") or info.get("refresh_token")):
            raise GoogleNotConnectedError()
        s = self.settings
        credentials = Credentials.from_authorized_user_info(
            {
                "refresh_token": None,
                "token_uri": TOKEN_URI,
                **info,
                "client_id": s.google_client_id,
                "client_secret": s.google_client_secret,
            },
            scopes=s.google_scope_list,
        )
        if (not credentials.token or credentials.expired) and credentials.refresh_token:
            try:
                credentials.refresh(Request())
            except RefreshError as e:
                raise GoogleCalendarError(str(e), "token refresh")
            self.tokens.save(json.loads(credentials.to_json()))
        return credentials

    def _service(self):
        return build(
            "calendar", API_VERSION,
            credentials=self._credentials(), cache_discovery=False,
        )


def _http_error_message(error: HttpError) -> str:
    reason = getattr(error, "reason", None)
    return reason or f"HTTP {error.resp.status}"


def get_google_calendar(
    settings: Settings = Depends(get_settings),
) -> GoogleCalendarGateway:
    """FastAPI dependency; overridden in tests with a fake gateway."""
    return GoogleCalendarGateway(settings)
