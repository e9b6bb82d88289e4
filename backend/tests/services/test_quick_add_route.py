"""Quick Add route — free text in, Google event + local mirror out.

Invariants:
    - Parsed start/end are zone-naive local timestamps relative to the pinned clock
    - Blank text fails with 400 EMPTY_INPUT before Google is called
    - Every created Google event shows up in GET /api/events
    - API key enforced when configured
"""

from app.core.errors import GoogleNotConnectedError


async def test_quick_add_creates_google_event_and_mirror(client, fake_google):
    res = await client.post(
        "/api/google/quick-add", json={"text": "coiffeur morgen 13:00 60min"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["ok"] is True
    assert body["parsed"] == {
        "title": "coiffeur",
        "start": "2026-01-02T13:00:00",
        "end": "2026-01-02T14:00:00",
        "minutes": 60,
    }
    assert body["googleEvent"]["id"] == "g1"
    assert body["mirroredEvent"]["id"] == "gcal_g1"
    assert body["mirroredEvent"]["googleEventId"] == "g1"
    assert fake_google.created[0]["start"] == {
        "dateTime": "2026-01-02T13:00:00", "timeZone": "Europe/Zurich",
    }


async def test_quick_add_explicit_date(client):
    res = await client.post(
        "/api/google/quick-add", json={"text": "arzt 24.01 09:15 30min"},
    )
    parsed = res.json()["parsed"]
    assert parsed["start"] == "2026-01-24T09:15:00"
    assert parsed["end"] == "2026-01-24T09:45:00"
    assert parsed["title"] == "arzt"


async def test_quick_add_uses_request_default_minutes(client):
    res = await client.post(
        "/api/google/quick-add", json={"text": "bio lernen 16:30", "defaultMinutes": 90},
    )
    parsed = res.json()["parsed"]
    assert parsed["minutes"] == 90
    assert parsed["end"] == "2026-01-01T18:00:00"


async def test_quick_add_falls_back_to_settings_default(client, test_settings):
    test_settings.quick_add_default_minutes = 45
    res = await client.post("/api/google/quick-add", json={"text": "lesen"})
    parsed = res.json()["parsed"]
    assert parsed["minutes"] == 45
    assert parsed["start"] == "2026-01-01T09:00:00"


async def test_non_positive_default_minutes_use_settings_default(client, test_settings):
    test_settings.quick_add_default_minutes = 45
    for default in (-10, 0):
        res = await client.post(
            "/api/google/quick-add", json={"text": "lesen", "defaultMinutes": default},
        )
        assert res.json()["parsed"]["minutes"] == 45


async def test_quick_add_passes_location_and_notes(client, fake_google):
    await client.post(
        "/api/google/quick-add",
        json={"text": "essen 19:00", "location": "Bern", "notes": "Tisch reserviert"},
    )
    assert fake_google.created[0]["location"] == "Bern"
    assert fake_google.created[0]["description"] == "Tisch reserviert"


async def test_blank_text_returns_empty_input(client, fake_google):
    res = await client.post("/api/google/quick-add", json={"text": "   "})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "EMPTY_INPUT"
    assert fake_google.created == []


async def test_missing_text_returns_empty_input(client):
    res = await client.post("/api/google/quick-add", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "EMPTY_INPUT"


async def test_mirrored_event_listed_locally(client):
    await client.post("/api/google/quick-add", json={"text": "90min 13:00 morgen"})
    res = await client.get("/api/events")
    events = res.json()["events"]
    assert len(events) == 1
    assert events[0]["title"] == "Termin"
    assert events[0]["start"] == "2026-01-02T13:00:00"


async def test_google_failure_stores_nothing(client, fake_google):
    fake_google.fail_with = GoogleNotConnectedError()
    res = await client.post("/api/google/quick-add", json={"text": "arzt 10:00"})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "GOOGLE_NOT_CONNECTED"
    assert (await client.get("/api/events")).json()["events"] == []


async def test_quick_add_requires_api_key_when_configured(client, test_settings):
    test_settings.api_key = "secret"
    res = await client.post("/api/google/quick-add", json={"text": "arzt 10:00"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "UNAUTHORIZED"


async def test_quick_add_accepts_x_api_key(client, test_settings):
    test_settings.api_key = "secret"
    res = await client.post(
        "/api/google/quick-add", json={"text": "arzt 10:00"},
        headers={"x-api-key": "secret"},
    )
    assert res.status_code == 200


async def test_quick_add_accepts_bearer_token(client, test_settings):
    test_settings.api_key = "secret"
    res = await client.post(
        "/api/google/quick-add", json={"text": "arzt 10:00"},
        headers={"Authorization": "Bearer secret"},
    )
    assert res.status_code == 200


async def test_wrong_api_key_rejected(client, test_settings):
    test_settings.api_key = "secret"
    res = await client.post(
        "/api/google/quick-add", json={"text": "arzt 10:00"},
        headers={"x-api-key": "nope"},
    )
    assert res.status_code == 401
