"""API Layer — FastAPI routes, error handlers and the API key guard.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON with an "ok" flag (except the OAuth callback page)

Design Decisions:
    - Thin routes delegate to services
"""
