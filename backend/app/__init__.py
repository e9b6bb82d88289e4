"""Calendar API Package — local calendar store with Google Calendar sync and quick add.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
