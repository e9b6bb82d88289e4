"""Infrastructure Layer — database, Google Calendar client, clock and logging.

Invariants:
    - External failures are mapped to CalendarApiError subclasses before leaving this layer
    - The wall clock is read here only, never in core/

Design Decisions:
    - Thin wrappers over raw clients, injected into routes via Depends
"""
