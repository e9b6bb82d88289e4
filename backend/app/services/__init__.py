"""Services Layer — quick-add orchestration and the record store.

Invariants:
    - Services receive their session and gateway; they never build them

Design Decisions:
    - One module per workflow for locality
"""
