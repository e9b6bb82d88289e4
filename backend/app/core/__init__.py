"""Core Layer — pure domain logic, no IO, no async, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/
    - Parsing is deterministic given the text, default minutes and reference clock

Design Decisions:
    - Functional core separated from imperative shell: the quick-add parser
      never reads the wall clock itself
"""
