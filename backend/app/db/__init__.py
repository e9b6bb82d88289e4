"""Database Infrastructure — declarative Base for the record store.

Invariants:
    - All sessions are async (AsyncSession)

Design Decisions:
    - aiosqlite by default, asyncpg when DATABASE_URL points at Postgres
"""
