"""Settings tests — URL rewriting and derived properties."""

from app.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    s = Settings(database_url="postgresql://u:p@db:5432/cal")
    assert s.database_url == "postgresql+asyncpg://u:p@db:5432/cal"


def test_sqlite_url_untouched():
    s = Settings(database_url="sqlite+aiosqlite:///./x.db")
    assert s.database_url == "sqlite+aiosqlite:///./x.db"


def test_auth_enabled_follows_api_key():
    assert Settings(api_key="").auth_enabled is False
    assert Settings(api_key="secret").auth_enabled is True


def test_scope_list_splits_on_spaces():
    s = Settings(google_scopes="a  b c")
    assert s.google_scope_list == ["a", "b", "c"]
