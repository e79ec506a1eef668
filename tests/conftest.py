"""
Pytest configuration for ClickHouse SDK tests.

Shared DSN constants are defined here so every test file can import them
instead of hardcoding hosts and credentials. They can be overridden from
the environment to exercise other layouts.
"""

import os
from collections.abc import Generator

import pytest

# ---------------------------------------------------------------------------
# Shared connection constants (import these in test files)
# ---------------------------------------------------------------------------
TEST_PORT = int(os.getenv("CLICKHOUSE_PORT", "9000"))
CLICKHOUSE_HOST = os.getenv("CLICKHOUSE_HOST", "localhost")
CLICKHOUSE_USER = os.getenv("CLICKHOUSE_USER", "user")
CLICKHOUSE_PASS = os.getenv("CLICKHOUSE_PASS", "pass")
CLICKHOUSE_DATABASE = os.getenv("CLICKHOUSE_DATABASE", "mydb")
CLICKHOUSE_DSN = (
    f"clickhouse://{CLICKHOUSE_USER}:{CLICKHOUSE_PASS}@{CLICKHOUSE_HOST}:{TEST_PORT}/{CLICKHOUSE_DATABASE}"
)


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Generator[pytest.MonkeyPatch, None, None]:
    """Remove any CLICKHOUSE_DSN inherited from the shell."""
    monkeypatch.delenv("CLICKHOUSE_DSN", raising=False)
    yield monkeypatch
