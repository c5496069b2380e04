# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up mock environment variables before any imports
# - Provides an in-memory stand-in for the Supabase query builder
# - Provides common product payloads
# =============================================================================

import os
from types import SimpleNamespace

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("SUPABASE_URL", "https://test-project.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_KEY", "test-service-key")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest

from lib.supabase_client import SupabaseClient


# =============================================================================
# In-memory Supabase stand-in
# =============================================================================

class FakeQuery:
    """Chainable query over one FakeTable, mirroring the PostgREST builder calls we use."""

    def __init__(self, table: "FakeTable"):
        self._table = table
        self._filters: list[tuple[str, object]] = []
        self._limit: int | None = None
        self._insert: dict | None = None
        self.selected: str | None = None

    def select(self, columns: str = "*", **kwargs):
        self.selected = columns
        return self

    def eq(self, column: str, value):
        self._filters.append((column, value))
        return self

    def limit(self, count: int):
        self._limit = count
        return self

    def insert(self, data: dict):
        self._insert = dict(data)
        return self

    def execute(self):
        self._table.executed.append(self)
        if self._table.error:
            raise self._table.error

        if self._insert is not None:
            self._table.inserted.append(dict(self._insert))
            row = {"id": self._table.next_id, **self._insert}
            self._table.next_id += 1
            self._table.rows.append(row)
            return SimpleNamespace(data=[dict(row)], count=None)

        rows = [
            dict(row) for row in self._table.rows
            if all(row.get(column) == value for column, value in self._filters)
        ]
        if self._limit is not None:
            rows = rows[:self._limit]
        return SimpleNamespace(data=rows, count=None)


class FakeTable:
    """Rows of one table plus a record of what was executed against it."""

    def __init__(self):
        self.rows: list[dict] = []
        self.inserted: list[dict] = []
        self.executed: list[FakeQuery] = []
        self.next_id = 1
        self.error: Exception | None = None


class FakeSupabase:
    """Stand-in for supabase.Client exposing only table()."""

    def __init__(self):
        self.tables: dict[str, FakeTable] = {}
        self.requested: list[str] = []

    def table(self, name: str) -> FakeQuery:
        self.requested.append(name)
        return FakeQuery(self.tables.setdefault(name, FakeTable()))

    def products(self) -> FakeTable:
        return self.tables.setdefault("product", FakeTable())

    def seed(self, *rows: dict) -> None:
        table = self.products()
        for row in rows:
            table.rows.append(dict(row))
            table.next_id = max(table.next_id, row["id"] + 1)


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def fake_supabase(monkeypatch):
    """Install an empty FakeSupabase as the shared client."""
    fake = FakeSupabase()
    monkeypatch.setattr(SupabaseClient, "_instance", fake)
    return fake


@pytest.fixture
def sample_product_rows():
    """Product rows as storage returns them."""
    return [
        {
            "id": 1,
            "category_id": 1,
            "product_name": "Classmate Notebook",
            "product_description": "200 pages, ruled",
            "product_stock": 120,
            "product_price": 2.5,
        },
        {
            "id": 2,
            "category_id": 1,
            "product_name": "Spiral Notebook",
            "product_description": "A5 spiral bound",
            "product_stock": 40,
            "product_price": 3.75,
        },
        {
            "id": 3,
            "category_id": 4,
            "product_name": "Parker Pen",
            "product_description": "Blue ink ballpoint",
            "product_stock": 15,
            "product_price": 12.0,
        },
    ]


@pytest.fixture
def new_product_payload():
    """A well-formed create payload."""
    return {
        "category_id": 1,
        "product_name": "Widget",
        "product_description": "A widget",
        "product_stock": 10,
        "product_price": "9.99",
    }
