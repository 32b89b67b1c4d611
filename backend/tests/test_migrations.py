"""
Tests for the schema migrations and the migration runner's file handling.
"""

import re

import pytest

import run_migrations


@pytest.fixture
def schema() -> str:
    return (run_migrations.MIGRATIONS_DIR / "001_initial_schema.sql").read_text()


def table_body(schema: str, table: str) -> str:
    match = re.search(rf"CREATE TABLE IF NOT EXISTS {table} \((.*?)\n\);", schema, re.S)
    assert match, f"table {table} not found"
    return match.group(1)


class TestInitialSchema:
    @pytest.mark.parametrize(
        "table",
        ["users", "apartments", "agreements", "payments", "members", "coupons", "announcements"],
    )
    def test_one_table_per_collection(self, schema, table):
        table_body(schema, table)

    def test_payments_survive_agreement_deletion(self, schema):
        assert "REFERENCES" not in table_body(schema, "payments")

    def test_pending_agreement_unique_index(self, schema):
        assert re.search(
            r"CREATE UNIQUE INDEX IF NOT EXISTS uq_agreements_pending_per_apartment\s+"
            r"ON agreements\(user_email, apartment_no\)\s+WHERE status = 'pending'",
            schema,
        )


class TestPendingMigrations:
    def test_lists_unapplied_files_in_order(self, tmp_path, monkeypatch):
        (tmp_path / "002_second.sql").write_text("SELECT 2;")
        (tmp_path / "001_first.sql").write_text("SELECT 1;")
        monkeypatch.setattr(run_migrations, "MIGRATIONS_DIR", tmp_path)

        pending = run_migrations.pending_migrations({})

        assert [p.name for p in pending] == ["001_first.sql", "002_second.sql"]

    def test_skips_applied_files(self, tmp_path, monkeypatch):
        first = tmp_path / "001_first.sql"
        first.write_text("SELECT 1;")
        (tmp_path / "002_second.sql").write_text("SELECT 2;")
        monkeypatch.setattr(run_migrations, "MIGRATIONS_DIR", tmp_path)

        applied = {"001_first.sql": (run_migrations.checksum_of(first), None)}
        pending = run_migrations.pending_migrations(applied)

        assert [p.name for p in pending] == ["002_second.sql"]

    def test_changed_file_is_not_reapplied(self, tmp_path, monkeypatch):
        (tmp_path / "001_first.sql").write_text("SELECT 1;")
        monkeypatch.setattr(run_migrations, "MIGRATIONS_DIR", tmp_path)

        pending = run_migrations.pending_migrations({"001_first.sql": ("stale", None)})

        assert pending == []
