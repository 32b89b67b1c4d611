#!/usr/bin/env python3
"""
Schema migration runner.

Applies the SQL files in migrations/ (one table per collection, plus the
unique index that backs the one-pending-agreement rule) to the Postgres
database behind the document store.

Usage:
    python run_migrations.py             # Apply pending migrations
    python run_migrations.py --status    # Show which files are applied
    python run_migrations.py --dry-run   # List what would be applied

Configuration:
    BMS_SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
"""

import argparse
import hashlib
import sys
from pathlib import Path

import psycopg2
from psycopg2 import sql
from rich.console import Console
from rich.table import Table

from shared.config import get_settings

console = Console()

MIGRATIONS_DIR = Path(__file__).parent / "migrations"
LEDGER_TABLE = "_bms_migrations"


def connect():
    """Open a direct connection, or exit if none is configured."""
    db_url = get_settings().supabase_db_url
    if not db_url:
        console.print("[red]Error:[/red] BMS_SUPABASE_DB_URL is not set.")
        sys.exit(1)
    try:
        return psycopg2.connect(db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def checksum_of(path: Path) -> str:
    return hashlib.sha256(path.read_bytes()).hexdigest()[:16]


def ensure_ledger(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL(
                """
                CREATE TABLE IF NOT EXISTS {} (
                    name TEXT PRIMARY KEY,
                    checksum TEXT NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                )
                """
            ).format(sql.Identifier(LEDGER_TABLE))
        )
    conn.commit()


def applied_migrations(conn) -> dict[str, tuple[str, object]]:
    """Map of applied file name to (checksum, applied_at)."""
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(LEDGER_TABLE)
            )
        )
        return {name: (checksum, applied_at) for name, checksum, applied_at in cur.fetchall()}


def pending_migrations(applied: dict[str, tuple[str, object]]) -> list[Path]:
    pending = []
    for path in sorted(MIGRATIONS_DIR.glob("*.sql")):
        if path.name not in applied:
            pending.append(path)
        elif applied[path.name][0] != checksum_of(path):
            console.print(f"[yellow]Warning:[/yellow] {path.name} changed after it was applied")
    return pending


def apply_migration(conn, path: Path) -> None:
    """Run one file and record it, in a single transaction."""
    console.print(f"[blue]Applying:[/blue] {path.name}")
    try:
        with conn.cursor() as cur:
            cur.execute(path.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(LEDGER_TABLE)
                ),
                (path.name, checksum_of(path)),
            )
        conn.commit()
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {path.name} failed: {e}")
        raise
    console.print(f"[green]✓[/green] {path.name}")


def print_status(applied: dict[str, tuple[str, object]], pending: list[Path]) -> None:
    table = Table(title="Migrations")
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")
    for name, (_, applied_at) in applied.items():
        stamp = applied_at.strftime("%Y-%m-%d %H:%M:%S") if applied_at else ""
        table.add_row(name, "[green]applied[/green]", stamp)
    for path in pending:
        table.add_row(path.name, "[yellow]pending[/yellow]", "")
    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Apply BMS Hub schema migrations")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="List pending migrations only")
    args = parser.parse_args()

    conn = connect()
    try:
        ensure_ledger(conn)
        applied = applied_migrations(conn)
        pending = pending_migrations(applied)

        if args.status:
            print_status(applied, pending)
            return
        if not pending:
            console.print("[green]Schema is up to date.[/green]")
            return
        for path in pending:
            if args.dry_run:
                console.print(f"[cyan]Would apply:[/cyan] {path.name}")
            else:
                apply_migration(conn, path)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
