#!/usr/bin/env python3
"""
Database migration runner for the user directory.

Connects directly to the Supabase PostgreSQL database and runs the SQL
files in migrations/ that have not been applied yet.

Usage:
    python run_migrations.py            # Run pending migrations
    python run_migrations.py --status   # Show migration status
    python run_migrations.py --dry-run  # Show what would run

Configuration:
    SUPABASE_DB_URL=postgresql://postgres.[project-ref]:[password]@[host]:6543/postgres
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
MIGRATIONS_TABLE = "_migrations"


def checksum_of(content: str) -> str:
    return hashlib.sha256(content.encode()).hexdigest()[:16]


def get_db_connection():
    """Connect to Postgres or exit with a hint."""
    settings = get_settings()

    if not settings.supabase_db_url:
        console.print("[red]Error:[/red] SUPABASE_DB_URL is not set.")
        sys.exit(1)

    try:
        return psycopg2.connect(settings.supabase_db_url)
    except psycopg2.Error as e:
        console.print(f"[red]Database connection failed:[/red] {e}")
        sys.exit(1)


def ensure_migrations_table(conn) -> None:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("""
                CREATE TABLE IF NOT EXISTS {} (
                    id SERIAL PRIMARY KEY,
                    name VARCHAR(255) NOT NULL UNIQUE,
                    checksum VARCHAR(64) NOT NULL,
                    applied_at TIMESTAMPTZ NOT NULL DEFAULT NOW()
                );
            """).format(sql.Identifier(MIGRATIONS_TABLE))
        )
    conn.commit()


def get_applied_migrations(conn) -> dict[str, dict]:
    with conn.cursor() as cur:
        cur.execute(
            sql.SQL("SELECT name, checksum, applied_at FROM {} ORDER BY name").format(
                sql.Identifier(MIGRATIONS_TABLE)
            )
        )
        return {row[0]: {"checksum": row[1], "applied_at": row[2]} for row in cur.fetchall()}


def find_pending(applied: dict[str, dict], migrations_dir: Path = MIGRATIONS_DIR) -> list[tuple[str, Path, str]]:
    """
    List migration files not yet applied, in name order.

    Files whose content changed after being applied are reported, not re-run.
    """
    pending = []
    for sql_file in sorted(migrations_dir.glob("*.sql")):
        checksum = checksum_of(sql_file.read_text())
        if sql_file.name not in applied:
            pending.append((sql_file.name, sql_file, checksum))
        elif applied[sql_file.name]["checksum"] != checksum:
            console.print(f"[yellow]Warning:[/yellow] Migration {sql_file.name} has changed since it was applied!")
    return pending


def run_migration(conn, name: str, sql_file: Path, checksum: str) -> None:
    console.print(f"[blue]Running:[/blue] {name}...")
    try:
        with conn.cursor() as cur:
            cur.execute(sql_file.read_text())
            cur.execute(
                sql.SQL("INSERT INTO {} (name, checksum) VALUES (%s, %s)").format(
                    sql.Identifier(MIGRATIONS_TABLE)
                ),
                (name, checksum),
            )
        conn.commit()
        console.print(f"[green]✓[/green] {name} applied")
    except psycopg2.Error as e:
        conn.rollback()
        console.print(f"[red]✗[/red] {name} failed: {e}")
        raise


def show_status(applied: dict[str, dict], pending: list[tuple[str, Path, str]]) -> None:
    table = Table(title="Migration Status")
    table.add_column("Migration", style="cyan")
    table.add_column("Status")
    table.add_column("Applied At")

    for name, info in applied.items():
        applied_at = info["applied_at"].strftime("%Y-%m-%d %H:%M:%S") if info["applied_at"] else ""
        table.add_row(name, "[green]Applied[/green]", applied_at)
    for name, _, _ in pending:
        table.add_row(name, "[yellow]Pending[/yellow]", "")

    console.print(table)


def main():
    parser = argparse.ArgumentParser(description="Run database migrations for the user directory")
    parser.add_argument("--status", action="store_true", help="Show migration status only")
    parser.add_argument("--dry-run", action="store_true", help="Show pending migrations without running them")
    args = parser.parse_args()

    conn = get_db_connection()
    try:
        ensure_migrations_table(conn)
        applied = get_applied_migrations(conn)
        pending = find_pending(applied)

        if args.status:
            show_status(applied, pending)
            return
        if not pending:
            console.print("[green]All migrations are up to date![/green]")
            return

        for name, sql_file, checksum in pending:
            if args.dry_run:
                console.print(f"[cyan]Would run:[/cyan] {name}")
            else:
                run_migration(conn, name, sql_file, checksum)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
