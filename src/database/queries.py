"""Parameterized query functions for database operations."""

import sqlite3
from typing import Iterable

from src.models.stock import StockEntry
from config.constants import STOCK_TABLES


def _check_table(table: str) -> str:
    if table not in STOCK_TABLES:
        raise ValueError(f"Tabela de estoque desconhecida: {table}")
    return table


# ── Stock ─────────────────────────────────────────────────

def upsert_stock(conn: sqlite3.Connection, table: str, entries: Iterable[StockEntry]) -> int:
    """Insert or update stock rows keyed by sku. Last write wins on quantidade.

    Runs in a single transaction: on error nothing of this call is kept.
    """
    _check_table(table)
    rows = [(entry.sku, int(entry.quantidade)) for entry in entries]
    try:
        conn.executemany(
            f"""INSERT INTO {table} (sku, quantidade, updated_at)
                VALUES (?, ?, CURRENT_TIMESTAMP)
                ON CONFLICT(sku) DO UPDATE SET
                    quantidade = excluded.quantidade,
                    updated_at = excluded.updated_at""",
            rows,
        )
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    return len(rows)


def get_stock(conn: sqlite3.Connection, table: str) -> list[sqlite3.Row]:
    _check_table(table)
    return conn.execute(
        f"SELECT sku, quantidade, updated_at FROM {table} ORDER BY sku"
    ).fetchall()


def get_stock_by_sku(conn: sqlite3.Connection, table: str, sku: str) -> sqlite3.Row | None:
    _check_table(table)
    return conn.execute(
        f"SELECT sku, quantidade, updated_at FROM {table} WHERE sku = ?", (sku,)
    ).fetchone()


def count_stock_entries(conn: sqlite3.Connection, table: str) -> int:
    _check_table(table)
    row = conn.execute(f"SELECT COUNT(*) as cnt FROM {table}").fetchone()
    return row["cnt"] if row else 0


# ── Import Log ───────────────────────────────────────────

def log_import(conn: sqlite3.Connection, file_name: str, file_type: str, rows_imported: int,
               rows_failed: int, status: str, error_message: str = None) -> int:
    cursor = conn.execute(
        """INSERT INTO import_log
           (file_name, file_type, rows_imported, rows_failed, status, error_message)
           VALUES (?, ?, ?, ?, ?, ?)""",
        (file_name, file_type, rows_imported, rows_failed, status, error_message),
    )
    conn.commit()
    return cursor.lastrowid


def get_recent_imports(conn: sqlite3.Connection, limit: int = 5) -> list[sqlite3.Row]:
    return conn.execute(
        """SELECT * FROM import_log
           ORDER BY imported_at DESC, id DESC
           LIMIT ?""",
        (limit,),
    ).fetchall()
