"""Database schema definition and initialization."""

import sqlite3

from config.constants import STOCK_VIEWS

STOCK_TABLE_SQL = """
    CREATE TABLE IF NOT EXISTS {table} (
        sku TEXT PRIMARY KEY,
        quantidade INTEGER NOT NULL DEFAULT 0,
        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
"""

TABLES = [STOCK_TABLE_SQL.format(table=view.table) for view in STOCK_VIEWS] + [
    """
    CREATE TABLE IF NOT EXISTS import_log (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        file_name TEXT NOT NULL,
        file_type TEXT,
        rows_imported INTEGER DEFAULT 0,
        rows_failed INTEGER DEFAULT 0,
        status TEXT DEFAULT 'pending',
        error_message TEXT,
        imported_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
    )
    """,
]

INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_import_log_date ON import_log(imported_at)",
]


def initialize_database(conn: sqlite3.Connection):
    """Create all tables and indexes."""
    cursor = conn.cursor()
    for table_sql in TABLES:
        cursor.execute(table_sql)
    for index_sql in INDEXES:
        cursor.execute(index_sql)
    conn.commit()
