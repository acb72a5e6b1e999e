import sqlite3
from pathlib import Path
from config.settings import DB_PATH, DB_TIMEOUT_SECONDS


def create_connection(
    db_path: Path | str = DB_PATH,
    timeout: float = DB_TIMEOUT_SECONDS,
) -> sqlite3.Connection:
    """Open a SQLite connection. Created once by the caller and passed around."""
    if str(db_path) != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(
        str(db_path),
        check_same_thread=False,
        timeout=timeout,
    )
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute(f"PRAGMA busy_timeout={int(timeout * 1000)}")
    return conn
