from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional


@contextmanager
def db_cursor(conn_factory, *, dictionary: bool = True):
    """Yield (conn, cursor); commit when the block ends, roll back if it raises."""
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def as_bool(value: Any) -> bool:
    """MySQL BOOLEAN columns come back as 0/1 (or None)."""
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "yes"}
    return bool(value)
