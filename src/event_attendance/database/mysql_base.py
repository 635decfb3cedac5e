from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, Optional

from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
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


def stored_rows(cur, columns: List[str]) -> List[Dict[str, Any]]:
    """Rows produced by the last `callproc`, as dicts.

    Depending on the connector version, stored result cursors yield tuples even when
    the calling cursor was opened with dictionary=True.
    """

    out: List[Dict[str, Any]] = []
    for result in cur.stored_results():
        for row in result.fetchall():
            if isinstance(row, dict):
                out.append(dict(row))
            else:
                out.append(dict(zip(columns, row)))
    return out
