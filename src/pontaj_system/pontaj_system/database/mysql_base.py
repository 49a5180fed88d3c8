from __future__ import annotations

import json
import logging
import uuid
from contextlib import contextmanager
from typing import Any, Dict, Iterable, List, Optional

from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


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


def new_id() -> str:
    return uuid.uuid4().hex


def placeholders(values: Iterable[object]) -> str:
    return ",".join(["%s"] * len(list(values)))


def dump_ids(ids: Iterable[str]) -> str:
    return json.dumps([str(i) for i in ids])


def decode_ids(value: Optional[str]) -> Optional[list[str]]:
    """Decode a stored membership list, ``None`` when the value is not a JSON list."""
    if not value:
        return []
    try:
        data = json.loads(value)
    except ValueError:
        return None
    if not isinstance(data, list):
        return None
    return [str(i) for i in data]


def load_ids(value: Optional[str]) -> list[str]:
    """Membership for reading; a malformed value reads as empty and is logged."""
    ids = decode_ids(value)
    if ids is None:
        logger.error("Malformed membership value %r, reading as empty", value)
        return []
    return ids
