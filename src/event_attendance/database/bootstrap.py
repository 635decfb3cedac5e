from __future__ import annotations

import logging
import re
import uuid
from pathlib import Path
from typing import Iterable

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"

DEMO_PROFILES = (
    ("admin@eventos.local", "Admin Demo", "ADMIN", "admin123"),
    ("operador@eventos.local", "Operador Demo", "OPERADOR", "operador123"),
    ("metricas@eventos.local", "Métricas Demo", "METRICAS", "metricas123"),
)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        charset=target.charset,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    """Split a script on ';', honouring quotes and `DELIMITER` blocks (procedures)."""

    delimiter = ";"
    buf: list[str] = []
    for line in sql.splitlines():
        stripped = line.strip()
        m = re.match(r"(?i)^DELIMITER\s+(\S+)\s*$", stripped)
        if m:
            delimiter = m.group(1)
            continue
        if stripped.startswith("--"):
            continue
        buf.append(line)
        if stripped.endswith(delimiter) and not _inside_quotes("\n".join(buf)):
            stmt = "\n".join(buf).rstrip()
            stmt = stmt[: len(stmt) - len(delimiter)].strip()
            buf.clear()
            if stmt:
                yield stmt

    tail = "\n".join(buf).strip()
    if tail:
        yield tail


def _inside_quotes(text: str) -> bool:
    in_single = False
    in_double = False
    escape = False
    for ch in text:
        if escape:
            escape = False
            continue
        if ch == "\\":
            escape = True
            continue
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
    return in_single or in_double


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    target = DBConfig.from_dict(db_config)
    ensure_database_exists(db_config)

    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Schema applied to %s", target.describe())


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    target = DBConfig.from_dict(db_config)
    sql = _strip_create_db_and_use(Path(seed_path).read_text(encoding="utf-8"))

    conn = _connect(target)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()


def ensure_demo_profiles(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)

    conn = _connect(target)
    try:
        cur = conn.cursor(dictionary=True)
        for email, full_name, role, password in DEMO_PROFILES:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT id FROM profiles WHERE email=%s", (email,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    "UPDATE profiles SET full_name=%s, role=%s, password_hash=%s WHERE email=%s",
                    (full_name, role, password_hash, email),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO profiles (id, email, full_name, role, password_hash)
                    VALUES (%s, %s, %s, %s, %s)
                    """,
                    (str(uuid.uuid4()), email, full_name, role, password_hash),
                )
        conn.commit()
    finally:
        conn.close()
    logger.info("Demo profiles ready (%d)", len(DEMO_PROFILES))


def list_tables(db_config: dict) -> list[str]:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target)
    try:
        cur = conn.cursor()
        cur.execute("SHOW FULL TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
