from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Profile
from .repository import ProfileRepository

_COLUMNS = "id, email, full_name, role, password_hash"


def _to_profile(row: dict) -> Profile:
    return Profile(
        profile_id=str(row["id"]),
        email=row.get("email"),
        full_name=row.get("full_name"),
        role=Role.parse(row.get("role")),
        raw_role=row.get("role"),
        password_hash=row.get("password_hash"),
    )


class MySQLProfileRepository(ProfileRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, profile_id: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE id=%s", (profile_id,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def get_by_email(self, email: str) -> Optional[Profile]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM profiles WHERE LOWER(email)=LOWER(%s)", (email,))
            row = fetchone(cur)
            return _to_profile(row) if row else None

    def list_by_raw_roles(self, raw_roles: Sequence[str]) -> Sequence[Profile]:
        roles = [str(r) for r in raw_roles]
        if not roles:
            return []
        placeholders = ", ".join(["%s"] * len(roles))
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM profiles
                WHERE role IN ({placeholders})
                ORDER BY full_name, email
                """,
                tuple(roles),
            )
            return [_to_profile(r) for r in fetchall(cur)]
