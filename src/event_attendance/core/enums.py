from __future__ import annotations

from enum import Enum
from typing import Optional

# Raw role strings accepted for operators (the profiles table has used both spellings).
OPERATOR_ALIASES = ("OPERADOR", "OPERARIO")


class Role(str, Enum):
    """User role resolved once from the raw `profiles.role` column."""

    ADMIN = "ADMIN"
    OPERATOR = "OPERADOR"
    METRICS = "METRICAS"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, raw: Optional[str]) -> "Role":
        value = (raw or "").strip().upper()
        if value == "ADMIN":
            return cls.ADMIN
        if value in OPERATOR_ALIASES:
            return cls.OPERATOR
        if value == "METRICAS":
            return cls.METRICS
        return cls.UNKNOWN


class View(str, Enum):
    """Top-level screens (tabs) of the client."""

    MY_EVENTS = "index"
    ATTENDANCE = "attendance"
    ADMIN = "admin"
    METRICS = "metrics"

    @property
    def title(self) -> str:
        return {
            View.MY_EVENTS: "Mis eventos",
            View.ATTENDANCE: "Asistencia",
            View.ADMIN: "Admin",
            View.METRICS: "Métricas",
        }[self]
