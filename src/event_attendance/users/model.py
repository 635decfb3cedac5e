from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class Profile:
    """Domain entity: a row of `profiles`.

    `role` is already parsed; `raw_role` keeps the stored string for display.
    """

    profile_id: str
    email: Optional[str]
    full_name: Optional[str]
    role: Role
    raw_role: Optional[str] = None
    password_hash: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email or self.profile_id
