from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from werkzeug.security import check_password_hash

from ..core.enums import OPERATOR_ALIASES, Role, View
from ..core.exceptions import AuthenticationError, ValidationError
from .model import Profile
from .navigation import landing_view
from .repository import ProfileRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionProfile:
    """What we store into the Flask session after login."""

    profile_id: str
    email: Optional[str]
    full_name: Optional[str]
    role: Role
    landing: View


class AuthService:
    """Use case: sign in and look up profiles."""

    def __init__(self, profiles: ProfileRepository):
        self._profiles = profiles

    def sign_in(self, email: str, password: str) -> SessionProfile:
        email = (email or "").strip()
        if not email or not password:
            raise ValidationError("Escribe tu correo y contraseña.")

        profile = self._profiles.get_by_email(email)
        if not profile or not profile.password_hash:
            logger.info("Sign-in rejected for unknown email %s", email)
            raise AuthenticationError("Correo o contraseña incorrectos")

        try:
            ok = check_password_hash(profile.password_hash, password)
        except Exception:  # noqa: BLE001
            # e.g. placeholder hashes like 'CHANGE_ME' or corrupted values
            ok = False

        if not ok:
            logger.info("Sign-in rejected for %s (bad password)", email)
            raise AuthenticationError("Correo o contraseña incorrectos")

        logger.info("Signed in %s as %s", email, profile.role.value)
        return SessionProfile(
            profile_id=profile.profile_id,
            email=profile.email,
            full_name=profile.full_name,
            role=profile.role,
            landing=landing_view(profile.role),
        )

    def get_profile(self, profile_id: str) -> Optional[Profile]:
        return self._profiles.get_by_id(profile_id)

    def list_operators(self) -> Sequence[Profile]:
        aliases = {alias for raw in OPERATOR_ALIASES for alias in (raw, raw.lower(), raw.capitalize())}
        return self._profiles.list_by_raw_roles(sorted(aliases))
