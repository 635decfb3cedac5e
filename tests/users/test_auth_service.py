from __future__ import annotations

import pytest
from werkzeug.security import generate_password_hash

from event_attendance.core.enums import Role, View
from event_attendance.core.exceptions import AuthenticationError, ValidationError
from event_attendance.users.model import Profile
from event_attendance.users.service import AuthService


class FakeProfiles:
    def __init__(self, profiles):
        self._profiles = {p.profile_id: p for p in profiles}
        self.requested_roles = None

    def get_by_id(self, profile_id):
        return self._profiles.get(profile_id)

    def get_by_email(self, email):
        return next((p for p in self._profiles.values() if p.email == email), None)

    def list_by_raw_roles(self, raw_roles):
        self.requested_roles = list(raw_roles)
        return [p for p in self._profiles.values() if p.raw_role in raw_roles]


@pytest.fixture
def profiles():
    return FakeProfiles(
        [
            Profile("u1", "op@eventos.local", "Operaria", Role.OPERATOR, "operario", generate_password_hash("secreto")),
            Profile("u2", "admin@eventos.local", None, Role.ADMIN, "ADMIN", generate_password_hash("admin123")),
            Profile("u3", "legacy@eventos.local", "Legacy", Role.METRICS, "METRICAS", "CHANGE_ME"),
            Profile("u4", "nopass@eventos.local", "Sin clave", Role.OPERATOR, "OPERADOR"),
        ]
    )


def test_sign_in_returns_session_profile_with_landing(profiles):
    session = AuthService(profiles).sign_in("  op@eventos.local ", "secreto")

    assert session.profile_id == "u1"
    assert session.role is Role.OPERATOR
    assert session.landing is View.ATTENDANCE


@pytest.mark.parametrize("email, password", [("", "x"), ("   ", "x"), ("op@eventos.local", "")])
def test_sign_in_requires_both_fields(profiles, email, password):
    with pytest.raises(ValidationError):
        AuthService(profiles).sign_in(email, password)


@pytest.mark.parametrize(
    "email, password",
    [
        ("op@eventos.local", "otra"),
        ("nadie@eventos.local", "secreto"),
        ("legacy@eventos.local", "CHANGE_ME"),
        ("nopass@eventos.local", "x"),
    ],
)
def test_sign_in_rejects_bad_credentials(profiles, email, password):
    with pytest.raises(AuthenticationError, match="Correo o contraseña incorrectos"):
        AuthService(profiles).sign_in(email, password)


def test_display_name_falls_back_to_email(profiles):
    admin = AuthService(profiles).get_profile("u2")
    assert admin.display_name == "admin@eventos.local"


def test_list_operators_queries_every_alias_spelling(profiles):
    operators = AuthService(profiles).list_operators()

    assert {p.profile_id for p in operators} == {"u1", "u4"}
    assert "OPERARIO" in profiles.requested_roles
    assert "operador" in profiles.requested_roles
