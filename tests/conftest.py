from __future__ import annotations

import pytest

from event_attendance.core.enums import Role
from event_attendance.users.navigation import landing_view
from event_attendance.users.service import SessionProfile


def make_actor(profile_id: str, role: Role) -> SessionProfile:
    return SessionProfile(
        profile_id=profile_id,
        email=f"{profile_id}@eventos.local",
        full_name=profile_id.title(),
        role=role,
        landing=landing_view(role),
    )


@pytest.fixture
def admin() -> SessionProfile:
    return make_actor("admin", Role.ADMIN)


@pytest.fixture
def operator() -> SessionProfile:
    return make_actor("op-1", Role.OPERATOR)


@pytest.fixture
def metrics_user() -> SessionProfile:
    return make_actor("metricas", Role.METRICS)
