import pytest

from event_attendance.core.enums import Role, View
from event_attendance.users.navigation import can_access, landing_view, visible_views


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("ADMIN", Role.ADMIN),
        (" admin ", Role.ADMIN),
        ("OPERADOR", Role.OPERATOR),
        ("operario", Role.OPERATOR),
        ("Metricas", Role.METRICS),
        ("supervisor", Role.UNKNOWN),
        ("", Role.UNKNOWN),
        (None, Role.UNKNOWN),
    ],
)
def test_role_parse(raw, expected):
    assert Role.parse(raw) is expected


def test_visible_views_per_role():
    assert visible_views(Role.ADMIN) == [View.MY_EVENTS, View.ADMIN, View.METRICS]
    assert visible_views(Role.OPERATOR) == [View.MY_EVENTS, View.ATTENDANCE]
    assert visible_views(Role.METRICS) == [View.METRICS]
    assert visible_views(Role.UNKNOWN) == []


def test_metrics_index_toggle():
    assert not can_access(Role.METRICS, View.MY_EVENTS)
    assert can_access(Role.METRICS, View.MY_EVENTS, metrics_can_see_index=True)
    assert visible_views(Role.METRICS, metrics_can_see_index=True) == [View.MY_EVENTS, View.METRICS]


def test_landing_view():
    assert landing_view(Role.ADMIN) is View.ADMIN
    assert landing_view(Role.OPERATOR) is View.ATTENDANCE
    assert landing_view(Role.METRICS) is View.METRICS
    assert landing_view(Role.UNKNOWN) is View.MY_EVENTS


def test_view_titles():
    assert [v.title for v in visible_views(Role.OPERATOR)] == ["Mis eventos", "Asistencia"]
