"""Role-gated navigation: which tabs a role sees and where it lands after sign-in."""

from __future__ import annotations

from ..core.enums import Role, View

_TAB_ORDER = (View.MY_EVENTS, View.ATTENDANCE, View.ADMIN, View.METRICS)

_LANDING = {
    Role.ADMIN: View.ADMIN,
    Role.OPERATOR: View.ATTENDANCE,
    Role.METRICS: View.METRICS,
}


def can_access(role: Role, view: View, *, metrics_can_see_index: bool = False) -> bool:
    if view == View.MY_EVENTS:
        if role in (Role.OPERATOR, Role.ADMIN):
            return True
        return role == Role.METRICS and metrics_can_see_index
    if view == View.ATTENDANCE:
        return role == Role.OPERATOR
    if view == View.ADMIN:
        return role == Role.ADMIN
    if view == View.METRICS:
        return role in (Role.METRICS, Role.ADMIN)
    return False


def visible_views(role: Role, *, metrics_can_see_index: bool = False) -> list[View]:
    return [v for v in _TAB_ORDER if can_access(role, v, metrics_can_see_index=metrics_can_see_index)]


def landing_view(role: Role) -> View:
    # Unknown roles land on "Mis eventos", which simply lists nothing for them.
    return _LANDING.get(role, View.MY_EVENTS)
