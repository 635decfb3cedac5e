"""Session helpers shared by the Flask controllers."""

from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import current_app, jsonify, session

from ..core.enums import Role, View
from ..users.navigation import can_access, landing_view
from ..users.service import SessionProfile


def store_session(profile: SessionProfile) -> None:
    session["user_id"] = profile.profile_id
    session["email"] = profile.email
    session["name"] = profile.full_name
    session["role"] = profile.role.value


def current_profile() -> Optional[SessionProfile]:
    if "user_id" not in session:
        return None
    role = Role.parse(session.get("role"))
    return SessionProfile(
        profile_id=str(session["user_id"]),
        email=session.get("email"),
        full_name=session.get("name"),
        role=role,
        landing=landing_view(role),
    )


def error(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "user_id" not in session:
            return error("Sin sesión.", 401)
        return view(*args, **kwargs)

    return wrapper


def view_required(screen: View):
    """Allow only roles that can see `screen` in the navigation."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            profile = current_profile()
            if profile is None:
                return error("Sin sesión.", 401)
            allowed = can_access(
                profile.role,
                screen,
                metrics_can_see_index=bool(current_app.config.get("METRICS_CAN_SEE_INDEX", False)),
            )
            if not allowed:
                return error("Sin permisos", 403)
            return view(*args, **kwargs)

        return wrapper

    return decorator
