from __future__ import annotations

import logging
from datetime import timedelta

from flask import Flask, jsonify, request, session

from ..common.web import current_profile, error, login_required, store_session
from ..container import Container
from ..core.constants import DEFAULT_SESSION_DAYS
from ..core.exceptions import AuthenticationError, ValidationError
from ..users.navigation import visible_views

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["POST"], endpoint="login")
    def login():
        data = request.get_json(silent=True) or request.form
        email = data.get("email", "")
        password = data.get("password", "")

        try:
            profile = container.auth_service.sign_in(email, password)
        except ValidationError as e:
            return error(str(e), 400)
        except AuthenticationError as e:
            return error(str(e), 401)
        except Exception:
            logger.exception("Sign-in failed")
            return error("Error del sistema al iniciar sesión", 500)

        session.permanent = bool(data.get("remember_me"))
        app.permanent_session_lifetime = timedelta(days=DEFAULT_SESSION_DAYS)
        store_session(profile)

        return jsonify({"success": True, "role": profile.role.value, "landing": profile.landing.value})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        session.clear()
        return jsonify({"success": True})

    @app.route("/me", methods=["GET"], endpoint="me")
    @login_required
    def me():
        profile = current_profile()
        views = visible_views(
            profile.role,
            metrics_can_see_index=bool(app.config.get("METRICS_CAN_SEE_INDEX", False)),
        )
        return jsonify(
            {
                "id": profile.profile_id,
                "email": profile.email,
                "full_name": profile.full_name,
                "role": profile.role.value,
                "landing": profile.landing.value,
                "views": [{"name": v.value, "title": v.title} for v in views],
            }
        )
