from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import coerce_date, coerce_time, now_utc
from ..common.web import current_profile, error, view_required
from ..container import Container
from ..core.enums import View
from ..core.exceptions import AuthorizationError, ValidationError
from .model import Event
from .service import format_event_line

logger = logging.getLogger(__name__)


def event_to_json(ev: Event) -> dict:
    d = coerce_date(ev.event_date)
    st = coerce_time(ev.start_time)
    et = coerce_time(ev.end_time)
    return {
        "id": ev.event_id,
        "name": ev.name,
        "location": ev.location,
        "event_date": d.isoformat() if d else None,
        "start_time": st.strftime("%H:%M") if st else None,
        "end_time": et.strftime("%H:%M") if et else None,
        "line": format_event_line(ev),
    }


def register(app: Flask, container: Container) -> None:
    @app.route("/events/pending", methods=["GET"], endpoint="my_events")
    @view_required(View.MY_EVENTS)
    def my_events():
        profile = current_profile()
        events = container.event_service.pending_events_for(profile.profile_id, now=now_utc())
        return jsonify({"events": [event_to_json(ev) for ev in events]})

    @app.route("/admin/events", methods=["GET"], endpoint="admin_events")
    @view_required(View.ADMIN)
    def admin_events():
        profile = current_profile()
        events = container.event_service.list_created_by(profile.profile_id)
        return jsonify({"events": [event_to_json(ev) for ev in events]})

    @app.route("/admin/events", methods=["POST"], endpoint="admin_create_event")
    @view_required(View.ADMIN)
    def admin_create_event():
        data = request.get_json(silent=True) or request.form
        try:
            created = container.event_service.create_event(
                actor=current_profile(),
                name=data.get("name", ""),
                location=data.get("location"),
                event_date=data.get("event_date", ""),
                start_time=data.get("start_time", ""),
                end_time=data.get("end_time"),
                operator_id=data.get("operator_id"),
            )
        except ValidationError as e:
            return error(str(e), 400)
        except AuthorizationError as e:
            return error(str(e), 403)
        except Exception:
            logger.exception("Event creation failed")
            return error("Error desconocido", 500)

        message = "Evento creado y asignado." if data.get("operator_id") else "Evento creado (sin operador asignado)."
        return jsonify({"success": True, "message": message, "event": event_to_json(created)}), 201

    @app.route("/admin/operators", methods=["GET"], endpoint="admin_operators")
    @view_required(View.ADMIN)
    def admin_operators():
        operators = container.auth_service.list_operators()
        return jsonify(
            {
                "operators": [
                    {"id": op.profile_id, "email": op.email, "full_name": op.full_name, "label": op.display_name}
                    for op in operators
                ]
            }
        )
