from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_utc
from ..common.web import current_profile, error, view_required
from ..container import Container
from ..core.enums import View
from ..core.exceptions import AuthorizationError, ValidationError
from ..events.controller import event_to_json
from ..export.csv_writer import format_timestamp
from .service import search_neighborhoods

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/attendance/events", methods=["GET"], endpoint="attendance_events")
    @view_required(View.ATTENDANCE)
    def attendance_events():
        profile = current_profile()
        events = container.event_service.pending_events_for(profile.profile_id, now=now_utc())
        return jsonify(
            {
                "events": [event_to_json(ev) for ev in events],
                "selected": events[0].event_id if events else None,
            }
        )

    @app.route("/attendance/neighborhoods", methods=["GET"], endpoint="attendance_neighborhoods")
    @view_required(View.ATTENDANCE)
    def attendance_neighborhoods():
        return jsonify({"neighborhoods": search_neighborhoods(request.args.get("q"))})

    @app.route("/attendance/<event_id>/attendees", methods=["GET"], endpoint="attendance_attendees")
    @view_required(View.ATTENDANCE)
    def attendance_attendees(event_id: str):
        records = container.attendance_service.list_for_event(event_id)
        return jsonify(
            {
                "attendees": [
                    {
                        "id": r.attendance_id,
                        "full_name": r.full_name,
                        "document": r.document,
                        "neighborhood": r.neighborhood,
                        "phone": r.phone,
                        "invited_by": r.invited_by,
                        "scanned_at": format_timestamp(r.scanned_at),
                    }
                    for r in records
                ]
            }
        )

    @app.route("/attendance", methods=["POST"], endpoint="attendance_register")
    @view_required(View.ATTENDANCE)
    def attendance_register():
        data = request.get_json(silent=True) or request.form
        try:
            attendance_id = container.attendance_service.register(
                actor=current_profile(),
                event_id=data.get("event_id"),
                full_name=data.get("full_name"),
                document=data.get("document"),
                neighborhood=data.get("neighborhood"),
                phone=data.get("phone"),
                invited_by=data.get("invited_by"),
            )
        except ValidationError as e:
            return error(str(e), 400)
        except AuthorizationError as e:
            return error(str(e), 403)
        except Exception:
            logger.exception("Attendance registration failed")
            return error("No se pudo guardar", 500)

        return jsonify({"success": True, "id": attendance_id, "message": "Asistente registrado."}), 201
