from __future__ import annotations

import logging

from flask import Flask, jsonify, request

from ..common.datetime_utils import month_start, now_utc, parse_iso_date
from ..common.web import current_profile, error, view_required
from ..container import Container
from ..core.enums import View
from ..core.exceptions import AuthorizationError
from ..export.sink import DownloadSink
from .service import REPORT_NAMES

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    sink = DownloadSink(app.response_class)

    def _from_date():
        raw = request.args.get("from")
        if raw:
            return parse_iso_date(raw)
        return month_start(now_utc())

    @app.route("/metrics", methods=["GET"], endpoint="metrics")
    @view_required(View.METRICS)
    def metrics():
        try:
            from_date = _from_date()
        except ValueError:
            return error("Fecha inválida (YYYY-MM-DD)", 400)

        try:
            snapshot = container.metrics_service.dashboard(actor=current_profile(), from_date=from_date)
        except AuthorizationError as e:
            return error(str(e), 403)
        except Exception:
            logger.exception("Loading metrics failed")
            return error("No se pudieron cargar métricas", 500)

        return jsonify(
            {
                "from_date": snapshot.from_date.isoformat(),
                "events_count": snapshot.events_count,
                "attendance_count": snapshot.attendance_count,
                "by_neighborhood": [
                    {"neighborhood": t.neighborhood, "total": t.total} for t in snapshot.by_neighborhood
                ],
            }
        )

    @app.route("/metrics/export/<report>.csv", methods=["GET"], endpoint="metrics_export")
    @view_required(View.METRICS)
    def metrics_export(report: str):
        if report not in REPORT_NAMES:
            return error(f"Reporte desconocido: {report}", 404)
        try:
            from_date = _from_date()
        except ValueError:
            return error("Fecha inválida (YYYY-MM-DD)", 400)

        try:
            export = container.metrics_service.build_report(report, actor=current_profile(), from_date=from_date)
        except AuthorizationError as e:
            return error(str(e), 403)
        except Exception:
            logger.exception("Export %s failed", report)
            return error("No se pudo exportar", 500)

        # The exporter always yields a valid header-only file; callers may prefer a notice.
        if export.row_count == 0 and request.args.get("ensure_rows") in {"1", "true"}:
            return error("Sin registros.", 404)

        return sink.deliver(export.filename, export.content)
