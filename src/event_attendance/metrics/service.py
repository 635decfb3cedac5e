from __future__ import annotations

import logging
from datetime import date
from typing import Any, Iterable, Sequence

from ..core.constants import DEFAULT_CSV_DELIMITER, UNGROUPED_KEY
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from ..export.csv_writer import Column, Row, format_timestamp, serialize_flat, serialize_grouped, with_bom
from ..users.service import SessionProfile
from .model import AttendanceExportRow, ExportFile, MetricsSnapshot
from .repository import MetricsRepository

logger = logging.getLogger(__name__)

ALLOWED_ROLES = (Role.METRICS, Role.ADMIN)

SUMMARY_COLUMNS: list[Column] = [("metric", "Metrica"), ("value", "Valor")]
NEIGHBORHOOD_COLUMNS: list[Column] = [("neighborhood", "Barrio/Vereda"), ("total", "Total")]
ATTENDANCE_COLUMNS: list[Column] = [
    ("event_name", "Evento"),
    ("event_date", "Fecha evento"),
    ("location", "Lugar"),
    ("full_name", "Nombre asistente"),
    ("document", "Documento"),
    ("neighborhood", "Barrio/Vereda"),
    ("phone", "Telefono"),
    ("invited_by", "Invitado por"),
    ("scanned_at", "Escaneado en"),
    ("registered_by", "Registrado por"),
]
EVENT_SUMMARY_COLUMNS: list[Column] = [
    ("event_name", "Evento"),
    ("event_date", "Fecha"),
    ("location", "Lugar"),
    ("total", "Total asistentes"),
]

_REPORTS = {
    "summary": "summary_report",
    "by-neighborhood": "by_neighborhood_report",
    "attendance": "attendance_report",
    "attendance-by-event": "attendance_by_event_report",
    "summary-by-event": "summary_by_event_report",
}
REPORT_NAMES: Sequence[str] = tuple(_REPORTS)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def normalize_attendance_row(r: AttendanceExportRow) -> dict:
    return {
        "event_id": r.event_id,
        "event_name": _text(r.event_name),
        "event_date": _text(r.event_date),
        "location": _text(r.location),
        "full_name": _text(r.full_name),
        "document": _text(r.document),
        "neighborhood": _text(r.neighborhood),
        "phone": _text(r.phone),
        "invited_by": _text(r.invited_by),
        "scanned_at": format_timestamp(r.scanned_at),
        "registered_by": r.scanned_by_name or r.scanned_by_email or "",
    }


def describe_event_group(key: str, rows: Sequence[Row]) -> Sequence[Any]:
    """Section header of the per-event attendance report."""

    first = rows[0] if rows else {}
    name = first.get("event_name") or ("Sin evento" if key == UNGROUPED_KEY else key)
    return (
        f"Evento: {name}",
        f"Fecha: {first.get('event_date') or ''}",
        f"Lugar: {first.get('location') or ''}",
        f"Asistentes: {len(rows)}",
    )


def summarize_by_event(rows: Iterable[AttendanceExportRow]) -> list[dict]:
    """Attendee count per (event name, date, location), most recent event date first."""

    totals: dict[tuple[str, str, str], dict] = {}
    for r in rows:
        key = (_text(r.event_name), _text(r.event_date), _text(r.location))
        entry = totals.get(key)
        if entry:
            entry["total"] += 1
        else:
            totals[key] = {"event_name": key[0], "event_date": key[1], "location": key[2], "total": 1}

    return sorted(totals.values(), key=lambda x: x["event_date"], reverse=True)


class MetricsService:
    """Use case: monthly metrics and CSV reports (METRICAS / ADMIN only)."""

    def __init__(
        self,
        metrics: MetricsRepository,
        *,
        delimiter: str = DEFAULT_CSV_DELIMITER,
        add_bom: bool = True,
    ):
        self._metrics = metrics
        self._delimiter = delimiter
        self._add_bom = bool(add_bom)

    @staticmethod
    def is_allowed(actor: SessionProfile | None) -> bool:
        return actor is not None and actor.role in ALLOWED_ROLES

    def _require_allowed(self, actor: SessionProfile | None) -> None:
        if not self.is_allowed(actor):
            raise AuthorizationError("No tienes permisos para ver métricas. (Requiere rol METRICAS o ADMIN)")

    def _finish(self, filename: str, content: str, row_count: int) -> ExportFile:
        if self._add_bom:
            content = with_bom(content)
        logger.info("Built export %s (%d rows)", filename, row_count)
        return ExportFile(filename=filename, content=content, row_count=row_count)

    def dashboard(self, *, actor: SessionProfile, from_date: date) -> MetricsSnapshot:
        self._require_allowed(actor)
        return MetricsSnapshot(
            from_date=from_date,
            events_count=self._metrics.count_events_since(from_date),
            attendance_count=self._metrics.count_attendance_since(from_date),
            by_neighborhood=list(self._metrics.attendance_by_neighborhood(from_date)),
        )

    def summary_report(self, *, actor: SessionProfile, from_date: date) -> ExportFile:
        snapshot = self.dashboard(actor=actor, from_date=from_date)
        rows = [
            {"metric": "Eventos desde", "value": from_date.isoformat()},
            {"metric": "Reuniones (conteo)", "value": snapshot.events_count},
            {"metric": "Asistentes (conteo)", "value": snapshot.attendance_count},
        ]
        content = serialize_flat(rows, SUMMARY_COLUMNS, delimiter=self._delimiter)
        return self._finish(f"resumen_{from_date.isoformat()}.csv", content, len(rows))

    def by_neighborhood_report(self, *, actor: SessionProfile, from_date: date) -> ExportFile:
        self._require_allowed(actor)
        rows = [
            {"neighborhood": t.neighborhood, "total": t.total}
            for t in self._metrics.attendance_by_neighborhood(from_date)
        ]
        content = serialize_flat(rows, NEIGHBORHOOD_COLUMNS, delimiter=self._delimiter)
        return self._finish(f"asistencia_por_barrio_{from_date.isoformat()}.csv", content, len(rows))

    def attendance_report(self, *, actor: SessionProfile, from_date: date) -> ExportFile:
        self._require_allowed(actor)
        rows = [normalize_attendance_row(r) for r in self._metrics.attendance_rows_since(from_date)]
        content = serialize_flat(rows, ATTENDANCE_COLUMNS, delimiter=self._delimiter)
        return self._finish(f"asistencias_{from_date.isoformat()}.csv", content, len(rows))

    def attendance_by_event_report(self, *, actor: SessionProfile, from_date: date) -> ExportFile:
        """Attendance grouped per event: event name ascending, newest scan first inside."""

        self._require_allowed(actor)
        rows = [normalize_attendance_row(r) for r in self._metrics.attendance_rows_since(from_date)]
        rows.sort(key=lambda r: r["scanned_at"], reverse=True)
        content = serialize_grouped(
            rows,
            ATTENDANCE_COLUMNS,
            delimiter=self._delimiter,
            order_key=lambda r: r["event_name"].lower(),
            describe=describe_event_group,
        )
        return self._finish(f"asistencias_por_evento_{from_date.isoformat()}.csv", content, len(rows))

    def summary_by_event_report(self, *, actor: SessionProfile, from_date: date) -> ExportFile:
        self._require_allowed(actor)
        summary = summarize_by_event(self._metrics.attendance_rows_since(from_date))
        content = serialize_flat(summary, EVENT_SUMMARY_COLUMNS, delimiter=self._delimiter)
        return self._finish(f"resumen_por_evento_{from_date.isoformat()}.csv", content, len(summary))

    def build_report(self, name: str, *, actor: SessionProfile, from_date: date) -> ExportFile:
        """Dispatch by public report name (see REPORT_NAMES); KeyError for unknown names."""

        builder = getattr(self, _REPORTS[name])
        return builder(actor=actor, from_date=from_date)
