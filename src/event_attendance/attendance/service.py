from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..common.validators import optional_text
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..events.repository import EventRepository
from ..users.service import SessionProfile
from .model import AttendanceRecord, NewAttendee
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

# Fixed catalog of barrios / veredas offered in the registration form.
NEIGHBORHOODS: tuple[str, ...] = (
    "La Veta",
    "Zarzal La Luz",
    "Zarzal Curazao",
    "Ancon",
    "El Noral",
    "El Salado",
    "Sabaneta",
    "Quebrada Arriba",
    "Alvarado",
    "Montañita",
    "Peñolcito",
    "Cabuyal",
    "Granizal",
    "El Convento",
    "Fontidueño",
    "Cristo Rey",
    "Simon Bolivar",
    "Obrero",
    "Yarumito",
    "Las Vegas",
    "Tobon Quintero",
    "La Asunción",
    "La Azulita",
    "El Porvenir",
    "Villanueva",
    "El Recreo",
    "El Remanso",
    "Pedregal",
    "La Misericordia",
    "Machado",
    "San Juan",
    "Maria",
    "Tablazo-Canoas",
    "El Mojon",
    "C. Multiple",
    "Fatima",
    "Pedrera",
    "San Francisco",
    "Miraflores",
)


def search_neighborhoods(query: Optional[str]) -> list[str]:
    q = (query or "").strip().lower()
    if not q:
        return list(NEIGHBORHOODS)
    return [n for n in NEIGHBORHOODS if q in n.lower()]


class AttendanceService:
    """Use case: operators register attendees at their assigned events."""

    def __init__(self, attendance: AttendanceRepository, events: EventRepository):
        self._attendance = attendance
        self._events = events

    def register(
        self,
        *,
        actor: SessionProfile,
        event_id: Optional[str],
        full_name: Optional[str],
        document: Optional[str],
        neighborhood: Optional[str],
        phone: Optional[str] = None,
        invited_by: Optional[str] = None,
    ) -> str:
        if actor.role != Role.OPERATOR:
            raise AuthorizationError("Solo OPERADOR puede registrar asistentes.")

        event_id = optional_text(event_id)
        if not event_id:
            raise ValidationError("Selecciona un evento.")

        full_name = optional_text(full_name)
        document = optional_text(document)
        neighborhood = optional_text(neighborhood)
        if not (full_name and document and neighborhood):
            raise ValidationError("Nombre, documento y barrio/vereda son obligatorios.")

        if not self._events.is_assigned(event_id=event_id, user_id=actor.profile_id):
            raise AuthorizationError("No estás asignado a este evento.")

        attendance_id = self._attendance.create(
            NewAttendee(
                event_id=event_id,
                full_name=full_name,
                document=document,
                neighborhood=neighborhood,
                phone=optional_text(phone),
                invited_by=optional_text(invited_by),
                scanned_by=actor.profile_id,
                created_by=actor.profile_id,
            )
        )
        logger.info("Attendee %s registered at event %s by %s", attendance_id, event_id, actor.profile_id)
        return attendance_id

    def list_for_event(self, event_id: Optional[str]) -> Sequence[AttendanceRecord]:
        if not event_id:
            return []
        return self._attendance.list_for_event(event_id)
