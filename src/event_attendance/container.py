from __future__ import annotations

from dataclasses import dataclass

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.service import AttendanceService
from .database.connection import DBConfig, DatabaseConnection
from .events.mysql_event_repository import MySQLEventRepository
from .events.service import EventService
from .metrics.mysql_metrics_repository import MySQLMetricsRepository
from .metrics.service import MetricsService
from .users.mysql_profile_repository import MySQLProfileRepository
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    auth_service: AuthService
    event_service: EventService
    attendance_service: AttendanceService
    metrics_service: MetricsService


def build_container(*, db_config: dict, csv_delimiter: str = ",", csv_with_bom: bool = True) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))

    profiles_repo = MySQLProfileRepository(conn)
    events_repo = MySQLEventRepository(conn)
    attendance_repo = MySQLAttendanceRepository(conn)
    metrics_repo = MySQLMetricsRepository(conn)

    return Container(
        auth_service=AuthService(profiles_repo),
        event_service=EventService(events_repo, profiles_repo),
        attendance_service=AttendanceService(attendance_repo, events_repo),
        metrics_service=MetricsService(metrics_repo, delimiter=csv_delimiter, add_bom=csv_with_bom),
    )
