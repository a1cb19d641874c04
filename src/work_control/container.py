from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .api.connection import ApiClient, ApiConfig
from .attendance.factory import DayCountingFactory
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService
from .attendance.strategies.base import DayCountingStrategy
from .core.enums import DayCountingMode
from .reports.service import ExportService
from .users.department_service import DepartmentService
from .users.http_department_repository import HttpDepartmentRepository
from .users.http_user_repository import HttpUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Services:
    """Services bound to one caller's bearer token."""

    user_service: UserService
    department_service: DepartmentService
    attendance_service: AttendanceService
    export_service: ExportService
    client: Optional[ApiClient] = None

    def close(self) -> None:
        if self.client is not None:
            self.client.close()


@dataclass(frozen=True)
class Container:
    api_config: ApiConfig
    counting_mode: DayCountingMode
    late_threshold_minutes: int
    window_days: int
    max_photo_bytes: int
    session_factory: Callable[[], requests.Session] = requests.Session

    def counting_strategy(self) -> DayCountingStrategy:
        return DayCountingFactory().for_mode(self.counting_mode)

    def services_for(self, token: str) -> Services:
        """Build the service graph for one request.

        The token travels explicitly into the ``ApiClient``; repositories and
        services never see where it came from.
        """
        client = ApiClient(self.api_config, token, session=self.session_factory())

        users_repo = HttpUserRepository(client)
        departments_repo = HttpDepartmentRepository(client)
        attendance_repo = HttpAttendanceRepository(client)

        return Services(
            user_service=UserService(users_repo, departments_repo, max_photo_bytes=self.max_photo_bytes),
            department_service=DepartmentService(departments_repo),
            attendance_service=AttendanceService(
                attendance_repo,
                users_repo,
                departments_repo,
                counting=self.counting_strategy(),
                late_threshold_minutes=self.late_threshold_minutes,
                window_days=self.window_days,
            ),
            export_service=ExportService(users_repo, departments_repo, attendance_repo),
            client=client,
        )


def build_container(*, settings, session_factory: Optional[Callable[[], requests.Session]] = None) -> Container:
    return Container(
        api_config=ApiConfig(
            base_url=str(getattr(settings, "API_BASE_URL")),
            timeout=float(getattr(settings, "API_TIMEOUT", 20)),
        ),
        counting_mode=DayCountingMode(getattr(settings, "DAY_COUNTING_MODE", DayCountingMode.OVERLAPPING.value)),
        late_threshold_minutes=int(getattr(settings, "LATE_THRESHOLD_MINUTES", 5)),
        window_days=int(getattr(settings, "TRAILING_WINDOW_DAYS", 30)),
        max_photo_bytes=int(getattr(settings, "MAX_PHOTO_BYTES", 2 * 1024 * 1024)),
        session_factory=session_factory or requests.Session,
    )
