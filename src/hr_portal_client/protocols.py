"""Protocol definitions for the HR portal client.

Feature clients depend on these interfaces, not on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from hr_portal_client.outcomes import GatewayOutcome, UnifiedFailure

if TYPE_CHECKING:
    from hr_portal_client.dto import (
        CourseV1,
        EmployeeCourseV1,
        EmployeeCreateV1,
        EmployeeV1,
        ProjectInfoV1,
    )
    from hr_portal_client.models import RequestDescriptor


class GatewayProtocol(Protocol):
    """Protocol for the authenticated request gateway."""

    async def send(self, descriptor: RequestDescriptor) -> GatewayOutcome:
        """Send one request and return a tagged outcome."""
        ...

    async def fetch(
        self,
        url: str,
        *,
        method: str = "GET",
        body: Any = None,
        headers: Mapping[str, str] | None = None,
        fallback_collection: str | None = None,
    ) -> Any | UnifiedFailure:
        """Send one request; every failure collapses to ``False``."""
        ...


class EmployeeClientProtocol(Protocol):
    """Protocol for employee endpoints."""

    async def list_employees(self) -> list[EmployeeV1] | UnifiedFailure: ...

    async def get_employee(self, employee_id: str) -> EmployeeV1 | None | UnifiedFailure: ...

    async def create_employee(
        self, employee: EmployeeCreateV1
    ) -> EmployeeV1 | None | UnifiedFailure: ...

    async def update_employee(
        self, employee_id: str, employee: EmployeeCreateV1
    ) -> EmployeeV1 | None | UnifiedFailure: ...

    async def delete_employee(self, employee_id: str) -> bool: ...

    async def upload_avatar(
        self, employee_id: str, filename: str, content: bytes, content_type: str | None = None
    ) -> Any | UnifiedFailure: ...


class CourseClientProtocol(Protocol):
    """Protocol for course and employee-course endpoints."""

    async def list_courses(self) -> list[CourseV1] | UnifiedFailure: ...

    async def list_employee_courses(
        self, employee_id: str
    ) -> list[EmployeeCourseV1] | UnifiedFailure: ...

    async def set_course_status(
        self, employee_id: str, course_id: str, status: bool
    ) -> EmployeeCourseV1 | None | UnifiedFailure: ...


class ProjectClientProtocol(Protocol):
    """Protocol for project endpoints."""

    async def list_projects(self) -> list[ProjectInfoV1] | UnifiedFailure: ...

    async def update_tech_stack(
        self, project_id: str, stack: list[str]
    ) -> ProjectInfoV1 | None | UnifiedFailure: ...
