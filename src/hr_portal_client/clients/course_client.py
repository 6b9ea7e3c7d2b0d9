"""Course and employee-course endpoints of the HR portal API."""

from __future__ import annotations

from hr_portal_client.clients._utils import extract_items, parse_item
from hr_portal_client.config import ClientSettings, settings
from hr_portal_client.dto import CourseV1, EmployeeCourseV1
from hr_portal_client.outcomes import UnifiedFailure
from hr_portal_client.protocols import GatewayProtocol


class CourseClientImpl:
    """Client for the course catalogue and per-employee course status."""

    def __init__(self, gateway: GatewayProtocol, config: ClientSettings = settings) -> None:
        self._gateway = gateway
        self._config = config

    async def list_courses(self) -> list[CourseV1] | UnifiedFailure:
        payload = await self._gateway.fetch(
            self._config.url_for("/courses"), fallback_collection="courses"
        )
        if payload is False:
            return False
        return [CourseV1.model_validate(item) for item in extract_items(payload, "courses")]

    async def list_employee_courses(
        self, employee_id: str
    ) -> list[EmployeeCourseV1] | UnifiedFailure:
        payload = await self._gateway.fetch(
            self._config.url_for(f"/employees/{employee_id}/courses"),
            fallback_collection="employeeCourses",
        )
        if payload is False:
            return False
        return [
            EmployeeCourseV1.model_validate(item)
            for item in extract_items(payload, "employeeCourses")
        ]

    async def set_course_status(
        self, employee_id: str, course_id: str, status: bool
    ) -> EmployeeCourseV1 | None | UnifiedFailure:
        """Mark a course as completed (True) or pending (False) for an employee.

        Returns None when the update succeeded without a response body.
        """
        payload = await self._gateway.fetch(
            self._config.url_for(f"/employees/{employee_id}/courses/{course_id}"),
            method="PATCH",
            body={"status": status},
        )
        if payload is False:
            return False
        return parse_item(payload, "employeeCourse", EmployeeCourseV1)
