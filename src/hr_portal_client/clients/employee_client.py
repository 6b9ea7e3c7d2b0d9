"""Employee endpoints of the HR portal API."""

from __future__ import annotations

from typing import Any

from hr_portal_client.clients._utils import extract_items, parse_item
from hr_portal_client.config import ClientSettings, settings
from hr_portal_client.dto import EmployeeCreateV1, EmployeeV1
from hr_portal_client.logging_utils import create_client_logger
from hr_portal_client.models import FormPayload, RequestDescriptor
from hr_portal_client.outcomes import UnifiedFailure, collapse
from hr_portal_client.protocols import GatewayProtocol

logger = create_client_logger("hr_portal.employee_client")

COLLECTION = "employees"


class EmployeeClientImpl:
    """Client for the employee list and employee records."""

    def __init__(self, gateway: GatewayProtocol, config: ClientSettings = settings) -> None:
        self._gateway = gateway
        self._config = config

    async def list_employees(self) -> list[EmployeeV1] | UnifiedFailure:
        """List all employees.

        Returns:
            Employees, or False when the request failed

        Raises:
            pydantic.ValidationError: When an item does not match EmployeeV1
        """
        payload = await self._gateway.fetch(
            self._config.url_for("/employees"), fallback_collection=COLLECTION
        )
        if payload is False:
            return False

        employees = [EmployeeV1.model_validate(item) for item in extract_items(payload, COLLECTION)]
        logger.debug("Fetched employees", extra={"count": len(employees)})
        return employees

    async def get_employee(self, employee_id: str) -> EmployeeV1 | None | UnifiedFailure:
        payload = await self._gateway.fetch(self._config.url_for(f"/employees/{employee_id}"))
        if payload is False:
            return False
        return parse_item(payload, "employee", EmployeeV1)

    async def create_employee(
        self, employee: EmployeeCreateV1
    ) -> EmployeeV1 | None | UnifiedFailure:
        payload = await self._gateway.fetch(
            self._config.url_for("/employees"),
            method="POST",
            body=employee.model_dump(by_alias=True, exclude_none=True),
        )
        if payload is False:
            return False
        return parse_item(payload, "employee", EmployeeV1)

    async def update_employee(
        self, employee_id: str, employee: EmployeeCreateV1
    ) -> EmployeeV1 | None | UnifiedFailure:
        payload = await self._gateway.fetch(
            self._config.url_for(f"/employees/{employee_id}"),
            method="PATCH",
            body=employee.model_dump(by_alias=True, exclude_none=True),
        )
        if payload is False:
            return False
        return parse_item(payload, "employee", EmployeeV1)

    async def delete_employee(self, employee_id: str) -> bool:
        """Delete an employee; True when the API accepted the deletion."""
        payload = await self._gateway.fetch(
            self._config.url_for(f"/employees/{employee_id}"), method="DELETE"
        )
        return payload is not False

    async def upload_avatar(
        self,
        employee_id: str,
        filename: str,
        content: bytes,
        content_type: str | None = None,
    ) -> Any | UnifiedFailure:
        """Upload a profile picture as a multipart form."""
        descriptor = RequestDescriptor(
            url=self._config.url_for(f"/employees/{employee_id}/avatar"),
            method="POST",
            body=FormPayload(files={"file": (filename, content, content_type)}),
        )
        return collapse(await self._gateway.send(descriptor))
