"""HR portal v1 DTOs.

Response and request models for the HR portal API. The API speaks camelCase;
fields here are snake_case with camelCase aliases.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class PortalModel(BaseModel):
    """Base model accepting both camelCase aliases and field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeV1(PortalModel):
    """Employee record as listed by the portal."""

    id: int | str
    name: str | None = None
    email: str | None = None
    img: str | None = None
    level: int | None = None
    role: str | None = None


class EmployeeCreateV1(PortalModel):
    """Payload for creating or updating an employee."""

    name: str
    email: str
    role: str | None = None
    level: int | None = None


class CourseV1(PortalModel):
    """Training course offered to employees."""

    id: int | str
    name: str
    description: str | None = None


class EmployeeCourseV1(PortalModel):
    """Link between an employee and a course, with completion status."""

    employee_id: str
    course_id: str
    status: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProjectInfoV1(PortalModel):
    """Project summary used by project pickers and the tech stack editor."""

    project_id: str
    project_name: str
    tech_stack: list[str] = Field(default_factory=list)
