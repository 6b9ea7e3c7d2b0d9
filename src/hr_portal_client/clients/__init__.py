"""HR portal client feature modules.

Each client sends its requests through the authenticated gateway.
"""

from hr_portal_client.clients.course_client import CourseClientImpl
from hr_portal_client.clients.employee_client import EmployeeClientImpl
from hr_portal_client.clients.project_client import ProjectClientImpl

__all__ = ["CourseClientImpl", "EmployeeClientImpl", "ProjectClientImpl"]
