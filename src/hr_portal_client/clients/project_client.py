"""Project endpoints of the HR portal API."""

from __future__ import annotations

from hr_portal_client.clients._utils import extract_items, parse_item
from hr_portal_client.config import ClientSettings, settings
from hr_portal_client.dto import ProjectInfoV1
from hr_portal_client.logging_utils import create_client_logger
from hr_portal_client.outcomes import UnifiedFailure
from hr_portal_client.protocols import GatewayProtocol

logger = create_client_logger("hr_portal.project_client")


class ProjectClientImpl:
    """Client for projects and their technology stacks."""

    def __init__(self, gateway: GatewayProtocol, config: ClientSettings = settings) -> None:
        self._gateway = gateway
        self._config = config

    async def list_projects(self) -> list[ProjectInfoV1] | UnifiedFailure:
        payload = await self._gateway.fetch(
            self._config.url_for("/projects"), fallback_collection="projects"
        )
        if payload is False:
            return False
        return [ProjectInfoV1.model_validate(item) for item in extract_items(payload, "projects")]

    async def update_tech_stack(
        self, project_id: str, stack: list[str]
    ) -> ProjectInfoV1 | None | UnifiedFailure:
        """Replace the project's technology stack.

        Duplicates are dropped, first occurrence wins. Returns None when the
        API accepted the change without echoing the project back.
        """
        unique_stack = list(dict.fromkeys(stack))
        payload = await self._gateway.fetch(
            self._config.url_for(f"/projects/{project_id}"),
            method="PATCH",
            body={"techStack": unique_stack},
        )
        if payload is False:
            return False

        logger.info(
            "Saved project tech stack",
            extra={"project_id": project_id, "stack_size": len(unique_stack)},
        )
        return parse_item(payload, "project", ProjectInfoV1)
