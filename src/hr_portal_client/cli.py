"""Command line interface for the HR portal client."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from typing import Any, NoReturn, TypeVar

import typer
from dishka import AsyncContainer, make_async_container

from hr_portal_client.config import settings
from hr_portal_client.credentials import CredentialProvider, JsonFileCredentialStore
from hr_portal_client.di import PortalClientProvider
from hr_portal_client.logging_utils import configure_client_logging
from hr_portal_client.protocols import (
    CourseClientProtocol,
    EmployeeClientProtocol,
    GatewayProtocol,
    ProjectClientProtocol,
)

T = TypeVar("T")

app = typer.Typer(help="HR portal API client")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    configure_client_logging(
        settings.SERVICE_NAME,
        environment=settings.ENVIRONMENT.value,
        log_level="DEBUG" if verbose else settings.LOG_LEVEL,
    )


def _credentials() -> CredentialProvider:
    return CredentialProvider(
        JsonFileCredentialStore(settings.CREDENTIAL_STORE_PATH),
        token_key=settings.TOKEN_KEY,
        role_key=settings.ROLE_KEY,
    )


def _run(func: Callable[[AsyncContainer], Awaitable[T]]) -> T:
    async def runner() -> T:
        container = make_async_container(PortalClientProvider(settings))
        try:
            return await func(container)
        finally:
            await container.close()

    return asyncio.run(runner())


def _fail(message: str) -> NoReturn:
    typer.secho(message, fg=typer.colors.RED, err=True)
    if not _credentials().is_authenticated:
        typer.secho("Run `hr-portal login` to store a new token.", fg=typer.colors.YELLOW, err=True)
    raise typer.Exit(code=1)


@app.command()
def login(
    token: str = typer.Option(..., prompt=True, hide_input=True, help="Bearer token"),
    role: str | None = typer.Option(None, help="Role issued with the token"),
) -> None:
    """Store a bearer token issued by the HR portal."""
    _credentials().write(token, role)
    typer.secho("Token stored.", fg=typer.colors.GREEN)


@app.command()
def logout() -> None:
    """Remove the stored token and role."""
    _credentials().logout()
    typer.secho("Logged out.", fg=typer.colors.GREEN)


@app.command()
def status() -> None:
    """Show whether a token is stored and which role it carries."""
    credentials = _credentials()
    if not credentials.is_authenticated:
        typer.echo("Not logged in.")
        raise typer.Exit(code=1)
    typer.echo(f"Logged in (role: {credentials.read_role() or 'unknown'})")


@app.command()
def request(
    method: str = typer.Argument(..., help="HTTP method, e.g. GET"),
    path: str = typer.Argument(..., help="Path relative to the API base URL"),
    data: str | None = typer.Option(None, "--data", "-d", help="JSON request body"),
) -> None:
    """Send an authenticated request and print the JSON response."""
    if data is not None:
        try:
            json.loads(data)
        except ValueError as error:
            raise typer.BadParameter(f"--data is not valid JSON: {error}") from error

    async def call(container: AsyncContainer) -> Any:
        gateway = await container.get(GatewayProtocol)
        return await gateway.fetch(settings.url_for(path), method=method.upper(), body=data)

    payload = _run(call)
    if payload is False:
        _fail("Request failed.")
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


@app.command()
def employees() -> None:
    """List employees."""

    async def call(container: AsyncContainer) -> Any:
        client = await container.get(EmployeeClientProtocol)
        return await client.list_employees()

    result = _run(call)
    if result is False:
        _fail("Could not fetch employees.")
    for employee in result:
        typer.echo(f"{employee.id}\t{employee.name or ''}\t{employee.email or ''}")


@app.command()
def courses(
    employee_id: str | None = typer.Option(None, "--employee", help="Show one employee's courses"),
) -> None:
    """List courses, or one employee's course status."""

    async def call(container: AsyncContainer) -> Any:
        client = await container.get(CourseClientProtocol)
        if employee_id is None:
            return await client.list_courses()
        return await client.list_employee_courses(employee_id)

    result = _run(call)
    if result is False:
        _fail("Could not fetch courses.")
    for item in result:
        if employee_id is None:
            typer.echo(f"{item.id}\t{item.name}")
        else:
            typer.echo(f"{item.course_id}\t{'done' if item.status else 'pending'}")


@app.command()
def projects() -> None:
    """List projects with their tech stack."""

    async def call(container: AsyncContainer) -> Any:
        client = await container.get(ProjectClientProtocol)
        return await client.list_projects()

    result = _run(call)
    if result is False:
        _fail("Could not fetch projects.")
    for project in result:
        typer.echo(f"{project.project_id}\t{project.project_name}\t{', '.join(project.tech_stack)}")


if __name__ == "__main__":
    app()
