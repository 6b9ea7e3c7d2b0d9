"""CLI tests for login, logout and authenticated commands."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import httpx
import pytest
import structlog
from respx import MockRouter
from typer.testing import CliRunner

from hr_portal_client import cli
from hr_portal_client.config import ClientSettings
from hr_portal_client.credentials import JsonFileCredentialStore

runner = CliRunner()


@pytest.fixture(autouse=True)
def cli_settings(
    monkeypatch: pytest.MonkeyPatch, test_settings: ClientSettings
) -> Iterator[ClientSettings]:
    """Point the CLI at the fake API and a temporary credential file."""
    monkeypatch.setattr(cli, "settings", test_settings)
    yield test_settings
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()


@pytest.fixture
def file_store(cli_settings: ClientSettings) -> JsonFileCredentialStore:
    return JsonFileCredentialStore(cli_settings.CREDENTIAL_STORE_PATH)


class TestSessionCommands:
    def test_login_stores_token_and_role(self, file_store: JsonFileCredentialStore) -> None:
        result = runner.invoke(cli.app, ["login", "--token", "abc", "--role", "admin"])

        assert result.exit_code == 0
        assert "Token stored." in result.output
        assert file_store.get("token") == "abc"
        assert file_store.get("rol") == "admin"

    def test_login_prompts_for_token(self, file_store: JsonFileCredentialStore) -> None:
        result = runner.invoke(cli.app, ["login"], input="prompted\n")

        assert result.exit_code == 0
        assert file_store.get("token") == "prompted"

    def test_logout_clears_token_and_role(self, file_store: JsonFileCredentialStore) -> None:
        file_store.set("token", "abc")
        file_store.set("rol", "admin")

        result = runner.invoke(cli.app, ["logout"])

        assert result.exit_code == 0
        assert file_store.get("token") is None
        assert file_store.get("rol") is None

    def test_status(self, file_store: JsonFileCredentialStore) -> None:
        result = runner.invoke(cli.app, ["status"])
        assert result.exit_code == 1
        assert "Not logged in." in result.output

        file_store.set("token", "abc")
        file_store.set("rol", "manager")

        result = runner.invoke(cli.app, ["status"])
        assert result.exit_code == 0
        assert "role: manager" in result.output


class TestRequestCommand:
    def test_prints_json_payload(
        self,
        cli_settings: ClientSettings,
        file_store: JsonFileCredentialStore,
        respx_mock: MockRouter,
    ) -> None:
        file_store.set("token", "abc")
        route = respx_mock.post(cli_settings.url_for("/courses")).mock(
            return_value=httpx.Response(201, json={"id": "c1", "name": "Safety"})
        )

        result = runner.invoke(cli.app, ["request", "post", "/courses", "--data", '{"name": "Safety"}'])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {"id": "c1", "name": "Safety"}
        request = route.calls.last.request
        assert request.headers["authorization"] == "Bearer abc"
        assert json.loads(request.content) == {"name": "Safety"}

    def test_rejected_request_exits_with_error(
        self,
        cli_settings: ClientSettings,
        file_store: JsonFileCredentialStore,
        respx_mock: MockRouter,
    ) -> None:
        file_store.set("token", "expired")
        file_store.set("rol", "admin")
        respx_mock.get(cli_settings.url_for("/employees")).mock(return_value=httpx.Response(401))

        result = runner.invoke(cli.app, ["request", "GET", "/employees"])

        assert result.exit_code == 1
        assert "Request failed." in result.output
        assert "hr-portal login" in result.output
        assert file_store.get("token") is None
        assert file_store.get("rol") == "admin"

    def test_invalid_json_data_is_a_usage_error(self) -> None:
        result = runner.invoke(cli.app, ["request", "POST", "/courses", "--data", "{nope"])

        assert result.exit_code == 2


class TestListCommands:
    def test_employees(
        self,
        cli_settings: ClientSettings,
        file_store: JsonFileCredentialStore,
        respx_mock: MockRouter,
    ) -> None:
        file_store.set("token", "abc")
        respx_mock.get(cli_settings.url_for("/employees")).mock(
            return_value=httpx.Response(
                200, json={"employees": [{"id": 1, "name": "Ana", "email": "ana@x.io"}]}
            )
        )

        result = runner.invoke(cli.app, ["employees"])

        assert result.exit_code == 0
        assert "1\tAna\tana@x.io" in result.stdout

    def test_employee_courses(
        self,
        cli_settings: ClientSettings,
        file_store: JsonFileCredentialStore,
        respx_mock: MockRouter,
    ) -> None:
        file_store.set("token", "abc")
        respx_mock.get(cli_settings.url_for("/employees/e1/courses")).mock(
            return_value=httpx.Response(
                200,
                json=[
                    {"employeeId": "e1", "courseId": "c1", "status": True},
                    {"employeeId": "e1", "courseId": "c2", "status": False},
                ],
            )
        )

        result = runner.invoke(cli.app, ["courses", "--employee", "e1"])

        assert result.exit_code == 0
        assert "c1\tdone" in result.stdout
        assert "c2\tpending" in result.stdout

    def test_projects_server_failure_keeps_login(
        self,
        cli_settings: ClientSettings,
        file_store: JsonFileCredentialStore,
        respx_mock: MockRouter,
    ) -> None:
        file_store.set("token", "abc")
        respx_mock.get(cli_settings.url_for("/projects")).mock(return_value=httpx.Response(500))

        result = runner.invoke(cli.app, ["projects"])

        assert result.exit_code == 1
        assert "Could not fetch projects." in result.output
        assert "hr-portal login" not in result.output
        assert file_store.get("token") == "abc"
