"""Tests for credential stores and the credential provider."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from hr_portal_client.credentials import (
    CredentialProvider,
    InMemoryCredentialStore,
    JsonFileCredentialStore,
)
from hr_portal_client.enums import ErrorCode
from hr_portal_client.exceptions import ConfigurationError, CredentialStoreError


class TestInMemoryCredentialStore:
    def test_set_get_remove(self) -> None:
        store = InMemoryCredentialStore()

        store.set("token", "abc")
        assert store.get("token") == "abc"

        store.remove("token")
        assert store.get("token") is None

    def test_remove_missing_key_is_noop(self) -> None:
        store = InMemoryCredentialStore({"rol": "admin"})

        store.remove("token")
        store.remove("token")

        assert store.get("rol") == "admin"

    def test_initial_mapping_is_copied(self) -> None:
        initial = {"token": "abc"}
        store = InMemoryCredentialStore(initial)

        store.remove("token")

        assert initial == {"token": "abc"}


class TestJsonFileCredentialStore:
    def test_values_persist_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "credentials.json"
        JsonFileCredentialStore(path).set("token", "abc")

        assert JsonFileCredentialStore(path).get("token") == "abc"
        assert json.loads(path.read_text(encoding="utf-8")) == {"token": "abc"}

    def test_missing_file_reads_as_empty(self, tmp_path: Path) -> None:
        store = JsonFileCredentialStore(tmp_path / "absent.json")

        assert store.get("token") is None
        store.remove("token")
        assert not (tmp_path / "absent.json").exists()

    def test_corrupt_file_reads_as_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "credentials.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonFileCredentialStore(path)

        assert store.get("token") is None

        store.set("token", "fresh")
        assert store.get("token") == "fresh"

    def test_non_string_values_are_ignored(self, tmp_path: Path) -> None:
        path = tmp_path / "credentials.json"
        path.write_text(json.dumps({"token": 42, "rol": "admin"}), encoding="utf-8")

        store = JsonFileCredentialStore(path)

        assert store.get("token") is None
        assert store.get("rol") == "admin"

    def test_remove_keeps_other_keys(self, tmp_path: Path) -> None:
        store = JsonFileCredentialStore(tmp_path / "credentials.json")
        store.set("token", "abc")
        store.set("rol", "admin")

        store.remove("token")

        assert store.get("token") is None
        assert store.get("rol") == "admin"

    def test_write_failure_raises_credential_store_error(self, tmp_path: Path) -> None:
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = JsonFileCredentialStore(blocker / "credentials.json")

        with pytest.raises(CredentialStoreError) as exc_info:
            store.set("token", "abc")

        assert exc_info.value.error_code is ErrorCode.CREDENTIAL_STORE_ERROR
        assert exc_info.value.details["path"].endswith("credentials.json")
        assert exc_info.value.to_dict()["error_code"] == "CREDENTIAL_STORE_ERROR"


class TestCredentialProvider:
    def test_write_and_read(self) -> None:
        store = InMemoryCredentialStore()
        provider = CredentialProvider(store)

        provider.write("abc", "admin")

        assert provider.read_token() == "abc"
        assert provider.read_role() == "admin"
        assert provider.is_authenticated
        assert store.get("token") == "abc"
        assert store.get("rol") == "admin"

    def test_write_without_role_keeps_existing_role(self) -> None:
        store = InMemoryCredentialStore({"rol": "manager"})
        provider = CredentialProvider(store)

        provider.write("abc")

        assert provider.read_role() == "manager"

    def test_empty_token_counts_as_absent(self) -> None:
        provider = CredentialProvider(InMemoryCredentialStore({"token": ""}))

        assert provider.read_token() is None
        assert not provider.is_authenticated

    def test_clear_token_keeps_role(self) -> None:
        store = InMemoryCredentialStore({"token": "abc", "rol": "admin"})

        CredentialProvider(store).clear_token()

        assert store.get("token") is None
        assert store.get("rol") == "admin"

    def test_logout_clears_token_and_role(self) -> None:
        store = InMemoryCredentialStore({"token": "abc", "rol": "admin", "theme": "dark"})

        CredentialProvider(store).logout()

        assert store.get("token") is None
        assert store.get("rol") is None
        assert store.get("theme") == "dark"

    def test_custom_keys(self) -> None:
        store = InMemoryCredentialStore()
        provider = CredentialProvider(store, token_key="access", role_key="role")

        provider.write("abc", "admin")

        assert store.get("access") == "abc"
        assert store.get("role") == "admin"

    @pytest.mark.parametrize(
        ("token_key", "role_key"), [("", "rol"), ("token", ""), ("same", "same")]
    )
    def test_invalid_keys_are_rejected(self, token_key: str, role_key: str) -> None:
        with pytest.raises(ConfigurationError):
            CredentialProvider(InMemoryCredentialStore(), token_key=token_key, role_key=role_key)
