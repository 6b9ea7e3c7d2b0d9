"""JSON file credential store.

Keeps the credential between CLI invocations, the way browser local storage
keeps it between page loads.
"""

from __future__ import annotations

import json
import os
from pathlib import Path

from hr_portal_client.exceptions import CredentialStoreError
from hr_portal_client.logging_utils import create_client_logger

logger = create_client_logger("hr_portal.credentials.file_store")


class JsonFileCredentialStore:
    """Credential store persisted as a flat JSON object of string values."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = value
        self._save(data)

    def remove(self, key: str) -> None:
        data = self._load()
        if key not in data:
            return
        del data[key]
        self._save(data)

    def _load(self) -> dict[str, str]:
        try:
            if not self._path.exists():
                return {}
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as error:
            logger.warning(
                "Ignoring unreadable credential file",
                extra={"path": str(self._path), "error": str(error)},
            )
            return {}

        if not isinstance(data, dict):
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _save(self, data: dict[str, str]) -> None:
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, indent=2), encoding="utf-8")
            os.chmod(tmp_path, 0o600)
            os.replace(tmp_path, self._path)
        except OSError as error:
            raise CredentialStoreError(
                "Failed to write credential file",
                details={"path": str(self._path), "error": str(error)},
            ) from error
