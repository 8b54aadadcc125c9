# src/warehouse/adapters/json_storage.py
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from warehouse.domain.models import Credential, CredentialDocument, InventoryDocument
from warehouse.domain.ports import (
    CredentialSourcePort,
    DocumentParseError,
    InventoryStoragePort,
    StorageReadError,
    StorageWriteError,
)

logger = logging.getLogger(__name__)


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageReadError(path, str(e)) from e


class JsonInventoryStorage(InventoryStoragePort):
    """
    Speichert das Lagerdokument als JSON-Datei.

    Geschrieben wird immer das komplette Dokument: zuerst in eine temporäre
    Datei im selben Verzeichnis, danach per os.replace über das Ziel. Ein
    Leser sieht so entweder den alten oder den neuen Stand, nie einen halben.
    """

    def __init__(self, path: Path, indent: int = 4) -> None:
        self._path = path
        self._indent = indent

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> InventoryDocument:
        raw = _read_text(self._path)
        try:
            document = InventoryDocument.model_validate_json(raw)
        except ValidationError as e:
            raise DocumentParseError(self._path, str(e)) from e

        logger.debug(
            "Loaded %d categories and %d products from %s",
            len(document.categories),
            len(document.products),
            self._path,
        )
        return document

    def save(self, document: InventoryDocument) -> None:
        payload = document.model_dump_json(by_alias=True, indent=self._indent)
        directory = self._path.parent

        tmp_name: str | None = None
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=directory,
                prefix=f".{self._path.name}.",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(payload)
                tmp.flush()
                os.fsync(tmp.fileno())
            os.replace(tmp_name, self._path)
        except OSError as e:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise StorageWriteError(self._path, str(e)) from e

        logger.debug("Wrote inventory document to %s", self._path)


class JsonCredentialStore(CredentialSourcePort):
    """
    Read-only access to the credential document.
    The file is read again on every check, nothing is cached.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    def load_credentials(self) -> list[Credential]:
        raw = _read_text(self._path)
        try:
            document = CredentialDocument.model_validate_json(raw)
        except ValidationError as e:
            raise DocumentParseError(self._path, str(e)) from e

        credentials = []
        for raw_user in document.users:
            try:
                credentials.append(Credential.model_validate(raw_user))
            except ValidationError:
                logger.warning("Skipping malformed user entry in %s", self._path, exc_info=True)
        return credentials

    def check_credentials(self, username: str, password: str) -> bool:
        return any(
            c.username == username and c.password == password for c in self.load_credentials()
        )
