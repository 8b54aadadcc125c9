# src/warehouse/domain/ports.py
from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from warehouse.domain.models import InventoryDocument


class InventoryStoragePort(ABC):
    """
    Abstrakte Schnittstelle für die Persistenz des Lagerdokuments.
    Das Dokument ist immer die komplette Einheit: kein inkrementelles Schreiben.
    """

    @abstractmethod
    def load(self) -> InventoryDocument:
        """
        Liest das komplette Dokument.

        Raises:
            StorageReadError: Wenn die Datei nicht lesbar ist.
            DocumentParseError: Wenn der Inhalt nicht wohlgeformt ist.
        """
        ...

    @abstractmethod
    def save(self, document: InventoryDocument) -> None:
        """
        Überschreibt das gespeicherte Dokument atomar.

        Raises:
            StorageWriteError: Wenn das Schreiben fehlschlägt.
        """
        ...


class CredentialSourcePort(ABC):
    @abstractmethod
    def check_credentials(self, username: str, password: str) -> bool:
        """Returns True iff the exact username/password pair is stored."""
        ...


# ---------------------------------------------------------------------------
# Custom Domain Exceptions
# ---------------------------------------------------------------------------


class InventoryError(Exception):
    """Base class for expected, recoverable inventory conditions."""


class CategoryNotFoundError(InventoryError):
    def __init__(self, category: int | str | None):
        super().__init__(f"Category '{category}' does not exist")
        self.category = category


class ProductNotFoundError(InventoryError):
    def __init__(self, name: str):
        super().__init__(f"Product '{name}' does not exist")
        self.name = name


class DuplicateCategoryError(InventoryError):
    def __init__(self, category_id: int, name: str):
        super().__init__(f"Category with id {category_id} or name '{name}' already exists")
        self.category_id = category_id
        self.name = name


class DuplicateProductError(InventoryError):
    def __init__(self, product_id: int, name: str):
        super().__init__(f"Product with id {product_id} or name '{name}' already exists")
        self.product_id = product_id
        self.name = name


class StorageError(OSError):
    def __init__(self, path: Path, detail: str):
        super().__init__(f"Storage error for '{path}': {detail}")
        self.path = path
        self.detail = detail


class StorageReadError(StorageError):
    pass


class StorageWriteError(StorageError):
    pass


class DocumentParseError(ValueError):
    def __init__(self, path: Path, detail: str):
        super().__init__(f"Malformed document '{path}': {detail}")
        self.path = path
        self.detail = detail
