# src/warehouse/dependencies.py
from __future__ import annotations

from warehouse.adapters.json_storage import JsonCredentialStore, JsonInventoryStorage
from warehouse.core.config import Settings, get_settings
from warehouse.repositories.inventory_repository import InventoryRepository
from warehouse.services.auth_service import AuthService
from warehouse.services.inventory_service import InventoryService


def get_inventory_storage(settings: Settings | None = None) -> JsonInventoryStorage:
    settings = settings or get_settings()
    return JsonInventoryStorage(path=settings.inventory_file, indent=settings.json_indent)


def get_credential_store(settings: Settings | None = None) -> JsonCredentialStore:
    settings = settings or get_settings()
    return JsonCredentialStore(path=settings.credentials_file)


def load_inventory(settings: Settings | None = None) -> InventoryService:
    """
    Liest das Lagerdokument einmal ein und liefert den Service darauf.
    Pro Prozess wird das Dokument nur hier geladen.
    """
    repository = InventoryRepository.load(get_inventory_storage(settings))
    return InventoryService(repository=repository)


def get_auth_service(settings: Settings | None = None) -> AuthService:
    return AuthService(credentials=get_credential_store(settings))


def authenticate(username: str, password: str, settings: Settings | None = None) -> bool:
    return get_auth_service(settings).authenticate(username, password)
