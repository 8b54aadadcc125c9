# tests/conftest.py
import json
from pathlib import Path

import pytest

from warehouse.adapters.json_storage import JsonCredentialStore, JsonInventoryStorage
from warehouse.core.config import Settings
from warehouse.repositories.inventory_repository import InventoryRepository
from warehouse.services.auth_service import AuthService
from warehouse.services.inventory_service import InventoryService

INVENTORY_DATA = {
    "Categoria": [
        {"id_categoria": 1, "nome_categoria": "Monitor"},
        {"id_categoria": 2, "nome_categoria": "Smartphone"},
    ],
    "Prodotto": [
        {"id_prodotto": 1, "id_categoria": 1, "nome_prodotto": "LG Monitor", "prezzo": 200},
        {"id_prodotto": 2, "id_categoria": 2, "nome_prodotto": "iPhone", "prezzo": 800},
    ],
}

LOGIN_DATA = {
    "users": [
        {"username": "kristian", "password": "123456"},
        {"username": "admin", "password": "password"},
    ]
}


def write_json(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data, indent=4), encoding="utf-8")
    return path


def read_json(path: Path) -> dict:
    return json.loads(path.read_text(encoding="utf-8"))


@pytest.fixture
def inventory_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "Magazzino.json", INVENTORY_DATA)


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    return write_json(tmp_path / "Login.json", LOGIN_DATA)


@pytest.fixture
def test_settings(inventory_file: Path, credentials_file: Path) -> Settings:
    return Settings(inventory_file=inventory_file, credentials_file=credentials_file)


@pytest.fixture
def storage(inventory_file: Path) -> JsonInventoryStorage:
    return JsonInventoryStorage(inventory_file)


@pytest.fixture
def repository(storage: JsonInventoryStorage) -> InventoryRepository:
    return InventoryRepository.load(storage)


@pytest.fixture
def service(repository: InventoryRepository) -> InventoryService:
    return InventoryService(repository=repository)


@pytest.fixture
def auth_service(credentials_file: Path) -> AuthService:
    return AuthService(credentials=JsonCredentialStore(credentials_file))
