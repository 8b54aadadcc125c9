from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from warehouse.domain.models import Category, InventoryDocument, Product
from warehouse.domain.ports import InventoryStoragePort
from warehouse.repositories.inventory_repository import InventoryRepository


def _product(product_id: int, category_id: int, name: str, price: str = "100") -> Product:
    return Product(id=product_id, category_id=category_id, name=name, price=Decimal(price))


@pytest.fixture  # type: ignore[misc]
def storage_mock() -> MagicMock:
    return MagicMock(spec=InventoryStoragePort)


@pytest.fixture  # type: ignore[misc]
def repo(storage_mock: MagicMock) -> InventoryRepository:
    document = InventoryDocument(
        categories=[Category(id=1, name="Monitor"), Category(id=2, name="TV")],
        products=[
            _product(1, 1, "LG Monitor"),
            _product(2, 2, "Samsung TV"),
            _product(3, 1, "Dell Monitor"),
            _product(4, 2, "Sony TV"),
            _product(5, 1, "Asus Monitor"),
        ],
    )
    return InventoryRepository(document, storage_mock)


def test_load_uses_storage(storage_mock: MagicMock) -> None:
    document = InventoryDocument(categories=[], products=[])
    storage_mock.load.return_value = document

    repo = InventoryRepository.load(storage_mock)

    storage_mock.load.assert_called_once_with()
    assert repo.document is document


@pytest.mark.parametrize("name", ["Monitor", "monitor", "MONITOR", "mOnItOr"])  # type: ignore[misc]
def test_find_category_by_name_ignores_case(repo: InventoryRepository, name: str) -> None:
    category = repo.find_category_by_name(name)
    assert category is not None
    assert category.id == 1


def test_find_category_by_name_returns_last_match(storage_mock: MagicMock) -> None:
    document = InventoryDocument(
        categories=[Category(id=1, name="Monitor"), Category(id=7, name="monitor")],
        products=[],
    )
    repo = InventoryRepository(document, storage_mock)

    found = repo.find_category_by_name("MONITOR")
    assert found is not None
    assert found.id == 7


def test_find_category_by_name_unknown(repo: InventoryRepository) -> None:
    assert repo.find_category_by_name("Inesistente") is None


def test_find_category_by_id(repo: InventoryRepository) -> None:
    assert repo.find_category_by_id(2) == Category(id=2, name="TV")
    assert repo.find_category_by_id(999) is None
    assert repo.find_category_by_id(None) is None


def test_find_product_by_name_ignores_case(repo: InventoryRepository) -> None:
    product = repo.find_product_by_name("samsung tv")
    assert product is not None
    assert product.id == 2
    assert repo.find_product_by_name("Nokia") is None


def test_find_product_by_id(repo: InventoryRepository) -> None:
    product = repo.find_product_by_id(3)
    assert product is not None
    assert product.name == "Dell Monitor"
    assert repo.find_product_by_id(42) is None


def test_products_in_category_keeps_store_order(repo: InventoryRepository) -> None:
    names = [p.name for p in repo.products_in_category(1)]
    assert names == ["LG Monitor", "Dell Monitor", "Asus Monitor"]


def test_remove_products_in_category_removes_non_adjacent_matches(
    repo: InventoryRepository,
) -> None:
    removed = repo.remove_products_in_category(1)

    assert [p.id for p in removed] == [1, 3, 5]
    assert [p.id for p in repo.products] == [2, 4]
    assert repo.products_in_category(1) == []


def test_remove_products_in_category_without_matches(repo: InventoryRepository) -> None:
    assert repo.remove_products_in_category(999) == []
    assert len(repo.products) == 5


def test_insert_and_remove(repo: InventoryRepository) -> None:
    repo.insert_category(Category(id=3, name="Smartphone"))
    repo.insert_product(_product(6, 3, "iPhone"))

    assert repo.index_of_category(3) == 2
    assert repo.index_of_product_by_name("IPHONE") == 5

    assert repo.remove_product_at(5).name == "iPhone"
    assert repo.remove_category_at(2).name == "Smartphone"
    assert repo.index_of_category(3) is None
    assert repo.index_of_category(None) is None


def test_replace_product_at(repo: InventoryRepository) -> None:
    updated = repo.products[0].model_copy(update={"price": Decimal("220")})
    repo.replace_product_at(0, updated)
    assert repo.products[0].price == Decimal("220")


def test_views_are_copies(repo: InventoryRepository) -> None:
    repo.products.clear()
    repo.categories.clear()
    assert len(repo.products) == 5
    assert len(repo.categories) == 2


def test_commit_saves_whole_document(repo: InventoryRepository, storage_mock: MagicMock) -> None:
    repo.commit()
    storage_mock.save.assert_called_once_with(repo.document)
