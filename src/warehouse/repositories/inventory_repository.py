# src/warehouse/repositories/inventory_repository.py
from __future__ import annotations

from warehouse.domain.models import Category, InventoryDocument, Product
from warehouse.domain.ports import InventoryStoragePort


class InventoryRepository:
    """
    In-memory inventory store.

    Holds the parsed document as the authoritative copy for reads and writes it
    back through the storage port on commit(). Mutations work on the ordered
    sequences directly; nothing here is transactional.
    """

    def __init__(self, document: InventoryDocument, storage: InventoryStoragePort) -> None:
        self._document = document
        self._storage = storage

    @classmethod
    def load(cls, storage: InventoryStoragePort) -> InventoryRepository:
        return cls(storage.load(), storage)

    @property
    def document(self) -> InventoryDocument:
        return self._document

    @property
    def categories(self) -> list[Category]:
        return list(self._document.categories)

    @property
    def products(self) -> list[Product]:
        return list(self._document.products)

    # --- Lookups --------------------------------------------------------------

    def find_category_by_name(self, name: str) -> Category | None:
        """Case-insensitive match. If several categories share a name the last one wins."""
        wanted = name.lower()
        found = None
        for category in self._document.categories:
            if category.name.lower() == wanted:
                found = category
        return found

    def find_category_by_id(self, category_id: int | None) -> Category | None:
        if category_id is None:
            return None
        return next((c for c in self._document.categories if c.id == category_id), None)

    def find_product_by_name(self, name: str) -> Product | None:
        index = self.index_of_product_by_name(name)
        return self._document.products[index] if index is not None else None

    def find_product_by_id(self, product_id: int) -> Product | None:
        return next((p for p in self._document.products if p.id == product_id), None)

    def products_in_category(self, category_id: int) -> list[Product]:
        return [p for p in self._document.products if p.category_id == category_id]

    def index_of_category(self, category_id: int | None) -> int | None:
        if category_id is None:
            return None
        for i, category in enumerate(self._document.categories):
            if category.id == category_id:
                return i
        return None

    def index_of_product_by_name(self, name: str) -> int | None:
        wanted = name.lower()
        for i, product in enumerate(self._document.products):
            if product.name.lower() == wanted:
                return i
        return None

    # --- Mutations ------------------------------------------------------------

    def insert_category(self, category: Category) -> Category:
        self._document.categories.append(category)
        return category

    def insert_product(self, product: Product) -> Product:
        self._document.products.append(product)
        return product

    def replace_product_at(self, index: int, product: Product) -> Product:
        self._document.products[index] = product
        return product

    def remove_category_at(self, index: int) -> Category:
        return self._document.categories.pop(index)

    def remove_product_at(self, index: int) -> Product:
        return self._document.products.pop(index)

    def remove_products_in_category(self, category_id: int) -> list[Product]:
        """Removes every product of the category in a single pass and returns them."""
        removed = [p for p in self._document.products if p.category_id == category_id]
        self._document.products[:] = [
            p for p in self._document.products if p.category_id != category_id
        ]
        return removed

    def commit(self) -> None:
        """Persists the whole document. On failure the in-memory state stays as it is."""
        self._storage.save(self._document)
