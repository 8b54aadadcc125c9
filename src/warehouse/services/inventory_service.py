# src/warehouse/services/inventory_service.py
from __future__ import annotations

from decimal import Decimal

from warehouse.core.metrics import INVENTORY_OPERATIONS, STORAGE_WRITES
from warehouse.domain.models import (
    CascadeDeleteResult,
    Category,
    CategoryCreate,
    PriceAdjustment,
    Product,
    ProductCreate,
)
from warehouse.domain.ports import (
    CategoryNotFoundError,
    DuplicateCategoryError,
    DuplicateProductError,
    ProductNotFoundError,
    StorageError,
)
from warehouse.repositories.inventory_repository import InventoryRepository


class InventoryService:
    """
    Domain operations on categories and products.

    Every successful mutation is persisted through the repository before the
    method returns. Expected failures are raised as InventoryError subclasses;
    formatting them for the user is left to the caller.
    """

    def __init__(self, repository: InventoryRepository) -> None:
        self._repo = repository

    @property
    def repository(self) -> InventoryRepository:
        return self._repo

    # --- Queries --------------------------------------------------------------

    def find_category_id(self, name: str) -> int | None:
        category = self._repo.find_category_by_name(name)
        return category.id if category else None

    def list_categories(self) -> list[Category]:
        return self._repo.categories

    def list_category_names(self) -> list[str]:
        return sorted(c.name for c in self._repo.categories)

    def list_product_names(self) -> list[str]:
        return sorted(p.name for p in self._repo.products)

    def list_products_in_category(self, category_id: int | None) -> list[Product]:
        category = self._require_category(category_id, "list_products")
        INVENTORY_OPERATIONS.labels(operation="list_products", outcome="ok").inc()
        return self._repo.products_in_category(category.id)

    def find_product_info(self, name: str) -> Product:
        product = self._repo.find_product_by_name(name)
        if product is None:
            INVENTORY_OPERATIONS.labels(operation="find_product", outcome="not_found").inc()
            raise ProductNotFoundError(name)
        INVENTORY_OPERATIONS.labels(operation="find_product", outcome="ok").inc()
        return product

    # --- Mutations ------------------------------------------------------------

    def adjust_category_prices(
        self, category_id: int | None, percent: Decimal | int | str
    ) -> list[PriceAdjustment]:
        category = self._require_category(category_id, "adjust_prices")
        factor = Decimal(str(percent))

        adjustments: list[PriceAdjustment] = []
        for index, product in enumerate(self._repo.products):
            if product.category_id != category.id:
                continue
            # Kein Floor bei 0: negative Preise werden durchgereicht
            new_price = product.price + product.price * factor / Decimal("100")
            self._repo.replace_product_at(index, product.model_copy(update={"price": new_price}))
            adjustments.append(
                PriceAdjustment(
                    product_id=product.id,
                    name=product.name,
                    previous_price=product.price,
                    new_price=new_price,
                )
            )

        self._commit()
        INVENTORY_OPERATIONS.labels(operation="adjust_prices", outcome="ok").inc()
        return adjustments

    def delete_product_by_name(self, name: str) -> Product:
        index = self._repo.index_of_product_by_name(name)
        if index is None:
            INVENTORY_OPERATIONS.labels(operation="delete_product", outcome="not_found").inc()
            raise ProductNotFoundError(name)

        removed = self._repo.remove_product_at(index)
        self._commit()
        INVENTORY_OPERATIONS.labels(operation="delete_product", outcome="ok").inc()
        return removed

    def delete_category_cascade(self, category_id: int | None) -> CascadeDeleteResult:
        index = self._repo.index_of_category(category_id)
        if index is None:
            INVENTORY_OPERATIONS.labels(operation="delete_category", outcome="not_found").inc()
            raise CategoryNotFoundError(category_id)

        category = self._repo.remove_category_at(index)
        removed_products = self._repo.remove_products_in_category(category.id)
        self._commit()
        INVENTORY_OPERATIONS.labels(operation="delete_category", outcome="ok").inc()
        return CascadeDeleteResult(category=category, removed_products=removed_products)

    def add_product(self, payload: ProductCreate) -> Product:
        # Exakter Namensvergleich, anders als bei den Suchen
        duplicate_name = any(p.name == payload.name for p in self._repo.products)
        if duplicate_name or self._repo.find_product_by_id(payload.id) is not None:
            INVENTORY_OPERATIONS.labels(operation="add_product", outcome="duplicate").inc()
            raise DuplicateProductError(payload.id, payload.name)
        self._require_category(payload.category_id, "add_product")

        product = self._repo.insert_product(payload.to_product())
        self._commit()
        INVENTORY_OPERATIONS.labels(operation="add_product", outcome="ok").inc()
        return product

    def add_category(self, payload: CategoryCreate) -> Category:
        if any(c.id == payload.id or c.name == payload.name for c in self._repo.categories):
            INVENTORY_OPERATIONS.labels(operation="add_category", outcome="duplicate").inc()
            raise DuplicateCategoryError(payload.id, payload.name)

        category = self._repo.insert_category(payload.to_category())
        self._commit()
        INVENTORY_OPERATIONS.labels(operation="add_category", outcome="ok").inc()
        return category

    # --- Private --------------------------------------------------------------

    def _require_category(self, category_id: int | None, operation: str) -> Category:
        category = self._repo.find_category_by_id(category_id)
        if category is None:
            INVENTORY_OPERATIONS.labels(operation=operation, outcome="not_found").inc()
            raise CategoryNotFoundError(category_id)
        return category

    def _commit(self) -> None:
        try:
            self._repo.commit()
        except StorageError:
            STORAGE_WRITES.labels(status="error").inc()
            raise
        STORAGE_WRITES.labels(status="ok").inc()
