# src/warehouse/domain/models.py
from __future__ import annotations

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_serializer

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _decimal_to_number(value: Decimal) -> int | float:
    # JSON-Zahl statt String, ganzzahlige Preise ohne ".0"
    if value == value.to_integral_value():
        return int(value)
    return float(value)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------


class Category(BaseModel):
    id: int = Field(alias="id_categoria")
    name: str = Field(alias="nome_categoria")

    # Unbekannte Schlüssel bleiben erhalten und werden mitgeschrieben
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")


class Product(BaseModel):
    """
    Ein Produkt im Lager.
    Der Preis wird beim Laden nicht auf >= 0 geprüft: Preisanpassungen mit
    negativem Prozentsatz dürfen ihn unter null drücken.
    """

    id: int = Field(alias="id_prodotto")
    category_id: int = Field(alias="id_categoria")
    name: str = Field(alias="nome_prodotto")
    price: Decimal = Field(alias="prezzo")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="allow")

    @field_serializer("price", when_used="json")
    def serialize_price(self, value: Decimal) -> int | float:
        return _decimal_to_number(value)


class Credential(BaseModel):
    username: str
    password: str

    model_config = ConfigDict(frozen=True)


# ---------------------------------------------------------------------------
# Aggregate: InventoryDocument
# ---------------------------------------------------------------------------


class InventoryDocument(BaseModel):
    """Das komplette Lagerdokument, wie es auf der Platte liegt."""

    categories: list[Category] = Field(alias="Categoria")
    products: list[Product] = Field(alias="Prodotto")

    model_config = ConfigDict(populate_by_name=True, extra="allow")


class CredentialDocument(BaseModel):
    # Einträge einzeln als Credential validiert, fehlerhafte werden übersprungen
    users: list[Any]


# ---------------------------------------------------------------------------
# Request/Result Schemas
# ---------------------------------------------------------------------------


class CategoryCreate(BaseModel):
    id: int = Field(alias="id_categoria")
    name: str = Field(alias="nome_categoria", min_length=1)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_category(self) -> Category:
        return Category(id=self.id, name=self.name)


class ProductCreate(BaseModel):
    id: int = Field(alias="id_prodotto")
    category_id: int = Field(alias="id_categoria")
    name: str = Field(alias="nome_prodotto", min_length=1)
    price: Decimal = Field(alias="prezzo", ge=0)

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_product(self) -> Product:
        return Product(id=self.id, category_id=self.category_id, name=self.name, price=self.price)


class PriceAdjustment(BaseModel):
    product_id: int
    name: str
    previous_price: Decimal
    new_price: Decimal


class CascadeDeleteResult(BaseModel):
    category: Category
    removed_products: list[Product]
