# src/warehouse/cli.py
"""Interactive command line front end for the warehouse inventory.

All prompting and printing happens here. The services below only return
results or raise errors; this module decides what the user gets to see.
"""

from __future__ import annotations

import argparse
import getpass
import logging
import sys
from collections.abc import Callable, Sequence
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pydantic import ValidationError

from warehouse.core.config import LOG_LEVELS, Settings, get_settings
from warehouse.dependencies import get_auth_service, load_inventory
from warehouse.domain.models import CategoryCreate, Product, ProductCreate
from warehouse.domain.ports import DocumentParseError, InventoryError, StorageError
from warehouse.services.auth_service import AuthService
from warehouse.services.inventory_service import InventoryService

logger = logging.getLogger(__name__)

MENU: list[tuple[str, str]] = [
    ("1", "Print the products of a category"),
    ("2", "Change the prices of a category"),
    ("3", "Search product information"),
    ("4", "Delete a product"),
    ("5", "Delete a category and all its products"),
    ("6", "Add a new product"),
    ("7", "Add a new category"),
    ("0", "Logout"),
]

LOGOUT = "logout"
QUIT = "quit"


def _format_product(product: Product, with_category: bool = False) -> str:
    lines = [f"Product id: {product.id}"]
    if with_category:
        lines.append(f"Category id: {product.category_id}")
    lines.append(f"Product name: {product.name}")
    lines.append(f"Price: {product.price}")
    return "\n".join(lines)


class InventoryCli:
    def __init__(
        self,
        service: InventoryService,
        auth: AuthService,
        input_fn: Callable[[str], str] | None = None,
        password_fn: Callable[[str], str] | None = None,
        echo: Callable[[str], None] | None = None,
    ) -> None:
        self._service = service
        self._auth = auth
        self._input = input_fn or input
        self._password = password_fn or getpass.getpass
        self._echo = echo or print

    def run(self) -> int:
        """Login/session loop. Returns the process exit code."""
        try:
            while True:
                self.login()
                if self.session() != LOGOUT:
                    return 0
        except EOFError:
            self._echo("")
            return 0
        except (StorageError, DocumentParseError) as e:
            logger.error("Cannot read credentials: %s", e)
            self._echo(f"Error: {e}")
            return 1

    def login(self) -> None:
        while True:
            username = self._input("Username: ")
            password = self._password("Password: ")
            if self._auth.authenticate(username, password):
                self._echo("Authentication successful\n")
                return
            logger.warning("Failed login for user '%s'", username)
            self._echo("\nWrong username or password\n")

    def session(self) -> str:
        handlers: dict[str, Callable[[], None]] = {
            "1": self._print_products,
            "2": self._change_prices,
            "3": self._search_product,
            "4": self._delete_product,
            "5": self._delete_category,
            "6": self._add_product,
            "7": self._add_category,
        }
        while True:
            self._echo("\nWhich operation do you want to run?")
            for key, label in MENU:
                self._echo(f"  {key}) {label}")
            choice = self._input("> ").strip()

            if choice == "0":
                return LOGOUT
            handler = handlers.get(choice)
            if handler is None:
                self._echo("Invalid operation")
                continue

            try:
                handler()
            except InventoryError as e:
                self._echo(str(e))
            except StorageError as e:
                logger.error("Inventory could not be saved: %s", e)
                self._echo(f"Changes were not saved: {e}")

            if self._input("Do you want to continue? (y/N) ").strip().lower() != "y":
                return QUIT

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _print_products(self) -> None:
        name = self._choose(self._service.list_category_names(), "Select the category:")
        products = self._service.list_products_in_category(self._service.find_category_id(name))
        if not products:
            self._echo("No products in this category")
        for product in products:
            self._echo("\n" + _format_product(product))

    def _change_prices(self) -> None:
        name = self._choose(self._service.list_category_names(), "Select the category:")
        raw = self._input("Enter the percentage: ").strip()
        try:
            percent = Decimal(raw)
        except InvalidOperation:
            percent = Decimal("NaN")
        if not percent.is_finite():
            self._echo(f"'{raw}' is not a valid percentage")
            return

        adjustments = self._service.adjust_category_prices(
            self._service.find_category_id(name), percent
        )
        for adj in adjustments:
            self._echo(f"\nChanging the price of: {adj.name} initial price: {adj.previous_price}")
            self._echo(f"Modified price: {adj.new_price}")

    def _search_product(self) -> None:
        name = self._choose(self._service.list_product_names(), "Select the product:")
        product = self._service.find_product_info(name)
        self._echo("\n" + _format_product(product, with_category=True))

    def _delete_product(self) -> None:
        name = self._choose(self._service.list_product_names(), "Select the product to delete:")
        removed = self._service.delete_product_by_name(name)
        self._echo(f"Deleted product '{removed.name}'")

    def _delete_category(self) -> None:
        name = self._choose(self._service.list_category_names(), "Select the category to delete:")
        result = self._service.delete_category_cascade(self._service.find_category_id(name))
        self._echo(
            f"Deleted category '{result.category.name}' "
            f"and {len(result.removed_products)} product(s)"
        )

    def _add_product(self) -> None:
        try:
            payload = ProductCreate(
                id=self._input("Product id: ").strip(),
                category_id=self._input("Category id: ").strip(),
                name=self._input("Product name: ").strip(),
                price=self._input("Product price: ").strip(),
            )
        except ValidationError as e:
            self._echo(f"Invalid product data: {e.error_count()} error(s)")
            return
        product = self._service.add_product(payload)
        self._echo(f"Product '{product.name}' added")

    def _add_category(self) -> None:
        try:
            payload = CategoryCreate(
                id=self._input("Category id: ").strip(),
                name=self._input("Category name: ").strip(),
            )
        except ValidationError as e:
            self._echo(f"Invalid category data: {e.error_count()} error(s)")
            return
        category = self._service.add_category(payload)
        self._echo(f"Category '{category.name}' added")

    def _choose(self, options: Sequence[str], prompt: str) -> str:
        """Shows numbered options; accepts either the number or the name itself."""
        self._echo(prompt)
        for i, option in enumerate(options, start=1):
            self._echo(f"  {i}) {option}")
        answer = self._input("> ").strip()
        if answer.isdigit() and 1 <= int(answer) <= len(options):
            return options[int(answer) - 1]
        return answer


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="warehouse", description="Warehouse inventory manager")
    parser.add_argument("--inventory", type=Path, help="Path of the inventory JSON document")
    parser.add_argument("--credentials", type=Path, help="Path of the credentials JSON document")
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, help="Logging level")
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    settings = base or get_settings()
    overrides: dict[str, object] = {}
    if args.inventory is not None:
        overrides["inventory_file"] = args.inventory
    if args.credentials is not None:
        overrides["credentials_file"] = args.credentials
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        parser.error(f"invalid configuration: {e}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        service = load_inventory(settings)
    except (StorageError, DocumentParseError) as e:
        logger.error("Cannot load inventory: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return InventoryCli(service, get_auth_service(settings)).run()


if __name__ == "__main__":
    sys.exit(main())
