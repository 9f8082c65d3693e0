"""Pytest fixtures for the in-memory retail store."""

from decimal import Decimal

import pytest

from retail_lite.inventory import InventoryStore
from retail_lite.models import Customer, Product
from retail_lite.orders import OrderWorkflow


@pytest.fixture
def inventory() -> InventoryStore:
    inventory = InventoryStore()

    inventory.add_product(Product(1, "T-Shirt", "Clothing", Decimal("19.99"), 10, frozenset({"S", "M", "L"})))
    inventory.add_product(Product(2, "Running Shoes", "Shoes", Decimal("100.00"), 5, frozenset({"42", "43"})))
    inventory.add_product(Product(3, "Hat", "Accessories", Decimal("14.99"), 10, frozenset({"One Size"})))
    inventory.add_product(Product(4, "Scarf", None, Decimal("25.00"), 0))  # Out of stock

    return inventory


@pytest.fixture
def workflow(inventory) -> OrderWorkflow:
    return OrderWorkflow(inventory)


@pytest.fixture
def customer() -> Customer:
    customer = Customer("Alice", "alice@example.com")
    customer.id = 101
    return customer


@pytest.fixture
def vip_customer() -> Customer:
    customer = Customer("Bob", "bob@example.com", is_vip=True)
    customer.id = 102
    return customer
