from unittest.mock import Mock

import pytest

from shop.application.shopping_service import ShoppingService
from shop.domain.cart.model import Cart
from shop.domain.customer.model import Customer
from shop.infrastructure.database import Database
from shop.infrastructure.repositories.inventory_store import InventoryStore


@pytest.fixture
def customer():
    return Customer(1, "79876543210")


@pytest.fixture
def cart(customer):
    return Cart(customer)


@pytest.fixture
def store_mock():
    return Mock(spec=InventoryStore)


@pytest.fixture
def shopping_service(store_mock):
    return ShoppingService(store_mock)


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.drop_tables()
    db.close()
