from typing import Protocol

from shop.domain.product.model import Product


class InventoryStore(Protocol):
    """Persistence boundary for products"""

    def save(self, product: Product) -> None:
        ...

    def find_all(self) -> list[Product]:
        ...

    def find_by_name(self, name: str) -> Product | None:
        ...


class InMemoryInventoryStore:
    """
    In-memory inventory store.

    Keeps product instances as they are, so a product read from the store
    and put in a cart is the same object the store saves later.
    """

    def __init__(self, products: list[Product] | None = None):
        self._products: dict[str, Product] = {}
        self.saved: list[Product] = []  # every save() call, in order
        for product in products or []:
            self._products[product.name] = product

    def save(self, product: Product) -> None:
        self._products[product.name] = product
        self.saved.append(product)

    def find_all(self) -> list[Product]:
        return sorted(self._products.values(), key=lambda p: p.name)

    def find_by_name(self, name: str) -> Product | None:
        return self._products.get(name)
