import threading

from shop.domain.customer.model import Customer
from shop.domain.product.model import Product


class Cart:
    """
    Cart - products a customer wants to buy, with requested quantities.

    Business Rules:
    1. Quantities are always positive
    2. Adding the same product again increases its quantity
    3. Stock is not checked here, only when buying

    `lock` guards the items. Checkout holds it from reading the items until
    the bought ones are removed, so adds wait for a running checkout.
    """

    def __init__(self, owner: Customer):
        self.owner = owner
        self.items: dict[Product, int] = {}
        self.lock = threading.RLock()

    def add(self, product: Product, quantity: int) -> None:
        """Add product to cart"""
        if quantity <= 0:
            raise ValueError("Quantity must be positive")

        with self.lock:
            if product in self.items:
                self.items[product] += quantity
            else:
                self.items[product] = quantity

    def get_products(self) -> dict[Product, int]:
        """Get copy of product -> quantity mapping"""
        with self.lock:
            return self.items.copy()

    def clear(self) -> None:
        """Remove all items from cart"""
        with self.lock:
            self.items.clear()

    def remove_items(self, items: dict[Product, int]) -> None:
        """
        Remove bought quantities.

        Whatever was added on top of them stays in the cart.
        """
        with self.lock:
            for product, quantity in items.items():
                left = self.items.get(product, 0) - quantity
                if left > 0:
                    self.items[product] = left
                else:
                    self.items.pop(product, None)

    # === Helpers ===

    @property
    def is_empty(self) -> bool:
        with self.lock:
            return not self.items

    @property
    def item_count(self) -> int:
        """Get total number of items in cart"""
        with self.lock:
            return sum(self.items.values())
