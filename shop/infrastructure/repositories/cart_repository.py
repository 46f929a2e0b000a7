import threading

from shop.domain.cart.model import Cart
from shop.domain.customer.model import Customer


class CartRepository:
    """
    Process-wide carts, one per customer.

    A cart is created on first access and kept for the lifetime of the
    repository.
    """

    def __init__(self):
        self._carts: dict[int, Cart] = {}
        self._lock = threading.Lock()

    def get_or_create(self, customer: Customer) -> Cart:
        with self._lock:
            cart = self._carts.get(customer.id)
            if cart is None:
                cart = Cart(customer)
                self._carts[customer.id] = cart
            return cart
