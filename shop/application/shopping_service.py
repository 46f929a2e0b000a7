import logging

from shop.application.locks import ProductLocks
from shop.domain.cart.model import Cart
from shop.domain.customer.model import Customer
from shop.domain.errors import BuyError, InsufficientStockError, ProductNotFoundError
from shop.domain.product.model import Product
from shop.infrastructure.repositories.cart_repository import CartRepository
from shop.infrastructure.repositories.inventory_store import InventoryStore

logger = logging.getLogger(__name__)


class ShoppingService:
    """
    Shopping service - carts and checkout against the inventory.

    Checkout flow:
    1. Validate every cart item against current stock (no changes yet)
    2. Decrease stock and save each product
    3. Remove the bought items from the cart

    The cart and its products are locked from reading the items to step 3,
    so concurrent checkouts can't oversell or buy one cart twice.
    """

    def __init__(
        self,
        store: InventoryStore,
        carts: CartRepository | None = None,
        locks: ProductLocks | None = None,
    ):
        self.store = store
        self.carts = carts or CartRepository()
        self.locks = locks or ProductLocks()

    def get_all_products(self) -> list[Product]:
        return self.store.find_all()

    def get_product_by_name(self, name: str) -> Product | None:
        return self.store.find_by_name(name)

    def get_cart(self, customer: Customer) -> Cart:
        """Get customer's cart, the same one on every call"""
        return self.carts.get_or_create(customer)

    def add_to_cart(self, customer: Customer, product_name: str, quantity: int) -> Cart:
        """Look product up by name and add it to customer's cart"""
        product = self.store.find_by_name(product_name)
        if product is None:
            raise ProductNotFoundError(product_name)

        cart = self.get_cart(customer)
        cart.add(product, quantity)
        return cart

    def buy(self, cart: Cart | None) -> bool:
        """
        Buy everything in the cart.

        Returns:
            True if bought, False if there was nothing to buy

        Raises:
            BuyError: if any product doesn't have enough stock. Nothing is
                changed or saved in that case. The InsufficientStockError
                of the product is the cause.
        """
        if cart is None:
            logger.debug("No cart given, nothing to buy")
            return False

        with cart.lock:
            items = cart.get_products()
            if not items:
                logger.debug(f"Cart of customer {cart.owner.id} is empty, nothing to buy")
                return False

            with self.locks.hold(items):
                self._validate(items)
                self._commit(items)
            cart.remove_items(items)

        logger.info(
            f"Customer {cart.owner.id} bought {sum(items.values())} items "
            f"of {len(items)} products"
        )
        return True

    def _validate(self, items: dict[Product, int]) -> None:
        """Check all items before touching any stock"""
        for product, quantity in items.items():
            if quantity > product.count:
                logger.warning(
                    f"Insufficient stock of '{product.name}': "
                    f"requested {quantity}, available {product.count}"
                )
                error = InsufficientStockError(
                    product.name,
                    requested=quantity,
                    available=product.count,
                )
                raise BuyError(product.name) from error

    def _commit(self, items: dict[Product, int]) -> None:
        for product, quantity in items.items():
            product.subtract_count(quantity)
            self.store.save(product)
