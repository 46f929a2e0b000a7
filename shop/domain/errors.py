class ShopError(Exception):
    """Base class for shop business errors"""
    pass


class InsufficientStockError(ShopError):
    """Raised when a product has fewer items in stock than requested"""

    def __init__(self, product_name: str, requested: int, available: int):
        self.product_name = product_name
        self.requested = requested
        self.available = available
        super().__init__(
            f"Insufficient stock of '{product_name}': "
            f"requested {requested}, available {available}"
        )


class BuyError(ShopError):
    """Raised when a cart cannot be bought because of missing stock"""

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"insufficient stock of product '{product_name}'")


class ProductNotFoundError(ShopError):
    """Raised when product doesn't exist in inventory"""

    def __init__(self, product_name: str):
        self.product_name = product_name
        super().__init__(f"Product '{product_name}' not found")
