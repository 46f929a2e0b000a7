from shop.domain.errors import InsufficientStockError


class Product:
    """
    Product - inventory record with available stock.

    Business Rules:
    1. Stock can't be negative
    2. Stock is changed only through subtract_count()
    3. Products are identified by name
    """

    def __init__(self, name: str, count: int):
        if count < 0:
            raise ValueError("Stock cannot be negative")

        self.name = name
        self._count = count

    @property
    def count(self) -> int:
        """Current stock"""
        return self._count

    def subtract_count(self, quantity: int) -> None:
        """
        Decrease stock by quantity.

        Stock is left untouched when there is not enough of it.
        """
        if quantity <= 0:
            raise ValueError("Quantity must be positive")

        if quantity > self._count:
            raise InsufficientStockError(
                self.name,
                requested=quantity,
                available=self._count,
            )

        self._count -= quantity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Product):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"Product(name={self.name!r}, count={self._count})"
