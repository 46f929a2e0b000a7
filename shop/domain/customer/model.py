class Customer:
    """Customer identity - only used to key a cart"""

    def __init__(self, id: int, phone: str | None = None):
        self.id = id
        self.phone = phone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Customer):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        return f"Customer(id={self.id!r}, phone={self.phone!r})"
