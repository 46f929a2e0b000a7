import logging
import threading

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from shop.domain.product.model import Product
from shop.infrastructure.models import ProductRecord

logger = logging.getLogger(__name__)


class SqlInventoryStore:
    """
    Inventory store backed by SQLAlchemy.

    Loaded products are kept in an identity map, so every lookup of a given
    name returns the same Product instance. All stock writes must go through
    this store for the map to stay in sync with the database.
    """

    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory
        self._identity_map: dict[str, Product] = {}
        self._lock = threading.Lock()

    def save(self, product: Product) -> None:
        """
        Insert or update product row and commit.

        A product already loaded by this store can only be saved through
        its loaded instance, carts hold that one.
        """
        with self._lock:
            loaded = self._identity_map.get(product.name)
            if loaded is not None and loaded is not product:
                raise ValueError(
                    f"Product '{product.name}' is already loaded, save the loaded instance"
                )

        with self.session_factory() as session:
            session.merge(ProductRecord(name=product.name, count=product.count))
            session.commit()

        with self._lock:
            self._identity_map[product.name] = product

        logger.debug(f"Saved product '{product.name}' with stock {product.count}")

    def find_all(self) -> list[Product]:
        with self.session_factory() as session:
            stmt = select(ProductRecord).order_by(ProductRecord.name)
            rows = session.scalars(stmt).all()
            return [self._to_domain(row) for row in rows]

    def find_by_name(self, name: str) -> Product | None:
        with self.session_factory() as session:
            row = session.get(ProductRecord, name)
            if row is None:
                return None
            return self._to_domain(row)

    def _to_domain(self, row: ProductRecord) -> Product:
        with self._lock:
            product = self._identity_map.get(row.name)
            if product is None:
                product = Product(name=row.name, count=row.count)
                self._identity_map[row.name] = product
            return product
