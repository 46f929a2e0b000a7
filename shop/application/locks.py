import threading
from collections.abc import Iterable, Iterator
from contextlib import ExitStack, contextmanager

from shop.domain.product.model import Product


class ProductLocks:
    """One lock per product name, created on first use"""

    def __init__(self):
        self._locks: dict[str, threading.Lock] = {}
        self._guard = threading.Lock()

    def _lock_for(self, name: str) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = threading.Lock()
                self._locks[name] = lock
            return lock

    @contextmanager
    def hold(self, products: Iterable[Product]) -> Iterator[None]:
        """
        Hold locks of all given products.

        Locks are taken in name order so two callers with overlapping
        products can't deadlock.
        """
        names = sorted({product.name for product in products})
        with ExitStack() as stack:
            for name in names:
                stack.enter_context(self._lock_for(name))
            yield
