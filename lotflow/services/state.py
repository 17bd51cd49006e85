"""
Inventory state — per-product slots and the locks guarding them.

Each product id owns one ProductSlot holding its receiving queue and its
preparation stack. A slot's lock guards both sequences, so moving a lot
from one to the other is a single atomic step.

Locking strategies:
    product: every slot has its own lock; products never block each other
    global:  every slot shares one lock; the whole inventory is serialized
"""

import threading
from collections import deque
from contextlib import nullcontext
from dataclasses import dataclass, field
from typing import Any

from lotflow.conf import LOCK_STRATEGIES
from lotflow.exceptions import LotflowError
from lotflow.models.lot import Lot


@dataclass
class ProductSlot:
    """Lots of one product. Only touch the sequences while holding ``lock``."""

    lock: Any
    # head (left) = oldest arrival
    receiving: deque[Lot] = field(default_factory=deque)
    # last item = most recently staged
    preparation: list[Lot] = field(default_factory=list)


class InventoryState:
    """Registry of product slots."""

    def __init__(self, lock_strategy: str = 'product'):
        if lock_strategy not in LOCK_STRATEGIES:
            raise LotflowError('INVALID_SETTING', setting='LOCK_STRATEGY', value=lock_strategy)
        self.lock_strategy = lock_strategy
        self._registry_lock = threading.Lock()
        self._global_lock = threading.RLock() if lock_strategy == 'global' else None
        self._slots: dict[int, ProductSlot] = {}

    def _new_lock(self):
        if self._global_lock is not None:
            return self._global_lock
        return threading.Lock()

    def get(self, product_id: int) -> ProductSlot | None:
        """Existing slot for product_id, without creating one."""
        with self._registry_lock:
            return self._slots.get(product_id)

    def get_or_create(self, product_id: int) -> ProductSlot:
        """Slot for product_id, created on first use."""
        with self._registry_lock:
            slot = self._slots.get(product_id)
            if slot is None:
                slot = ProductSlot(lock=self._new_lock())
                self._slots[product_id] = slot
            return slot

    def slots(self) -> list[tuple[int, ProductSlot]]:
        """Snapshot of (product_id, slot) pairs, safe to iterate."""
        with self._registry_lock:
            return list(self._slots.items())

    def hold_all(self):
        """
        Context holding every slot at once under the global strategy.

        A no-op under the product strategy, where each slot is read under
        its own lock instead. The global lock is reentrant, so slot locks
        may still be taken inside it.
        """
        if self._global_lock is None:
            return nullcontext()
        return self._global_lock
