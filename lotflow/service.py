"""
Inventory Service — The single public interface for all lot operations.

Usage:
    from lotflow import inventory

    inventory.receive_lot(100, 1, 5)
    inventory.receive_lot(100, 2, 3)
    lot = inventory.stage_for_outbound(100)   # lot 1 (oldest received)
    lot = inventory.dispatch_outbound(100)    # lot 1 (last staged)
    report = inventory.build_report()
"""

import threading

from lotflow.conf import lotflow_settings
from lotflow.services.movements import InventoryMovements
from lotflow.services.queries import InventoryQueries
from lotflow.services.state import InventoryState


class Inventory(InventoryMovements, InventoryQueries):
    """
    Owner of every lot in the process.

    Parameter convention: (product_id, ...)

    State is private to the instance and only reachable through the
    operations below; nothing returned shares mutable state with it.

    Movements (lotflow.services.movements):
        receive_lot, stage_for_outbound, dispatch_outbound
    Queries (lotflow.services.queries):
        build_report, lots, product_ids
    """

    def __init__(self, lock_strategy: str | None = None):
        self._state = InventoryState(lock_strategy or lotflow_settings.LOCK_STRATEGY)

    @property
    def lock_strategy(self) -> str:
        return self._state.lock_strategy

    def __repr__(self) -> str:
        return f"<Inventory lock_strategy={self.lock_strategy!r}>"


# ══════════════════════════════════════════════════════════════
# Process-wide instance
# ══════════════════════════════════════════════════════════════


_lock = threading.Lock()
_inventory_instance: Inventory | None = None


def get_inventory() -> Inventory:
    """Get or create the process-wide Inventory."""
    global _inventory_instance

    if _inventory_instance is None:
        with _lock:
            if _inventory_instance is None:  # double-checked
                _inventory_instance = Inventory()

    return _inventory_instance


def reset_inventory() -> None:
    """Drop the process-wide Inventory (for tests)."""
    global _inventory_instance
    with _lock:
        _inventory_instance = None
