"""
Inventory services — modular organization of inventory operations.

Re-exports the building blocks of lotflow.service.Inventory:
    from lotflow.services import InventoryQueries, InventoryMovements, InventoryState
"""

from lotflow.services.movements import InventoryMovements
from lotflow.services.queries import InventoryQueries
from lotflow.services.state import InventoryState, ProductSlot

__all__ = [
    'InventoryQueries',
    'InventoryMovements',
    'InventoryState',
    'ProductSlot',
]
