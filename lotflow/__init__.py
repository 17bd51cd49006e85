"""
Lotflow — per-product lot tracking through receiving (FIFO) and
outbound preparation (LIFO).

Usage:
    from lotflow import inventory, Lot

    inventory.receive_lot(100, 1, 5)
    inventory.stage_for_outbound(100)   # Lot 1 (5)
    inventory.dispatch_outbound(100)    # Lot 1 (5)
    inventory.build_report()
"""


def __getattr__(name):
    """Lazy import to avoid touching settings during app loading."""
    if name == 'inventory':
        from lotflow.service import get_inventory
        return get_inventory()
    elif name == 'Inventory':
        from lotflow.service import Inventory
        return Inventory
    elif name == 'LotflowError':
        from lotflow.exceptions import LotflowError
        return LotflowError
    elif name == 'Lot':
        from lotflow.models.lot import Lot
        return Lot
    elif name == 'Area':
        from lotflow.models.enums import Area
        return Area
    elif name == 'ReportRow':
        from lotflow.models.report import ReportRow
        return ReportRow
    elif name == 'InventoryReport':
        from lotflow.models.report import InventoryReport
        return InventoryReport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    'inventory',
    'Inventory',
    'LotflowError',
    'Lot',
    'Area',
    'ReportRow',
    'InventoryReport',
]

__version__ = '0.1.0'
