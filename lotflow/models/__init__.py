"""
Lotflow Models.

In-memory records for lot tracking (no database tables):
- Lot: Immutable batch of one product
- Area: Receiving (FIFO) or Preparation (LIFO)
- MenuOption: Console menu entries
- ReportRow / InventoryReport: Aggregated inventory view
"""

from lotflow.models.enums import Area, MenuOption
from lotflow.models.lot import Lot
from lotflow.models.report import InventoryReport, ReportRow

__all__ = [
    'Area',
    'MenuOption',
    'Lot',
    'ReportRow',
    'InventoryReport',
]
