"""
Report records returned by Inventory.build_report().
"""

from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone


@dataclass(frozen=True)
class ReportRow:
    """Aggregate of one product's lots in one area."""

    product_id: int
    total_quantity: int
    oldest_received_at: datetime
    lot_count: int


@dataclass(frozen=True)
class InventoryReport:
    """
    Both report sections.

    receiving: ascending product id
    preparation: descending total quantity, ties by ascending product id
    """

    receiving: tuple[ReportRow, ...]
    preparation: tuple[ReportRow, ...]
    generated_at: datetime = field(default_factory=timezone.now)
