"""
Lot — a batch of one product received at one time.

Lots are immutable. The receiving timestamp is captured when the lot is
built and never changes afterwards, whichever area the lot moves to.

Usage:
    lot = Lot(lot_number=4711, quantity=12)
    lot.received_at  # aware datetime, now
"""

from dataclasses import dataclass, field
from datetime import datetime

from django.utils import timezone


@dataclass(frozen=True, eq=False)
class Lot:
    """
    Immutable lot record.

    Equality is identity: two lots with the same number and quantity are
    still two lots. Lot numbers are caller assigned and not deduplicated.
    """

    lot_number: int
    quantity: int
    received_at: datetime = field(default_factory=timezone.now)

    def __str__(self) -> str:
        return f"Lot {self.lot_number} ({self.quantity})"
