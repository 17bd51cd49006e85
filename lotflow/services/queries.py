"""
Inventory queries — read-only operations.

Nothing here mutates state. Each product is copied under its slot lock,
so a row never mixes lots from before and after a concurrent movement.
"""

from lotflow.models.enums import Area
from lotflow.models.lot import Lot
from lotflow.models.report import InventoryReport, ReportRow


def _row(product_id: int, lots: list[Lot], oldest: Lot) -> ReportRow:
    return ReportRow(
        product_id=product_id,
        total_quantity=sum(lot.quantity for lot in lots),
        oldest_received_at=oldest.received_at,
        lot_count=len(lots),
    )


class InventoryQueries:
    """Read-only inventory query methods. Mixed into Inventory."""

    def build_report(self) -> InventoryReport:
        """
        Aggregate both areas per product.

        Receiving rows:
            total quantity of the queue, receive time of the head lot,
            ordered by ascending product id.
        Preparation rows:
            total quantity of the stack, receive time of the bottom lot,
            ordered by descending total quantity (ties: ascending product id).

        Products with no lots in an area do not appear in that section.
        """
        receiving: list[ReportRow] = []
        preparation: list[ReportRow] = []

        with self._state.hold_all():
            for product_id, slot in self._state.slots():
                with slot.lock:
                    queued = list(slot.receiving)
                    staged = list(slot.preparation)

                if queued:
                    receiving.append(_row(product_id, queued, oldest=queued[0]))
                if staged:
                    # bottom of the stack was staged first
                    preparation.append(_row(product_id, staged, oldest=staged[0]))

        receiving.sort(key=lambda row: row.product_id)
        preparation.sort(key=lambda row: (-row.total_quantity, row.product_id))

        return InventoryReport(
            receiving=tuple(receiving),
            preparation=tuple(preparation),
        )

    def lots(self, product_id: int, area: Area | str) -> tuple[Lot, ...]:
        """
        Lots of one product in one area, in the order they would leave.

        Receiving: oldest first. Preparation: top of the stack first.
        """
        area = Area(area)
        slot = self._state.get(product_id)
        if slot is None:
            return ()

        with slot.lock:
            if area == Area.RECEIVING:
                return tuple(slot.receiving)
            return tuple(reversed(slot.preparation))

    def product_ids(self) -> list[int]:
        """Products holding at least one lot in either area."""
        ids = []
        for product_id, slot in self._state.slots():
            with slot.lock:
                if slot.receiving or slot.preparation:
                    ids.append(product_id)
        return sorted(ids)
