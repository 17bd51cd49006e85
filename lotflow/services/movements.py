"""
Inventory movements — state-changing operations (receive, stage, dispatch).

Every method runs under the lock of the product slot it touches, so calls
for one product are totally ordered and calls for different products do
not wait on each other (under the "product" lock strategy).
"""

import logging

from lotflow.conf import lotflow_settings
from lotflow.exceptions import LotflowError
from lotflow.models.enums import Area
from lotflow.models.lot import Lot

logger = logging.getLogger('lotflow')


class InventoryMovements:
    """State-changing lot movement methods. Mixed into Inventory."""

    def receive_lot(self, product_id: int, lot_number: int, quantity: int) -> None:
        """
        Register an inbound lot.

        Appends a new Lot to the tail of the product's receiving queue.
        Duplicate lot numbers and any quantity are accepted unless
        VALIDATE_UNIQUE_LOTS / VALIDATE_QUANTITY are enabled.

        Raises:
            LotflowError('INVALID_QUANTITY'): quantity < 0 with VALIDATE_QUANTITY
            LotflowError('DUPLICATE_LOT'): lot number already held with VALIDATE_UNIQUE_LOTS
        """
        if lotflow_settings.VALIDATE_QUANTITY and quantity < 0:
            logger.warning(
                "inventory.rejected",
                extra={"product_id": product_id, "lot_number": lot_number, "quantity": quantity},
            )
            raise LotflowError('INVALID_QUANTITY', product_id=product_id, quantity=quantity)

        validate_unique = lotflow_settings.VALIDATE_UNIQUE_LOTS
        slot = self._state.get_or_create(product_id)

        with slot.lock:
            if validate_unique and any(
                held.lot_number == lot_number
                for held in (*slot.receiving, *slot.preparation)
            ):
                logger.warning(
                    "inventory.rejected",
                    extra={"product_id": product_id, "lot_number": lot_number},
                )
                raise LotflowError('DUPLICATE_LOT', product_id=product_id, lot_number=lot_number)

            lot = Lot(lot_number=lot_number, quantity=quantity)
            slot.receiving.append(lot)

        logger.info(
            "inventory.receive",
            extra={
                "product_id": product_id,
                "lot_number": lot_number,
                "qty": quantity,
                "area": Area.RECEIVING.value,
            },
        )

    def stage_for_outbound(self, product_id: int) -> Lot | None:
        """
        Move the oldest received lot of a product to its preparation stack.

        Returns:
            The staged Lot, or None when the product has nothing in
            receiving (nothing is changed in that case).
        """
        slot = self._state.get(product_id)
        lot = None
        if slot is not None:
            # FIFO -> LIFO handover, under one lock
            with slot.lock:
                if slot.receiving:
                    lot = slot.receiving.popleft()
                    slot.preparation.append(lot)

        if lot is None:
            logger.debug("inventory.stage.empty", extra={"product_id": product_id})
            return None

        logger.info(
            "inventory.stage",
            extra={
                "product_id": product_id,
                "lot_number": lot.lot_number,
                "qty": lot.quantity,
                "area": Area.PREPARATION.value,
            },
        )
        return lot

    def dispatch_outbound(self, product_id: int) -> Lot | None:
        """
        Ship the most recently staged lot of a product.

        The lot leaves the inventory for good; nothing keeps a reference.

        Returns:
            The dispatched Lot, or None when nothing is staged for the
            product (nothing is changed in that case).
        """
        slot = self._state.get(product_id)
        lot = None
        if slot is not None:
            with slot.lock:
                if slot.preparation:
                    lot = slot.preparation.pop()

        if lot is None:
            logger.debug("inventory.dispatch.empty", extra={"product_id": product_id})
            return None

        logger.info(
            "inventory.dispatch",
            extra={
                "product_id": product_id,
                "lot_number": lot.lot_number,
                "qty": lot.quantity,
            },
        )
        return lot
