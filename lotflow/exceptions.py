"""
Exceptions for Lotflow.

All errors are LotflowError with a structured code for programmatic handling.
Absence of a lot is never an error: stage/dispatch return None instead.
"""

from typing import Any


class LotflowError(Exception):
    """
    Structured exception for inventory operations.

    Usage:
        try:
            inventory.receive_lot(100, 1, -5)
        except LotflowError as e:
            if e.code == 'INVALID_QUANTITY':
                print(f"Rejected quantity {e.data['quantity']}")

    Attributes:
        code: Error code for programmatic handling
        message: Human-readable message
        data: Additional context data
    """

    _default_messages = {
        'INVALID_QUANTITY': 'Invalid quantity (must not be negative)',
        'DUPLICATE_LOT': 'Lot number already held for this product',
        'INVALID_SETTING': 'Invalid Lotflow setting',
    }

    def __init__(self, code: str, message: str | None = None, **data: Any):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict[str, Any]:
        """Serialize to dict (useful for APIs)."""
        return {
            'code': self.code,
            'message': self.message,
            'data': dict(self.data),
        }
