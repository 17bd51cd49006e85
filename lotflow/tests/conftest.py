"""
Pytest fixtures for Lotflow tests.
"""

from datetime import datetime, timezone as dt_timezone

import pytest

from lotflow.service import Inventory, reset_inventory


@pytest.fixture(autouse=True)
def fresh_process_inventory():
    """Every test starts without a process-wide Inventory."""
    reset_inventory()
    yield
    reset_inventory()


@pytest.fixture
def inventory():
    """Empty inventory with one lock per product."""
    return Inventory(lock_strategy='product')


@pytest.fixture
def global_inventory():
    """Empty inventory serialized behind a single lock."""
    return Inventory(lock_strategy='global')


@pytest.fixture(params=['product', 'global'])
def any_inventory(request):
    """Empty inventory, once per lock strategy."""
    return Inventory(lock_strategy=request.param)


@pytest.fixture
def stocked(inventory):
    """
    Inventory with two products in receiving.

    100: lot 1 (5), lot 2 (3)
    200: lot 7 (10)
    """
    inventory.receive_lot(100, 1, 5)
    inventory.receive_lot(100, 2, 3)
    inventory.receive_lot(200, 7, 10)
    return inventory


@pytest.fixture
def noon():
    """Fixed aware timestamp."""
    return datetime(2026, 3, 14, 12, 30, 45, 123456, tzinfo=dt_timezone.utc)
