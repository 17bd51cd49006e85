"""
Lotflow configuration.

Usage in settings.py:
    LOTFLOW = {
        "LOCK_STRATEGY": "product",
        "VALIDATE_QUANTITY": False,
        "VALIDATE_UNIQUE_LOTS": False,
        "TIMESTAMP_FORMAT": "%Y-%m-%d %H:%M:%S",
    }
"""

from dataclasses import dataclass
from typing import Any

from django.conf import settings


LOCK_STRATEGIES = ('product', 'global')


@dataclass
class LotflowSettings:
    """Lotflow configuration settings."""

    # "product" = one lock per product id, "global" = one lock for everything
    LOCK_STRATEGY: str = 'product'

    # Reject negative quantities on receive (off = accept anything)
    VALIDATE_QUANTITY: bool = False

    # Reject a lot number already held for the same product
    VALIDATE_UNIQUE_LOTS: bool = False

    # strftime format used by the console output
    TIMESTAMP_FORMAT: str = '%Y-%m-%d %H:%M:%S'


def get_lotflow_settings() -> LotflowSettings:
    """Load settings from Django settings."""
    user_settings: dict[str, Any] = getattr(settings, "LOTFLOW", {})
    return LotflowSettings(**{
        k: v for k, v in user_settings.items()
        if k in LotflowSettings.__dataclass_fields__
    })


class _LazySettings:
    """Lazy proxy that re-reads settings on every attribute access."""

    def __getattr__(self, name):
        return getattr(get_lotflow_settings(), name)


lotflow_settings = _LazySettings()
