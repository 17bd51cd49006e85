"""
Enums for Lotflow models.
"""

from django.db import models
from django.utils.translation import gettext_lazy as _


class Area(models.TextChoices):
    """
    Stage of the warehouse a lot currently sits in.

    RECEIVING:   Lots waiting to be staged. Oldest arrival leaves first (FIFO).
    PREPARATION: Lots staged for outbound. Most recently staged leaves first (LIFO).
    """
    RECEIVING = 'receiving', _('Receiving')
    PREPARATION = 'preparation', _('Preparation')


class MenuOption(models.IntegerChoices):
    """Console menu entries, keyed by the number the operator types."""
    RECEIVE = 1, _('Register inbound lot')
    STAGE = 2, _('Stage lot for outbound')
    DISPATCH = 3, _('Dispatch outbound lot')
    REPORT = 4, _('Show inventory')
    EXIT = 5, _('Exit')

    @classmethod
    def from_code(cls, code: int) -> 'MenuOption | None':
        """Option for a typed number, or None when nothing matches."""
        try:
            return cls(code)
        except ValueError:
            return None
