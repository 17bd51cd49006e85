"""Django app configuration for Lotflow."""

from django.apps import AppConfig
from django.utils.translation import gettext_lazy as _


class LotflowConfig(AppConfig):
    """Configuration for Lotflow app."""

    name = "lotflow"
    verbose_name = _("Lot Flow")
