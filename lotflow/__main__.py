"""
Standalone entry point.

Usage:
    python -m lotflow
    lotflow                 # console script

Runs the inventory_menu command. Outside a Django project a minimal
settings object is configured first (no database).
"""

import os
import sys

import django
from django.conf import settings
from django.core.management import call_command
from django.core.management.base import CommandError

DEFAULT_SETTINGS = {
    'INSTALLED_APPS': ['lotflow'],
    'USE_TZ': True,
    'TIME_ZONE': 'UTC',
    'LOGGING': {
        'version': 1,
        'disable_existing_loggers': False,
        'handlers': {
            'console': {'class': 'logging.StreamHandler', 'stream': 'ext://sys.stderr'},
        },
        'loggers': {
            'lotflow': {'handlers': ['console'], 'level': 'WARNING'},
        },
    },
}


def setup():
    """Configure Django unless a settings module or configuration exists."""
    if not settings.configured and not os.environ.get('DJANGO_SETTINGS_MODULE'):
        settings.configure(**DEFAULT_SETTINGS)
    django.setup()


def main():
    setup()
    try:
        call_command('inventory_menu')
    except CommandError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
