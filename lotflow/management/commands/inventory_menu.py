"""
Interactive inventory menu.

Usage:
    python manage.py inventory_menu

Every choice maps to one Inventory operation. Input is read line by line;
anything that is not a number in range is rejected and asked again.
"""

import logging
import sys

from django.core.management.base import BaseCommand, CommandError
from django.utils.translation import gettext as _

from lotflow.formatting import format_lot, format_report
from lotflow.models.enums import MenuOption
from lotflow.service import get_inventory

logger = logging.getLogger('lotflow')

INT64 = (-2 ** 63, 2 ** 63 - 1)
INT32 = (-2 ** 31, 2 ** 31 - 1)


class Command(BaseCommand):
    """Console front end for the process-wide Inventory."""

    help = 'Interactive menu to receive, stage, dispatch and list lots'

    # call_command(..., stdin=StringIO(...)) in tests
    stealth_options = ('stdin',)

    def handle(self, *args, **options):
        self.stdin = options.get('stdin') or sys.stdin
        self.inventory = get_inventory()

        try:
            self.run()
        except EOFError:
            self.stdout.write('')
            self.stdout.write(_('End of input, exiting.'))
        except Exception as exc:
            logger.exception("inventory.menu.failed")
            raise CommandError(_('Unexpected error: %s') % exc) from exc

    def run(self):
        while True:
            self.show_menu()
            option = MenuOption.from_code(self.read_int(_('Choice > '), INT32))

            if option == MenuOption.RECEIVE:
                self.handle_receive()
            elif option == MenuOption.STAGE:
                self.handle_stage()
            elif option == MenuOption.DISPATCH:
                self.handle_dispatch()
            elif option == MenuOption.REPORT:
                self.stdout.write(format_report(self.inventory.build_report()))
            elif option == MenuOption.EXIT:
                self.stdout.write(_('Exiting.'))
                return
            else:
                self.stdout.write(_('Invalid choice.'))

    def show_menu(self):
        self.stdout.write('')
        self.stdout.write(_('--- Inventory menu ---'))
        for option in MenuOption:
            self.stdout.write(f'{option.value}. {option.label}')

    def handle_receive(self):
        product_id = self.read_int(_('Product ID > '), INT64)
        lot_number = self.read_int(_('Lot number > '), INT64)
        quantity = self.read_int(_('Quantity > '), INT32)
        self.inventory.receive_lot(product_id, lot_number, quantity)
        self.stdout.write(self.style.SUCCESS(_('Received.')))

    def handle_stage(self):
        product_id = self.read_int(_('Product ID > '), INT64)
        lot = self.inventory.stage_for_outbound(product_id)
        if lot is None:
            self.stdout.write(_('No lot in receiving for this product.'))
            return
        self.stdout.write(self.style.SUCCESS(_('Staged: %s') % format_lot(lot)))

    def handle_dispatch(self):
        product_id = self.read_int(_('Product ID > '), INT64)
        lot = self.inventory.dispatch_outbound(product_id)
        if lot is None:
            self.stdout.write(_('No lot staged for this product.'))
            return
        self.stdout.write(self.style.SUCCESS(_('Dispatched: %s') % format_lot(lot)))

    def read_int(self, prompt: str, bounds: tuple[int, int]) -> int:
        """Prompt until a number within bounds is typed. EOFError on end of input."""
        low, high = bounds
        while True:
            self.stdout.write(prompt, ending='')
            self.stdout.flush()
            line = self.stdin.readline()
            if not line:
                raise EOFError
            try:
                value = int(line.strip())
            except ValueError:
                self.stdout.write(_('Please enter a number.'))
                continue
            if not low <= value <= high:
                self.stdout.write(_('Please enter a number.'))
                continue
            return value
