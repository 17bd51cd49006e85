"""
Tests for the inventory_menu management command and console formatting.
"""

from io import StringIO
from unittest import mock
from zoneinfo import ZoneInfo

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.utils import timezone

from lotflow.formatting import format_lot, format_report, format_timestamp
from lotflow.models import InventoryReport, Lot, MenuOption, ReportRow
from lotflow.service import get_inventory


def run_menu(*lines):
    """Run the menu with the given input lines, return stdout."""
    out = StringIO()
    stdin = StringIO(''.join(f'{line}\n' for line in lines))
    call_command('inventory_menu', stdin=stdin, stdout=out, no_color=True)
    return out.getvalue()


class TestMenuOption:

    def test_from_code(self):
        assert MenuOption.from_code(1) == MenuOption.RECEIVE
        assert MenuOption.from_code(5) == MenuOption.EXIT

    def test_from_unknown_code(self):
        assert MenuOption.from_code(0) is None
        assert MenuOption.from_code(6) is None


class TestInventoryMenu:

    def test_exit(self):
        """Choosing exit ends the session."""
        output = run_menu(5)

        assert '--- Inventory menu ---' in output
        assert 'Exiting.' in output

    def test_receive_registers_lot(self):
        """Receive feeds the process-wide inventory."""
        run_menu(1, 100, 1, 5, 5)

        lots = get_inventory().lots(100, 'receiving')
        assert [(lot.lot_number, lot.quantity) for lot in lots] == [(1, 5)]

    def test_stage_and_dispatch(self):
        """Stage and dispatch print the moved lot."""
        output = run_menu(1, 100, 1, 5, 1, 100, 2, 3, 2, 100, 2, 100, 3, 100, 5)

        assert 'Staged: lot 1, quantity 5' in output
        assert 'Staged: lot 2, quantity 3' in output
        assert 'Dispatched: lot 2, quantity 3' in output
        assert [lot.lot_number for lot in get_inventory().lots(100, 'preparation')] == [1]

    def test_stage_unknown_product(self):
        output = run_menu(2, 999, 5)

        assert 'No lot in receiving for this product.' in output

    def test_dispatch_unknown_product(self):
        output = run_menu(3, 999, 5)

        assert 'No lot staged for this product.' in output

    def test_report(self):
        """Report prints both sections with summed quantities."""
        output = run_menu(1, 100, 1, 5, 1, 100, 2, 3, 4, 5)

        assert '--- Receiving ---' in output
        assert '--- Preparation ---' in output
        assert '100         : 8           :' in output

    def test_invalid_choice(self):
        output = run_menu(9, 5)

        assert 'Invalid choice.' in output

    def test_non_numeric_input_reprompts(self):
        """Garbage is rejected and asked again."""
        output = run_menu('abc', 1, 'x', 100, 1, '', 5, 5)

        assert output.count('Please enter a number.') == 3
        assert len(get_inventory().lots(100, 'receiving')) == 1

    def test_out_of_range_input_reprompts(self):
        """Quantities beyond 32 bits are rejected."""
        output = run_menu(1, 100, 1, 2 ** 31, 7, 5)

        assert 'Please enter a number.' in output
        assert get_inventory().lots(100, 'receiving')[0].quantity == 7

    def test_end_of_input(self):
        """Running out of input ends the session cleanly."""
        output = run_menu(1, 100)

        assert 'End of input, exiting.' in output

    def test_unexpected_error(self):
        """Unexpected failures surface as CommandError."""
        with mock.patch('lotflow.service.Inventory.build_report', side_effect=RuntimeError('boom')):
            with pytest.raises(CommandError, match='Unexpected error: boom'):
                run_menu(4)


class TestFormatting:

    def test_timestamp_second_precision(self, noon):
        assert format_timestamp(noon) == '2026-03-14 12:30:45'

    def test_timestamp_format_setting(self, noon, settings):
        settings.LOTFLOW = {'TIMESTAMP_FORMAT': '%d/%m/%Y %H:%M'}

        assert format_timestamp(noon) == '14/03/2026 12:30'

    def test_timestamp_local_time(self, noon):
        with timezone.override(ZoneInfo('Asia/Tokyo')):
            assert format_timestamp(noon) == '2026-03-14 21:30:45'

    def test_format_lot(self, noon):
        lot = Lot(lot_number=42, quantity=7, received_at=noon)

        assert format_lot(lot) == 'lot 42, quantity 7, received 2026-03-14 12:30:45'

    def test_format_report(self, noon):
        report = InventoryReport(
            receiving=(ReportRow(100, 8, noon, 2),),
            preparation=(ReportRow(200, 12, noon, 3), ReportRow(100, 5, noon, 1)),
        )

        lines = format_report(report).splitlines()

        assert lines[0] == '--- Receiving ---'
        assert lines[1].startswith('Product ID')
        assert lines[2] == '100         : 8           : 2026-03-14 12:30:45 '
        assert lines[3] == '--- Preparation ---'
        assert lines[5].startswith('200         : 12')
        assert lines[6].startswith('100         : 5 ')
