"""
Console formatting for lots and inventory reports.

The core hands out plain records; everything human-readable lives here.
"""

from datetime import datetime

from django.utils import timezone
from django.utils.translation import gettext as _

from lotflow.conf import lotflow_settings
from lotflow.models.lot import Lot
from lotflow.models.report import InventoryReport, ReportRow

ROW_FORMAT = "{:<12}: {:<12}: {:<20}"


def format_timestamp(value: datetime) -> str:
    """Local time, second precision (TIMESTAMP_FORMAT)."""
    if timezone.is_aware(value):
        value = timezone.localtime(value)
    return value.strftime(lotflow_settings.TIMESTAMP_FORMAT)


def format_lot(lot: Lot) -> str:
    return _("lot %(lot)s, quantity %(qty)s, received %(at)s") % {
        'lot': lot.lot_number,
        'qty': lot.quantity,
        'at': format_timestamp(lot.received_at),
    }


def _format_section(title: str, rows: tuple[ReportRow, ...]) -> list[str]:
    lines = [
        f"--- {title} ---",
        ROW_FORMAT.format(_("Product ID"), _("Quantity"), _("Oldest received")),
    ]
    for row in rows:
        lines.append(ROW_FORMAT.format(
            row.product_id,
            row.total_quantity,
            format_timestamp(row.oldest_received_at),
        ))
    return lines


def format_report(report: InventoryReport) -> str:
    """
    Both sections as fixed-width text.

    Quantities are summed lot quantities, not lot counts.
    """
    lines = _format_section(_("Receiving"), report.receiving)
    lines += _format_section(_("Preparation"), report.preparation)
    return "\n".join(lines)
