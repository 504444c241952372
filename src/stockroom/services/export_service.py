"""PDF export of an inventory collection.

Renders the full cached collection (no search, filter or pagination applied)
ordered by category, sector and name. Layout is a single table per document:

    Stockroom - Materials
    Generated 2026-10-19 14:05 - 87 items, 6 low stock

    Category | Sector | Name | Quantity | Reorder point | Status

Low-stock rows are shaded. Beverage exports omit the sector column.
"""

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, Union

from fpdf import FPDF

from stockroom.models.inventory_item import Collection, InventoryItem
from stockroom.services.filter_service import CANONICAL_SORT, sort_items
from stockroom.services.logging_utils import get_service_logger, log_operation
from stockroom.utils.constants import APP_NAME, STATUS_LABELS
from stockroom.utils.datetime_utils import format_local, utc_now

logger = get_service_logger(__name__)

# Column title and width in mm (A4 portrait leaves 190mm between margins)
_MATERIAL_COLUMNS: List[Tuple[str, float]] = [
    ("Category", 34),
    ("Sector", 30),
    ("Name", 62),
    ("Quantity", 20),
    ("Reorder point", 24),
    ("Status", 20),
]
_BEVERAGE_COLUMNS: List[Tuple[str, float]] = [
    ("Category", 44),
    ("Name", 82),
    ("Quantity", 20),
    ("Reorder point", 24),
    ("Status", 20),
]

_HEADER_FILL = (220, 220, 220)
_LOW_STOCK_FILL = (253, 236, 234)
_ROW_HEIGHT = 7


def _latin1(text) -> str:
    """Core PDF fonts only cover latin-1; replace anything else."""
    return str(text).encode("latin-1", "replace").decode("latin-1")


def _fit(pdf: FPDF, text: str, width: float) -> str:
    """Truncate text with '...' so it fits a cell of the given width."""
    available = width - 2
    if pdf.get_string_width(text) <= available:
        return text
    while text and pdf.get_string_width(text + "...") > available:
        text = text[:-1]
    return text + "..."


def _row_values(collection: Collection, item: InventoryItem) -> List[str]:
    values = [item.category]
    if collection.has_sector:
        values.append(item.sector)
    values.extend(
        [
            item.name,
            str(item.current_quantity),
            str(item.reorder_point),
            STATUS_LABELS[item.status.value],
        ]
    )
    return values


def default_export_filename(collection: Collection) -> str:
    """File name for an export, e.g. 'stockroom-materials-20261019-1405.pdf'."""
    stamp = format_local(utc_now(), "%Y%m%d-%H%M")
    return f"{APP_NAME.lower()}-{collection.value}-{stamp}.pdf"


def export_inventory_pdf(
    collection: Collection,
    items: Sequence[InventoryItem],
    path: Optional[Union[str, Path]] = None,
) -> bytes:
    """
    Render a collection as a PDF table.

    Args:
        collection: Collection being exported (decides the columns and title)
        items: Every cached item of the collection
        path: Optional file path; when given the document is also written there

    Returns:
        The PDF document as bytes

    Raises:
        OSError: If the file cannot be written
    """
    rows = sort_items(items, CANONICAL_SORT)
    columns = _MATERIAL_COLUMNS if collection.has_sector else _BEVERAGE_COLUMNS
    low_count = sum(1 for item in rows if item.is_low_stock)

    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=True, margin=15)
    pdf.add_page()

    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, _latin1(f"{APP_NAME} - {collection.label}"), align="C")
    pdf.ln()
    pdf.set_font("Helvetica", "", 10)
    summary = (
        f"Generated {format_local(utc_now())} - "
        f"{len(rows)} items, {low_count} low stock"
    )
    pdf.cell(0, 8, _latin1(summary), align="C")
    pdf.ln(12)

    def header():
        pdf.set_font("Helvetica", "B", 10)
        pdf.set_fill_color(*_HEADER_FILL)
        for title, width in columns:
            pdf.cell(width, 8, title, border=1, fill=True, align="C")
        pdf.ln()
        pdf.set_font("Helvetica", "", 9)

    header()
    for item in rows:
        if pdf.will_page_break(_ROW_HEIGHT):
            pdf.add_page()
            header()

        low = item.is_low_stock
        if low:
            pdf.set_fill_color(*_LOW_STOCK_FILL)
        for (title, width), value in zip(columns, _row_values(collection, item)):
            align = "R" if title in ("Quantity", "Reorder point") else "L"
            text = _fit(pdf, _latin1(value), width)
            pdf.cell(width, _ROW_HEIGHT, text, border=1, fill=low, align=align)
        pdf.ln()

    if not rows:
        pdf.set_font("Helvetica", "I", 10)
        pdf.cell(0, 10, "No items registered.", align="C")
        pdf.ln()

    document = bytes(pdf.output())

    if path is not None:
        Path(path).write_bytes(document)

    log_operation(
        logger,
        operation="export_pdf",
        outcome="success",
        collection=collection.value,
        item_count=len(rows),
        low_stock_count=low_count,
        path=str(path) if path is not None else None,
    )
    return document
