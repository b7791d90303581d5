"""
Booklet sequencer: which logical page goes into which cell of which sheet.
"""

from typing import List, Optional, Sequence, Tuple

from .errors import EmptyDocumentError, log
from .geometry import cell_transform, sheet_layout
from .models import (
    BLANK,
    IDENTITY,
    Cell,
    Face,
    FlipDirection,
    Layout,
    LogicalPage,
    PageGeometry,
    ReadingDirection,
    SheetSide,
)
from .padding import padded_count, resolve_page_count


def _two_up_sheet(total: int, sheet: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """Front and back (left, right) of sheet `sheet`, outermost sheet first."""
    front = (total - 1 - 2 * sheet, 2 * sheet)
    back = (2 * sheet + 1, total - 2 - 2 * sheet)
    return front, back


def _four_up_sheet(total: int, sheet: int) -> Tuple[Tuple[int, ...], Tuple[int, ...]]:
    """
    Front and back of a four-up sheet, row-major (TL, TR, BL, BR).

    Each row is a two-up leaf: cut the sheet across, lay the top half on the
    bottom half, and the leaves nest like consecutive two-up sheets.
    """
    base = 4 * sheet
    front = (total - 1 - base, base,
             total - 3 - base, base + 2)
    back = (base + 1, total - 2 - base,
            base + 3, total - 4 - base)
    return front, back


def _mirror_rows(pages: Tuple[int, ...], cols: int) -> Tuple[int, ...]:
    """Swap left and right within every row."""
    rows = [pages[i:i + cols] for i in range(0, len(pages), cols)]
    return tuple(page for row in rows for page in reversed(row))


def booklet_order(
    page_count: int,
    layout: Layout,
    reading_direction: ReadingDirection = ReadingDirection.LEFT_TO_RIGHT,
    target_page_count: Optional[int] = None
) -> List[Tuple[LogicalPage, ...]]:
    """
    Calculate the imposition order for booklet printing.

    Args:
        page_count: Number of real pages in the source document
        layout: two-up or four-up
        reading_direction: left-to-right or right-to-left
        target_page_count: Legacy fixed booklet size to pad up to

    Returns:
        One tuple per sheet side in print order (sheet 0 front, sheet 0 back,
        sheet 1 front, ...). Each tuple lists the side's cells row-major;
        padding cells hold BLANK.

    Raises:
        EmptyDocumentError: If page_count is 0
        ConfigError: If layout or reading_direction is not recognised

    Example:
        >>> booklet_order(8, Layout.TWO_UP)
        [(7, 0), (1, 6), (5, 2), (3, 4)]
    """
    layout = Layout.from_token(layout)
    reading_direction = ReadingDirection.from_token(reading_direction)

    if page_count <= 0:
        raise EmptyDocumentError("Cannot impose a booklet from a document with no pages")

    total = padded_count(resolve_page_count(page_count, target_page_count),
                         layout.signature_size)
    sheet_builder = _two_up_sheet if layout is Layout.TWO_UP else _four_up_sheet

    sides: List[Tuple[LogicalPage, ...]] = []
    for sheet in range(total // layout.signature_size):
        for side in sheet_builder(total, sheet):
            if reading_direction is ReadingDirection.RIGHT_TO_LEFT:
                side = _mirror_rows(side, layout.cols)
            sides.append(tuple(BLANK if index >= page_count else index for index in side))

    return sides


def impose_booklet(
    geometries: Sequence[PageGeometry],
    layout: Layout,
    reading_direction: ReadingDirection = ReadingDirection.LEFT_TO_RIGHT,
    flip_direction: FlipDirection = FlipDirection.SHORT_EDGE,
    paper_size: Optional[str] = None,
    target_page_count: Optional[int] = None
) -> List[SheetSide]:
    """
    Build every sheet side of a booklet, with a placement for each page.

    The first page's geometry sizes the sheet; every page is then fitted
    into its own cell, so mixed page sizes are scaled rather than clipped.

    Args:
        geometries: Geometry of each source page, in document order
        layout: two-up or four-up
        reading_direction: left-to-right or right-to-left
        flip_direction: Edge the duplex printer turns the paper over
        paper_size: Optional PAPER_SIZES key for the sheet
        target_page_count: Legacy fixed booklet size to pad up to

    Returns:
        SheetSide list in print order
    """
    layout = Layout.from_token(layout)
    order = booklet_order(len(geometries), layout, reading_direction, target_page_count)
    sheet = sheet_layout(geometries[0], layout, flip_direction, paper_size)

    sides: List[SheetSide] = []
    for side_index, pages in enumerate(order):
        face = Face.FRONT if side_index % 2 == 0 else Face.BACK
        cells = []
        for position, page in enumerate(pages):
            if page == BLANK:
                cells.append(Cell(BLANK, IDENTITY))
                continue
            row, col = divmod(position, layout.cols)
            cells.append(Cell(page, cell_transform(geometries[page], sheet, row, col, face)))
        sides.append(SheetSide(
            sheet_index=side_index // 2,
            face=face,
            geometry=sheet.geometry,
            cells=tuple(cells),
        ))

    log.debug("Imposed %d page(s) onto %d sheet(s), %s, sheet %.0fx%.0f pt%s",
              len(geometries), len(sides) // 2, layout.value,
              sheet.geometry.width, sheet.geometry.height,
              " (rotated)" if sheet.rotated else "")
    return sides
