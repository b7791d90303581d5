"""
Manual double-sided splitting.

Printing odd pages, turning the stack over and printing even pages on the
back only needs the two halves of the document; the flip type adds a 180°
turn to either half for printers that feed the stack back upside down.
"""

from typing import List, Sequence

from .errors import EmptyDocumentError, log
from .geometry import rotate_in_place
from .models import (
    IDENTITY,
    Cell,
    Face,
    FlipType,
    OddEven,
    PageGeometry,
    SheetSide,
    Transform,
)


def rotates(flip_type: FlipType, odd_even: OddEven) -> bool:
    """Whether pages of the selected half are turned by 180 degrees."""
    flip_type = FlipType.from_token(flip_type)
    odd_even = OddEven.from_token(odd_even)
    if odd_even is OddEven.ODD:
        return flip_type.rotates_odd
    return flip_type.rotates_even


def split_order(page_count: int, flip_type: FlipType, odd_even: OddEven) -> List[Cell]:
    """
    Pages of one half of a manual double-sided job, in document order.

    The odd half holds human page numbers 1, 3, 5... (0-based indices
    0, 2, 4...); the even half holds the rest. The flip type only decides the
    rotation, never the order.

    Raises:
        EmptyDocumentError: If page_count is 0
        ConfigError: If flip_type or odd_even is not recognised
    """
    turn = rotates(flip_type, odd_even)
    odd_even = OddEven.from_token(odd_even)

    if page_count <= 0:
        raise EmptyDocumentError("Cannot split a document with no pages")

    start = 0 if odd_even is OddEven.ODD else 1
    transform = Transform(rotate_degrees=180) if turn else IDENTITY
    return [Cell(index, transform) for index in range(start, page_count, 2)]


def split_double_sided(
    geometries: Sequence[PageGeometry],
    flip_type: FlipType,
    odd_even: OddEven
) -> List[SheetSide]:
    """
    Output pages for one half of a manual double-sided job.

    Each output page keeps its source page's media box; rotated pages get the
    translation that keeps the turned content inside that box.
    """
    cells = split_order(len(geometries), flip_type, odd_even)
    face = Face.FRONT if OddEven.from_token(odd_even) is OddEven.ODD else Face.BACK

    sides = []
    for position, cell in enumerate(cells):
        geometry = geometries[cell.page]
        transform = rotate_in_place(geometry, cell.transform.rotate_degrees)
        sides.append(SheetSide(
            sheet_index=position,
            face=face,
            geometry=geometry,
            cells=(Cell(cell.page, transform),),
        ))

    log.debug("Selected %d of %d page(s) for the %s half",
              len(sides), len(geometries), OddEven.from_token(odd_even).value)
    return sides
