"""
Page assembler: render computed sheet sides into a pypdf document.

The assembler has no ordering logic of its own. It walks the sides it is
given, creates a blank page of each side's media box and merges every
non-blank cell's source page onto it with the cell's transform.
"""

from typing import Sequence, Tuple

from pypdf import PageObject, PdfWriter, Transformation

from .document import SourceDocument
from .errors import log
from .models import SheetSide, Transform


# (cos, sin) of the quarter turns, kept exact so matrices carry no float noise
_QUARTER_TURNS = {
    0: (1, 0),
    90: (0, 1),
    180: (-1, 0),
    270: (0, -1),
}


def to_transformation(
    transform: Transform,
    mediabox_origin: Tuple[float, float] = (0.0, 0.0)
) -> Transformation:
    """
    Convert a Transform into a pypdf content transformation matrix.

    The source media box is first shifted so its lower-left corner sits at the
    origin, which is what the Transform maths assumes.
    """
    cos, sin = _QUARTER_TURNS[transform.rotate_degrees]
    s = transform.scale
    a, b, c, d = s * cos, s * sin, -s * sin, s * cos
    ox, oy = mediabox_origin
    e = transform.translate_x - a * ox - c * oy
    f = transform.translate_y - b * ox - d * oy
    return Transformation(ctm=(a, b, c, d, e, f))


def compose_side(source: SourceDocument, side: SheetSide) -> PageObject:
    """
    Compose one output page.

    Args:
        source: Loaded source document
        side: Sheet side with its media box and cells

    Returns:
        New page of the side's geometry with every real page merged on it
    """
    sheet = PageObject.create_blank_page(width=side.geometry.width, height=side.geometry.height)

    for cell in side.cells:
        if cell.is_blank:
            continue
        ctm = to_transformation(cell.transform, source.origin(cell.page))
        sheet.merge_transformed_page(source.pages[cell.page], ctm)

    return sheet


def assemble(source: SourceDocument, sides: Sequence[SheetSide]) -> PdfWriter:
    """Build the output document, one page per side, in the given order."""
    writer = PdfWriter()
    for side in sides:
        writer.add_page(compose_side(source, side))

    log.info("Assembled %d output page(s) from %d source page(s)",
             len(sides), source.page_count)
    return writer
