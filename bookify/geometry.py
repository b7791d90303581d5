"""
Geometry transforms: fitting pages into sheet cells and turning whole pages.

All functions are pure and return Transform values; nothing here knows about
PDF objects.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from .config import PAPER_SIZES
from .errors import ConfigError
from .models import (
    IDENTITY,
    Face,
    FlipDirection,
    Layout,
    PageGeometry,
    Transform,
)


@dataclass(frozen=True)
class SheetLayout:
    """
    Destination sheet for a booklet.

    ``upright`` is the sheet as the reader sees it (cells side by side);
    ``geometry`` is the media box actually written, which is ``upright``
    turned by 90 degrees when ``rotated`` is set.
    """
    layout: Layout
    upright: PageGeometry
    geometry: PageGeometry
    rotated: bool

    @property
    def cell_size(self) -> Tuple[float, float]:
        return (self.upright.width / self.layout.cols,
                self.upright.height / self.layout.rows)


def fit_into_cell(
    source: PageGeometry,
    cell_width: float,
    cell_height: float,
    origin_x: float = 0.0,
    origin_y: float = 0.0
) -> Transform:
    """
    Scale a page to fit a cell, keeping its aspect ratio, and centre it.

    Args:
        source: Geometry of the page being placed
        cell_width: Cell width in points
        cell_height: Cell height in points
        origin_x: Lower-left x of the cell on the sheet
        origin_y: Lower-left y of the cell on the sheet

    Returns:
        Transform placing the page inside the cell
    """
    if source.width <= 0 or source.height <= 0:
        raise ValueError(f"Page dimensions must be positive, got {source}")

    scale = min(cell_width / source.width, cell_height / source.height)
    scaled_w = source.width * scale
    scaled_h = source.height * scale

    return Transform(
        scale=scale,
        translate_x=origin_x + (cell_width - scaled_w) / 2,
        translate_y=origin_y + (cell_height - scaled_h) / 2,
    )


def rotate_in_place(source: PageGeometry, degrees: int) -> Transform:
    """
    Turn a whole page by a multiple of 90 degrees.

    Rotating about the origin moves the content out of the media box, so the
    translation brings it back: (width, height) for 180 degrees. For 90 and
    270 degrees the content lands in the rotated box (height x width).
    """
    degrees %= 360
    if degrees == 0:
        return IDENTITY
    if degrees == 90:
        return Transform(rotate_degrees=90, translate_x=source.height)
    if degrees == 180:
        return Transform(rotate_degrees=180, translate_x=source.width,
                         translate_y=source.height)
    if degrees == 270:
        return Transform(rotate_degrees=270, translate_y=source.width)
    raise ValueError(f"Rotation must be a multiple of 90 degrees, got {degrees}")


def sheet_layout(
    reference: PageGeometry,
    layout: Layout,
    flip_direction: FlipDirection = FlipDirection.SHORT_EDGE,
    paper_size: Optional[str] = None
) -> SheetLayout:
    """
    Work out the sheet a booklet is printed on.

    Without a paper size the sheet is exactly cols x rows reference pages
    (two-up: 2w x h, four-up: 2w x 2h), so pages keep their size. With a
    paper size the paper is oriented like that sheet and pages scale down.

    Booklet leaves turn about the upright sheet's vertical edges. When the
    printer turns the paper about the other pair of edges the sheet is
    written rotated by 90 degrees instead.
    """
    layout = Layout.from_token(layout)
    flip_direction = FlipDirection.from_token(flip_direction)

    upright = PageGeometry(reference.width * layout.cols,
                           reference.height * layout.rows)

    if paper_size is not None:
        if paper_size not in PAPER_SIZES:
            raise ConfigError(f"Unknown paper size '{paper_size}'")
        long_side, short_side = sorted(PAPER_SIZES[paper_size], reverse=True)
        if upright.width >= upright.height:
            upright = PageGeometry(long_side, short_side)
        else:
            upright = PageGeometry(short_side, long_side)

    vertical_edge_is_long = upright.height > upright.width
    flips_on_long_edge = flip_direction is FlipDirection.LONG_EDGE
    rotated = (upright.width != upright.height
               and vertical_edge_is_long != flips_on_long_edge)

    return SheetLayout(
        layout=layout,
        upright=upright,
        geometry=upright.rotated() if rotated else upright,
        rotated=rotated,
    )


def sheet_rotation(sheet: SheetLayout, face: Face) -> Transform:
    """
    Map upright sheet coordinates onto the written media box.

    Fronts turn 90 degrees and backs 270, so the back side comes out upright
    after the printer turns the paper.
    """
    if not sheet.rotated:
        return IDENTITY
    if face is Face.FRONT:
        return Transform(rotate_degrees=90, translate_x=sheet.upright.height)
    return Transform(rotate_degrees=270, translate_y=sheet.upright.width)


def cell_origin(sheet: SheetLayout, row: int, col: int) -> Tuple[float, float]:
    """Lower-left corner of a cell in upright coordinates; row 0 is the top row."""
    cell_w, cell_h = sheet.cell_size
    return col * cell_w, (sheet.layout.rows - 1 - row) * cell_h


def cell_transform(
    source: PageGeometry,
    sheet: SheetLayout,
    row: int,
    col: int,
    face: Face
) -> Transform:
    """Transform placing a page in cell (row, col) of one side of the sheet."""
    cell_w, cell_h = sheet.cell_size
    x, y = cell_origin(sheet, row, col)
    return fit_into_cell(source, cell_w, cell_h, x, y).then(sheet_rotation(sheet, face))
