"""
Data models for bookify.

This module defines the enums, immutable value types and option objects that
flow between the padding policy, the sequencer, the splitter, the geometry
helpers and the assembler.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple, Union

from .config import PAPER_SIZES
from .errors import ConfigError


# Marker for a padding page; real pages are 0-based indices
BLANK = "blank"

LogicalPage = Union[int, str]


class TokenEnum(Enum):
    """Enum whose members are parsed from command line / config tokens."""

    @classmethod
    def from_token(cls, value):
        """
        Return the member for a token such as ``"two-up"``.

        Members are passed through unchanged. Anything that is not a known
        token raises ConfigError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            token = value.strip().lower().replace('_', '-')
            for member in cls:
                if member.value == token:
                    return member
        choices = ", ".join(member.value for member in cls)
        raise ConfigError(f"Invalid {cls.__name__} '{value}'. Must be one of: {choices}")


class Layout(TokenEnum):
    """Booklet pages placed on each side of a physical sheet."""
    TWO_UP = "two-up"    # 2 pages per side, 4 per sheet (A5 booklet on A4)
    FOUR_UP = "four-up"  # 4 pages per side, 8 per sheet (A6 booklet on A4)

    @property
    def rows(self) -> int:
        return 1 if self is Layout.TWO_UP else 2

    @property
    def cols(self) -> int:
        return 2

    @property
    def cells_per_side(self) -> int:
        return self.rows * self.cols

    @property
    def signature_size(self) -> int:
        """Logical pages carried by one sheet, front and back."""
        return 2 * self.cells_per_side


class ReadingDirection(TokenEnum):
    """Reading direction of the finished booklet."""
    LEFT_TO_RIGHT = "left-to-right"
    RIGHT_TO_LEFT = "right-to-left"


class FlipDirection(TokenEnum):
    """Sheet edge the duplex printer turns the paper over."""
    SHORT_EDGE = "short-edge"
    LONG_EDGE = "long-edge"


class FlipType(TokenEnum):
    """180° compensation for the odd (first letter) and even (second letter) sets."""
    RR = "rr"  # rotate both
    NN = "nn"  # rotate neither
    RN = "rn"  # rotate odd pages only
    NR = "nr"  # rotate even pages only

    @property
    def rotates_odd(self) -> bool:
        return self in (FlipType.RR, FlipType.RN)

    @property
    def rotates_even(self) -> bool:
        return self in (FlipType.RR, FlipType.NR)


class OddEven(TokenEnum):
    """Which half of a manual double-sided job to output."""
    ODD = "odd"
    EVEN = "even"


class Face(Enum):
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class PageGeometry:
    """Media box dimensions of a page, in points."""
    width: float
    height: float

    def rotated(self) -> 'PageGeometry':
        """Dimensions after turning the page by 90 degrees."""
        return PageGeometry(self.height, self.width)


def _rotate_point(x: float, y: float, degrees: int) -> Tuple[float, float]:
    # Exact counter-clockwise rotation about the origin for quarter turns
    if degrees == 90:
        return -y, x
    if degrees == 180:
        return -x, -y
    if degrees == 270:
        return y, -x
    return x, y


@dataclass(frozen=True)
class Transform:
    """
    Placement of a source page's content on a destination page.

    A content point ``p`` ends up at ``scale * R(rotate_degrees) * p + t``:
    rotate counter-clockwise about the origin, scale uniformly, then translate.
    """
    scale: float = 1.0
    rotate_degrees: int = 0
    translate_x: float = 0.0
    translate_y: float = 0.0

    def __post_init__(self):
        if self.rotate_degrees not in (0, 90, 180, 270):
            raise ValueError(
                f"rotate_degrees must be 0, 90, 180 or 270, got {self.rotate_degrees}"
            )
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    def apply(self, x: float, y: float) -> Tuple[float, float]:
        """Map a point of the source page into destination coordinates."""
        rx, ry = _rotate_point(x, y, self.rotate_degrees)
        return (self.scale * rx + self.translate_x,
                self.scale * ry + self.translate_y)

    def then(self, other: 'Transform') -> 'Transform':
        """Return the transform applying self first, then other."""
        tx, ty = other.apply(self.translate_x, self.translate_y)
        return Transform(
            scale=self.scale * other.scale,
            rotate_degrees=(self.rotate_degrees + other.rotate_degrees) % 360,
            translate_x=tx,
            translate_y=ty,
        )

    def is_identity(self) -> bool:
        return self == IDENTITY


IDENTITY = Transform()


@dataclass(frozen=True)
class Cell:
    """One logical page (or BLANK) and where its content goes."""
    page: LogicalPage
    transform: Transform = IDENTITY

    @property
    def is_blank(self) -> bool:
        return self.page == BLANK


@dataclass(frozen=True)
class SheetSide:
    """
    One output page: a physical side of a sheet.

    Booklet sides hold ``layout.cells_per_side`` cells in row-major order
    (left to right, top to bottom); double-sided pages hold a single cell.
    """
    sheet_index: int
    face: Face
    geometry: PageGeometry
    cells: Tuple[Cell, ...]

    @property
    def pages(self) -> Tuple[LogicalPage, ...]:
        return tuple(cell.page for cell in self.cells)

    @property
    def is_blank(self) -> bool:
        return all(cell.is_blank for cell in self.cells)


@dataclass
class BookletOptions:
    """
    Configuration for booklet imposition.

    String tokens are accepted for every enum field and normalised on
    construction, so options read from argparse or JSON can be passed as-is.
    """
    layout: Layout = Layout.FOUR_UP
    reading_direction: ReadingDirection = ReadingDirection.LEFT_TO_RIGHT
    flip_direction: FlipDirection = FlipDirection.SHORT_EDGE
    paper_size: Optional[str] = None          # Key of PAPER_SIZES, None = fit to pages
    target_page_count: Optional[int] = None   # Legacy: pad up to this many pages

    def __post_init__(self):
        """Normalise tokens and validate options."""
        self.layout = Layout.from_token(self.layout)
        self.reading_direction = ReadingDirection.from_token(self.reading_direction)
        self.flip_direction = FlipDirection.from_token(self.flip_direction)

        if self.paper_size is not None:
            self.paper_size = self.paper_size.strip().lower()
            if self.paper_size not in PAPER_SIZES:
                raise ConfigError(
                    f"Unknown paper size '{self.paper_size}'. "
                    f"Must be one of: {', '.join(PAPER_SIZES)}"
                )

        if self.target_page_count is not None and self.target_page_count < 1:
            raise ConfigError("target_page_count must be >= 1")


@dataclass
class DoubleSidedOptions:
    """Configuration for manual double-sided splitting."""
    flip_type: FlipType = FlipType.RR
    odd_even: OddEven = OddEven.ODD

    def __post_init__(self):
        self.flip_type = FlipType.from_token(self.flip_type)
        self.odd_even = OddEven.from_token(self.odd_even)


@dataclass
class ValidationResult:
    """
    Result of validation checks.

    Contains validation status, errors, and warnings that can be
    displayed to the user.
    """
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def add_error(self, message: str):
        """Add an error message and mark as invalid."""
        self.errors.append(message)
        self.is_valid = False

    def add_warning(self, message: str):
        """Add a warning message."""
        self.warnings.append(message)

    def has_issues(self) -> bool:
        """Check if there are any errors or warnings."""
        return len(self.errors) > 0 or len(self.warnings) > 0

    def get_summary(self) -> str:
        """Get a human-readable summary of validation results."""
        if self.is_valid and not self.warnings:
            return "Validation passed with no issues"

        parts = []
        if self.errors:
            parts.append(f"{len(self.errors)} error(s)")
        if self.warnings:
            parts.append(f"{len(self.warnings)} warning(s)")

        return ", ".join(parts)

    def __repr__(self):
        return f"ValidationResult(is_valid={self.is_valid}, {self.get_summary()})"
