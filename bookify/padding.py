"""
Padding policy: how many logical pages a booklet needs.
"""

from typing import Optional

from .errors import ConfigError


def padded_count(page_count: int, signature_size: int) -> int:
    """
    Round page_count up to a whole number of signatures.

    Args:
        page_count: Number of real pages (0 yields 0)
        signature_size: Logical pages per sheet (4 for two-up, 8 for four-up)

    Returns:
        Smallest multiple of signature_size that is >= page_count

    Examples:
        padded_count(5, 4) -> 8
        padded_count(16, 8) -> 16
        padded_count(17, 8) -> 24
    """
    if signature_size < 1:
        raise ConfigError(f"signature_size must be >= 1, got {signature_size}")
    if page_count < 0:
        raise ValueError(f"page_count must be >= 0, got {page_count}")
    return -(-page_count // signature_size) * signature_size


def blanks_needed(page_count: int, signature_size: int) -> int:
    """Number of blank pages padding appends."""
    return padded_count(page_count, signature_size) - page_count


def resolve_page_count(page_count: int, target_page_count: Optional[int] = None) -> int:
    """
    Page count the sequencer works on for the legacy fixed-size booklet.

    A document shorter than the target is extended with blanks up to the
    target; a longer one is never truncated and keeps its own count.
    """
    if target_page_count is None:
        return page_count
    return max(page_count, target_page_count)
