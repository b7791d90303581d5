"""
Pre-flight validators for imposition jobs.

These validators run before any page is assembled. Errors stop the job;
warnings are reported to the user but the job goes ahead.
"""

from .config import MAX_COMFORTABLE_SHEETS
from .models import BookletOptions, ValidationResult
from .padding import padded_count, resolve_page_count


class ImpositionValidator:
    """Validates a page count against booklet or double-sided options."""

    @staticmethod
    def validate_booklet(page_count: int, options: BookletOptions) -> ValidationResult:
        """
        Validate a booklet job.

        Args:
            page_count: Number of pages in the source document
            options: Booklet options (already normalised)

        Returns:
            ValidationResult with any errors or warnings

        Example:
            >>> result = ImpositionValidator.validate_booklet(6, BookletOptions(layout="two-up"))
            >>> result.warnings
            ['2 blank page(s) will be added to fill 2 sheet(s)']
        """
        result = ValidationResult(is_valid=True)

        if page_count <= 0:
            result.add_error("Document has no pages")
            return result

        target = options.target_page_count
        if target is not None and target < page_count:
            result.add_warning(
                f"Document has {page_count} pages, more than the target of {target}; "
                f"the target is ignored"
            )

        signature = options.layout.signature_size
        counted = resolve_page_count(page_count, target)
        total = padded_count(counted, signature)
        sheets = total // signature
        blanks = total - page_count

        if blanks:
            result.add_warning(f"{blanks} blank page(s) will be added to fill {sheets} sheet(s)")

        if sheets > MAX_COMFORTABLE_SHEETS:
            result.add_warning(
                f"Booklet needs {sheets} sheets, which may be too thick to fold cleanly"
            )

        return result

    @staticmethod
    def validate_double_sided(page_count: int) -> ValidationResult:
        """
        Validate a manual double-sided job.

        Args:
            page_count: Number of pages in the source document

        Returns:
            ValidationResult with any errors or warnings
        """
        result = ValidationResult(is_valid=True)

        if page_count <= 0:
            result.add_error("Document has no pages")
            return result

        if page_count % 2 == 1:
            result.add_warning(
                f"Document has an odd number of pages ({page_count}); "
                f"the last sheet has no back page"
            )

        return result
