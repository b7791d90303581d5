"""
Imposition Service - High-level booklet and double-sided operations.

This service coordinates validation, document loading, the pure page-order
computation, assembly and the atomic write.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from pypdf import PdfWriter
from pypdf.errors import PyPdfError

from ..assembler import assemble
from ..config import TEMP_PREFIX_BOOKLET, TEMP_PREFIX_DOUBLE_SIDED
from ..document import (
    SourceDocument,
    default_output_path,
    load_document,
    temporary_output_path,
    write_document,
)
from ..errors import EmptyDocumentError, InvalidDocumentError, log
from ..models import BookletOptions, DoubleSidedOptions, SheetSide, ValidationResult
from ..sequencer import impose_booklet
from ..splitter import split_double_sided
from ..validators import ImpositionValidator


class ImpositionService:
    """
    High-level service for imposition jobs.

    Each job is a single pass: load, compute, assemble, write. Any failure
    aborts the job and leaves no output behind; nothing is retried.
    """

    def make_booklet(
        self,
        input_path: Union[str, Path],
        options: BookletOptions,
        output_path: Optional[Union[str, Path]] = None,
        temp: bool = False
    ) -> Path:
        """
        Impose a PDF as a booklet.

        Args:
            input_path: Source PDF
            options: Booklet options
            output_path: Target path (default: <stem>.imposed.pdf beside the input)
            temp: Write to a fresh temporary file instead

        Returns:
            Path of the written booklet

        Raises:
            InvalidDocumentError: If the source cannot be read
            EmptyDocumentError: If the source has no pages
            IoError: If the output cannot be written
        """
        source = load_document(input_path)
        self._check(ImpositionValidator.validate_booklet(source.page_count, options))

        sides = impose_booklet(
            source.geometries,
            layout=options.layout,
            reading_direction=options.reading_direction,
            flip_direction=options.flip_direction,
            paper_size=options.paper_size,
            target_page_count=options.target_page_count,
        )
        writer = self._assemble(source, sides)
        target = self._resolve_output(input_path, output_path, temp, TEMP_PREFIX_BOOKLET)
        return write_document(writer, target)

    def split_double_sided(
        self,
        input_path: Union[str, Path],
        options: DoubleSidedOptions,
        output_path: Optional[Union[str, Path]] = None,
        temp: bool = False
    ) -> Path:
        """
        Write the odd or even half of a PDF for manual double-sided printing.

        Args:
            input_path: Source PDF
            options: Flip type and odd/even selection
            output_path: Target path (default: <stem>.imposed.pdf beside the input)
            temp: Write to a fresh temporary file instead

        Returns:
            Path of the written half
        """
        source = load_document(input_path)
        self._check(ImpositionValidator.validate_double_sided(source.page_count))

        sides = split_double_sided(source.geometries, options.flip_type, options.odd_even)
        writer = self._assemble(source, sides)
        target = self._resolve_output(input_path, output_path, temp, TEMP_PREFIX_DOUBLE_SIDED)
        return write_document(writer, target)

    def _assemble(self, source: SourceDocument, sides: Sequence[SheetSide]) -> PdfWriter:
        """Assemble; pypdf resolves objects lazily, so broken ones surface here."""
        try:
            return assemble(source, sides)
        except (PyPdfError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise InvalidDocumentError(f"Cannot read PDF {source.path}: {e}") from e

    def _check(self, result: ValidationResult):
        """Log the outcome and raise on errors."""
        if result.has_issues():
            log.info("Validation: %s", result.get_summary())
        for warning in result.warnings:
            log.warning(warning)
        if not result.is_valid:
            raise EmptyDocumentError("; ".join(result.errors))

    def _resolve_output(
        self,
        input_path: Union[str, Path],
        output_path: Optional[Union[str, Path]],
        temp: bool,
        prefix: str
    ) -> Path:
        if output_path is not None:
            return Path(output_path)
        if temp:
            return temporary_output_path(prefix)
        return default_output_path(input_path)
