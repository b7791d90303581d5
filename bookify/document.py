"""
Input and output collaborators: loading a source PDF and writing the result.

Loading hands the core a page count and per-page geometry; writing goes
through a temporary sibling file that replaces the target in one step, so a
failed run never leaves a half-written PDF in place of a good one.
"""

import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from pypdf import PageObject, PdfReader, PdfWriter
from pypdf.errors import PyPdfError

from .config import IMPOSED_SUFFIX, TEMP_WRITE_PREFIX
from .errors import InvalidDocumentError, IoError, log
from .models import PageGeometry


@dataclass
class SourceDocument:
    """A loaded source PDF: its pages and their geometry."""
    path: Path
    reader: PdfReader = field(repr=False)
    pages: List[PageObject] = field(repr=False)
    geometries: List[PageGeometry]

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def origin(self, index: int) -> Tuple[float, float]:
        """Lower-left corner of a page's media box."""
        box = self.pages[index].mediabox
        return float(box.left), float(box.bottom)


def load_document(path: Union[str, Path]) -> SourceDocument:
    """
    Open a PDF and read its page geometry.

    Pages carrying a /Rotate entry are normalised first so that the reported
    geometry matches what is drawn.

    Args:
        path: Path to the source PDF

    Returns:
        SourceDocument with at least one page

    Raises:
        InvalidDocumentError: If the file is missing, malformed, encrypted
            or has no pages
    """
    path = Path(path)
    if not path.is_file():
        raise InvalidDocumentError(f"PDF file not found: {path}")

    try:
        reader = PdfReader(str(path))
        if reader.is_encrypted and not reader.decrypt(""):
            raise InvalidDocumentError(f"Password protected PDFs are not supported: {path}")

        pages = list(reader.pages)
        geometries = []
        for page in pages:
            if page.rotation % 360:
                page.transfer_rotation_to_content()
            box = page.mediabox
            geometries.append(PageGeometry(float(box.width), float(box.height)))
    except InvalidDocumentError:
        raise
    except (PyPdfError, OSError, ValueError, KeyError) as e:
        raise InvalidDocumentError(f"Cannot read PDF {path}: {e}") from e

    if not pages:
        raise InvalidDocumentError(f"PDF has no pages: {path}")
    if any(g.width <= 0 or g.height <= 0 for g in geometries):
        raise InvalidDocumentError(f"PDF has a page with an empty media box: {path}")

    log.info("Loaded %s: %d page(s)", path.name, len(pages))
    return SourceDocument(path=path, reader=reader, pages=pages, geometries=geometries)


def write_document(writer: PdfWriter, output_path: Union[str, Path]) -> Path:
    """
    Write a PDF, replacing any existing file only once the write succeeded.

    The document is written to a uniquely named hidden sibling first, so
    concurrent runs aimed at the same target never share a temp file.

    Args:
        writer: Assembled output document
        output_path: Target path; parent directories are created

    Returns:
        The output path

    Raises:
        IoError: If the document cannot be written
    """
    output_path = Path(output_path)
    tmp_path = None
    written = False

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(dir=output_path.parent, prefix=TEMP_WRITE_PREFIX,
                                         suffix='.pdf', delete=False) as f:
            tmp_path = Path(f.name)
            writer.write(f)
        os.replace(tmp_path, output_path)
        written = True
    except (OSError, PyPdfError) as e:
        raise IoError(f"Failed to write {output_path}: {e}") from e
    finally:
        if not written and tmp_path is not None:
            try:
                tmp_path.unlink(missing_ok=True)
            except OSError as cleanup_error:
                log.warning("Failed to delete temp file %s: %s", tmp_path, cleanup_error)

    log.info("Wrote %s", output_path)
    return output_path


def default_output_path(input_path: Union[str, Path]) -> Path:
    """``report.pdf`` -> ``report.imposed.pdf`` next to the input."""
    input_path = Path(input_path)
    return input_path.with_name(f"{input_path.stem}{IMPOSED_SUFFIX}")


def temporary_output_path(prefix: str) -> Path:
    """Reserve a fresh file in the system temp directory."""
    temp_file = tempfile.NamedTemporaryFile(prefix=prefix, suffix='.pdf', delete=False)
    temp_file.close()
    return Path(temp_file.name)
