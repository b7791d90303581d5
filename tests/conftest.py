"""
Pytest configuration and fixtures.
"""

import pytest
from reportlab.pdfgen import canvas

from bookify.models import PageGeometry


A5_PORTRAIT = (420, 595)


def write_sample_pdf(path, page_count, pagesize=A5_PORTRAIT):
    """Write a PDF whose pages each say 'Page N' (1-indexed)."""
    c = canvas.Canvas(str(path), pagesize=pagesize)
    for number in range(1, page_count + 1):
        c.setFont("Helvetica", 24)
        c.drawString(72, 72, f"Page {number}")
        c.showPage()
    c.save()
    return path


def write_dangling_resources_pdf(path):
    """
    Write a one-page PDF whose /Resources points at an object that does not exist.

    The file parses and reports its page size; the broken reference only
    shows up once the page content is merged.
    """
    content = b"BT /F1 24 Tf 72 72 Td (Page 1) Tj ET"
    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 420 595] "
        b"/Resources 9 0 R /Contents 4 0 R >>",
        b"<< /Length %d >>\nstream\n" % len(content) + content + b"\nendstream",
    ]

    data = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(data))
        data += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_offset = len(data)
    data += b"xref\n0 %d\n" % (len(objects) + 1)
    data += b"0000000000 65535 f \n"
    for offset in offsets:
        data += b"%010d 00000 n \n" % offset
    data += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1, xref_offset)

    path.write_bytes(bytes(data))
    return path


def fold_reading_order(sides, cols=2, right_to_left=False):
    """
    Pages in the order a reader meets them after printing and folding.

    ``sides`` alternate front/back per sheet. Each row of a side is one
    two-up leaf (four-up sheets are cut across first, top half on top). The
    leaves are stacked in print order and folded in the middle: the reader
    sees each leaf's front-right then back-left going in, and each leaf's
    back-right then front-left coming out. A right-to-left booklet opens
    from the other side, so left and right swap.
    """
    leaves = []
    for front, back in zip(sides[0::2], sides[1::2]):
        for start in range(0, len(front), cols):
            leaves.append((front[start:start + cols], back[start:start + cols]))

    inner = 0 if right_to_left else 1
    outer = 1 - inner
    first_half = []
    second_half = []
    for front, back in leaves:
        first_half.extend([front[inner], back[outer]])
        second_half[:0] = [back[inner], front[outer]]
    return first_half + second_half


@pytest.fixture
def sample_pdf(tmp_path):
    """Factory writing an N-page sample PDF into tmp_path."""
    def _make(page_count, name="sample.pdf", pagesize=A5_PORTRAIT):
        return write_sample_pdf(tmp_path / name, page_count, pagesize)
    return _make


@pytest.fixture
def a5_geometries():
    """Factory for N portrait A5 page geometries."""
    def _make(page_count):
        return [PageGeometry(*A5_PORTRAIT) for _ in range(page_count)]
    return _make


@pytest.fixture
def dangling_resources_pdf(tmp_path):
    """One-page PDF that loads but cannot be merged."""
    return write_dangling_resources_pdf(tmp_path / "dangling.pdf")
