"""
Booklet imposition and manual double-sided splitting for PDF documents.

The page-order computations (padding, sequencing, splitting, geometry) are
pure functions over page counts and page sizes; pypdf is only touched by the
assembler and the document collaborators.
"""

__version__ = "0.3.0"
