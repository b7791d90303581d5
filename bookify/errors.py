"""
Exceptions and logging for bookify.
"""

import logging


log = logging.getLogger('bookify')
log.addHandler(logging.NullHandler())


class BookifyError(Exception):
    """Abstract base class of exceptions raised by this package."""


class EmptyDocumentError(BookifyError):
    """The source document has no pages to arrange."""


class ConfigError(BookifyError):
    """An option token or value is not recognised."""


class InvalidDocumentError(BookifyError):
    """The source file is missing, unreadable or not a usable PDF."""


class IoError(BookifyError):
    """The output document could not be written."""
