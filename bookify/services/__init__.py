"""
Service layer for bookify.

Services coordinate whole jobs and manage resources like temp files,
providing a clean interface between the CLI and the page-order core.
"""

from .config_service import ConfigService
from .imposition_service import ImpositionService

__all__ = ['ConfigService', 'ImpositionService']
