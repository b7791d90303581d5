"""
Configuration Service - Manages persisted default options.

This service loads and saves the user's preferred booklet and double-sided
options to/from a JSON file, with validation and defaults.
"""

import json
from pathlib import Path
from typing import Optional, Tuple

from ..config import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_FLIP_DIRECTION,
    DEFAULT_FLIP_TYPE,
    DEFAULT_LAYOUT,
    DEFAULT_ODD_EVEN,
    DEFAULT_READING_DIRECTION,
)
from ..errors import BookifyError, log
from ..models import BookletOptions, DoubleSidedOptions


class ConfigService:
    """
    Manages default option persistence.

    Handles loading configuration from JSON, saving changes, and providing
    sensible defaults when the config doesn't exist or can't be read.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize config service.

        Args:
            config_path: Optional custom config file path.
                        If None, uses bookify.json in the current directory.
        """
        if config_path is None:
            config_path = Path.cwd() / DEFAULT_CONFIG_FILENAME

        self.config_path = Path(config_path)

    def load(self) -> Tuple[BookletOptions, DoubleSidedOptions]:
        """
        Load configuration from file.

        Returns:
            (BookletOptions, DoubleSidedOptions) with loaded settings, or
            defaults if the file doesn't exist

        Note:
            A corrupted or invalid config file is logged and replaced by
            defaults; it never stops a job.
        """
        if not self.config_path.exists():
            return BookletOptions(), DoubleSidedOptions()

        try:
            with open(self.config_path) as f:
                data = json.load(f)

            booklet = BookletOptions(
                layout=data.get('layout', DEFAULT_LAYOUT),
                reading_direction=data.get('reading_direction', DEFAULT_READING_DIRECTION),
                flip_direction=data.get('flip_direction', DEFAULT_FLIP_DIRECTION),
                paper_size=data.get('paper_size'),
            )
            double_sided = DoubleSidedOptions(
                flip_type=data.get('flip_type', DEFAULT_FLIP_TYPE),
                odd_even=data.get('odd_even', DEFAULT_ODD_EVEN),
            )
            return booklet, double_sided

        except (json.JSONDecodeError, OSError, AttributeError, BookifyError) as e:
            log.warning("Failed to load config from %s: %s; using defaults", self.config_path, e)
            return BookletOptions(), DoubleSidedOptions()

    def save(self, booklet: BookletOptions, double_sided: DoubleSidedOptions) -> bool:
        """
        Save configuration to file.

        Args:
            booklet: Booklet defaults to save
            double_sided: Double-sided defaults to save

        Returns:
            True if the file was written, False if writing failed (logged)
        """
        data = {
            'layout': booklet.layout.value,
            'reading_direction': booklet.reading_direction.value,
            'flip_direction': booklet.flip_direction.value,
            'paper_size': booklet.paper_size,
            'flip_type': double_sided.flip_type.value,
            'odd_even': double_sided.odd_even.value,
        }

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_path, 'w') as f:
                json.dump(data, f, indent=2)
            return True

        except OSError as e:
            log.warning("Failed to save config to %s: %s", self.config_path, e)
            return False

    def reset_to_defaults(self) -> bool:
        """
        Delete config file to reset to defaults.

        Returns:
            True if config was deleted, False if it didn't exist or couldn't be deleted
        """
        try:
            if self.config_path.exists():
                self.config_path.unlink()
                return True
            return False

        except OSError as e:
            log.warning("Failed to delete config file %s: %s", self.config_path, e)
            return False

    def get_config_path(self) -> Path:
        """
        Get the path to the configuration file.

        Returns:
            Path to config file (may not exist yet)
        """
        return self.config_path
