"""
Centralized configuration and constants for bookify.

Paper sizes, defaults and file naming live here so the CLI, the services and
the tests agree on a single set of values.
"""

from typing import Dict, Tuple


# Paper sizes in points (72 points per inch) - (width, height) in landscape
PAPER_SIZES: Dict[str, Tuple[float, float]] = {
    'a3': (1190, 842),                   # A3 (16.5" x 11.7")
    'a4': (842, 595),                    # A4 (11.7" x 8.3")
    'a5': (595, 420),                    # A5 (8.3" x 5.8")
    'tabloid': (17 * 72, 11 * 72),       # 11x17" (1224 x 792 pt)
    'letter': (11 * 72, 8.5 * 72),       # 8.5x11" (792 x 612 pt)
    'legal': (14 * 72, 8.5 * 72),        # 8.5x14" (1008 x 612 pt)
}

# Booklet defaults
DEFAULT_LAYOUT = 'four-up'
DEFAULT_READING_DIRECTION = 'left-to-right'
DEFAULT_FLIP_DIRECTION = 'short-edge'

# Legacy single-mode booklet: pad up to this many pages when --pages is given bare
DEFAULT_TARGET_PAGE_COUNT = 16

# Double-sided defaults
DEFAULT_FLIP_TYPE = 'rr'
DEFAULT_ODD_EVEN = 'odd'

# Output naming
IMPOSED_SUFFIX = '.imposed.pdf'
TEMP_PREFIX_BOOKLET = 'booklet-'
TEMP_PREFIX_DOUBLE_SIDED = 'double-sided-'
TEMP_WRITE_PREFIX = '.tmp_'

# Persisted user defaults
DEFAULT_CONFIG_FILENAME = 'bookify.json'

# Booklets thicker than this many sheets fold badly
MAX_COMFORTABLE_SHEETS = 20
