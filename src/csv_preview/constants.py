"""
Centralized constants for CSV Preview.

Eliminates magic numbers scattered across the codebase.
Import from here instead of hardcoding values.
"""

# ===========================================================================
# Pagination
# ===========================================================================
DEFAULT_ROWS_PER_PAGE = 18      # Page size before the first layout pass
MIN_ROWS_PER_PAGE = 5           # Adaptive sizing never goes below this

# ===========================================================================
# Adaptive sizing (pixels)
# ===========================================================================
ESTIMATED_ROW_HEIGHT = 45       # Rendered height of one table row
TABLE_HEADER_HEIGHT = 40
PAGINATION_BAR_HEIGHT = 48
SCROLLBAR_HEIGHT = 4

# ===========================================================================
# Statistics
# ===========================================================================
TOP_VALUES_LIMIT = 5            # Distinct sample values kept per column
SAMPLE_VALUES_DISPLAYED = 3     # Sample values shown in the columns overview

# ===========================================================================
# Parsing
# ===========================================================================
CANDIDATE_DELIMITERS = (',', ';', '\t', '|')
DELIMITER_SNIFF_LINES = 5

# ===========================================================================
# Caching / display
# ===========================================================================
VIEW_CACHE_SIZE = 32            # Memoized (filter, sort) views per session
TOOLTIP_MIN_LENGTH = 50         # Cells longer than this get a tooltip
