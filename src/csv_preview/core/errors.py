"""
Error kinds raised at the ingestion boundary.

The pure computations (statistics, filtering, sorting, pagination) never
raise; only reading and parsing raw input can fail.
"""


class CsvPreviewError(Exception):
    """Base class for all CSV Preview errors."""


class ParseError(CsvPreviewError):
    """Malformed input reported by the parser."""


class ReadError(CsvPreviewError):
    """The raw input could not be obtained at all."""


class ValidationError(CsvPreviewError):
    """A structural check failed (settings files, page sizes)."""
