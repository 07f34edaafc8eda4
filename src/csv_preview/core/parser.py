"""
CSV Parser - Turns raw delimited text into a Dataset via pandas.

pandas reads every field as a string; numeric coercion happens per field in
coerce_field so that a column can mix numbers and text. Malformed input
never raises: problems are reported as ParseIssue entries and whatever rows
could be recovered are returned.
"""

import csv
import io
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

import pandas as pd

from ..constants import CANDIDATE_DELIMITERS, DELIMITER_SNIFF_LINES
from .cells import coerce_field
from .dataset import Dataset, Row
from .errors import ParseError

logger = logging.getLogger(__name__)


@dataclass
class ParseOptions:
    """Parser switches."""
    header: bool = True
    dynamic_typing: bool = True
    skip_empty_lines: bool = True
    delimiter: Optional[str] = None  # auto-detected if None


@dataclass
class ParseIssue:
    """A problem reported while parsing (row is 0-based, None if unknown)."""
    message: str
    row: Optional[int] = None


@dataclass
class ParseResult:
    """
    Result of a parse.

    Attributes:
        rows: Parsed rows (one dict of Cells per record)
        headers: Column names detected by the parser
        errors: Issues in encounter order; the first one is surfaced to users
        meta: Additional info (delimiter, fields)
    """
    rows: List[Row] = field(default_factory=list)
    headers: List[str] = field(default_factory=list)
    errors: List[ParseIssue] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)

    @property
    def first_error(self) -> Optional[str]:
        return self.errors[0].message if self.errors else None

    def to_dataset(self) -> Dataset:
        return Dataset(headers=list(self.headers), rows=list(self.rows))

    def raise_for_errors(self) -> None:
        """Raise ParseError carrying the first reported issue, if any."""
        if self.errors:
            raise ParseError(self.errors[0].message)


def _scan_quotes(text: str, delimiters: Sequence[str]) -> Tuple[Dict[str, int], bool]:
    """
    Walk text the way a CSV tokenizer does, honouring double-quoted fields.

    A quote only opens a field when it is the field's first character;
    doubled quotes inside a quoted field are an escaped quote.

    Returns:
        (occurrences of each delimiter outside quotes, True if the text ends
        inside a quoted field)
    """
    counts = dict.fromkeys(delimiters, 0)
    in_quotes = False
    field_start = True
    i = 0
    while i < len(text):
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if text[i + 1:i + 2] == '"':
                    i += 1
                else:
                    in_quotes = False
            field_start = False
        elif ch == '"' and field_start:
            in_quotes = True
            field_start = False
        else:
            if ch in counts:
                counts[ch] += 1
            field_start = ch in counts or ch in '\r\n'
        i += 1
    return counts, in_quotes


def detect_delimiter(raw_text: str) -> str:
    """
    Detect the delimiter by analyzing the first few lines.

    Delimiters inside quoted fields are not counted.

    Args:
        raw_text: Raw CSV text

    Returns:
        Most frequent candidate delimiter, ',' when none occurs
    """
    lines = raw_text.splitlines()[:DELIMITER_SNIFF_LINES]
    sample = '\n'.join(lines)

    counts, _ = _scan_quotes(sample, CANDIDATE_DELIMITERS)
    best = max(counts, key=counts.get)
    if counts[best] > 0:
        return best
    return ','


def _is_blank(record: List[str]) -> bool:
    return not record or (len(record) == 1 and not record[0].strip())


def _record_widths(raw_text: str, delimiter: str, skip_empty_lines: bool) -> List[int]:
    """Field count of every record handed to pandas, header record included."""
    widths = []
    for record in csv.reader(io.StringIO(raw_text), delimiter=delimiter):
        if skip_empty_lines and _is_blank(record):
            continue
        widths.append(len(record) or 1)
    return widths


def _width_issues(widths: List[int], header: bool) -> List[ParseIssue]:
    """Report data records whose field count differs from the first record."""
    if not widths:
        return []

    expected = widths[0]
    records = widths[1:] if header else widths
    issues = []
    for row, width in enumerate(records):
        if width < expected:
            issues.append(ParseIssue(
                f"Too few fields: expected {expected} fields but parsed {width}", row
            ))
        elif width > expected:
            issues.append(ParseIssue(
                f"Too many fields: expected {expected} fields but parsed {width}; record skipped", row
            ))
    return issues


def parse(raw_text: str, options: Optional[ParseOptions] = None) -> ParseResult:
    """
    Parse delimited text.

    Records with too few fields are kept and padded with nulls; records with
    too many fields are skipped. An unterminated quoted field at the end of
    the input is closed so the partial record is kept. Each case is reported
    as a ParseIssue.

    Args:
        raw_text: Full CSV content
        options: ParseOptions (defaults: header row, dynamic typing, skip empty lines)

    Returns:
        ParseResult with rows, headers and any issues
    """
    options = options or ParseOptions()
    result = ParseResult()

    delimiter = options.delimiter or detect_delimiter(raw_text)
    result.meta['delimiter'] = delimiter
    if len(delimiter) != 1:
        result.errors.append(ParseIssue(f"Delimiter must be a single character, got {delimiter!r}"))
        logger.warning(f"CSV parse failed: unusable delimiter {delimiter!r}")
        return result

    _, unterminated = _scan_quotes(raw_text, (delimiter,))
    if unterminated:
        raw_text = raw_text.rstrip('\r\n') + '"'

    try:
        widths = _record_widths(raw_text, delimiter, options.skip_empty_lines)
        df = pd.read_csv(
            io.StringIO(raw_text),
            sep=delimiter,
            header=0 if options.header else None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=options.skip_empty_lines,
            engine='python',
            on_bad_lines='skip',
        )
    except pd.errors.EmptyDataError:
        result.errors.append(ParseIssue("No data found in input"))
        logger.warning("CSV parse found no data")
        return result
    except (pd.errors.ParserError, csv.Error, ValueError) as e:
        result.errors.append(ParseIssue(str(e)))
        logger.warning(f"CSV parse failed: {e}")
        return result

    result.errors.extend(_width_issues(widths, options.header))
    if unterminated:
        data_records = len(widths) - 1 if options.header else len(widths)
        last_row = data_records - 1 if data_records > 0 else None
        result.errors.append(ParseIssue("Quoted field unterminated", last_row))

    headers = [str(col) for col in df.columns]
    result.headers = headers
    result.meta['fields'] = list(headers)

    for record in df.itertuples(index=False, name=None):
        result.rows.append({
            header: coerce_field(value, options.dynamic_typing)
            for header, value in zip(headers, record)
        })

    if result.errors:
        logger.warning(
            f"Parsed {len(result.rows)} rows with {len(result.errors)} issue(s); "
            f"first: {result.first_error}"
        )
    else:
        logger.debug(f"Parsed {len(result.rows)} rows, {len(headers)} columns (sep={delimiter!r})")

    return result
