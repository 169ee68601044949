"""
Spreadsheet feed access.

The availability sheet is published as CSV with a header row:
date (YYYY-MM-DD), apartment, price, available. Parsing is lenient: short
rows are padded with empty strings, extra trailing cells are dropped and
everything stays a string.
"""

import csv
import io
import logging
from typing import Optional

import pandas as pd
import requests

from . import config

logger = logging.getLogger(__name__)


# =============================================================================
# FETCHING
# =============================================================================

def fetch_sheet(url: str, timeout: int = config.FETCH_TIMEOUT) -> tuple[Optional[str], Optional[str]]:
    """
    Fetch the published CSV with timeout and error handling.

    Returns:
        tuple: (csv_text, error_message) - one will be None
    """
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.exceptions.Timeout:
        return None, "Request timed out"
    except requests.exceptions.HTTPError as e:
        return None, f"HTTP error: {e.response.status_code}"
    except requests.exceptions.RequestException as e:
        return None, f"Request failed: {str(e)}"

    # Published sheets are UTF-8 but do not always say so
    if not response.encoding or response.encoding.lower() == "iso-8859-1":
        response.encoding = "utf-8"
    return response.text, None


# =============================================================================
# PARSING
# =============================================================================

def _read_rows(csv_text: str, width: int, quoting: int) -> list[list[str]]:
    """Read every row, header included, as trimmed strings."""
    df = pd.read_csv(
        io.StringIO(csv_text),
        header=None,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        index_col=False,
        engine="python",
        quoting=quoting,
        # Rows longer than the header keep only the leading cells
        on_bad_lines=lambda bad_line: bad_line[:width],
    )
    df = df.fillna("").astype(str).apply(lambda col: col.str.strip())
    return df.values.tolist()


def parse_csv(csv_text: str) -> list[dict[str, str]]:
    """
    Parse CSV text with a header row into a list of records.

    Each record maps the (trimmed) header name to the (trimmed) cell value.
    Quoted fields may contain commas. When a header name repeats, the
    rightmost column wins. Empty input or a header without rows yields an
    empty list.

    If the quote-aware read loses rows (a stray opening quote swallows every
    following line), the text is re-read one physical line per record with
    quoting disabled.
    """
    if not csv_text or not csv_text.strip():
        return []
    csv_text = csv_text.lstrip("\ufeff")

    try:
        width = len(pd.read_csv(io.StringIO(csv_text), nrows=0).columns)
    except pd.errors.EmptyDataError:
        return []

    expected = sum(1 for line in csv_text.splitlines() if line.strip()) - 1
    try:
        rows = _read_rows(csv_text, width, csv.QUOTE_MINIMAL)
    except pd.errors.ParserError as e:
        logger.warning("Quote-aware CSV parse failed (%s), reading line by line", e)
        rows = _read_rows(csv_text, width, csv.QUOTE_NONE)
    else:
        if len(rows) - 1 != expected:
            logger.warning("CSV parse kept %d of %d rows, reading line by line",
                           max(len(rows) - 1, 0), expected)
            rows = _read_rows(csv_text, width, csv.QUOTE_NONE)

    if len(rows) < 2:
        return []
    header, body = rows[0], rows[1:]
    records = [dict(zip(header, row)) for row in body]
    logger.debug("Parsed %d feed rows with columns %s", len(records), header)
    return records
