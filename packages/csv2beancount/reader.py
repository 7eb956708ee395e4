"""CSV tokenization for bank exports.

Wraps the stdlib :mod:`csv` reader with the knobs bank exports need: a
configurable separator, a number of preamble records to skip and a row
width check. Blank lines are ignored everywhere and do not count as skipped
records.
"""

from __future__ import annotations

import csv
from collections.abc import Iterable, Iterator

from .logging_setup import TRACE, get_logger

_logger = get_logger("csv2beancount.reader")


def read_rows(
    lines: Iterable[str],
    *,
    separator: str = ";",
    skip: int = 0,
    fields: int = 0,
) -> Iterator[list[str]]:
    """Yield the data rows of a CSV stream.

    Parameters
    ----------
    lines:
        A text stream (opened with ``newline=""``) or any iterable of lines.
    separator:
        Field delimiter, a single character.
    skip:
        Number of non-blank records to drop before the data starts. Their
        width is not checked.
    fields:
        Width check for the remaining rows: ``-1`` disables it, ``0`` uses the
        width of the first data row and a positive value is the exact width.

    Raises ``csv.Error`` for malformed input or a row of the wrong width; the
    message carries the line number.
    """

    reader = csv.reader(lines, delimiter=separator)
    expected = fields if fields > 0 else None

    for row in reader:
        if not row:
            continue
        if skip > 0:
            skip -= 1
            _logger.log(TRACE, "reader:skip line=%d record=%r", reader.line_num, row)
            continue
        if fields == 0 and expected is None:
            expected = len(row)
        if expected is not None and len(row) != expected:
            raise csv.Error(
                f"line {reader.line_num}: wrong number of fields (got {len(row)}, want {expected})"
            )
        _logger.log(TRACE, "reader:row line=%d record=%r", reader.line_num, row)
        yield row


__all__ = ["read_rows"]
