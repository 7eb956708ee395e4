"""Public API for converting bank CSV exports into ledger entries.

The single-row engine lives in :mod:`csv2beancount.classifier`; this module
adds the batch loop that ties the CSV reader, the classifier and the
renderer together.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TextIO

from .classifier import apply_rules, classify  # noqa: F401  (re-export)
from .logging_setup import get_logger
from .models import Config, Entry
from .reader import read_rows
from .rendering import DEFAULT_TEMPLATE, TemplateRenderError, render_entry

_logger = get_logger("csv2beancount.api")


def iter_entries(lines: Iterable[str], config: Config) -> Iterator[Entry]:
    """Yield one :class:`Entry` per data row, in input order.

    ``csv.Error`` from the reader and
    :class:`~csv2beancount.classifier.RowShapeError` from the classifier
    propagate and end the iteration.
    """

    layout = config.csv
    rows = read_rows(
        lines,
        separator=layout.separator,
        skip=layout.skip,
        fields=layout.fields,
    )
    for row in rows:
        yield classify(row, layout, config.transactions_rules)


def convert_csv(
    lines: Iterable[str],
    config: Config,
    *,
    output: TextIO,
    template: str = DEFAULT_TEMPLATE,
) -> int:
    """Convert a CSV stream and write the rendered entries to ``output``.

    Returns the number of entries written. A row that fails to render is
    logged and left out; fatal reader and row-shape errors propagate.
    """

    written = 0
    for idx, entry in enumerate(iter_entries(lines, config)):
        try:
            text = render_entry(entry, template)
        except TemplateRenderError as exc:
            _logger.error("convert:render_failed row=%d error=%s", idx, exc)
            continue
        output.write(text)
        written += 1
    _logger.info("convert:done entries=%d", written)
    return written


__all__ = ["apply_rules", "classify", "convert_csv", "iter_entries"]
