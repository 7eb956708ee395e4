"""Transaction classification and rule matching.

Public API:
    - :func:`classify`: turn one raw CSV row into an :class:`~.models.Entry`
    - :func:`apply_rules`: resolve the counter account and comment for a row

Both functions are pure apart from logging: they read the shared layout and
rule set without mutating them, so repeated calls with the same inputs give
identical entries.
"""

from __future__ import annotations

import re

from .amounts import is_negative, negate_amount, normalize_amount
from .dates import ZERO_DATE, format_date, parse_date
from .logging_setup import TRACE, get_logger
from .models import Entry, FieldLayout, RawRow, Rule, RuleSet

_logger = get_logger("csv2beancount.classifier")


class RowShapeError(ValueError):
    """A row is too short for the configured field layout.

    This is fatal for the batch: the layout does not describe the file.
    """

    def __init__(self, field: str, index: int, width: int) -> None:
        super().__init__(
            f"row has {width} fields but the layout reads {field!r} from column {index}"
        )
        self.field = field
        self.index = index
        self.width = width


def _check_width(row: RawRow, layout: FieldLayout) -> None:
    width = len(row)
    for field in ("date", "payee", "description", "amount_in", "amount_out"):
        index = getattr(layout, field)
        if index >= width:
            raise RowShapeError(field, index, width)


def _matches(pattern: re.Pattern[str] | None, value: str) -> bool:
    # No pattern never matches; an empty match does not count either.
    if pattern is None:
        return False
    m = pattern.search(value)
    matched = bool(m and m.group(0))
    _logger.log(
        TRACE,
        "rules:check pattern=%r value=%r matched=%s",
        pattern.pattern,
        value,
        matched,
    )
    return matched


def rule_matches(rule: Rule, payee: str, description: str) -> bool:
    """Whether ``rule`` fires on either the payee or the description."""

    return _matches(rule.payee_pattern, payee) or _matches(rule.description_pattern, description)


def apply_rules(
    rules: RuleSet,
    payee: str,
    description: str,
    account: str,
    comment: str,
) -> tuple[str, str]:
    """Return ``(account, comment)`` after applying every matching rule.

    Rules are visited in name order. Every matching rule is applied, so when
    two rules set the same value the later one wins. Empty ``set_*`` values
    leave the current value alone.
    """

    for rule in rules:
        _logger.debug(
            "rules:evaluate rule=%s payee=%r description=%r",
            rule.name,
            payee,
            description,
        )
        if not rule_matches(rule, payee, description):
            continue
        if rule.set_account:
            account = rule.set_account
        if rule.set_comment:
            comment = rule.set_comment
        _logger.debug("rules:applied rule=%s account=%s comment=%r", rule.name, account, comment)
    return account, comment


def _resolve_date(row: RawRow, layout: FieldLayout) -> str:
    value = row[layout.date]
    try:
        moment = parse_date(value, layout.date_layout_in)
    except ValueError as exc:
        _logger.warning(
            "classify:date_parse_failed layout=%r value=%r error=%s",
            layout.date_layout_in,
            value,
            exc,
        )
        moment = ZERO_DATE
    return format_date(moment, layout.date_layout_out)


def resolve_amount(row: RawRow, layout: FieldLayout) -> str:
    """Return the signed, normalized amount of ``row``.

    With a single amount column its sign is taken as-is. With separate
    columns a non-empty ``amount_in`` wins; otherwise ``amount_out`` is a
    debit whatever sign the bank printed on it. Only one of the two columns
    is expected to carry a value.
    """

    if layout.single_amount_column:
        return normalize_amount(row[layout.amount_in])

    amount_in = row[layout.amount_in]
    if amount_in != "":
        return normalize_amount(amount_in)
    amount_out = row[layout.amount_out]
    if amount_out != "":
        return f"-{normalize_amount(amount_out).lstrip('+-')}"

    _logger.warning(
        "classify:amount_missing amount_in_column=%d amount_out_column=%d",
        layout.amount_in,
        layout.amount_out,
    )
    return ""


def classify(row: RawRow, layout: FieldLayout, rules: RuleSet) -> Entry:
    """Build the double-entry record for one CSV row.

    A negative amount is a debit: money leaves the processing account
    towards the default account, and rules may redirect the incoming leg.
    Anything else is a credit, and rules may redirect the outgoing leg.

    Raises :class:`RowShapeError` when ``row`` is too short for ``layout``.
    Unparseable dates are logged and replaced by the zero date.
    """

    _check_width(row, layout)

    date = _resolve_date(row, layout)
    payee = row[layout.payee]
    description = row[layout.description]
    amount = resolve_amount(row, layout)
    comment = ""

    if is_negative(amount):
        amount_out = amount
        amount_in = amount[1:]
        account_out = layout.processing_account
        account_in, comment = apply_rules(
            rules, payee, description, layout.default_account, comment
        )
    else:
        amount_in = amount
        amount_out = negate_amount(amount)
        account_in = layout.processing_account
        account_out, comment = apply_rules(
            rules, payee, description, layout.default_account, comment
        )

    return Entry(
        account_in=account_in,
        account_out=account_out,
        amount_in=amount_in,
        amount_out=amount_out,
        comment=comment,
        currency=layout.currency,
        date=date,
        description=description,
        payee=payee,
        raw=repr(list(row)),
    )


__all__ = ["RowShapeError", "apply_rules", "classify", "resolve_amount", "rule_matches"]
