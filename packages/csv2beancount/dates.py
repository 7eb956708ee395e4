"""Date parsing and formatting with reference-date layouts.

Layouts are written the way the reference moment ``Mon Jan 2 15:04:05 MST
2006`` would be printed, e.g. ``02.01.2006`` for ``DD.MM.YYYY`` and
``2006-01-02`` for ISO dates. Layouts containing ``%`` are plain
``strftime``/``strptime`` formats and bypass the translation.

Parsing goes through :func:`datetime.strptime` with a translated format.
Formatting is done token by token so unpadded fields (``1``, ``2``) and
four-digit years before 1000 come out as the layout asks, independent of the
platform's ``strftime``.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

# Value used when a date cannot be parsed; formats as 0001-01-01.
ZERO_DATE = datetime(1, 1, 1)

_MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

# Longest tokens first so "2006" wins over "2" and "January" over "Jan".
_TOKENS: tuple[str, ...] = (
    "January",
    "Monday",
    "Z07:00",
    "-07:00",
    "-0700",
    "Z0700",
    "2006",
    "Jan",
    "Mon",
    "MST",
    "002",
    "-07",
    "01",
    "02",
    "03",
    "04",
    "05",
    "06",
    "15",
    "_2",
    "PM",
    "pm",
    "1",
    "2",
    "3",
    "4",
    "5",
)

_FRACTION_RE = re.compile(r"[.,](0+|9+)(?!\d)")
# One strftime directive, "%%" included, so an escaped "%%Y" stays literal.
_STRFTIME_DIRECTIVE_RE = re.compile(r"%.")

_STRPTIME = {
    "January": "%B",
    "Monday": "%A",
    "Z07:00": "%z",
    "-07:00": "%z",
    "-0700": "%z",
    "Z0700": "%z",
    "2006": "%Y",
    "Jan": "%b",
    "Mon": "%a",
    "MST": "%Z",
    "002": "%j",
    "-07": "%z",
    "01": "%m",
    "02": "%d",
    "03": "%I",
    "04": "%M",
    "05": "%S",
    "06": "%y",
    "15": "%H",
    "_2": "%d",
    "PM": "%p",
    "pm": "%p",
    "1": "%m",
    "2": "%d",
    "3": "%I",
    "4": "%M",
    "5": "%S",
}


def _tokenize(layout: str) -> list[tuple[bool, str]]:
    """Split ``layout`` into ``(is_token, text)`` chunks."""

    chunks: list[tuple[bool, str]] = []
    literal: list[str] = []
    i = 0
    while i < len(layout):
        # "_2006" is an underscore followed by the year, not a padded day.
        if layout.startswith("_2006", i):
            literal.append("_")
            i += 1
            continue
        frac = _FRACTION_RE.match(layout, i)
        if frac:
            if literal:
                chunks.append((False, "".join(literal)))
                literal = []
            chunks.append((True, frac.group(0)))
            i = frac.end()
            continue
        for token in _TOKENS:
            if layout.startswith(token, i):
                if literal:
                    chunks.append((False, "".join(literal)))
                    literal = []
                chunks.append((True, token))
                i += len(token)
                break
        else:
            literal.append(layout[i])
            i += 1
    if literal:
        chunks.append((False, "".join(literal)))
    return chunks


def to_strptime_format(layout: str) -> str:
    """Translate a reference layout into a :func:`datetime.strptime` format."""

    if "%" in layout:
        return layout
    parts: list[str] = []
    for is_token, text in _tokenize(layout):
        if not is_token:
            parts.append(text)
        elif text[0] in ".,":
            parts.append(f"{text[0]}%f")
        else:
            parts.append(_STRPTIME[text])
    return "".join(parts)


def parse_date(value: str, layout: str) -> datetime:
    """Parse ``value`` according to ``layout``.

    Raises ``ValueError`` when the value does not match or the layout is
    empty.
    """

    if not layout:
        raise ValueError("empty date layout")
    return datetime.strptime(value, to_strptime_format(layout))


def _utc_offset(moment: datetime, *, colon: bool, zulu: bool, hours_only: bool = False) -> str:
    offset = moment.utcoffset() or timedelta(0)
    if zulu and offset == timedelta(0):
        return "Z"
    total = int(offset.total_seconds()) // 60
    sign = "-" if total < 0 else "+"
    hh, mm = divmod(abs(total), 60)
    if hours_only:
        return f"{sign}{hh:02d}"
    return f"{sign}{hh:02d}:{mm:02d}" if colon else f"{sign}{hh:02d}{mm:02d}"


def _format_token(moment: datetime, token: str) -> str:
    hour12 = moment.hour % 12 or 12
    if token[0] in ".,":
        digits = f"{moment.microsecond:06d}".ljust(9, "0")[: len(token) - 1]
        if token[1] == "9":
            digits = digits.rstrip("0")
            return f"{token[0]}{digits}" if digits else ""
        return f"{token[0]}{digits}"
    match token:
        case "2006":
            return f"{moment.year:04d}"
        case "06":
            return f"{moment.year % 100:02d}"
        case "January":
            return _MONTHS[moment.month - 1]
        case "Jan":
            return _MONTHS[moment.month - 1][:3]
        case "01":
            return f"{moment.month:02d}"
        case "1":
            return str(moment.month)
        case "Monday":
            return _WEEKDAYS[moment.weekday()]
        case "Mon":
            return _WEEKDAYS[moment.weekday()][:3]
        case "02":
            return f"{moment.day:02d}"
        case "2":
            return str(moment.day)
        case "_2":
            return f"{moment.day:>2}"
        case "002":
            return f"{moment.timetuple().tm_yday:03d}"
        case "15":
            return f"{moment.hour:02d}"
        case "03":
            return f"{hour12:02d}"
        case "3":
            return str(hour12)
        case "04":
            return f"{moment.minute:02d}"
        case "4":
            return str(moment.minute)
        case "05":
            return f"{moment.second:02d}"
        case "5":
            return str(moment.second)
        case "PM":
            return "PM" if moment.hour >= 12 else "AM"
        case "pm":
            return "pm" if moment.hour >= 12 else "am"
        case "MST":
            return moment.tzname() or "UTC"
        case "-0700":
            return _utc_offset(moment, colon=False, zulu=False)
        case "-07:00":
            return _utc_offset(moment, colon=True, zulu=False)
        case "-07":
            return _utc_offset(moment, colon=False, zulu=False, hours_only=True)
        case "Z0700":
            return _utc_offset(moment, colon=False, zulu=True)
        case "Z07:00":
            return _utc_offset(moment, colon=True, zulu=True)
    raise ValueError(f"unknown layout token: {token!r}")


def format_date(moment: datetime, layout: str) -> str:
    """Render ``moment`` with ``layout``."""

    if "%" in layout:
        # Some libc strftime implementations do not pad %Y below year 1000.
        year = f"{moment.year:04d}"
        return moment.strftime(
            _STRFTIME_DIRECTIVE_RE.sub(
                lambda m: year if m.group(0) == "%Y" else m.group(0), layout
            )
        )
    return "".join(
        _format_token(moment, text) if is_token else text for is_token, text in _tokenize(layout)
    )


__all__ = ["ZERO_DATE", "format_date", "parse_date", "to_strptime_format"]
