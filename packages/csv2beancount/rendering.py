"""Rendering of entries through text templates.

Templates are ``str.format`` strings whose replacement fields are the
:class:`~.models.Entry` attribute names: ``date``, ``payee``,
``description``, ``account_in``, ``account_out``, ``amount_in``,
``amount_out``, ``currency``, ``raw`` and ``comment``. Literal braces are
written doubled (``{{`` and ``}}``).
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path
from string import Formatter

from .logging_setup import get_logger
from .models import Entry

_logger = get_logger("csv2beancount.rendering")

DEFAULT_TEMPLATE = """\
{date} * "{payee}" "{description}"
  ; {raw}
  {account_out}  {currency} {amount_out}
  {account_in}   {currency} {amount_in}

"""


class TemplateRenderError(Exception):
    """An entry could not be rendered with the given template."""


def check_template(template: str) -> None:
    """Raise ``ValueError`` when ``template`` does not parse.

    Unknown field names are not rejected here; they fail at render time.
    """

    for _literal, field_name, format_spec, _conversion in Formatter().parse(template):
        if format_spec:
            # Nested fields inside a format spec must parse as well.
            list(Formatter().parse(format_spec))
        if field_name is not None and field_name == "":
            raise ValueError("positional replacement fields are not supported")


def load_template(path: str | PathLike[str] | None) -> str:
    """Return the template stored at ``path``, or the default one.

    The default is used when ``path`` is ``None``, when the file cannot be read
    and when its content is not a valid template.
    """

    if path is None:
        return DEFAULT_TEMPLATE

    p = Path(path)
    try:
        text = p.read_text(encoding="utf-8")
    except OSError as exc:
        _logger.debug("rendering:template_unreadable path=%s error=%s", p, exc)
        return DEFAULT_TEMPLATE

    try:
        check_template(text)
    except ValueError as exc:
        _logger.warning("rendering:template_invalid path=%s error=%s", p, exc)
        return DEFAULT_TEMPLATE
    return text


def render_entry(entry: Entry, template: str = DEFAULT_TEMPLATE) -> str:
    """Render ``entry`` with ``template``.

    Raises :class:`TemplateRenderError` for unknown fields or malformed format
    specifications.
    """

    try:
        return template.format_map(entry.as_template_fields())
    except (KeyError, IndexError, ValueError, AttributeError) as exc:
        raise TemplateRenderError(f"cannot render entry dated {entry.date}: {exc!r}") from exc


__all__ = [
    "DEFAULT_TEMPLATE",
    "TemplateRenderError",
    "check_template",
    "load_template",
    "render_entry",
]
