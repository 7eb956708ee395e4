"""Public interface for the ``csv2beancount`` package.

This module exposes the package's API functions and public models/types as the
stable import surface. There is no runtime logic here, only symbol re-exports.
"""

__version__ = "0.1.0"

from .amounts import normalize_amount
from .api import convert_csv, iter_entries
from .classifier import RowShapeError, apply_rules, classify
from .config import ConfigError, load_config
from .models import Config, Entry, FieldLayout, RawRow, Rule, RuleSet
from .rendering import DEFAULT_TEMPLATE, TemplateRenderError, render_entry

__all__ = [
    "__version__",
    # API
    "normalize_amount",
    "classify",
    "apply_rules",
    "convert_csv",
    "iter_entries",
    "load_config",
    "render_entry",
    # Models / types
    "Config",
    "Entry",
    "FieldLayout",
    "RawRow",
    "Rule",
    "RuleSet",
    "DEFAULT_TEMPLATE",
    # Errors
    "ConfigError",
    "RowShapeError",
    "TemplateRenderError",
]
