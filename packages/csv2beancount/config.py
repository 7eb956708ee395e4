"""Configuration loading.

The configuration is a YAML document with a ``csv`` section describing the
field layout and a ``transactions_rules`` mapping of named rules::

    csv:
      amount_in: 7
      amount_out: 7
      currency: "EUR"
      date: 0
      date_layout_in: "02.01.2006"
      payee: 2
      description: 4
      skip: 10
    transactions_rules:
      ryanair:
        match_payee: "RYANAIR"
        set_account: "Expenses:Travel:Flights"

Missing keys take the defaults declared on :class:`~.models.FieldLayout`.
Any ``csv.<key>`` can be overridden from the environment with
``CSV2BEANCOUNT_CSV_<KEY>``. Validation happens here, once, so a bad regular
expression or a negative column index is reported before any row is read.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from os import PathLike
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .logging_setup import get_logger
from .models import Config, FieldLayout

_logger = get_logger("csv2beancount.config")

DEFAULT_CONFIG_FILE = "config.yaml"
ENV_PREFIX = "CSV2BEANCOUNT_CSV_"


class ConfigError(Exception):
    """The configuration could not be read or is invalid."""


def _env_overrides(environ: Mapping[str, str]) -> dict[str, str]:
    overrides: dict[str, str] = {}
    for key in FieldLayout.model_fields:
        env_key = f"{ENV_PREFIX}{key.upper()}"
        if env_key in environ:
            overrides[key] = environ[env_key]
    return overrides


def config_from_mapping(
    data: Mapping[str, Any] | None,
    *,
    environ: Mapping[str, str] | None = None,
    source: str = "<mapping>",
) -> Config:
    """Validate a parsed configuration document into a :class:`Config`.

    ``environ`` defaults to ``os.environ``; pass an empty mapping to ignore
    environment overrides.
    """

    if data is None:
        data = {}
    if not isinstance(data, Mapping):
        raise ConfigError(f"{source}: top level must be a mapping, got {type(data).__name__}")

    csv_section = data.get("csv") or {}
    if not isinstance(csv_section, Mapping):
        raise ConfigError(f"{source}: 'csv' must be a mapping")

    overrides = _env_overrides(os.environ if environ is None else environ)
    if overrides:
        _logger.debug("config:env_overrides keys=%s", ",".join(sorted(overrides)))

    try:
        return Config.model_validate(
            {
                "csv": {**csv_section, **overrides},
                "transactions_rules": data.get("transactions_rules"),
            }
        )
    except ValidationError as exc:
        raise ConfigError(f"{source}: invalid configuration:\n{exc}") from exc


def load_config(
    path: str | PathLike[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> Config:
    """Load the configuration file and return a validated :class:`Config`.

    When ``path`` is ``None`` the default ``config.yaml`` in the current
    directory is used if it exists, and plain defaults otherwise. An explicit
    ``path`` must exist.
    """

    explicit = path is not None
    p = Path(path) if path is not None else Path.cwd() / DEFAULT_CONFIG_FILE

    if not p.exists():
        if explicit:
            raise ConfigError(f"config file not found: {p}")
        _logger.debug("config:no_file path=%s using defaults", p)
        return config_from_mapping({}, environ=environ, source=str(p))

    try:
        with p.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {p}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"malformed YAML in {p}: {exc}") from exc

    _logger.debug("config:loaded path=%s", p)
    return config_from_mapping(data, environ=environ, source=str(p))


__all__ = ["DEFAULT_CONFIG_FILE", "ENV_PREFIX", "ConfigError", "config_from_mapping", "load_config"]
