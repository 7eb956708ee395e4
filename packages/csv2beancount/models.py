"""Data models for ``csv2beancount``.

Configuration values (:class:`FieldLayout`, :class:`Rule`, :class:`RuleSet`,
:class:`Config`) are immutable Pydantic models built once at startup and
passed explicitly into the conversion functions. :class:`Entry` is the frozen
per-row result handed to the renderer.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import asdict, dataclass
from typing import Any, TypeAlias

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PrivateAttr,
    field_validator,
    model_validator,
)

# A single tokenized CSV record.
RawRow: TypeAlias = Sequence[str]

DEFAULT_ACCOUNT = "Expenses:Unknown"
PROCESSING_ACCOUNT = "Assets:Unknown"
DATE_LAYOUT_OUT = "2006-01-02"
SEPARATOR = ";"


# ---------------------------------------------------------------------------
# Field layout
# ---------------------------------------------------------------------------


class FieldLayout(BaseModel):
    """Where each semantic field lives in a row, plus per-file settings.

    Column indices are zero-based. ``fields`` controls width validation of
    the CSV reader: ``-1`` disables it, ``0`` infers the width from the first
    data row and any positive value is the exact expected width.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    amount_in: int = Field(default=0, ge=0)
    amount_out: int = Field(default=0, ge=0)
    currency: str = ""
    date: int = Field(default=0, ge=0)
    date_layout_in: str = ""
    date_layout_out: str = DATE_LAYOUT_OUT
    default_account: str = DEFAULT_ACCOUNT
    description: int = Field(default=0, ge=0)
    fields: int = Field(default=0, ge=-1)
    payee: int = Field(default=0, ge=0)
    processing_account: str = PROCESSING_ACCOUNT
    separator: str = SEPARATOR
    skip: int = Field(default=0, ge=0)

    @field_validator("separator")
    @classmethod
    def _single_character(cls, v: str) -> str:
        if len(v) != 1:
            raise ValueError(f"separator must be exactly one character, got {v!r}")
        if v in {'"', "\r", "\n"}:
            raise ValueError(f"separator cannot be {v!r}")
        return v

    @property
    def single_amount_column(self) -> bool:
        """Whether one signed column carries both credits and debits."""
        return self.amount_in == self.amount_out

    def required_width(self) -> int:
        """Smallest row length that satisfies every configured index."""
        return (
            max(self.date, self.payee, self.description, self.amount_in, self.amount_out) + 1
        )


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


def _compile(pattern: str) -> re.Pattern[str] | None:
    # An empty pattern would match everything; treat it as "no pattern".
    if not pattern:
        return None
    return re.compile(pattern)


class Rule(BaseModel):
    """A named directive overriding the counter account and comment.

    Patterns are regular expressions searched anywhere in the field. They are
    compiled when the rule is built, so an invalid expression fails
    validation instead of surfacing while rows are processed.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    match_payee: str = ""
    match_description: str = ""
    set_account: str = ""
    set_comment: str = ""

    _payee_re: re.Pattern[str] | None = PrivateAttr(default=None)
    _description_re: re.Pattern[str] | None = PrivateAttr(default=None)

    @field_validator(
        "name", "match_payee", "match_description", "set_account", "set_comment", mode="before"
    )
    @classmethod
    def _scalar_as_str(cls, v: Any) -> Any:
        # YAML reads "1234" unquoted as a number; rule values are always text.
        if v is None:
            return ""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("match_payee", "match_description")
    @classmethod
    def _valid_regex(cls, v: str) -> str:
        try:
            _compile(v)
        except re.error as exc:
            raise ValueError(f"invalid regular expression {v!r}: {exc}") from exc
        return v

    def model_post_init(self, __context: Any) -> None:
        self._payee_re = _compile(self.match_payee)
        self._description_re = _compile(self.match_description)

    @property
    def payee_pattern(self) -> re.Pattern[str] | None:
        return self._payee_re

    @property
    def description_pattern(self) -> re.Pattern[str] | None:
        return self._description_re


class RuleSet(Sequence[Rule]):
    """Read-only collection of rules iterated in lexicographic name order.

    Configuration files declare rules as a mapping, whose order carries no
    meaning. Sorting by name makes the outcome of overlapping rules
    reproducible.
    """

    __slots__ = ("_rules",)

    def __init__(self, rules: Mapping[str, Rule | Mapping[str, Any]] | None = None) -> None:
        built: list[Rule] = []
        for key, rule in (rules or {}).items():
            name = str(key)
            if isinstance(rule, Rule):
                built.append(rule if rule.name == name else rule.model_copy(update={"name": name}))
            else:
                built.append(Rule.model_validate({**dict(rule), "name": name}))
        self._rules: tuple[Rule, ...] = tuple(sorted(built, key=lambda r: r.name))

    def __getitem__(self, index):  # type: ignore[override]
        return self._rules[index]

    def __len__(self) -> int:
        return len(self._rules)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RuleSet):
            return NotImplemented
        return self._rules == other._rules

    def __hash__(self) -> int:
        return hash(self._rules)

    def __repr__(self) -> str:
        return f"RuleSet({[r.name for r in self._rules]!r})"

    def names(self) -> list[str]:
        return [r.name for r in self._rules]


class Config(BaseModel):
    """Complete run configuration: the field layout and the rule set."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="ignore")

    csv: FieldLayout = Field(default_factory=FieldLayout)
    transactions_rules: RuleSet = Field(default_factory=RuleSet)

    @field_validator("csv", mode="before")
    @classmethod
    def _empty_layout(cls, v: Any) -> Any:
        return {} if v is None else v

    @model_validator(mode="before")
    @classmethod
    def _build_rules(cls, data: Any) -> Any:
        if not isinstance(data, Mapping):
            return data
        rules = data.get("transactions_rules")
        if isinstance(rules, RuleSet):
            return data
        if rules is None:
            return {**data, "transactions_rules": RuleSet()}
        if not isinstance(rules, Mapping):
            raise ValueError("transactions_rules must be a mapping of rule name to rule")
        for name, rule in rules.items():
            if not isinstance(rule, (Mapping, Rule)):
                raise ValueError(f"rule {name!r} must be a mapping")
        return {**data, "transactions_rules": RuleSet(rules)}


# ---------------------------------------------------------------------------
# Output record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Entry:
    """A resolved double-entry record for one CSV row.

    ``amount_in`` and ``amount_out`` carry the same magnitude with opposite
    signs. ``raw`` echoes the original row for the audit comment line.
    """

    account_in: str
    account_out: str
    amount_in: str
    amount_out: str
    comment: str
    currency: str
    date: str
    description: str
    payee: str
    raw: str

    def as_template_fields(self) -> dict[str, str]:
        """Mapping of template field name to value."""
        return asdict(self)


__all__ = [
    "DATE_LAYOUT_OUT",
    "DEFAULT_ACCOUNT",
    "PROCESSING_ACCOUNT",
    "SEPARATOR",
    "Config",
    "Entry",
    "FieldLayout",
    "RawRow",
    "Rule",
    "RuleSet",
]
