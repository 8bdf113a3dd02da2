"""Parse context, checks, transform signatures and zero-value helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable

from zogpy.errors import ErrsList, ErrsMap, ZogError

ErrFormatter = Callable[[ZogError, "ParseCtx"], None]
"""Fills in the message of an error."""

PreTransform = Callable[[Any, "ParseCtx"], Any]
"""Receives the input data and returns the data to continue with; raising aborts."""

PostTransform = Callable[[Any, "ParseCtx"], Any]
"""Receives the parsed value after successful validation and returns the final value."""

TestFunc = Callable[[Any, "ParseCtx"], bool]
"""Returns whether a value passes a check."""


@dataclass
class Check:
    """One validation rule, such as a minimum length."""

    code: str
    params: dict[str, Any] | None = None
    formatter: ErrFormatter | None = None
    validate: TestFunc | None = None


@dataclass
class ParseCtx:
    """State shared across one parse or validate call."""

    errors: ErrsList | ErrsMap
    formatter: ErrFormatter
    values: dict[str, Any] = field(default_factory=dict)

    def new_error(self, path: str, error: ZogError) -> None:
        """Format an error and record it under the given path."""
        self.formatter(error, self)
        self.errors.add(path, error)

    def has_errored(self) -> bool:
        return not self.errors.is_empty()

    def set_formatter(self, formatter: ErrFormatter) -> None:
        self.formatter = formatter

    def set(self, key: str, value: Any) -> None:
        self.values[key] = value

    def get(self, key: str) -> Any:
        return self.values.get(key)


def is_zero_value(value: Any) -> bool:
    """Whether the value equals the empty value of its own type."""
    if value is None:
        return True
    try:
        empty = type(value)()
    except Exception:
        return False
    try:
        return bool(value == empty)
    except Exception:
        return False


def is_parse_zero_value(value: Any, ctx: ParseCtx | None) -> bool:
    """Whether input data counts as missing: None or a blank string."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False