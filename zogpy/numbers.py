"""Schemas for integer and floating point numbers."""

from __future__ import annotations

from typing import Any, Iterable

from zogpy import checks, conf
from zogpy.base import PrimitiveSchema
from zogpy.context import ErrFormatter
from zogpy.errors import ZogType

_Message = "str | ErrFormatter | None"


class NumberSchema(PrimitiveSchema):
    """Parses and validates numbers."""

    def __init__(self, zero: int | float, coercer: conf.CoercerFunc) -> None:
        super().__init__(ZogType.NUMBER, zero, coercer)

    def one_of(
        self, values: Iterable[Any], message: str | ErrFormatter | None = None
    ) -> NumberSchema:
        """The value must be one of ``values``."""
        return self.test(checks.one_of(list(values)), message)

    def eq(self, n: Any, message: str | ErrFormatter | None = None) -> NumberSchema:
        return self.test(checks.eq(n), message)

    def lte(self, n: Any, message: str | ErrFormatter | None = None) -> NumberSchema:
        return self.test(checks.lte(n), message)

    def gte(self, n: Any, message: str | ErrFormatter | None = None) -> NumberSchema:
        return self.test(checks.gte(n), message)

    def lt(self, n: Any, message: str | ErrFormatter | None = None) -> NumberSchema:
        return self.test(checks.lt(n), message)

    def gt(self, n: Any, message: str | ErrFormatter | None = None) -> NumberSchema:
        return self.test(checks.gt(n), message)


def integer(coercer: conf.CoercerFunc | None = None) -> NumberSchema:
    """A new integer schema, optionally with its own coercer."""
    return NumberSchema(0, coercer or conf.COERCERS.integer)


def floating(coercer: conf.CoercerFunc | None = None) -> NumberSchema:
    """A new float schema, optionally with its own coercer."""
    return NumberSchema(0.0, coercer or conf.COERCERS.floating)