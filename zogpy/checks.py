"""Factories for the generic checks shared by schemas."""

from __future__ import annotations

import operator
from typing import Any, Callable, Sequence

from zogpy.context import Check, ParseCtx, TestFunc
from zogpy.errors import ErrCode


def _same_kind(a: Any, b: Any) -> bool:
    # Booleans are a distinct type from numbers for comparison purposes.
    return isinstance(a, bool) == isinstance(b, bool)


def required() -> Check:
    """The check used to mark a schema as required.

    It has no validate function: whether a value is missing is decided by
    the schema itself.
    """
    return Check(code=ErrCode.REQUIRED)


def custom(code: str, fn: TestFunc) -> Check:
    """A user defined check with its own error code."""
    return Check(code=code, validate=fn)


def _length_check(code: ErrCode, n: int, op: Callable[[int, int], bool]) -> Check:
    def validate(value: Any, ctx: ParseCtx) -> bool:
        try:
            size = len(value)
        except TypeError:
            return False
        return op(size, n)

    return Check(code=code, params={code: n}, validate=validate)


def len_min(n: int) -> Check:
    """Length must be at least ``n``."""
    return _length_check(ErrCode.MIN, n, operator.ge)


def len_max(n: int) -> Check:
    """Length must be at most ``n``."""
    return _length_check(ErrCode.MAX, n, operator.le)


def length(n: int) -> Check:
    """Length must be exactly ``n``."""
    return _length_check(ErrCode.LEN, n, operator.eq)


def one_of(values: Sequence[Any]) -> Check:
    """Value must equal one of ``values``."""

    def validate(value: Any, ctx: ParseCtx) -> bool:
        return any(_same_kind(value, option) and value == option for option in values)

    return Check(code=ErrCode.ONE_OF, params={ErrCode.ONE_OF: values}, validate=validate)


def eq(n: Any) -> Check:
    """Value must equal ``n``."""

    def validate(value: Any, ctx: ParseCtx) -> bool:
        return _same_kind(value, n) and value == n

    return Check(code=ErrCode.EQ, params={ErrCode.EQ: n}, validate=validate)


def _ordered(code: ErrCode, n: Any, op: Callable[[Any, Any], bool]) -> Check:
    def validate(value: Any, ctx: ParseCtx) -> bool:
        if not _same_kind(value, n):
            return False
        try:
            return bool(op(value, n))
        except TypeError:
            return False

    return Check(code=code, params={code: n}, validate=validate)


def lte(n: Any) -> Check:
    """Value must be less than or equal to ``n``."""
    return _ordered(ErrCode.LTE, n, operator.le)


def gte(n: Any) -> Check:
    """Value must be greater than or equal to ``n``."""
    return _ordered(ErrCode.GTE, n, operator.ge)


def lt(n: Any) -> Check:
    """Value must be less than ``n``."""
    return _ordered(ErrCode.LT, n, operator.lt)


def gt(n: Any) -> Check:
    """Value must be greater than ``n``."""
    return _ordered(ErrCode.GT, n, operator.gt)