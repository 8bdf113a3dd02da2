"""Schema for lists of values."""

from __future__ import annotations

import operator
from typing import Any, Callable, Mapping

from zogpy import checks, conf
from zogpy.base import ParseResult, _error_from_check, _new_ctx, _with_message, _wrap_error
from zogpy.context import (
    Check,
    ErrFormatter,
    ParseCtx,
    PostTransform,
    PreTransform,
    is_parse_zero_value,
)
from zogpy.errors import ErrCode, ErrsMap, ZogType, push_path


def _size_check(code: ErrCode, n: int, op: Callable[[int, int], bool]) -> Check:
    def validate(value: Any, ctx: ParseCtx) -> bool:
        return isinstance(value, (list, tuple)) and op(len(value), n)

    return Check(code=code, params={code: n}, validate=validate)


def _contains_check(wanted: Any) -> Check:
    def validate(value: Any, ctx: ParseCtx) -> bool:
        if not isinstance(value, (list, tuple)):
            return False
        return any(type(item) is type(wanted) and item == wanted for item in value)

    return Check(code=ErrCode.CONTAINS, params={ErrCode.CONTAINS: wanted}, validate=validate)


class SliceSchema:
    """Parses and validates lists, running an item schema over every element."""

    def __init__(self, schema: Any = None, coercer: conf.CoercerFunc | None = None) -> None:
        self._schema = schema
        self._coercer = coercer or conf.COERCERS.slice
        self._pre_transforms: list[PreTransform] = []
        self._checks: list[Check] = []
        self._post_transforms: list[PostTransform] = []
        self._required: Check | None = None
        self._default: Any = None
        self._type = ZogType.SLICE

    # public API

    def parse(self, data: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Coerce ``data`` to a list and parse each item. Errors are keyed by path."""
        errors = ErrsMap()
        ctx = _new_ctx(errors, ctx_values)
        value = self._process(data, "", ctx)
        return ParseResult(value, errors.errors)

    def validate(self, value: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Check an existing list and its items. Errors are keyed by path."""
        errors = ErrsMap()
        ctx = _new_ctx(errors, ctx_values)
        value = self._validate(value, "", ctx)
        return ParseResult(value, errors.errors)

    def pre_transform(self, transform: PreTransform) -> SliceSchema:
        self._pre_transforms.append(transform)
        return self

    def post_transform(self, transform: PostTransform) -> SliceSchema:
        self._post_transforms.append(transform)
        return self

    def required(self, message: str | ErrFormatter | None = None) -> SliceSchema:
        self._required = _with_message(checks.required(), message)
        return self

    def optional(self) -> SliceSchema:
        self._required = None
        return self

    def default(self, value: Any) -> SliceSchema:
        self._default = value
        return self

    def test(self, check: Check, message: str | ErrFormatter | None = None) -> SliceSchema:
        self._checks.append(_with_message(check, message))
        return self

    def min(self, n: int, message: str | ErrFormatter | None = None) -> SliceSchema:
        """At least ``n`` items."""
        return self.test(_size_check(ErrCode.MIN, n, operator.ge), message)

    def max(self, n: int, message: str | ErrFormatter | None = None) -> SliceSchema:
        """At most ``n`` items."""
        return self.test(_size_check(ErrCode.MAX, n, operator.le), message)

    def length(self, n: int, message: str | ErrFormatter | None = None) -> SliceSchema:
        """Exactly ``n`` items."""
        return self.test(_size_check(ErrCode.LEN, n, operator.eq), message)

    def contains(self, value: Any, message: str | ErrFormatter | None = None) -> SliceSchema:
        """At least one item equal to ``value`` and of the same type."""
        return self.test(_contains_check(value), message)

    # internals

    def _set_coercer(self, coercer: conf.CoercerFunc) -> None:
        self._coercer = coercer

    def _process(self, data: Any, path: str, ctx: ParseCtx) -> Any:
        for transform in self._pre_transforms:
            try:
                data = transform(data, ctx)
            except Exception as exc:
                ctx.new_error(path, _wrap_error(data, self._type, exc))
                return []
        value = self._build(data, path, ctx)
        return self._post(value, data, path, ctx)

    def _build(self, data: Any, path: str, ctx: ParseCtx) -> list[Any]:
        if is_parse_zero_value(data, ctx):
            if self._default is not None:
                items = self._default
            elif self._required is None:
                return []
            else:
                ctx.new_error(path, _error_from_check(data, self._type, self._required, ctx))
                return []
        else:
            try:
                items = self._coercer(data)
            except Exception as exc:
                ctx.new_error(path, _wrap_error(data, self._type, exc, ErrCode.COERCE))
                return []
        if self._schema is None:
            value = list(items)
        else:
            value = [
                self._schema._process(item, push_path(path, f"[{index}]"), ctx)
                for index, item in enumerate(items)
            ]
        self._run_checks(value, data, path, ctx)
        return value

    def _validate(self, value: Any, path: str, ctx: ParseCtx) -> Any:
        for transform in self._pre_transforms:
            try:
                value = transform(value, ctx)
            except Exception as exc:
                ctx.new_error(path, _wrap_error(value, self._type, exc))
                return value
        if value is None or len(value) == 0:
            if self._default is not None:
                value = self._default
            elif self._required is None:
                return self._post(value, value, path, ctx)
            else:
                ctx.new_error(path, _error_from_check(value, self._type, self._required, ctx))
                return value
        if self._schema is not None:
            value = [
                self._schema._validate(item, push_path(path, f"[{index}]"), ctx)
                for index, item in enumerate(value)
            ]
        else:
            value = list(value)
        self._run_checks(value, value, path, ctx)
        return self._post(value, value, path, ctx)

    def _run_checks(self, value: Any, reported: Any, path: str, ctx: ParseCtx) -> None:
        for check in self._checks:
            if not check.validate(value, ctx):
                ctx.new_error(path, _error_from_check(reported, self._type, check, ctx))

    def _post(self, value: Any, reported: Any, path: str, ctx: ParseCtx) -> Any:
        if ctx.has_errored():
            return value
        for transform in self._post_transforms:
            try:
                value = transform(value, ctx)
            except Exception as exc:
                ctx.new_error(path, _wrap_error(reported, self._type, exc))
                return value
        return value


def list_of(schema: Any, coercer: conf.CoercerFunc | None = None) -> SliceSchema:
    """A new list schema whose items follow ``schema``."""
    return SliceSchema(schema, coercer)