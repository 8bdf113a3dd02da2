"""The processing pipeline shared by primitive schemas."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping

from zogpy import checks, conf
from zogpy.context import (
    Check,
    ErrFormatter,
    ParseCtx,
    PostTransform,
    PreTransform,
    is_parse_zero_value,
    is_zero_value,
)
from zogpy.errors import ErrCode, ErrsList, ErrsMap, ZogError

Message = "str | ErrFormatter | None"


@dataclass
class ParseResult:
    """The outcome of parsing or validating: the value and its errors."""

    value: Any
    errors: Any

    @property
    def ok(self) -> bool:
        return not self.errors


def _new_ctx(errors: ErrsList | ErrsMap, ctx_values: Mapping[str, Any] | None) -> ParseCtx:
    return ParseCtx(
        errors=errors, formatter=conf.get_error_formatter(), values=dict(ctx_values or {})
    )


def _error_from_check(value: Any, dtype: str, check: Check, ctx: ParseCtx) -> ZogError:
    error = ZogError(code=check.code, params=check.params, dtype=dtype, value=value)
    if check.formatter is not None:
        check.formatter(error, ctx)
    return error


def _wrap_error(
    value: Any, dtype: str, exc: BaseException, code: str = ErrCode.UNKNOWN
) -> ZogError:
    return ZogError(code=code, dtype=dtype, value=value, err=exc)


def _with_message(check: Check, message: str | ErrFormatter | None) -> Check:
    """A copy of ``check`` whose errors get ``message``."""
    check = replace(check)
    if message is None:
        return check
    if callable(message):
        check.formatter = message
    else:

        def set_message(error: ZogError, ctx: ParseCtx) -> None:
            error.message = message

        check.formatter = set_message
    return check


class PrimitiveSchema:
    """Schema for a single value: transforms, coercion, default, catch and checks."""

    def __init__(self, zog_type: str, zero: Any, coercer: conf.CoercerFunc) -> None:
        self._type = zog_type
        self._zero = zero
        self._coercer = coercer
        self._pre_transforms: list[PreTransform] = []
        self._checks: list[Check] = []
        self._post_transforms: list[PostTransform] = []
        self._default: Any = None
        self._required: Check | None = None
        self._catch: Any = None

    # public API

    def parse(self, data: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Coerce and check ``data``; values in ``ctx_values`` are visible to checks."""
        errors = ErrsList()
        ctx = _new_ctx(errors, ctx_values)
        value = self._process(data, "", ctx)
        return ParseResult(value, errors.errors)

    def validate(self, value: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Check an already typed value without coercing it."""
        errors = ErrsList()
        ctx = _new_ctx(errors, ctx_values)
        value = self._validate(value, "", ctx)
        return ParseResult(value, errors.errors)

    def pre_transform(self, transform: PreTransform) -> PrimitiveSchema:
        self._pre_transforms.append(transform)
        return self

    def post_transform(self, transform: PostTransform) -> PrimitiveSchema:
        self._post_transforms.append(transform)
        return self

    def required(self, message: str | ErrFormatter | None = None) -> PrimitiveSchema:
        self._required = _with_message(checks.required(), message)
        return self

    def optional(self) -> PrimitiveSchema:
        self._required = None
        return self

    def default(self, value: Any) -> PrimitiveSchema:
        self._default = value
        return self

    def catch(self, value: Any) -> PrimitiveSchema:
        """Value to return, without errors, when coercion or a check fails."""
        self._catch = value
        return self

    def test(self, check: Check, message: str | ErrFormatter | None = None) -> PrimitiveSchema:
        self._checks.append(_with_message(check, message))
        return self

    # internals

    def _set_coercer(self, coercer: conf.CoercerFunc) -> None:
        self._coercer = coercer

    def _process(self, data: Any, path: str, ctx: ParseCtx) -> Any:
        for transform in self._pre_transforms:
            try:
                data = transform(data, ctx)
            except Exception as exc:
                if self._catch is not None:
                    return self._catch
                ctx.new_error(path, _wrap_error(data, self._type, exc))
                return self._zero
        value = self._coerce(data, path, ctx)
        return self._post(value, data, path, ctx)

    def _coerce(self, data: Any, path: str, ctx: ParseCtx) -> Any:
        if is_parse_zero_value(data, ctx):
            if self._default is not None:
                value = self._default
            elif self._required is None:
                return self._zero
            else:
                ctx.new_error(path, _error_from_check(data, self._type, self._required, ctx))
                return self._zero
        else:
            try:
                value = self._coercer(data)
            except Exception as exc:
                if self._catch is not None:
                    return self._catch
                ctx.new_error(path, _wrap_error(data, self._type, exc, ErrCode.COERCE))
                return self._zero
        return self._run_checks(value, data, path, ctx)

    def _validate(self, value: Any, path: str, ctx: ParseCtx) -> Any:
        for transform in self._pre_transforms:
            try:
                value = transform(value, ctx)
            except Exception as exc:
                if self._catch is not None:
                    return self._catch
                ctx.new_error(path, _wrap_error(value, self._type, exc))
                return value
        if is_zero_value(value):
            if self._default is not None:
                value = self._default
            elif self._required is None:
                return self._post(value, value, path, ctx)
            else:
                ctx.new_error(path, _error_from_check(value, self._type, self._required, ctx))
                return value
        value = self._run_checks(value, value, path, ctx)
        return self._post(value, value, path, ctx)

    def _run_checks(self, value: Any, reported: Any, path: str, ctx: ParseCtx) -> Any:
        for check in self._checks:
            if not check.validate(value, ctx):
                if self._catch is not None:
                    return self._catch
                ctx.new_error(path, _error_from_check(reported, self._type, check, ctx))
        return value

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