"""Schema for values that may be absent."""

from __future__ import annotations

from typing import Any, Mapping

from zogpy import conf
from zogpy.base import ParseResult, _error_from_check, _new_ctx, _with_message
from zogpy.context import Check, ErrFormatter, ParseCtx, is_parse_zero_value
from zogpy.errors import ErrCode, ErrsList, ErrsMap, ZogType


class PointerSchema:
    """Wraps a schema so that missing input yields None instead of a value."""

    def __init__(self, schema: Any) -> None:
        self._schema = schema
        self._required: Check | None = None
        self._type = ZogType.PTR

    def parse(self, data: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Parse ``data``; missing input gives None. Errors are keyed by path."""
        errors = ErrsMap()
        ctx = _new_ctx(errors, ctx_values)
        value = self._process(data, "", ctx)
        return ParseResult(value, errors.errors)

    def validate(self, value: Any, ctx_values: Mapping[str, Any] | None = None) -> ParseResult:
        """Validate an existing value, which may be None."""
        errors = ErrsList()
        ctx = _new_ctx(errors, ctx_values)
        value = self._validate(value, "", ctx)
        return ParseResult(value, errors.errors)

    def not_nil(self, message: str | ErrFormatter | None = None) -> PointerSchema:
        """Report an error when the value is missing."""
        self._required = _with_message(Check(code=ErrCode.NOT_NIL), message)
        return self

    def _set_coercer(self, coercer: conf.CoercerFunc) -> None:
        self._schema._set_coercer(coercer)

    def _report_missing(self, value: Any, path: str, ctx: ParseCtx) -> None:
        if self._required is not None:
            ctx.new_error(
                path, _error_from_check(value, self._schema._type, self._required, ctx)
            )

    def _process(self, data: Any, path: str, ctx: ParseCtx) -> Any:
        if is_parse_zero_value(data, ctx):
            self._report_missing(data, path, ctx)
            return None
        return self._schema._process(data, path, ctx)

    def _validate(self, value: Any, path: str, ctx: ParseCtx) -> Any:
        if value is None:
            self._report_missing(value, path, ctx)
            return None
        return self._schema._validate(value, path, ctx)


def nullable(schema: Any) -> PointerSchema:
    """A schema that accepts missing input for ``schema``."""
    return PointerSchema(schema)