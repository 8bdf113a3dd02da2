"""Data provider factories that read JSON objects."""

from __future__ import annotations

import json
from typing import IO, Any

from zogpy.errors import ErrCode, ZogError
from zogpy.providers import DataProvider, DpFactory, ProviderError, new_map_data_provider

_DECODER = json.JSONDecoder()
_JSON_WHITESPACE = " \t\n\r"


def _invalid(exc: BaseException) -> ProviderError:
    return ProviderError(ZogError(code=ErrCode.INVALID_JSON, err=exc))


def decode(reader: IO[Any]) -> DpFactory:
    """A factory that reads one JSON object from ``reader`` and closes it.

    Arrays, primitives, ``null`` and malformed input raise ProviderError
    with the invalid JSON error code.
    """

    def factory() -> DataProvider:
        try:
            raw = reader.read()
        finally:
            close = getattr(reader, "close", None)
            if callable(close):
                close()
        try:
            text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
            data, _ = _DECODER.raw_decode(text.lstrip(_JSON_WHITESPACE))
        except ValueError as exc:
            raise _invalid(exc) from exc
        if data is None:
            raise _invalid(ValueError("nil json body"))
        if not isinstance(data, dict):
            raise _invalid(
                TypeError(f"cannot unmarshal {type(data).__name__} into an object")
            )
        return new_map_data_provider(data)

    return factory