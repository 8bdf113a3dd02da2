"""Default coercers and the error message formatter used by all schemas."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Callable

from zogpy.context import ErrFormatter, ParseCtx
from zogpy.errors import ErrCode, ZogError
from zogpy.lang import en

CoercerFunc = Callable[[Any], Any]
"""Turns an input value into the schema's type, raising if it cannot."""

LangMap = dict[str, dict[str, str]]
"""Error message templates keyed by schema type, then error code."""

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_RE = re.compile(r"[+-]?[0-9]+")
_RFC3339_RE = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?(Z|[+-]\d{2}:\d{2})"
)


def _format_float(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "+Inf" if x > 0 else "-Inf"
    if x == 0:
        return "-0" if math.copysign(1.0, x) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(x)).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    text = "".join(str(d) for d in digits)
    prefix = "-" if sign else ""
    count = len(digits)
    point = count + exponent
    exp10 = point - 1
    if exp10 < -4 or exp10 >= 6:
        mantissa = text[0] + ("." + text[1:] if count > 1 else "")
        exp_sign = "-" if exp10 < 0 else "+"
        return f"{prefix}{mantissa}e{exp_sign}{abs(exp10):02d}"
    if point <= 0:
        return f"{prefix}0.{'0' * -point}{text}"
    if point >= count:
        return prefix + text + "0" * (point - count)
    return f"{prefix}{text[:point]}.{text[point:]}"


def _format_time(t: datetime) -> str:
    if t.tzinfo is None:
        t = t.astimezone()
    text = t.strftime("%Y-%m-%d %H:%M:%S")
    if t.microsecond:
        text += "." + f"{t.microsecond:06d}".rstrip("0")
    offset = t.utcoffset() or timedelta(0)
    total = int(offset.total_seconds())
    sign = "-" if total < 0 else "+"
    hours, minutes = divmod(abs(total) // 60, 60)
    offset_text = f"{sign}{hours:02d}{minutes:02d}"
    name = t.tzname()
    if total == 0 and (name is None or name.startswith("UTC")):
        name = "UTC"
    elif name is None or name.startswith("UTC"):
        name = offset_text
    return f"{text} {offset_text} {name}"


def _format_value(value: Any) -> str:
    """Render a value in the plain style used by error messages."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return str(value)
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return "[" + " ".join(_format_value(item) for item in value) + "]"
    if isinstance(value, dict):
        try:
            keys = sorted(value)
        except TypeError:
            keys = list(value)
        pairs = (f"{_format_value(k)}:{_format_value(value[k])}" for k in keys)
        return "map[" + " ".join(pairs) + "]"
    return str(value)


def time_coercer_factory(parse: Callable[[str], datetime]) -> CoercerFunc:
    """Build a time coercer that uses ``parse`` for string input."""

    def coerce(data: Any) -> datetime:
        if isinstance(data, datetime):
            return data
        if isinstance(data, str):
            try:
                return parse(data)
            except ValueError as exc:
                raise ValueError(f"failed to parse time: {exc}") from exc
        if isinstance(data, int) and not isinstance(data, bool):
            return datetime.fromtimestamp(data, timezone.utc).astimezone()
        raise TypeError(
            f"input data is an unsupported type to coerce to time.Time: {_format_value(data)}"
        )

    return coerce


def _parse_rfc3339(text: str) -> datetime:
    match = _RFC3339_RE.fullmatch(text)
    if match is None:
        raise ValueError(f"cannot parse {text!r} as RFC3339")
    year, month, day, hour, minute, second, fraction, zone = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    if zone == "Z":
        tz = timezone.utc
    else:
        sign = -1 if zone[0] == "-" else 1
        zone_hours, zone_minutes = int(zone[1:3]), int(zone[4:6])
        if zone_hours > 23 or zone_minutes > 59:
            raise ValueError(f"time zone offset out of range in {text!r}")
        tz = timezone(sign * timedelta(hours=zone_hours, minutes=zone_minutes))
    return datetime(
        int(year), int(month), int(day), int(hour), int(minute), int(second), micro, tzinfo=tz
    )


def coerce_bool(data: Any) -> bool:
    """Coerce booleans, "on"/"off", boolean words and 0/1 to a bool."""
    if isinstance(data, bool):
        return data
    if isinstance(data, str):
        # Form toggles send "on" and "off".
        if data == "on":
            return True
        if data == "off":
            return False
        if data in _TRUE_WORDS:
            return True
        if data in _FALSE_WORDS:
            return False
        raise ValueError(f"failed to coerce string to parse bool: invalid syntax: {data!r}")
    if isinstance(data, int):
        if data == 0:
            return False
        if data == 1:
            return True
        raise ValueError(
            f"input data is an unsupported type to coerce to bool: {_format_value(data)}"
        )
    raise TypeError(f"input data is an unsupported type to coerce to bool: {_format_value(data)}")


def coerce_string(data: Any) -> str:
    """Coerce any value to its textual form."""
    if isinstance(data, str):
        return data
    return _format_value(data)


def coerce_int(data: Any) -> int:
    """Coerce integers, decimal strings, floats (truncated) and booleans to an int."""
    if isinstance(data, bool):
        return 1 if data else 0
    if isinstance(data, int):
        return data
    if isinstance(data, str):
        if _INT_RE.fullmatch(data) is None:
            raise ValueError(f"failed to coerce string int: invalid syntax: {data!r}")
        value = int(data)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"failed to coerce string int: value out of range: {data!r}")
        return value
    if isinstance(data, float):
        try:
            return int(data)
        except (OverflowError, ValueError) as exc:
            raise ValueError(f"failed to coerce float to int: {exc}") from exc
    raise TypeError(f"input data is an unsupported type to coerce to int: {_format_value(data)}")


def coerce_float(data: Any) -> float:
    """Coerce integers, numeric strings and floats to a float."""
    if isinstance(data, bool):
        raise TypeError(
            f"input data is an unsupported type to coerce to float64: {_format_value(data)}"
        )
    if isinstance(data, int):
        return float(data)
    if isinstance(data, float):
        return data
    if isinstance(data, str):
        if not data or data != data.strip() or "_" in data:
            raise ValueError(f"failed to coerce string to float64: invalid syntax: {data!r}")
        try:
            value = float(data)
        except ValueError:
            try:
                value = float.fromhex(data)
            except ValueError as exc:
                raise ValueError(
                    f"failed to coerce string to float64: invalid syntax: {data!r}"
                ) from exc
        if math.isinf(value) and "inf" not in data.lower():
            raise ValueError(f"failed to coerce string to float64: value out of range: {data!r}")
        return value
    raise TypeError(
        f"input data is an unsupported type to coerce to float64: {_format_value(data)}"
    )


_rfc3339_time_coercer = time_coercer_factory(_parse_rfc3339)


def coerce_time(data: Any) -> datetime:
    """Coerce datetimes, RFC 3339 strings and Unix seconds to a datetime."""
    return _rfc3339_time_coercer(data)


def coerce_slice(data: Any) -> list[Any] | tuple[Any, ...]:
    """Return sequences unchanged and box any other value in a list."""
    if isinstance(data, (list, tuple)):
        return data
    return [data]


@dataclass
class Coercers:
    """The coercer used by each kind of schema."""

    boolean: CoercerFunc = coerce_bool
    string: CoercerFunc = coerce_string
    integer: CoercerFunc = coerce_int
    floating: CoercerFunc = coerce_float
    time: CoercerFunc = coerce_time
    slice: CoercerFunc = coerce_slice


DEFAULT_COERCERS = Coercers()
"""The built-in coercers; left untouched."""

COERCERS = Coercers()
"""The coercers schemas pick up when created; change its fields to customise."""


def new_default_formatter(lang_map: LangMap) -> ErrFormatter:
    """Build a formatter that fills messages from ``lang_map`` templates.

    Errors that already carry a message are left alone. Unknown codes get
    the type's fallback message.
    """

    def formatter(error: ZogError, ctx: ParseCtx | None) -> None:
        if error.message:
            return
        messages = lang_map.get(str(error.dtype), {})
        template = messages.get(str(error.code))
        if template is None:
            error.message = messages.get(ErrCode.FALLBACK.value, "")
            return
        for key, value in (error.params or {}).items():
            template = template.replace("{{" + str(key) + "}}", _format_value(value))
        error.message = template.replace("{{value}}", _format_value(error.value))

    return formatter


DEFAULT_ERR_MSG_MAP: LangMap = en.MAP
DEFAULT_ERROR_FORMATTER: ErrFormatter = new_default_formatter(DEFAULT_ERR_MSG_MAP)

_error_formatter: ErrFormatter = DEFAULT_ERROR_FORMATTER


def get_error_formatter() -> ErrFormatter:
    """The formatter new parse contexts use."""
    return _error_formatter


def set_error_formatter(formatter: ErrFormatter) -> None:
    """Replace the formatter used by all schemas."""
    global _error_formatter
    _error_formatter = formatter


def reset_error_formatter() -> None:
    """Restore the built-in English formatter."""
    set_error_formatter(DEFAULT_ERROR_FORMATTER)