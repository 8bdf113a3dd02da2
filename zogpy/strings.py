"""Schema for string values."""

from __future__ import annotations

import re
from typing import Any, Iterable
from urllib.parse import urlsplit

from zogpy import checks, conf
from zogpy.base import PrimitiveSchema
from zogpy.context import Check, ErrFormatter, ParseCtx
from zogpy.errors import ErrCode, ZogType

_EMAIL_RE = re.compile(
    r"[a-zA-Z0-9.!#$%&'*+\/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)
_UUID_RE = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)


def _trim(value: Any, ctx: ParseCtx) -> Any:
    if isinstance(value, str):
        return value.strip()
    return value


def _is_special(char: str) -> bool:
    return "!" <= char <= "/" or ":" <= char <= "@" or "[" <= char <= "`" or "{" <= char <= "~"


def _is_url(value: str) -> bool:
    if not value or value[0].isspace():
        return False
    if any(ord(char) < 0x20 or ord(char) == 0x7F for char in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    host = parts.netloc.rpartition("@")[2]
    return bool(parts.scheme) and bool(host) and not any(char.isspace() for char in host)


def _string_check(code: ErrCode, predicate, param: Any = None) -> Check:
    def validate(value: Any, ctx: ParseCtx) -> bool:
        return isinstance(value, str) and bool(predicate(value))

    params = {code: param} if param is not None else None
    return Check(code=code, params=params, validate=validate)


class StringSchema(PrimitiveSchema):
    """Parses and validates strings."""

    def __init__(self, coercer: conf.CoercerFunc | None = None) -> None:
        super().__init__(ZogType.STRING, "", coercer or conf.COERCERS.string)

    def trim(self) -> StringSchema:
        """Strip surrounding whitespace from string input before anything else."""
        self._pre_transforms.append(_trim)
        return self

    def one_of(
        self, values: Iterable[str], message: str | ErrFormatter | None = None
    ) -> StringSchema:
        """The value must be one of ``values``."""
        return self.test(checks.one_of(list(values)), message)

    def min(self, n: int, message: str | ErrFormatter | None = None) -> StringSchema:
        """At least ``n`` characters."""
        return self.test(checks.len_min(n), message)

    def max(self, n: int, message: str | ErrFormatter | None = None) -> StringSchema:
        """At most ``n`` characters."""
        return self.test(checks.len_max(n), message)

    def length(self, n: int, message: str | ErrFormatter | None = None) -> StringSchema:
        """Exactly ``n`` characters."""
        return self.test(checks.length(n), message)

    def email(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """A valid e-mail address."""
        return self.test(_string_check(ErrCode.EMAIL, _EMAIL_RE.fullmatch), message)

    def url(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """A URL with both a scheme and a host."""
        return self.test(_string_check(ErrCode.URL, _is_url), message)

    def has_prefix(self, prefix: str, message: str | ErrFormatter | None = None) -> StringSchema:
        return self.test(
            _string_check(ErrCode.HAS_PREFIX, lambda s: s.startswith(prefix), prefix), message
        )

    def has_suffix(self, suffix: str, message: str | ErrFormatter | None = None) -> StringSchema:
        return self.test(
            _string_check(ErrCode.HAS_SUFFIX, lambda s: s.endswith(suffix), suffix), message
        )

    def contains(self, sub: str, message: str | ErrFormatter | None = None) -> StringSchema:
        return self.test(_string_check(ErrCode.CONTAINS, lambda s: sub in s, sub), message)

    def contains_upper(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """At least one ASCII uppercase letter."""
        return self.test(
            _string_check(ErrCode.CONTAINS_UPPER, lambda s: any("A" <= c <= "Z" for c in s)),
            message,
        )

    def contains_digit(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """At least one ASCII digit."""
        return self.test(
            _string_check(ErrCode.CONTAINS_DIGIT, lambda s: any("0" <= c <= "9" for c in s)),
            message,
        )

    def contains_special(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """At least one ASCII punctuation character."""
        return self.test(
            _string_check(ErrCode.CONTAINS_SPECIAL, lambda s: any(map(_is_special, s))),
            message,
        )

    def uuid(self, message: str | ErrFormatter | None = None) -> StringSchema:
        """A UUID in its canonical hyphenated form, any letter case."""
        return self.test(_string_check(ErrCode.UUID, _UUID_RE.fullmatch), message)

    def match(
        self, pattern: str | re.Pattern[str], message: str | ErrFormatter | None = None
    ) -> StringSchema:
        """The value must contain a match of ``pattern``."""
        compiled = re.compile(pattern)
        return self.test(
            _string_check(ErrCode.MATCH, compiled.search, compiled.pattern), message
        )


def string(coercer: conf.CoercerFunc | None = None) -> StringSchema:
    """A new string schema, optionally with its own coercer."""
    return StringSchema(coercer)