"""Validation errors, the collections that gather them, and error paths."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

ERROR_KEY_FIRST = "$first"
ERROR_KEY_ROOT = "$root"


class ErrCode(str, Enum):
    """Identifiers of the built-in checks and failures."""

    REQUIRED = "required"
    NOT_NIL = "not_nil"
    MIN = "min"
    MAX = "max"
    LEN = "len"
    EMAIL = "email"
    UUID = "uuid"
    MATCH = "match"
    URL = "url"
    HAS_PREFIX = "prefix"
    HAS_SUFFIX = "suffix"
    CONTAINS = "contained"
    CONTAINS_DIGIT = "contains_digit"
    CONTAINS_UPPER = "contains_upper"
    CONTAINS_LOWER = "contains_lower"
    CONTAINS_SPECIAL = "contains_special"
    ONE_OF = "one_of_options"
    FALLBACK = "fallback"
    TRUE = "true"
    FALSE = "false"
    EQ = "eq"
    LTE = "lte"
    LT = "lt"
    GTE = "gte"
    GT = "gt"
    AFTER = "after"
    BEFORE = "before"
    COERCE = "coerce"
    UNKNOWN = "unknown"
    INVALID_JSON = "invalid_json"
    ZHTTP_INVALID_FORM = "invalid_form"
    ZHTTP_INVALID_QUERY = "invalid_query"

    def __str__(self) -> str:
        return self.value


class ZogType(str, Enum):
    """The kind of value a schema produces."""

    STRING = "string"
    BOOL = "bool"
    NUMBER = "number"
    TIME = "time"
    SLICE = "slice"
    STRUCT = "struct"
    PTR = "ptr"

    def __str__(self) -> str:
        return self.value


def safe_string(value: Any) -> str:
    """Render a value for display, showing ``<nil>`` for None."""
    if value is None:
        return "<nil>"
    return f"{value}"


def push_path(path: str, segment: str) -> str:
    """Extend an error path with a field name or an ``[index]`` segment."""
    if not path:
        return segment
    if segment.startswith("["):
        return path + segment
    return f"{path}.{segment}"


@dataclass
class ZogError:
    """A single validation failure."""

    code: str
    params: dict[str, Any] | None = None
    dtype: str = ""
    value: Any = None
    message: str = ""
    err: BaseException | None = None

    def __str__(self) -> str:
        return (
            f"ZogError{{Code: {safe_string(self.code)}, "
            f"Params: {safe_string(self.params)}, "
            f"Type: {safe_string(self.dtype)}, "
            f"Value: {safe_string(self.value)}, "
            f"Message: '{safe_string(self.message)}', "
            f"Error: {safe_string(self.err)}}}"
        )


@dataclass
class ErrsList:
    """Flat collection of errors, used by primitive schemas."""

    errors: list[ZogError] = field(default_factory=list)

    def add(self, path: str, error: ZogError) -> None:
        self.errors.append(error)

    def is_empty(self) -> bool:
        return not self.errors


@dataclass
class ErrsMap:
    """Errors keyed by path, used by complex schemas.

    The first error ever added is also stored under ``$first``; errors
    without a path go under ``$root``.
    """

    errors: dict[str, list[ZogError]] = field(default_factory=dict)

    def add(self, path: str, error: ZogError) -> None:
        if not self.errors:
            self.errors[ERROR_KEY_FIRST] = [error]
        self.errors.setdefault(path or ERROR_KEY_ROOT, []).append(error)

    def is_empty(self) -> bool:
        return not self.errors