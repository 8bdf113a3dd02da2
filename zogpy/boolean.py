"""Schema for boolean values."""

from __future__ import annotations

from zogpy import checks, conf
from zogpy.base import PrimitiveSchema
from zogpy.errors import ZogType


class BoolSchema(PrimitiveSchema):
    """Parses and validates booleans."""

    def __init__(self, coercer: conf.CoercerFunc | None = None) -> None:
        super().__init__(ZogType.BOOL, False, coercer or conf.COERCERS.boolean)

    def true(self) -> BoolSchema:
        """The value must be True."""
        self._checks.append(checks.eq(True))
        return self

    def false(self) -> BoolSchema:
        """The value must be False."""
        self._checks.append(checks.eq(False))
        return self


def boolean(coercer: conf.CoercerFunc | None = None) -> BoolSchema:
    """A new boolean schema, optionally with its own coercer."""
    return BoolSchema(coercer)