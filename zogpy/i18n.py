"""Choosing error message language per parse from a context value."""

from __future__ import annotations

from typing import Mapping

from zogpy import conf
from zogpy.conf import LangMap
from zogpy.context import ParseCtx
from zogpy.errors import ZogError

LANG_KEY = "lang"
"""Default context key that holds the language."""

__all__ = ["LANG_KEY", "LangMap", "set_languages_errs_map"]


def set_languages_errs_map(
    maps: Mapping[str, LangMap], default_lang: str, lang_key: str = LANG_KEY
) -> None:
    """Install a formatter that picks the message map by the context's language.

    The language is read from the parse context under ``lang_key``; when it
    is missing or unknown, the map for ``default_lang`` is used.
    """
    formatters = {lang: conf.new_default_formatter(m) for lang, m in maps.items()}
    fallback = conf.new_default_formatter(maps.get(default_lang, {}))

    def formatter(error: ZogError, ctx: ParseCtx | None) -> None:
        lang = ctx.get(lang_key) if ctx is not None else None
        chosen = formatters.get(lang) if isinstance(lang, str) else None
        (chosen or fallback)(error, ctx)

    conf.set_error_formatter(formatter)