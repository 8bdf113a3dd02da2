"""Data providers: uniform key access over the input of struct and map schemas."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable

from zogpy.errors import ErrCode, ZogError

DpFactory = Callable[[], "DataProvider"]
"""Builds a data provider lazily; raises ProviderError when it cannot."""


class DataProvider(ABC):
    """Key based access to the data being parsed."""

    @abstractmethod
    def get(self, key: str) -> Any:
        """The value stored under ``key``, or None."""

    @abstractmethod
    def get_nested_provider(self, key: str) -> DataProvider:
        """A provider over the value stored under ``key``."""

    @abstractmethod
    def underlying(self) -> Any:
        """The value this provider wraps."""


@dataclass
class MapDataProvider(DataProvider):
    """Provider over a mapping with string keys."""

    mapping: Mapping[str, Any]

    def get(self, key: str) -> Any:
        return self.mapping.get(key)

    def get_nested_provider(self, key: str) -> DataProvider:
        try:
            return try_new_data_provider(self.mapping.get(key))
        except ProviderError as exc:
            return exc.provider

    def underlying(self) -> Any:
        return self.mapping


@dataclass
class EmptyDataProvider(DataProvider):
    """Provider that holds no keys; it may still remember what it replaced."""

    wrapped: Any = None

    def get(self, key: str) -> Any:
        return None

    def get_nested_provider(self, key: str) -> DataProvider:
        return self

    def underlying(self) -> Any:
        return self.wrapped


class ProviderError(Exception):
    """Raised when a value cannot be turned into a data provider."""

    def __init__(self, error: ZogError, provider: DataProvider | None = None) -> None:
        super().__init__(str(error))
        self.error = error
        self.provider = provider if provider is not None else EmptyDataProvider()


def _coerce_error(text: str) -> ZogError:
    return ZogError(code=ErrCode.COERCE, err=TypeError(text))


def new_map_data_provider(mapping: Mapping[str, Any] | None) -> DataProvider:
    """Wrap a mapping; None gives an empty provider."""
    if mapping is None:
        return EmptyDataProvider()
    return MapDataProvider(mapping)


def try_new_data_provider(value: Any) -> DataProvider:
    """Turn a provider, a provider factory or a string keyed mapping into a provider.

    Raises ProviderError for anything else; the exception carries an empty
    provider that wraps the rejected value.
    """
    if isinstance(value, DataProvider):
        return value
    if isinstance(value, Mapping):
        bad_key = next((key for key in value if not isinstance(key, str)), None)
        if bad_key is not None:
            raise ProviderError(
                _coerce_error(
                    f"could not convert map[{type(bad_key).__name__}]any to a data provider"
                ),
                EmptyDataProvider(value),
            )
        return MapDataProvider(value)
    if callable(value):
        return value()
    if value is None:
        raise ProviderError(
            _coerce_error("could not convert None to a data provider"), EmptyDataProvider()
        )
    raise ProviderError(
        _coerce_error(
            f"could not convert type {type(value).__name__} to a data provider. unsupported type"
        ),
        EmptyDataProvider(value),
    )