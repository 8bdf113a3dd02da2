import pytest

from zogpy.errors import ErrCode
from zogpy.providers import (
    EmptyDataProvider,
    MapDataProvider,
    ProviderError,
    new_map_data_provider,
    try_new_data_provider,
)


def test_map_provider_get_and_missing_key():
    provider = MapDataProvider({"name": "Jane"})
    assert provider.get("name") == "Jane"
    assert provider.get("missing") is None


def test_map_provider_underlying_is_the_mapping():
    data = {"name": "Jane"}
    assert new_map_data_provider(data).underlying() is data


def test_new_map_provider_from_none_is_empty():
    provider = new_map_data_provider(None)
    assert isinstance(provider, EmptyDataProvider)
    assert provider.get("anything") is None


def test_nested_provider_over_mapping():
    inner = {"value": 10}
    provider = MapDataProvider({"inner": inner})
    nested = provider.get_nested_provider("inner")
    assert nested.get("value") == 10
    assert nested.underlying() is inner


def test_nested_provider_over_non_mapping_is_empty_wrapping_value():
    provider = MapDataProvider({"inner": "text"})
    nested = provider.get_nested_provider("inner")
    assert isinstance(nested, EmptyDataProvider)
    assert nested.underlying() == "text"
    assert nested.get("x") is None


def test_empty_provider_nests_to_itself():
    empty = EmptyDataProvider()
    assert empty.get_nested_provider("a") is empty


def test_existing_provider_is_returned_unchanged():
    provider = MapDataProvider({})
    assert try_new_data_provider(provider) is provider


def test_factory_is_called():
    provider = MapDataProvider({"a": 1})
    assert try_new_data_provider(lambda: provider) is provider


def test_mapping_becomes_map_provider():
    provider = try_new_data_provider({"a": 1})
    assert provider.get("a") == 1


def test_non_string_keys_rejected():
    data = {1: "a"}
    with pytest.raises(ProviderError) as info:
        try_new_data_provider(data)
    assert info.value.error.code == ErrCode.COERCE
    assert info.value.provider.underlying() is data


def test_none_rejected():
    with pytest.raises(ProviderError) as info:
        try_new_data_provider(None)
    assert info.value.error.code == ErrCode.COERCE
    assert info.value.provider.underlying() is None


def test_unsupported_type_rejected():
    with pytest.raises(ProviderError) as info:
        try_new_data_provider(1213)
    assert info.value.error.code == ErrCode.COERCE
    assert isinstance(info.value.error.err, TypeError)
    assert info.value.provider.underlying() == 1213