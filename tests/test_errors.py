import pytest

from zogpy.errors import (
    ERROR_KEY_FIRST,
    ERROR_KEY_ROOT,
    ErrCode,
    ErrsList,
    ErrsMap,
    ZogError,
    ZogType,
    push_path,
    safe_string,
)


def test_push_path_on_empty_path_returns_segment():
    assert push_path("", "name") == "name"
    assert push_path("", "[0]") == "[0]"


def test_push_path_builds_nested_paths():
    assert push_path(push_path("users", "[0]"), "name") == "users[0].name"


def test_push_path_index_is_appended_without_dot():
    result = push_path("users", "[1]")
    assert result.startswith("users")
    assert "." not in result


def test_safe_string_nil():
    assert safe_string(None) == "<nil>"


def test_safe_string_passes_strings_through():
    assert safe_string("hello") == "hello"
    assert safe_string("") == ""


def test_zog_error_str_with_defaults():
    text = str(ZogError(code=ErrCode.REQUIRED))
    assert text.startswith("ZogError{Code: " + ErrCode.REQUIRED.value)
    assert "Params: <nil>" in text
    assert "Message: ''" in text
    assert text.endswith("Error: <nil>}")


def test_zog_error_str_includes_wrapped_error_and_message():
    err = ValueError("boom")
    text = str(ZogError(code="x", message="msg", err=err, dtype=ZogType.STRING))
    assert "Error: boom}" in text
    assert "Message: 'msg'" in text
    assert "Type: " + ZogType.STRING.value in text


def test_err_code_formats_as_value():
    text = str(ZogError(code=ErrCode.MIN))
    assert text.startswith("ZogError{Code: " + ErrCode.MIN.value + ",")


def test_errs_list_collects_in_order():
    errs = ErrsList()
    assert errs.is_empty()
    first, second = ZogError(code="a"), ZogError(code="b")
    errs.add("ignored", first)
    errs.add("", second)
    assert not errs.is_empty()
    assert errs.errors == [first, second]


def test_errs_map_root_and_first():
    errs = ErrsMap()
    assert errs.is_empty()
    err = ZogError(code="a")
    errs.add("", err)
    assert errs.errors[ERROR_KEY_ROOT] == [err]
    assert errs.errors[ERROR_KEY_FIRST] == [err]
    assert not errs.is_empty()


def test_errs_map_first_is_not_replaced():
    errs = ErrsMap()
    first, second, third = ZogError(code="a"), ZogError(code="b"), ZogError(code="c")
    errs.add("users[0].name", first)
    errs.add("users[0].name", second)
    errs.add("other", third)
    assert errs.errors[ERROR_KEY_FIRST] == [first]
    assert errs.errors["users[0].name"] == [first, second]
    assert errs.errors["other"] == [third]
    assert ERROR_KEY_ROOT not in errs.errors


@pytest.mark.parametrize("constant", [ERROR_KEY_FIRST, ERROR_KEY_ROOT])
def test_error_keys_pinned(constant):
    assert constant in ("$first", "$root")