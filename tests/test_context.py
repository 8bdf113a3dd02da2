import pytest

from zogpy.context import Check, ParseCtx, is_parse_zero_value, is_zero_value
from zogpy.errors import ErrsList, ErrsMap, ZogError, ERROR_KEY_ROOT


def _set_message(text):
    def fmt(error, ctx):
        error.message = text

    return fmt


def test_new_error_formats_then_records():
    ctx = ParseCtx(ErrsList(), _set_message("formatted"))
    err = ZogError(code="c")
    ctx.new_error("", err)
    assert ctx.errors.errors == [err]
    assert err.message == "formatted"


def test_new_error_with_map_uses_path():
    ctx = ParseCtx(ErrsMap(), _set_message("m"))
    err = ZogError(code="c")
    ctx.new_error("", err)
    assert ctx.errors.errors[ERROR_KEY_ROOT] == [err]


def test_formatter_receives_context():
    seen = []
    ctx = ParseCtx(ErrsList(), lambda e, c: seen.append(c))
    ctx.new_error("", ZogError(code="c"))
    assert seen == [ctx]


def test_has_errored():
    ctx = ParseCtx(ErrsList(), _set_message("x"))
    assert ctx.has_errored() is False
    ctx.new_error("", ZogError(code="c"))
    assert ctx.has_errored() is True


def test_set_formatter_replaces_formatter():
    ctx = ParseCtx(ErrsList(), _set_message("old"))
    ctx.set_formatter(_set_message("new"))
    err = ZogError(code="c")
    ctx.new_error("", err)
    assert err.message == "new"


def test_set_and_get_values():
    ctx = ParseCtx(ErrsList(), _set_message("x"))
    assert ctx.get("lang") is None
    ctx.set("lang", "es")
    assert ctx.get("lang") == "es"


def test_initial_values():
    ctx = ParseCtx(ErrsList(), _set_message("x"), {"lang": "en"})
    assert ctx.get("lang") == "en"


def test_check_defaults():
    check = Check(code="custom")
    assert check.code == "custom"
    assert check.params is None
    assert check.validate is None
    assert check.formatter is None


@pytest.mark.parametrize("value", [None, 0, 0.0, "", False, [], {}, ()])
def test_is_zero_value_true(value):
    assert is_zero_value(value) is True


class _NeedsArgs:
    def __init__(self, x):
        self.x = x


@pytest.mark.parametrize("value", [1, "a", [0], True, {"k": 1}, object(), _NeedsArgs(1)])
def test_is_zero_value_false(value):
    assert is_zero_value(value) is False


@pytest.mark.parametrize("value", [None, "", "   ", "\t\n"])
def test_is_parse_zero_value_true(value):
    assert is_parse_zero_value(value, None) is True


@pytest.mark.parametrize("value", [0, False, "a", " a ", [], 0.0])
def test_is_parse_zero_value_false(value):
    assert is_parse_zero_value(value, None) is False