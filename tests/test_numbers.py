import pytest

from zogpy import conf
from zogpy.checks import custom
from zogpy.errors import ZogType
from zogpy.numbers import floating, integer


@pytest.fixture(autouse=True)
def _default_formatter():
    conf.reset_error_formatter()
    yield
    conf.reset_error_formatter()


def test_int_schema_option():
    result = integer(coercer=lambda original: 42).parse("123")
    assert result.errors == []
    assert result.value == 42


def test_float_schema_option():
    result = floating(coercer=lambda original: 3.14).parse("2.718")
    assert result.errors == []
    assert result.value == 3.14


def test_number_required():
    validator = integer().required("custom")
    result = validator.parse(5)
    assert result.errors == []
    assert result.value == 5
    for data in ("", "     ", None):
        errors = validator.parse(data).errors
        assert len(errors) == 1
        assert errors[0].message == "custom"


def test_number_optional():
    validator = integer().optional()
    assert validator.parse(5).errors == []
    result = validator.parse(None)
    assert result.errors == []
    assert result.value == 0


def test_number_default():
    result = integer().default(10).parse(None)
    assert result.errors == []
    assert result.value == 10


def test_number_catch():
    result = integer().catch(0).parse("not a number")
    assert result.errors == []
    assert result.value == 0


def _double(value, ctx):
    return value * 2 if isinstance(value, int) else value


def _increment(value, ctx):
    return value + 1


def test_number_pre_transform():
    result = integer().pre_transform(_double).parse(5)
    assert result.errors == []
    assert result.value == 10


def test_number_post_transform():
    result = integer().post_transform(_increment).parse(5)
    assert result.errors == []
    assert result.value == 6


def test_number_multiple_transforms():
    result = integer().pre_transform(_double).post_transform(_increment).parse(5)
    assert result.errors == []
    assert result.value == 11


def test_number_one_of():
    validator = integer().one_of([1, 2, 3], "custom")
    assert validator.parse(1).errors == []
    result = validator.parse(4)
    assert result.errors[0].message == "custom"
    assert result.value == 4


def test_number_eq():
    validator = integer().eq(5, "custom")
    assert validator.parse(5).errors == []
    result = validator.parse(4)
    assert result.errors[0].message == "custom"
    assert result.value == 4


def test_number_gt():
    validator = integer().gt(5, "custom")
    assert validator.parse(6).errors == []
    assert validator.parse(5).errors[0].message == "custom"
    result = validator.parse(4)
    assert result.errors[0].message == "custom"
    assert result.value == 4


def test_number_gte():
    validator = integer().gte(5, "custom")
    assert validator.parse(6).errors == []
    assert validator.parse(5).errors == []
    result = validator.parse(4)
    assert result.errors[0].message == "custom"
    assert result.value == 4


def test_number_lt():
    validator = integer().lt(5, "custom")
    assert validator.parse(4).errors == []
    assert validator.parse(5).errors[0].message == "custom"
    result = validator.parse(6)
    assert result.errors[0].message == "custom"
    assert result.value == 6


def test_number_lte():
    validator = integer().lte(5, "custom")
    assert validator.parse(4).errors == []
    assert validator.parse(5).errors == []
    result = validator.parse(6)
    assert result.errors[0].message == "custom"
    assert result.value == 6


def test_number_parse():
    result = integer().parse(5)
    assert result.errors == []
    assert result.value == 5


def test_number_custom_test():
    seen = []

    def check(value, ctx):
        seen.append(value)
        return True

    result = integer().test(custom("custom_test", check), "custom").parse(5)
    assert result.errors == []
    assert result.value == 5
    assert seen == [5]


def test_int_and_float_type():
    assert integer().required().parse(None).errors[0].dtype == ZogType.NUMBER
    assert floating().required().parse(None).errors[0].dtype == ZogType.NUMBER


def test_float_default_coercion():
    result = floating().parse("123")
    assert result.errors == []
    assert result.value == 123.0
    assert isinstance(result.value, float)