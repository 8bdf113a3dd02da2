# zogpy

Declarative schemas for parsing and validating untyped input such as form
fields, query parameters and decoded JSON. A schema coerces the raw value to
the target type, applies defaults, runs checks and transforms, and collects
human-readable errors instead of raising on the first problem.

## Install

```
pip install zogpy
```

## Schemas

| Builder | Module | Produces |
| --- | --- | --- |
| `boolean(coercer=None)` | `zogpy.boolean` | `BoolSchema` |
| `integer(coercer=None)`, `floating(coercer=None)` | `zogpy.numbers` | `NumberSchema` |
| `string(coercer=None)` | `zogpy.strings` | `StringSchema` |
| `list_of(schema, coercer=None)` | `zogpy.slices` | `SliceSchema` |
| `nullable(schema)` | `zogpy.pointers` | `PointerSchema` |

A `coercer` is a callable that turns the raw input into the target type and
raises on failure. Without one, a schema takes the coercer from
`zogpy.conf.COERCERS` at the moment it is created; the built-in coercers are
`coerce_bool`, `coerce_string`, `coerce_int`, `coerce_float`, `coerce_time`
and `coerce_slice` in `zogpy.conf`.

Modifiers and checks return the schema itself, so they chain:

```python
from zogpy.strings import string
from zogpy.numbers import integer

name = string().trim().required(message="name is required").min(2)
age = integer().gte(0).lte(130).default(18)

result = name.parse("  Ada  ")
print(result.value)   # "Ada"
print(result.errors)  # [] when the value is valid
print(result.ok)      # True
```

`parse(data, ctx_values=None)` coerces and checks raw input;
`validate(value, ctx_values=None)` checks a value that already has the right
type. Both return a `ParseResult` with `value`, `errors` and `ok`. Input that
is `None` or a blank string counts as missing: it yields the default if one is
set, an error if the schema is required, and otherwise the type's empty value.

Primitive schemas (boolean, number, string) and list schemas offer
`required`, `optional`, `default`, `pre_transform`, `post_transform` and
`test`. Primitive schemas also offer `catch`, which returns a fallback value
without errors when coercion, a pre-transform or a check fails. Post-transforms
run only when no error was recorded.

String checks: `min`, `max`, `length`, `email`, `url`, `has_prefix`,
`has_suffix`, `contains`, `contains_upper`, `contains_digit`,
`contains_special`, `uuid`, `match` and `one_of`; `trim` strips whitespace
before coercion. Numbers have `eq`, `lt`, `lte`, `gt`, `gte` and `one_of`;
booleans have `true` and `false`. Lists have `min`, `max`, `length` and
`contains`, and run the item schema over every element.

`nullable(schema)` returns `None` for missing input and otherwise hands the
input to the wrapped schema; `not_nil(message=None)` makes missing input an
error.

## Errors

Each failure is a `ZogError` (`zogpy.errors`) with `code`, `params`, `dtype`,
`value`, `message` and the underlying exception in `err`. The codes and types
are listed in the `ErrCode` and `ZogType` enums.

Primitive schemas, and `nullable(...).validate`, report a list of errors.
List schemas and `nullable(...).parse` report a mapping from path to errors:
items appear under keys such as `"[0]"`, errors on the value itself under
`"$root"`, and the very first error also under `"$first"`.

```python
from zogpy.slices import list_of
from zogpy.strings import string

tags = list_of(string().required().min(2)).max(3)
result = tags.parse(["a", "bc"])
print(result.errors["[0]"][0].message)
```

## Custom checks

```python
from zogpy.checks import custom
from zogpy.strings import string

only_test = string().test(custom("is_test", lambda value, ctx: value == "test"),
                          message="must be 'test'")
```

`message` may also be a callable `(error, ctx)` that sets `error.message`.
`zogpy.checks` holds the generic check factories (`len_min`, `len_max`,
`length`, `one_of`, `eq`, `lt`, `lte`, `gt`, `gte`, `required`).

## Messages and languages

Error messages come from per-type language maps, `zogpy.lang.en.MAP` and
`zogpy.lang.es.MAP`. Build a formatter from any map with
`zogpy.conf.new_default_formatter`, install it with
`zogpy.conf.set_error_formatter`, and go back to English with
`zogpy.conf.reset_error_formatter`. To pick the language per call from a
context value:

```python
from zogpy.i18n import set_languages_errs_map
from zogpy.lang import en, es
from zogpy.strings import string

set_languages_errs_map({"en": en.MAP, "es": es.MAP}, "en", "lang")
result = string().required().parse("", ctx_values={"lang": "es"})
print(result.errors[0].message)  # "Es obligatorio"
```

The formatter is global: it applies to every schema until replaced.

## Data providers and JSON input

`zogpy.providers` wraps string-keyed mappings in `MapDataProvider` (or
`EmptyDataProvider` for `None`) through `new_map_data_provider` and
`try_new_data_provider`; values that cannot be wrapped raise `ProviderError`.
`zogpy.zjson.decode(reader)` returns a factory that reads one JSON object from
a file-like object, closes it and returns a provider; malformed JSON, `null`,
arrays and primitives raise `ProviderError` carrying an error with the
`invalid_json` code.

## What the package does not do

There is no schema for records or objects with named fields, so data
providers are offered as building blocks but no schema consumes them. There is
no time schema either: `coerce_time` converts datetimes, RFC 3339 strings and
Unix seconds, but only as a standalone coercer.