# envbind

Bind environment variables to typed dataclass fields. Values come from the
process environment after the nearest `.env` file has been loaded. The search
for `.env` starts in the current directory and moves up through its parents.

## Installation

```
pip install envbind
```

## Declaring a configuration

Mark each field with `envbind.parse.env_field`. It takes the variable name and
options that control how the raw text is converted:

```python
from dataclasses import dataclass
from datetime import datetime, timedelta

from envbind.parse import Kind, env_field, load_and_parse


@dataclass
class Config:
    foo: str = env_field("ENV_FOO", required=True, default="fooValue")
    bar: int = env_field("ENV_BAR", not_empty=True)
    ips: list[str] = env_field("ENV_IPS", delimiter=";")
    when: datetime = env_field("ENV_WHEN", time_layout="2006-01-02T15:04:05")
    timeout: timedelta = env_field("ENV_TIMEOUT", default="1h30m")
    small: int = env_field("ENV_SMALL", kind=Kind.INT8)


config = load_and_parse(Config())
```

Every `env_field` field starts as `None` until it is parsed. `parse(target)`
loads the nearest `.env` file, fills the marked fields of the dataclass
instance in place, and returns that same instance. Frozen dataclasses work as
well. `load_and_parse(target)` loads the `.env` file and then calls `parse`.
Fields declared without `env_field` are left as they are.

### Options

- `required`: raises `RequiredFieldError` if the variable is not defined.
- `not_empty`: raises `EmptyFieldError` if the value, or the default, is empty
  or contains only whitespace.
- `default`: raw text to use when the variable is not defined.
- `delimiter`: separator for string lists. It defaults to `,`.
- `time_layout`: layout for datetime fields, written against the reference time
  `2006-01-02T15:04:05`, for example `2006-01-02`, `15:04`, `Jan 2 2006` or
  `2006-01-02T15:04:05Z07:00`. A datetime field without a layout raises
  `TimeLayoutRequiredError`.
- `kind`: a `Kind` member that sets the conversion explicitly, such as
  `Kind.INT8`, `Kind.UINT32` or `Kind.FLOAT32`.

If no `kind` is given, it is inferred from the annotation. The supported
annotations are `bool`, `int` (64-bit signed), `float` (64-bit), `str`,
`datetime`, `timedelta`, `list[str]` or `list`, and any of these wrapped in
`Optional[...]` or `X | None`. String annotations work too. Any other type
raises `UnsupportedTypeError`.

### Conversion rules

Conversions are done by `envbind.value.Value`, a `str` subclass that provides
`as_int`, `as_int8` … `as_int64`, `as_uint` … `as_uint64`, `as_float32`,
`as_float64`, `as_bool`, `as_string`, `as_time(layout)`, `as_duration()`,
`as_string_slice(delimiter)` and `is_zero()`.

- Malformed or out-of-range input becomes the zero of the type (`0`, `0.0`,
  `False`, `timedelta(0)`). It does not raise.
- Integers are plain decimal and may carry a sign. Unsigned kinds reject signs.
- Booleans are true only for `1`, `t`, `T`, `true`, `TRUE` and `True`.
- Times are timezone-aware and default to UTC when the layout has no zone. If
  the text does not match, the result is `envbind.value.ZERO_TIME`
  (0001-01-01 UTC).
- Durations use units `ns`, `us`, `ms`, `s`, `m`, `h`, `d` and `w`. Values may
  combine units and use fractions, as in `30m`, `2d`, `1.5h` or `1w2d12h30m5s`.
  They are truncated to whole microseconds.
- String lists are split on the delimiter. Blank text gives `[]`.

`parse_duration(text)` and `parse_time(layout, text)` are also available in
`envbind.value`. Unlike the methods above, they raise `ValueError` on bad
input.

### Errors

- A target that is not a dataclass instance raises `NotAPointerError`. Passing
  the class itself also counts as an error.
- `NotAPointerError`, `TimeLayoutRequiredError`, `RequiredFieldError`,
  `EmptyFieldError` and `UnsupportedTypeError` all derive from `EnvError`.
- `must_parse` and `must_load_and_parse` work like `parse` and
  `load_and_parse`. Any `EnvError` or `OSError` is raised again as
  `RuntimeError`, chained to the original error.

`lookup(name, default="")` returns a `(Value, defined)` pair. It checks active
overrides first, then `os.environ`, and falls back to `default` when the
variable is not defined.

## Temporary overrides

`envbind.override` replaces selected variables within a block without changing
`os.environ`:

```python
from envbind.override import current_overrides, overridden, with_override

with overridden("FOO", "testing", "DUMMY", "24"):
    load_and_parse(config)

result = with_override(lambda: load_and_parse(config), "FOO", "other")
```

Arguments are given as name/value pairs. An odd number of arguments raises
`ValueError`. Overrides are local to the current thread or asyncio task.

Overrides can be nested, but only the innermost one is used. Inner overrides do
not merge with outer ones. A variable that the innermost override does not set
is read from the environment or from its default. `with_override` returns the
callback's result. `current_overrides()` returns the active mapping, or `None`
when no override is active.

## Loading only

`envbind.loader.load()` finds the nearest `.env` file and applies it to
`os.environ`. Values from the file replace variables that are already set. The
function returns the file's path, or `None` if no file was found.
`find_dotenv(directory)` returns the path it would use, or `None` when neither
that directory nor any of its parents contains a `.env` file.

## Scope

This is a library only. It has no command-line program, and it does not write
or edit `.env` files.