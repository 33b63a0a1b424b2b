# stx

Explicit success/failure values for Python, with panics for failures that
should not be recovered from, and a small helper for walking UTF-8 bytes.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Results

`stx.result.Result` holds either an `stx.variants.Ok` or an `stx.variants.Err`.
Build one with `Result(Ok(value))` / `Result(Err(error))`, or with
`make_ok(value)` / `make_err(error)`. Passing anything other than `Ok` or
`Err` to `Result` raises `TypeError`.

```python
from stx.result import Result, make_ok, make_err
from stx.variants import Ok, Err

def parse_version(header: bytes) -> Result:
    if header[0] == 1:
        return make_ok(1)
    if header[0] == 2:
        return make_ok(2)
    return make_err("invalid version")

res = parse_version(b"\x01\x02\x03")
assert res.is_ok()
assert res.contains(1)
assert res == Ok(1)

message = parse_version(b"\x09").match(
    lambda version: f"working with version {version}",
    lambda err: f"error parsing header: {err}",
)
assert message == "error parsing header: invalid version"
```

A `Result` is truthy when it is `Ok`. It compares equal to an `Ok` or `Err`
with equal contents, and to another `Result` in the same state with equal
contents. The variant it holds is available as `result.variant`.

Methods:

- `is_ok()`, `is_err()`
- `contains(cmp)`, `contains_err(cmp)`, `exists(predicate)`, `err_exists(predicate)`
- `map(op)`, `map_err(op)`, `map_or(op, alt)`, `map_or_else(op, alt_op)`
- `and_(res)`, `and_then(op)` (wraps the return value of `op` in `Ok`)
- `or_(alt)`, `or_else(op)` (`op` returns a `Result`)
- `unwrap_or(alt)`, `unwrap_or_else(op)`, `unwrap_or_default(default_factory)`
- `match(ok_fn, err_fn)`
- `copy()`: a deep copy of the result and its contents

`Ok.copy()` and `Err.copy()` return a deep copy of the wrapped value.

## Panics

`unwrap()`, `expect(msg)`, `unwrap_err()`, `expect_err(msg)`, `value()` and
`err()` panic when the result holds the other variant. A panic writes a report
to standard error (the thread, the message, a report of the error value, the
caller's location and the current call stack) and then raises
`stx.panic.Panic`:

```python
from stx.panic import Panic

try:
    make_err("disk full").expect("unable to open file")
except Panic as exc:
    assert exc.info == "unable to open file"
    assert exc.error_report == "disk full"
```

`Panic` carries `info`, `error_report` and `location` (a `SourceLocation`
with `file`, `line`, `column` and `function`; a line or column of 0 means
unknown).

The error value is reported by `stx.panic.report(value, size=256)`: strings
are returned whole, integers in the 32-bit range are written in decimal and
cut to `size - 1` characters, and anything else gives an empty report.
`ReportQuery(size).report(value)` does the same with a stored size.

Other functions in `stx.panic`:

- `panic(info="explicit panic", value=..., location=None)`: panic yourself;
  at most one value to report may be given, and the location defaults to the
  caller.
- `begin_panic(info, error_report, location)`: write the report to standard
  error and raise `Panic`.
- `panic_default(info, error_report, location, stream=None)`: write the report
  and call stack to `stream` (standard error by default) without raising.
- `format_panic(info, error_report, location, thread_id=None)`: return the
  headline of the report as a string.
- `SourceLocation.current(depth=0)`: the location of the caller, `depth`
  frames further up.

## UTF-8 helpers

`stx.text.utf8_next(data, pos=0)` reads the UTF-8 sequence starting at `pos`
in a `bytes` object. It returns the sequence's bytes packed big-endian into
one integer (not the decoded code point) together with the position just past
the sequence. It raises `IndexError` when `pos` is outside the data and
`ValueError` when the sequence is cut short. `stx.text.utf8_codepoints(data)`
yields the packed value of every sequence in turn.

## What is not included

There is no optional-value type to pair with `Result`, no helper for
propagating errors early out of a function, and no way to install a custom
panic handler: a panic always writes to standard error and raises `Panic`.