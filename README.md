# zenkit

A small, dependency-free toolkit of building blocks often needed together in
games and tools. Every module is imported on its own, for example
`from zenkit.vector import Vector2`.

## Modules

Math and geometry

- `zenkit.types`: `Point2`, `Size2`, `Point3`, `Rect4f` dataclasses and
  `rect_from_points(x0, y0, x1, y1)`.
- `zenkit.vector`: `Vector2`, `Vector3`, `Vector4` with component-wise
  `+ - * /` (against a vector or a number), negation, indexing, iteration and
  `dot`, `length`, `length2`, `distance`, `distance2`, `normalize`, `lerp`,
  `project`; `cross` on `Vector3` and `Vector4` (the latter zeroes `w`).
  `str()` gives the components joined by commas.
- `zenkit.bezier`: `Bezier` with three (quadratic) or four (cubic) control
  points, all `Vector2` or all `Vector3`; `point(t)` and `pair(t)`, whose
  difference is the tangent direction.
- `zenkit.fraction`: `Fraction(num, den)`, an integer fraction that is not
  reduced automatically; arithmetic with fractions and ints, comparisons,
  `reduce()`, `value()`, and `str()` as `num/den`.
- `zenkit.numerical`: `square`, `cube`, `lerp`, `is_fuzzy_zero`,
  `is_fuzzy_equal`, `get_gcd` (1 when an argument is zero),
  `get_min_power_two(v, bits)` for 16, 32 or 64 bit widths, and constants such
  as `F_PI` and `F_EPSILON`.

Randomness and time

- `zenkit.rng`: `RandomNG(seed, generator, max_value)` over `LFSRGenerator`
  (default) or `WellGenerator` (Well512); `next()`, `next(bound)` for
  `[0, bound)`, `nextf()` for `[0, 1]`, `reset(seed)`. Sequences are fixed by
  the seed.
- `zenkit.ticker`: `now()` in microseconds since the epoch, `to_seconds`,
  `to_microseconds`, and `Ticker` with `duration()`, `tick()` and `delay()`.

Bytes and text

- `zenkit.buffer`: `Buffer` with `append`, `write(pos, data)` (raises
  `IndexError` past the end), `read(size)` and `read_struct(fmt)` at a cursor
  (raise `EOFError` when short), `forward`, `resize`, `clear`, `position`.
- `zenkit.md5`: `md5(data, upper_case=False)` and the streaming `MD5Util`
  with `start`, `update`, `finish`, `finish_bytes`, `finish_number`.
- `zenkit.codec64`: Base64 `encode`, lenient `decode`, `check`, `demap`,
  `map_value`.
- `zenkit.urlcoding`: `url_encode`, `url_decode`, `url_check_coding`
  (letters, digits and `-_.*` kept, space as `+`, others as `%xx`).
- `zenkit.utf8`: `utf8_to_unicode` and `unicode_to_utf8`, which also handle
  the old five-byte forms.
- `zenkit.cast`: `to_number`, hex digit helpers, `value_to_hex_number`,
  `hex_number_to_value`, `buffer_to_hex_string`, `hex_string_to_buffer`.
- `zenkit.endian`: `endian_swap16/32`, `host_net16/32` and `Byte4`.

Tables, files and logging

- `zenkit.csv_table`: `CSVLoader` with `decode` (raises `ValueError` on a
  malformed quoted field), `encode` (CRLF rows, quoting where needed),
  `clear` and the `rows` list.
- `zenkit.localization`: `Localization` built from rows of
  `key, text0, text1, ...`; `language_index`, `get_text` (falls back to the
  first language), `set_text`, `get_item`.
- `zenkit.files`: `get_file_extension` and whole-file load, write and append
  helpers; reading a missing file raises `OSError`.
- `zenkit.log`: `log_error`, `log_warning`, `log_info`, `log_debug`,
  `log_verbose` printing `<tag>:<message>` to standard output, filtered by
  `set_priority(mask)` with the bits of `LogLevel`.

## Examples

```python
from zenkit.fraction import Fraction
from zenkit.md5 import md5
from zenkit.csv_table import CSVLoader
from zenkit.localization import Localization

f = Fraction(2, 3)
print(f, f.value())            # 2/3 0.6666666666666666

print(md5(b"hello"))           # 5d41402abc4b2a76b9719d911017c592

loader = CSVLoader()
loader.decode("key,en,cn\nhello,Hello!,你好\n")
local = Localization()
local.init_with_csv_content(loader.rows)
print(local.get_text("hello"))  # Hello!
local.language_index = 1
print(local.get_text("hello"))  # 你好
```

```python
from zenkit.vector import Vector2
from zenkit.bezier import Bezier

curve = Bezier([Vector2(0, 0), Vector2(0, 1), Vector2(1, 1), Vector2(2, 2)])
print(curve.point(0.5))        # 0.625,1
```

## What it does not do

There are no matrix or quaternion types, and so no rotation, transform or
camera projection helpers: geometry stops at vectors and Bézier curves.
There is no obfuscated integer type and no error class of its own; failures
are reported with standard Python exceptions. The package is a library only
and installs no command.

## Installation and tests

Python 3.10 or newer is required; there are no runtime dependencies.

```
pip install -e ".[test]"
pytest
```