# ogbcore

Small, dependency-free building blocks for game and tool code.

## Modules

- `ogbcore.strings`: string helpers (`string_concat`, `strings_match`,
  `string_view`, `string_find_from_left`, `string_find_from_right`,
  `string_starts_with`, `string_replace_all`, `string_trim_left`,
  `string_trim_right`, `string_trim`) and `StringBuilder`, which accumulates
  text while tracking a capacity that grows like a doubling buffer.
  `string_view` raises `IndexError` for a range outside the string; the trim
  functions strip only the space character.
- `ogbcore.pathutils`: `get_file_extension`, `get_file_name_including_extension`,
  `get_file_name_excluding_extension` and `get_directory_of`. `/`, `\` and `:`
  all count as separators.
- `ogbcore.lcg`: `Lcg`, a 64-bit linear congruential generator with
  `get_random`, `peek_random`, `random_float32`, `random_float64`,
  `float32_in_range`, `float64_in_range` and `int_in_range` (both bounds
  inclusive; equal bounds give 0, reversed bounds are swapped).
- `ogbcore.floatops`: element-wise float32 arithmetic on vectors of 2, 4, 8 or
  16 elements (`add_float32`, `sub_float32`, `mul_float32`, `div_float32`),
  `dot_product_float32` for 2, 3 or 4 elements, and `sqrt_float32` /
  `rsqrt_float32` for 2, 3, 4, 8 or 16 elements. Results are rounded to
  float32 and follow IEEE rules for infinities and NaN.
- `ogbcore.intops`: `add_int32`, `sub_int32` and `mul_int32` on vectors of 4, 8
  or 16 integers, wrapping like 32-bit two's complement.
- `ogbcore.formatting`: `format_string` and `sprint`, printf-style formatting
  with extra specifiers (`%s` for any string, `%cs`, `%b` for `true`/`false`,
  `%v2`/`%v3`/`%v4` for vectors), plus `print_formatted` (writes to standard
  output) and `builder_print` (appends to a `StringBuilder`).
- `ogbcore.logger`: `LogLevel`, `log`, `log_verbose`, `log_info`, `log_warning`,
  `log_error`, the tagged `default_logger`, `set_logger` to replace it (or
  `None` to silence logging), and `version_string`.
- `ogbcore.osthreads`: `Thread` (runs `proc(thread)` once started),
  `BinarySemaphore`, `sleep`, `yield_thread`, `high_precision_sleep`,
  `elapsed_seconds` and `logical_processor_count`.

## Install

```
pip install .
```

## Examples

```python
from ogbcore.strings import StringBuilder, string_trim
from ogbcore.pathutils import get_file_extension, get_directory_of
from ogbcore.formatting import sprint, builder_print
from ogbcore.lcg import Lcg
from ogbcore.floatops import add_float32
from ogbcore.intops import add_int32
from ogbcore.logger import log_info, version_string

builder = StringBuilder(128)
builder.append(string_trim("  hello  "))
builder_print(builder, " %d", 7)
print(str(builder))                              # "hello 7"

print(get_file_extension("dir/file.ext"))        # ".ext"
print(get_directory_of("dir/file.ext"))          # "dir"

print(sprint("Int: %d, ok: %b", 42, True))      # "Int: 42, ok: true"
print(sprint("%v2", (1.0, 2.0)))                # "{ X: 1.000000, Y: 2.000000 }"

rng = Lcg(1)
roll = rng.int_in_range(1, 6)                    # 1 to 6, both inclusive

print(add_float32([1.0, 2.0], [3.0, 4.0]))       # [4.0, 6.0]
print(add_int32([2147483647, 0, 0, 0], [1, 0, 0, 0]))  # [-2147483648, 0, 0, 0]

log_info("Loaded %d assets", 3)                  # "[INFO]:    Loaded 3 assets"
print(version_string())                          # "0.01.009"
```

Threads and semaphores:

```python
from ogbcore.osthreads import Thread, BinarySemaphore

ready = BinarySemaphore(False)

def work(thread):
    thread.data = "done"
    ready.signal()

t = Thread(work)
t.start()
ready.wait()
t.join()
print(t.data)                                    # "done"
```

## What it does not do

The package has no file or directory helpers and no timing profiler or trace
output; use the standard library (`pathlib`, `shutil`, `time`) for those. It
has no window, graphics, input or audio support.

## Tests

The test suite uses pytest, installed with the `test` extra.