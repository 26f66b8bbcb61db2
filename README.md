# minilibc

A small set of routines of the kind a minimal C runtime provides: plain
Python functions and classes. They follow C conventions for strings,
characters and numbers.

## Modules

### `minilibc.strings`

These functions work on strings that end at their first `"\0"`. Anything
after that character is ignored.

- `length(text)` returns the number of characters before the terminator.
- `copy(src)` returns `src` cut at its terminator.
- `concat(dest, src)` returns `dest + src`, with each one cut at its terminator.
- `compare(first, second)` returns 0 when the two are equal. Otherwise it
  returns the code-point difference at the first mismatch. The end of a
  string counts as code point 0.
- `find(text, sub)` returns the index of the first occurrence of `sub`, or
  `None` when there is none. An empty `sub` gives 0.

### `minilibc.ctype`

This module classifies ASCII characters and converts their case. Every
function takes either a code point (`int`) or a one-character `str`.

- Classification: `isalnum`, `isalpha`, `isdigit`, `islower`, `isupper`,
  `isspace`, `isprint`, `ispunct`, `iscntrl` and `isxdigit`. Values outside
  0–127 belong to no class.
- Case conversion: `tolower` and `toupper`. Each returns the same type it
  was given.
- A `str` longer than one character raises `ValueError`.

### `minilibc.mathfuncs`

The math functions are computed by Taylor series or Newton iteration:
`sin`, `cos`, `tan`, `asin`, `acos`, `atan`, `atan2`, `exp`, `log`,
`log10`, `pow`, `sqrt`, `ceil`, `floor`, `fabs` and `fmod`.

- Series terms are summed until they fall below `1e-10`.
- Domain errors return `NAN` instead of raising.
- `atan` is clamped to ±π/2 outside [-1, 1].
- `floor` drops the fractional part, so it rounds toward zero.
- The module also defines the constants `PI`, `E`, `SQRT2`, `LN2`, `LN10`,
  `INFINITY` and `NAN`.

### `minilibc.stdlib`

- `atoi`, `atol` and `atof` parse a leading number. They skip leading
  spaces and accept an optional sign. They return 0 when there are no
  digits. `atof` accepts a fractional part but no exponent.
- `Random(seed=1)` is a linear congruential generator. `seed(n)` restarts
  the sequence, and `rand()` returns values in `0..RAND_MAX` (32767).
- `MemoryPool(size=1048576)` is a bump allocator that hands out writable
  `memoryview` blocks:
  - `malloc(size)` returns a block. A size of 0 returns `None`, and a
    request larger than the space left raises `MemoryError`.
  - `calloc(count, size)` returns a zero-filled block.
  - `realloc(block, size)` returns a new block that holds the start of the
    old one.
  - `free(block)` reclaims nothing.
  - The attributes `size`, `used` and `available` report its state.
- The module also defines the constants `EXIT_SUCCESS`, `EXIT_FAILURE` and
  `RAND_MAX`.

### `minilibc.system`

- `write(fd, data)` writes to a file descriptor. Text is encoded as UTF-8.
- `read(fd, count)` reads from a file descriptor.
- `getpid()` returns the current process id.
- `sleep(seconds)` pauses the calling thread.
- A negative count or duration raises `ValueError`.

### `minilibc.console`

- `format_int(num)` returns `num` as decimal text.
- `format_message(fmt, num, text)` expands `%d` to `num` and `%s` to
  `text`. Any other `%x` is kept as it is.
- `Console(stdout=None, stdin=None)` binds to text streams. It uses
  `sys.stdout` and `sys.stdin` when none are given.
  - Output methods: `print_char`, `print_int`, `print_str` and `print(fmt, num, text)`.
  - `getchar()` returns one character, or `""` at end of input.
  - `scan(fmt)` reads values for the `%d` and `%s` directives in `fmt`.
    Each directive skips leading whitespace. A string holds at most 99
    characters.
  - `scan` returns a `ScanResult` with these fields:
    - `count`: how many values were read.
    - `number`: the last integer read.
    - `text`: the last string read.

## Example

```python
import io

from minilibc.console import Console, format_message
from minilibc.stdlib import Random, atoi
from minilibc.strings import compare, find

print(format_message("%s has %d items", 3, "cart"))   # cart has 3 items
print(find("hello world", "world"))                    # 6
print(compare("abc", "abd") < 0)                       # True
print(atoi("  -42abc"))                                # -42

rng = Random(1)
print(rng.rand())

out = io.StringIO()
console = Console(stdout=out, stdin=io.StringIO("17 apples\n"))
result = console.scan("%d %s")       # ScanResult(count=2, number=17, text='apples')
console.print("%d %s\n", 17, "apples")
```

## What it does not do

The package has no command-line program. It offers nothing for process
termination (`exit`, `abort`) or for reading environment variables. Use
Python's own `sys.exit` and `os.environ` for those.

## Tests

Install with the `test` extra and run `pytest`.