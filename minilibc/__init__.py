"""C-runtime style helpers: NUL-terminated strings, ASCII ctype, series-based math, stdlib conversions, system calls and console I/O."""

__version__ = "0.1.0"
__all__ = ["console", "ctype", "mathfuncs", "stdlib", "strings", "system"]