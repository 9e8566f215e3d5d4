"""Formatting of whole format strings and writing them to a stream."""

import sys
from collections.abc import Iterator
from typing import Any, Callable, TextIO

from .handlers import (
    LOWER_HEX,
    UPPER_HEX,
    render_char,
    render_hex,
    render_int,
    render_ptr,
    render_str,
    render_uint,
)
from .spec import FormatSpec, parse_spec

_Renderer = Callable[[FormatSpec, Any], str]

_RENDERERS: dict[str, _Renderer] = {
    "c": render_char,
    "s": render_str,
    "p": render_ptr,
    "d": render_int,
    "i": render_int,
    "u": render_uint,
    "x": lambda spec, n: render_hex(spec, n, LOWER_HEX),
    "X": lambda spec, n: render_hex(spec, n, UPPER_HEX),
}


def _render_conversion(spec: FormatSpec, args: Iterator[Any]) -> str:
    if spec.specifier == "%":
        return render_char(spec, "%")
    renderer = _RENDERERS.get(spec.specifier)
    if renderer is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return renderer(spec, value)


def _pieces(fmt: str, args: Iterator[Any]) -> Iterator[str]:
    pos = 0
    while pos < len(fmt):
        percent = fmt.find("%", pos)
        if percent < 0:
            yield fmt[pos:]
            return
        if percent > pos:
            yield fmt[pos:percent]
        spec, pos = parse_spec(fmt, percent)
        yield _render_conversion(spec, args)


def sprintf(fmt: str, *args: Any) -> str:
    """Format ``args`` according to ``fmt`` and return the resulting text.

    Supported conversions are c, s, p, d, i, u, x, X and %.  Unknown
    specifiers produce no output and consume no argument.  Extra arguments
    are ignored; missing ones raise TypeError.
    """
    return "".join(_pieces(fmt, iter(args)))


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)