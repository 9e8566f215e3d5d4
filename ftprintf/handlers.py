"""Rendering of each conversion into its padded text."""

from .convert import repeat, to_base
from .spec import FormatSpec

DECIMAL = "0123456789"
LOWER_HEX = "0123456789abcdef"
UPPER_HEX = "0123456789ABCDEF"
NULL_STRING = "(null)"
NULL_POINTER = "(nil)"

_INT_BITS = 32
_POINTER_BITS = 64


def _as_unsigned(n: int, bits: int) -> int:
    return n & ((1 << bits) - 1)


def _as_signed(n: int, bits: int) -> int:
    n = _as_unsigned(n, bits)
    return n - (1 << bits) if n >= 1 << (bits - 1) else n


def _number_text(spec: FormatSpec, n: int, digits: str) -> str:
    if spec.precision == 0 and n == 0:
        return ""
    return to_base(n, digits)


def _zero_count(spec: FormatSpec, prefix_len: int, length: int) -> int:
    if spec.precision is not None:
        pad = spec.precision - length
    elif spec.zero_pad and not spec.left_align:
        pad = spec.width - prefix_len - length
    else:
        pad = 0
    return max(pad, 0)


def _assemble(spec: FormatSpec, prefix: str, zeros: int, body: str) -> str:
    core = prefix + repeat("0", zeros) + body
    spaces = repeat(" ", spec.width - len(core))
    return core + spaces if spec.left_align else spaces + core


def render_char(spec: FormatSpec, char) -> str:
    """Render a single character; an int is taken as a byte value."""
    if isinstance(char, int):
        char = chr(char & 0xFF)
    if len(char) != 1:
        raise ValueError("expected a single character")
    pad = spec.width - 1
    if spec.left_align:
        return char + repeat(" ", pad)
    return repeat("0" if spec.zero_pad else " ", pad) + char


def render_str(spec: FormatSpec, text) -> str:
    """Render a string, truncated to the precision; None renders as '(null)'."""
    if text is None:
        text = NULL_STRING
    if spec.precision is not None:
        text = text[: spec.precision]
    pad = repeat(" ", spec.width - len(text))
    return text + pad if spec.left_align else pad + text


def render_int(spec: FormatSpec, n: int) -> str:
    """Render a signed 32-bit integer."""
    n = _as_signed(n, _INT_BITS)
    if n < 0:
        sign = "-"
    elif spec.plus:
        sign = "+"
    elif spec.space:
        sign = " "
    else:
        sign = ""
    body = _number_text(spec, abs(n), DECIMAL)
    zeros = _zero_count(spec, len(sign), len(body))
    return _assemble(spec, sign, zeros, body)


def render_uint(spec: FormatSpec, n: int) -> str:
    """Render an unsigned 32-bit integer in decimal."""
    n = _as_unsigned(n, _INT_BITS)
    body = _number_text(spec, n, DECIMAL)
    zeros = _zero_count(spec, 0, len(body))
    return _assemble(spec, "", zeros, body)


def render_hex(spec: FormatSpec, n: int, digits: str | None = None) -> str:
    """Render an unsigned 32-bit integer in hexadecimal.

    Without explicit ``digits`` the case follows the specifier ('X' is upper).
    """
    if digits is None:
        digits = UPPER_HEX if spec.specifier == "X" else LOWER_HEX
    n = _as_unsigned(n, _INT_BITS)
    body = _number_text(spec, n, digits)
    prefix = ""
    if spec.alternate and n != 0:
        prefix = "0" + (spec.specifier or "x")
    zeros = _zero_count(spec, len(prefix), len(body))
    return _assemble(spec, prefix, zeros, body)


def render_ptr(spec: FormatSpec, address) -> str:
    """Render an address as '0x...'; a null address renders as '(nil)'."""
    if not address and spec.precision is None:
        return NULL_POINTER
    n = _as_unsigned(address or 0, _POINTER_BITS)
    body = to_base(n, LOWER_HEX)
    zeros = max(spec.precision - len(body), 0) if spec.precision is not None else 0
    return _assemble(spec, "0x", zeros, body)