"""Parsing of a single conversion specification such as ``%-08.3x``."""

from dataclasses import dataclass

FLAG_CHARS = "-0# +"
_ASCII_DIGITS = "0123456789"


@dataclass(frozen=True)
class FormatSpec:
    """Flags, width, precision and specifier of one conversion."""

    left_align: bool = False
    zero_pad: bool = False
    alternate: bool = False
    space: bool = False
    plus: bool = False
    width: int = 0
    precision: int | None = None
    specifier: str = ""


def _read_number(fmt: str, pos: int) -> tuple[int, int]:
    """Read a run of ASCII digits starting at ``pos``; an empty run reads as 0."""
    end = pos
    while end < len(fmt) and fmt[end] in _ASCII_DIGITS:
        end += 1
    return (int(fmt[pos:end]) if end > pos else 0), end


def parse_spec(fmt: str, pos: int) -> tuple[FormatSpec, int]:
    """Parse the conversion starting at the ``%`` found at ``fmt[pos]``.

    Returns the parsed specification and the index just past it.  When the
    string ends before a specifier character, the specifier is empty and the
    returned index is the end of the string.
    """
    if not fmt.startswith("%", pos):
        raise ValueError(f"no conversion starts at position {pos}")
    i = pos + 1
    flags = set()
    while i < len(fmt) and fmt[i] in FLAG_CHARS:
        flags.add(fmt[i])
        i += 1
    width, i = _read_number(fmt, i)
    precision = None
    if i < len(fmt) and fmt[i] == ".":
        precision, i = _read_number(fmt, i + 1)
    specifier = fmt[i] if i < len(fmt) else ""
    end = i + 1 if specifier else i
    spec = FormatSpec(
        left_align="-" in flags,
        zero_pad="0" in flags,
        alternate="#" in flags,
        space=" " in flags,
        plus="+" in flags,
        width=width,
        precision=precision,
        specifier=specifier,
    )
    return spec, end