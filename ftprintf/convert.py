"""Number-to-text conversion and padding helpers."""


def to_base(num: int, digits: str) -> str:
    """Write a non-negative integer using ``digits`` as the digit alphabet."""
    base = len(digits)
    if base < 2:
        raise ValueError("a digit alphabet needs at least two symbols")
    if num < 0:
        raise ValueError("only non-negative numbers can be converted")
    out = []
    while True:
        num, rem = divmod(num, base)
        out.append(digits[rem])
        if num == 0:
            break
    return "".join(reversed(out))


def repeat(char: str, count: int) -> str:
    """Return ``char`` repeated ``count`` times; a non-positive count gives ''."""
    return char * max(count, 0)