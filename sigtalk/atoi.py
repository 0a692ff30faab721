"""Lenient decimal integer parsing."""

_WHITESPACE = frozenset("\t\n\v\f\r ")
_DIGITS = frozenset("0123456789")


def parse_int(text: str) -> int:
    """Parse a leading decimal integer from *text*.

    Leading ASCII whitespace is skipped and a single optional sign is
    accepted. Parsing stops at the first character that is not a digit.
    Text with no digits gives 0.
    """
    stripped = text.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] == "-":
        sign = -1
        stripped = stripped[1:]
    elif stripped[:1] == "+":
        stripped = stripped[1:]

    value = 0
    for char in stripped:
        if char not in _DIGITS:
            break
        value = value * 10 + int(char)
    return sign * value