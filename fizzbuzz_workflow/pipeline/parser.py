from __future__ import annotations

import re

# Optional ASCII whitespace around an optionally signed run of ASCII digits.
_INTEGER_RE = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)[ \t\n\v\f\r]*")

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1


def parse_number(text: str) -> int | None:
    """Read `text` as a signed 32-bit decimal integer.

    Returns None when the text is not such an integer (including overflow).
    `int()` alone also accepts underscores and non-ASCII digits.
    """

    match = _INTEGER_RE.fullmatch(text)
    if match is None:
        return None

    number = int(match.group(1))
    if number < INT32_MIN or number > INT32_MAX:
        return None
    return number
