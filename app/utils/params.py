# app/utils/params.py
import re

#same as js parseInt(x) without radix: whitespace, sign, then 0x hex or decimal digits
_LEADING_HEX = re.compile(r"\s*([+-]?)0[xX]([0-9a-fA-F]*)")
_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_int(raw: str | None) -> int | None:
    """
    Parse the leading integer of ``raw``.

    A ``0x``/``0X`` prefix switches to base 16 ("0x1E" gives 30), otherwise
    base 10. Trailing characters are ignored, so "2abc" and "2.9" both
    give 2. Returns None when there is nothing to parse ("abc", "", "-",
    "0x"), which is the "not a number" outcome: callers must treat it as
    matching nothing.
    """
    if raw is None:
        return None

    match = _LEADING_HEX.match(raw)
    if match:
        sign, digits = match.groups()
        if not digits:
            return None
        value = int(digits, 16)
        return -value if sign == "-" else value

    match = _LEADING_INT.match(raw)
    if not match:
        return None
    return int(match.group(1))
