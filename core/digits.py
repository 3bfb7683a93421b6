"""Decimal text conversion for integers of any length.

The interpreter refuses int(str) and str(int) beyond a few thousand digits
(sys.get_int_max_str_digits). These helpers split the work into pieces
below that limit so arbitrary-precision values always print and parse,
without touching the process-wide setting.
"""

# Pieces at or below this many digits go through the builtin conversion.
_CHUNK = 4000
_CHUNK_BOUND = 10 ** _CHUNK

# log10(2), scaled by 10^5
_LOG10_2 = 30103


def _from_digits(digits: str) -> int:
    if len(digits) <= _CHUNK:
        return int(digits)
    k = len(digits) // 2
    return _from_digits(digits[:-k]) * 10 ** k + _from_digits(digits[-k:])


def int_from_digits(text: str) -> int:
    """Integer value of an optionally signed string of ASCII digits."""
    sign = text[:1]
    if sign in ('+', '-'):
        text = text[1:]
    n = _from_digits(text)
    return -n if sign == '-' else n


def int_to_digits(n: int) -> str:
    """Decimal text of n, the same as str(n) but without the length cap."""
    if n < 0:
        return '-' + int_to_digits(-n)
    if n < _CHUNK_BOUND:
        return str(n)
    k = n.bit_length() * _LOG10_2 // 200000
    high, low = divmod(n, 10 ** k)
    return int_to_digits(high) + int_to_digits(low).zfill(k)
