"""Spell out non-negative integers in American English words."""

from __future__ import annotations

_MAX = 2**64 - 1

_SMALL = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine",
    "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen", "sixteen",
    "seventeen", "eighteen", "nineteen",
)

_TENS = {
    2: "twenty",
    3: "thirty",
    4: "forty",
    5: "fifty",
    6: "sixty",
    7: "seventy",
    8: "eighty",
    9: "ninety",
}

_SCALES = (
    (10**18, "quintillion"),
    (10**15, "quadrillion"),
    (10**12, "trillion"),
    (10**9, "billion"),
    (10**6, "million"),
    (10**3, "thousand"),
    (10**2, "hundred"),
)


def encode(n: int) -> str:
    """Words for n, from zero up to 2**64 - 1, without "and"."""
    if n < 0:
        raise ValueError("Number must not be negative")
    if n > _MAX:
        raise ValueError("Number too large")
    if n < 20:
        return _SMALL[n]
    if n < 100:
        tens, ones = divmod(n, 10)
        word = _TENS[tens]
        return f"{word}-{_SMALL[ones]}" if ones else word
    for size, name in _SCALES:
        if n >= size:
            head, rest = divmod(n, size)
            words = f"{encode(head)} {name}"
            return f"{words} {encode(rest)}" if rest else words
    raise AssertionError("unreachable")