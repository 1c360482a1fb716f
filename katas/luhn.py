"""Luhn checksum validation."""

_DIGITS = "0123456789"


def is_valid(code: str) -> bool:
    """True when the code, ignoring whitespace, is two or more digits passing Luhn."""
    chars = [c for c in code if not c.isspace()]
    if len(chars) < 2 or any(c not in _DIGITS for c in chars):
        return False
    total = 0
    for position, char in enumerate(reversed(chars)):
        digit = int(char)
        if position % 2 == 1:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0