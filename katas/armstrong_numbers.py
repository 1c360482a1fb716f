"""Armstrong (narcissistic) number check."""


def is_armstrong_number(num: int) -> bool:
    """True when num equals the sum of its digits each raised to the digit count."""
    digits = [int(d) for d in str(num)]
    return num == sum(d ** len(digits) for d in digits)