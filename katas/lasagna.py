"""Lasagna cooking times."""

_OVEN_MINUTES = 40
_MINUTES_PER_LAYER = 2


def expected_minutes_in_oven() -> int:
    return _OVEN_MINUTES


def remaining_minutes_in_oven(actual_minutes_in_oven: int) -> int:
    return expected_minutes_in_oven() - actual_minutes_in_oven


def preparation_time_in_minutes(number_of_layers: int) -> int:
    return number_of_layers * _MINUTES_PER_LAYER


def elapsed_time_in_minutes(number_of_layers: int, actual_minutes_in_oven: int) -> int:
    return preparation_time_in_minutes(number_of_layers) + actual_minutes_in_oven