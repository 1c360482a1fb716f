"""Production rates of a car assembly line."""

PRODUCTION_RATE = 221.0


def production_rate_per_hour(speed: int) -> float:
    """Cars produced per hour at a speed from 0 to 10, after failures."""
    if not 0 <= speed <= 10:
        raise ValueError("Speed must be between 0 and 10")
    if speed <= 4:
        return PRODUCTION_RATE * speed
    if speed <= 8:
        return PRODUCTION_RATE * speed * 0.9
    return PRODUCTION_RATE * speed * 0.77


def working_items_per_minute(speed: int) -> int:
    """Whole working cars produced per minute."""
    return int(production_rate_per_hour(speed) / 60.0)