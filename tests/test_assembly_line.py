import pytest

from katas.assembly_line import production_rate_per_hour, working_items_per_minute


@pytest.mark.parametrize(
    "speed, expected",
    [(0, 0.0), (1, 221.0), (4, 884.0), (7, 1392.3), (9, 1531.53)],
)
def test_production_rate_per_hour(speed, expected):
    assert round(production_rate_per_hour(speed), 2) == pytest.approx(expected)


@pytest.mark.parametrize(
    "speed, expected",
    [(0, 0), (1, 3), (5, 16), (8, 26), (10, 28)],
)
def test_working_items_per_minute(speed, expected):
    assert working_items_per_minute(speed) == expected


@pytest.mark.parametrize("speed", [-1, 11])
def test_speed_out_of_range(speed):
    with pytest.raises(ValueError):
        production_rate_per_hour(speed)