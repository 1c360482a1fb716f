import pytest

from katas.health_statistics import User

NAME = "Ebenezer"
AGE = 89
WEIGHT = 131.6


def test_name():
    assert User(NAME, AGE, WEIGHT).name == NAME


def test_age():
    assert User(NAME, AGE, WEIGHT).age == AGE


def test_weight():
    assert User(NAME, AGE, WEIGHT).weight == pytest.approx(WEIGHT)


def test_set_age():
    user = User(NAME, AGE, WEIGHT)
    user.age = 90
    assert user.age == 90
    assert user == User(NAME, 90, WEIGHT)


def test_set_weight():
    user = User(NAME, AGE, WEIGHT)
    user.weight = 129.4
    assert user.weight == pytest.approx(129.4)
    assert user == User(NAME, AGE, 129.4)