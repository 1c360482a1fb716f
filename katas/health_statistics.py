"""A user's health record."""

from dataclasses import dataclass


@dataclass
class User:
    """Name, age and weight of a user."""

    name: str
    age: int
    weight: float