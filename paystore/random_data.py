"""Random sample data for accounts: owners, amounts and currencies."""

from __future__ import annotations

import random

CURRENCIES: tuple[str, ...] = (
    "USD", "EUR", "CAD", "AUD", "JPY", "GBP", "CNY", "INR", "RUB", "BRL",
)

_FIRST_NAMES: tuple[str, ...] = (
    "Alice", "Bruno", "Carla", "Dmitri", "Elena", "Farid", "Greta", "Hiro",
    "Ines", "Jonas", "Keiko", "Liam", "Mara", "Nikolai", "Olga", "Pedro",
    "Quinn", "Rosa", "Sven", "Tara", "Umar", "Vera", "Wen", "Yara", "Zoe",
)

_LAST_NAMES: tuple[str, ...] = (
    "Anders", "Baker", "Costa", "Dubois", "Eriksen", "Fischer", "Garcia",
    "Hughes", "Ivanov", "Jensen", "Kowalski", "Larsen", "Moreau", "Novak",
    "Okafor", "Petrov", "Quintero", "Rossi", "Schmidt", "Tanaka", "Ueda",
    "Vargas", "Weber", "Yilmaz", "Zimmer",
)


def generate_random_owner() -> str:
    """Return a random full name followed by an extra random last name."""
    full_name = f"{random.choice(_FIRST_NAMES)} {random.choice(_LAST_NAMES)}"
    return f"{full_name} {random.choice(_LAST_NAMES)}"


def random_int(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    if high < low:
        raise ValueError(f"invalid range: high ({high}) is less than low ({low})")
    return random.randint(low, high)


def random_money() -> int:
    """Return a random amount of money between 0 and 1000 inclusive."""
    return random_int(0, 1000)


def random_currency() -> str:
    """Return a random currency code."""
    return random.choice(CURRENCIES)