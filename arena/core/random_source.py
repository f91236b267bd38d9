"""
Random number sources for the arena.

The battle engine and the weapon inventory never touch the global random
state; they draw from a RandomSource handed to them by the caller.
"""

import random
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    """Produces uniformly distributed integers in an inclusive range."""

    def randint(self, low: int, high: int) -> int:
        """
        Draws an integer uniformly from [low, high].

        Args:
            low (int): The lowest value that can be drawn.
            high (int): The highest value that can be drawn.

        Returns:
            int: The drawn value.

        """
        ...


class SystemRandomSource:
    """
    RandomSource backed by a private random.Random instance.

    Attributes:
        seed (int | None):
            The seed the generator was created with. None draws the seed from
            the operating system.

    """

    def __init__(self, seed: int | None = None) -> None:
        self.seed = seed
        self._random = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        if low > high:
            raise ValueError(f"Empty range [{low}, {high}]")
        return self._random.randint(low, high)

    def __repr__(self) -> str:
        return f"SystemRandomSource(seed={self.seed!r})"
