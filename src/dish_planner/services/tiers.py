"""Price-tiered random selection."""

import math
from collections.abc import Iterable, MutableSequence
from typing import Protocol

from dish_planner.domain.menu import MenuItem

DEFAULT_CUTOFFS = (0.70, 0.95)


class RandomSource(Protocol):
    """Randomness capability used by the selectors."""

    def random(self) -> float:
        """Return a float uniformly drawn from [0, 1)."""

    def shuffle(self, x: MutableSequence[object]) -> None:
        """Shuffle a sequence in place."""


class TieredSelector:
    """Draws candidates from cheap/mid/expensive price tiers.

    Candidates are sorted by unit price and split into three contiguous tiers
    of sizes ceil(n/3), ceil(n/3) and the remainder. Each tier is shuffled
    once up front. Every draw picks a tier by weight (70/25/5 by default); an
    empty tier falls back to expensive, then mid, then cheap. Repeated draws
    drain the whole candidate set before returning ``None``.
    """

    def __init__(
        self,
        candidates: Iterable[MenuItem],
        rng: RandomSource,
        cutoffs: tuple[float, float] = DEFAULT_CUTOFFS,
        prefer_popular: bool = False,
    ) -> None:
        self._rng = rng
        self._cutoffs = cutoffs
        ordered = sorted(candidates, key=lambda item: item.price)
        size = math.ceil(len(ordered) / 3)
        self._cheap = ordered[:size]
        self._mid = ordered[size : size * 2]
        self._expensive = ordered[size * 2 :]
        for tier in (self._cheap, self._mid, self._expensive):
            rng.shuffle(tier)
            if prefer_popular:
                tier.sort(key=lambda item: -(item.popularity or 0.0))

    @property
    def remaining(self) -> int:
        return len(self._cheap) + len(self._mid) + len(self._expensive)

    def draw(self) -> MenuItem | None:
        """Take one item, or return ``None`` once every tier is empty."""
        if not self.remaining:
            return None
        roll = self._rng.random()
        cheap_cutoff, mid_cutoff = self._cutoffs
        if roll < cheap_cutoff:
            chosen = self._cheap
        elif roll < mid_cutoff:
            chosen = self._mid
        else:
            chosen = self._expensive
        if chosen:
            return chosen.pop(0)
        for tier in (self._expensive, self._mid, self._cheap):
            if tier:
                return tier.pop(0)
        return None

    def drain(self) -> list[MenuItem]:
        """Draw until exhausted and return the picks in draw order."""
        picks = []
        while True:
            item = self.draw()
            if item is None:
                return picks
            picks.append(item)
