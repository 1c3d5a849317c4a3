"""Temperature-aware selection layered on the tiered selector."""

from collections.abc import Iterable

from dish_planner.domain.constraints import Quota
from dish_planner.domain.menu import MenuItem, Temperature
from dish_planner.services.tiers import DEFAULT_CUTOFFS, RandomSource, TieredSelector

TEMPERATURE_UNSPECIFIED_NOTE = (
    "Temperature pairing was not specified; dishes were chosen without hot/cold balance"
)


class TemperatureQuotaTracker:
    """Run-wide bookkeeping of per-temperature quotas.

    ``remaining`` is ``None`` for auto quotas (as many as available).
    Counts only change through ``record``, which callers invoke for accepted
    lines.
    """

    def __init__(self, quotas: dict[Temperature, Quota]) -> None:
        self._order = [temp for temp, quota in quotas.items() if not quota.is_excluded]
        self._excluded = {temp for temp, quota in quotas.items() if quota.is_excluded}
        self._remaining: dict[Temperature, int | None] = {
            temp: quotas[temp].limit for temp in self._order
        }

    @property
    def active(self) -> bool:
        """Whether any temperature quota was declared for the run."""
        return bool(self._order or self._excluded)

    def allows(self, item: MenuItem) -> bool:
        """Return False for items of a hard-excluded temperature."""
        return item.serving_temperature not in self._excluded

    def open_temperatures(self) -> list[Temperature]:
        """Declared temperatures whose quota still has room, in declared order."""
        return [temp for temp in self._order if self._remaining[temp] != 0]

    def remaining(self, temperature: Temperature) -> int | None:
        return self._remaining.get(temperature, 0)

    def record(self, item: MenuItem) -> None:
        """Count an accepted item against its temperature quota."""
        temperature = item.serving_temperature
        left = self._remaining.get(temperature)
        if left:
            self._remaining[temperature] = left - 1


class TemperatureAwareSelector:
    """Fills one category honouring the run-wide temperature quotas.

    Declared temperatures are served first, in order, each from its own
    tiered selector. Once no open temperature can supply an item, the
    shortfall is drawn from the rest of the category pool regardless of
    temperature (excluded temperatures stay out).
    """

    def __init__(  # noqa: PLR0913
        self,
        candidates: Iterable[MenuItem],
        tracker: TemperatureQuotaTracker,
        rng: RandomSource,
        cutoffs: tuple[float, float] = DEFAULT_CUTOFFS,
        prefer_popular: bool = False,
    ) -> None:
        self._pool = [item for item in candidates if tracker.allows(item)]
        self._tracker = tracker
        self._rng = rng
        self._cutoffs = cutoffs
        self._prefer_popular = prefer_popular
        self._by_temperature: dict[Temperature, TieredSelector] = {}
        self._fallback: TieredSelector | None = None
        self._taken: set[str] = set()

    @property
    def available(self) -> int:
        """Number of items this selector could ever return."""
        return len(self._pool)

    def draw(self) -> MenuItem | None:
        for temperature in self._tracker.open_temperatures():
            item = self._next_untaken(self._selector_for(temperature))
            if item is not None:
                return item
        if self._fallback is None:
            self._fallback = self._tiered(
                item for item in self._pool if item.id not in self._taken
            )
        return self._next_untaken(self._fallback)

    def _selector_for(self, temperature: Temperature) -> TieredSelector:
        selector = self._by_temperature.get(temperature)
        if selector is None:
            selector = self._tiered(
                item
                for item in self._pool
                if item.serving_temperature == temperature
                and item.id not in self._taken
            )
            self._by_temperature[temperature] = selector
        return selector

    def _next_untaken(self, selector: TieredSelector) -> MenuItem | None:
        while True:
            item = selector.draw()
            if item is None:
                return None
            if item.id not in self._taken:
                self._taken.add(item.id)
                return item

    def _tiered(self, candidates: Iterable[MenuItem]) -> TieredSelector:
        return TieredSelector(
            candidates,
            self._rng,
            cutoffs=self._cutoffs,
            prefer_popular=self._prefer_popular,
        )
