"""Primary allocation pass over the requested categories."""

import logging
from collections.abc import Collection, Sequence
from dataclasses import dataclass, field

from dish_planner.domain.constraints import Auto, ConstraintSpec, Exact
from dish_planner.domain.menu import Category, MenuItem
from dish_planner.domain.results import SelectedItem
from dish_planner.services.temperature import (
    TemperatureAwareSelector,
    TemperatureQuotaTracker,
)
from dish_planner.services.tiers import DEFAULT_CUTOFFS, RandomSource, TieredSelector

BUDGET_INSUFFICIENT_WARNING = "Budget may be insufficient to satisfy every constraint"

_logger = logging.getLogger(__name__)


@dataclass
class AllocationLedger:
    """Running state shared by the allocation passes of one run."""

    budget: float
    headcount: int
    lines: list[SelectedItem] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    spent: float = 0.0

    def selected_ids(self) -> set[str]:
        return {line.item.id for line in self.lines}

    def count_in(self, category: Category) -> int:
        return sum(1 for line in self.lines if line.item.category == category)

    def fits(self, line: SelectedItem) -> bool:
        return self.spent + line.total_price <= self.budget

    def add(self, line: SelectedItem) -> None:
        self.lines.append(line)
        self.spent += line.total_price
        _logger.debug(
            "Selected %s (%s) x%s for %.2f, spent=%.2f",
            line.item.name,
            line.item.category.value,
            line.quantity,
            line.total_price,
            self.spent,
        )

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def warn_once(self, message: str) -> None:
        if message not in self.warnings:
            self.warnings.append(message)


def build_line(
    item: MenuItem,
    headcount: int,
    alternatives: Sequence[MenuItem] = (),
    *,
    is_fixed: bool = False,
) -> SelectedItem:
    """Resolve quantity and price for an item: price = unit price x quantity."""
    quantity = item.resolve_quantity(headcount)
    return SelectedItem(
        item=item,
        quantity=quantity,
        total_price=item.price * quantity,
        is_fixed=is_fixed,
        can_replace=True,
        alternatives=tuple(alternatives),
    )


def alternatives_for(
    item: MenuItem,
    pool: Sequence[MenuItem],
    limit: int = 3,
    taken: Collection[str] = (),
) -> list[MenuItem]:
    """Return up to ``limit`` same-category items other than ``item``.

    Items whose id is in ``taken`` are already on the menu and are skipped.
    """
    picks = []
    for candidate in pool:
        if len(picks) >= limit:
            break
        if candidate.id == item.id or candidate.id in taken:
            continue
        if candidate.category == item.category:
            picks.append(candidate)
    return picks


@dataclass
class PrimaryAllocator:
    """Fills each requested category through the tiered selectors.

    Exact requests are served before auto requests, each group in the
    constraint map's order.
    """

    constraints: ConstraintSpec
    partitions: dict[Category, list[MenuItem]]
    tracker: TemperatureQuotaTracker
    rng: RandomSource
    cutoffs: tuple[float, float] = DEFAULT_CUTOFFS
    max_alternatives: int = 3

    def run(self, ledger: AllocationLedger) -> None:
        exact = []
        auto = []
        for category, quota in self.constraints.categories.items():
            if isinstance(quota, Exact):
                exact.append((category, quota.count))
            elif isinstance(quota, Auto):
                auto.append(category)
        for category, count in exact:
            self._fill_exact(ledger, category, count)
        for category in auto:
            self._fill_auto(ledger, category)

    def _fill_exact(
        self, ledger: AllocationLedger, category: Category, requested: int
    ) -> None:
        pinned = ledger.count_in(category)
        needed = requested - pinned
        if needed <= 0:
            return
        selector, available = self._selector(ledger, category)
        if available == 0:
            ledger.warn(f"No {category.value} dishes available")
            return
        target = min(needed, available)
        if target < needed:
            ledger.warn(
                f"Insufficient {category.value} dishes: requested {requested}, "
                f"only {pinned + available} available"
            )
        for _ in range(target):
            item = selector.draw()
            if item is None:
                break
            if not self._accept(ledger, item):
                ledger.warn_once(BUDGET_INSUFFICIENT_WARNING)
                break

    def _fill_auto(self, ledger: AllocationLedger, category: Category) -> None:
        selector, available = self._selector(ledger, category)
        if available == 0:
            ledger.warn(f"No {category.value} dishes available")
            return
        added = 0
        while True:
            item = selector.draw()
            if item is None or not self._accept(ledger, item):
                break
            added += 1
        ledger.warn(f"Auto-arranged {added} {category.value} dish(es) within budget")

    def _accept(self, ledger: AllocationLedger, item: MenuItem) -> bool:
        pool = self.partitions.get(item.category, [])
        line = build_line(
            item,
            ledger.headcount,
            alternatives_for(
                item, pool, self.max_alternatives, taken=ledger.selected_ids()
            ),
        )
        if not ledger.fits(line):
            return False
        ledger.add(line)
        self.tracker.record(item)
        return True

    def _selector(
        self, ledger: AllocationLedger, category: Category
    ) -> tuple[TieredSelector | TemperatureAwareSelector, int]:
        taken = ledger.selected_ids()
        candidates = [
            item
            for item in self.partitions.get(category, [])
            if item.id not in taken
        ]
        prefer_popular = self.constraints.prefer_popular
        if self.tracker.active:
            selector = TemperatureAwareSelector(
                candidates,
                self.tracker,
                self.rng,
                cutoffs=self.cutoffs,
                prefer_popular=prefer_popular,
            )
            return selector, selector.available
        tiered = TieredSelector(
            candidates, self.rng, cutoffs=self.cutoffs, prefer_popular=prefer_popular
        )
        return tiered, tiered.remaining
