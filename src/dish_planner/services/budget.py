"""Budget-maximization pass and utilization reporting."""

import logging
from dataclasses import dataclass

from dish_planner.domain.constraints import ConstraintSpec, Exact
from dish_planner.domain.menu import Category, MenuItem
from dish_planner.domain.results import SelectedItem
from dish_planner.services.allocation import (
    AllocationLedger,
    alternatives_for,
    build_line,
)
from dish_planner.services.temperature import TemperatureQuotaTracker

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _PoolEntry:
    line: SelectedItem
    is_extra: bool


@dataclass
class BudgetMaximizer:
    """Greedily tops the menu up towards a fraction of the budget.

    The pool holds unselected items of unspecified, auto and exact
    categories. Each round accepts the single candidate that lands closest to
    the target without passing it, so the pool shrinks by one per accepted
    item and the pass ends after at most ``len(pool)`` rounds.
    """

    constraints: ConstraintSpec
    partitions: dict[Category, list[MenuItem]]
    tracker: TemperatureQuotaTracker
    target_ratio: float = 0.9
    max_alternatives: int = 3

    def run(self, ledger: AllocationLedger) -> int:
        """Top up the ledger and return the number of items added."""
        target = ledger.budget * self.target_ratio
        if ledger.spent >= target:
            return 0
        pool = self._build_pool(ledger)
        added = 0
        while pool:
            best_index = self._closest_to_target(pool, ledger, target)
            if best_index is None:
                break
            entry = pool.pop(best_index)
            ledger.add(entry.line)
            self.tracker.record(entry.line.item)
            added += 1
            item = entry.line.item
            if entry.is_extra:
                ledger.warn(
                    f"Added extra {item.category.value} dish {item.name} "
                    "to use the remaining budget"
                )
            else:
                ledger.warn(
                    f"Auto-added {item.name} to fill the {item.category.value} category"
                )
            if ledger.spent >= target:
                break
        _logger.debug("Budget pass added %s item(s), spent=%.2f", added, ledger.spent)
        return added

    def _build_pool(self, ledger: AllocationLedger) -> list[_PoolEntry]:
        taken = ledger.selected_ids()
        requested = self.constraints.categories
        entries = []
        for category, items in self.partitions.items():
            quota = requested.get(category)
            if quota is not None and quota.is_excluded:
                continue
            is_extra = isinstance(quota, Exact)
            for item in items:
                if item.id in taken:
                    continue
                if self.tracker.active and not self.tracker.allows(item):
                    continue
                line = build_line(
                    item,
                    ledger.headcount,
                    alternatives_for(item, items, self.max_alternatives, taken=taken),
                )
                entries.append(_PoolEntry(line=line, is_extra=is_extra))
        entries.sort(key=lambda entry: entry.line.total_price)
        return entries

    @staticmethod
    def _closest_to_target(
        pool: list[_PoolEntry], ledger: AllocationLedger, target: float
    ) -> int | None:
        best_index = None
        best_gap = None
        for index, entry in enumerate(pool):
            new_total = ledger.spent + entry.line.total_price
            if new_total > target:
                # Pool is sorted by price, nothing further can fit either.
                break
            if new_total > ledger.budget:
                continue
            gap = target - new_total
            if best_gap is None or gap < best_gap:
                best_index = index
                best_gap = gap
        return best_index


def utilization_warning(
    spent: float,
    budget: float,
    low_percent: float = 85.0,
    good_percent: float = 90.0,
) -> str | None:
    """Return the advisory utilization message, if any.

    Between ``low_percent`` and ``good_percent`` there is no message.
    """
    if budget <= 0:
        return None
    utilization = spent / budget * 100
    if utilization < low_percent:
        return (
            f"Budget utilization is low ({utilization:.1f}%); "
            "consider adding more dishes or adjusting the budget"
        )
    if utilization >= good_percent:
        return f"Budget utilization is good ({utilization:.1f}%)"
    return None
