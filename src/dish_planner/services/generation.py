"""Menu generation service."""

import logging
import random
import time
from collections.abc import Sequence
from dataclasses import dataclass, field

from dish_planner.config import Settings
from dish_planner.domain.constraints import ConstraintSpec, Exact
from dish_planner.domain.menu import Category, MenuItem
from dish_planner.domain.results import (
    GenerationMetadata,
    GenerationResult,
    SelectedItem,
)
from dish_planner.services.allocation import AllocationLedger, PrimaryAllocator
from dish_planner.services.budget import BudgetMaximizer, utilization_warning
from dish_planner.services.filters import filter_candidates, partition_by_category
from dish_planner.services.temperature import (
    TEMPERATURE_UNSPECIFIED_NOTE,
    TemperatureQuotaTracker,
)
from dish_planner.services.tiers import RandomSource

_logger = logging.getLogger(__name__)


@dataclass
class GenerationService:
    """Selects dishes for a catalog under a set of constraints."""

    settings: Settings
    rng: RandomSource = field(default_factory=random.Random)

    def generate(
        self,
        catalog: Sequence[MenuItem],
        constraints: ConstraintSpec,
        previous_result: GenerationResult | None = None,
    ) -> GenerationResult:
        """Run filtering, allocation and the budget pass; never raises."""
        started = time.perf_counter()
        ledger = AllocationLedger(
            budget=constraints.budget, headcount=constraints.headcount
        )
        tracker = TemperatureQuotaTracker(constraints.temperatures)
        if previous_result is not None:
            _preserve_pinned(ledger, tracker, previous_result.pinned)

        candidates = filter_candidates(
            catalog, constraints, skip_ids=ledger.selected_ids()
        )
        partitions = partition_by_category(candidates)
        if not tracker.active:
            ledger.warn(TEMPERATURE_UNSPECIFIED_NOTE)

        PrimaryAllocator(
            constraints=constraints,
            partitions=partitions,
            tracker=tracker,
            rng=self.rng,
            cutoffs=self.settings.tier_cutoffs,
            max_alternatives=self.settings.max_alternatives,
        ).run(ledger)
        BudgetMaximizer(
            constraints=constraints,
            partitions=partitions,
            tracker=tracker,
            target_ratio=self.settings.budget_target_ratio,
            max_alternatives=self.settings.max_alternatives,
        ).run(ledger)

        for message in _unmet_protein_warnings(ledger.lines, constraints):
            ledger.warn(message)
        for message in _unmet_tag_warnings(ledger.lines, constraints):
            ledger.warn(message)
        utilization = utilization_warning(
            ledger.spent,
            constraints.budget,
            low_percent=self.settings.low_utilization_percent,
            good_percent=self.settings.good_utilization_percent,
        )
        if utilization:
            ledger.warn(utilization)

        result = GenerationResult(
            items=tuple(ledger.lines),
            metadata=GenerationMetadata(
                generation_ms=int((time.perf_counter() - started) * 1000),
                algorithm_version=self.settings.algorithm_version,
                satisfied_categories=satisfied_categories(ledger.lines),
                warnings=tuple(ledger.warnings),
            ),
        )
        _logger.info(
            "Generated %s dish(es): total=%.2f budget=%.2f warnings=%s",
            len(result.items),
            result.total_cost,
            constraints.budget,
            len(result.metadata.warnings),
        )
        return result


def satisfied_categories(lines: Sequence[SelectedItem]) -> tuple[Category, ...]:
    """Categories with at least one line, in canonical category order."""
    present = {line.item.category for line in lines}
    return tuple(category for category in Category if category in present)


def _preserve_pinned(
    ledger: AllocationLedger,
    tracker: TemperatureQuotaTracker,
    pinned: Sequence[SelectedItem],
) -> None:
    for line in pinned:
        ledger.add(line)
        tracker.record(line.item)
        ledger.warn(f"Kept pinned dish: {line.item.name}")
    if pinned and ledger.spent > ledger.budget:
        ledger.warn(
            f"Pinned dishes cost {ledger.spent:.2f}, "
            f"which exceeds the budget of {ledger.budget:.2f}"
        )


def _unmet_protein_warnings(
    lines: Sequence[SelectedItem], constraints: ConstraintSpec
) -> list[str]:
    messages = []
    for protein, quota in constraints.proteins.items():
        if not isinstance(quota, Exact):
            continue
        found = sum(1 for line in lines if line.item.protein == protein)
        if found < quota.count:
            messages.append(
                f"Requested {quota.count} {protein.value} dish(es), "
                f"selected {found}"
            )
    return messages


def _unmet_tag_warnings(
    lines: Sequence[SelectedItem], constraints: ConstraintSpec
) -> list[str]:
    messages = []
    for tag, minimum in constraints.tag_minimums.items():
        if minimum <= 0:
            continue
        found = sum(1 for line in lines if tag in line.item.tags)
        if found < minimum:
            messages.append(
                f"Tag '{tag}' requires at least {minimum} dish(es), selected {found}"
            )
    return messages
