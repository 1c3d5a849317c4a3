"""Module-level entry points backed by a default container."""

from collections.abc import Sequence
from functools import lru_cache

from dish_planner.containers import AppContainer, build_container
from dish_planner.domain.constraints import ConstraintSpec
from dish_planner.domain.menu import MenuItem
from dish_planner.domain.results import Adjustment, GenerationResult


@lru_cache(maxsize=1)
def default_container() -> AppContainer:
    return build_container()


def generate(
    catalog: Sequence[MenuItem],
    constraints: ConstraintSpec,
    previous_result: GenerationResult | None = None,
) -> GenerationResult:
    """Select dishes for ``catalog`` under ``constraints``."""
    service = default_container().generation_service
    return service.generate(catalog, constraints, previous_result)


def apply_adjustments(
    result: GenerationResult,
    adjustments: Sequence[Adjustment],
    constraints: ConstraintSpec,
) -> GenerationResult:
    """Apply a batch of manual edits to ``result``."""
    service = default_container().adjustment_service
    return service.apply(result, adjustments, constraints)
