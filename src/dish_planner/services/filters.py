"""Candidate filtering and category partitioning."""

from collections.abc import Iterable

from dish_planner.domain.constraints import ConstraintSpec
from dish_planner.domain.menu import Category, MenuItem


def exclude_tagged(
    catalog: Iterable[MenuItem], excluded_tags: Iterable[str]
) -> list[MenuItem]:
    """Drop items carrying any excluded tag."""
    excluded = set(excluded_tags)
    if not excluded:
        return list(catalog)
    return [item for item in catalog if not item.tags & excluded]


def filter_candidates(
    catalog: Iterable[MenuItem],
    constraints: ConstraintSpec,
    skip_ids: Iterable[str] = (),
) -> list[MenuItem]:
    """Apply tag exclusion plus the optional secondary filters."""
    skipped = set(skip_ids)
    excluded_proteins = constraints.excluded_proteins()
    candidates = []
    for item in exclude_tagged(catalog, constraints.excluded_tags):
        if item.id in skipped:
            continue
        if item.protein is not None and item.protein in excluded_proteins:
            continue
        if item.allergens & constraints.excluded_allergens:
            continue
        if _exceeds(item.spice_level, constraints.max_spice_level):
            continue
        if _exceeds(item.prep_minutes, constraints.max_prep_minutes):
            continue
        candidates.append(item)
    return candidates


def partition_by_category(
    candidates: Iterable[MenuItem],
) -> dict[Category, list[MenuItem]]:
    """Group candidates by category, preserving catalog order."""
    partitions: dict[Category, list[MenuItem]] = {}
    for item in candidates:
        partitions.setdefault(item.category, []).append(item)
    return partitions


def _exceeds(value: int | None, limit: int | None) -> bool:
    if value is None or limit is None:
        return False
    return value > limit
