"""Tests for candidate filtering and partitioning."""

from dish_planner.domain.constraints import AUTO, EXCLUDED
from dish_planner.domain.menu import Category, Protein
from dish_planner.services.filters import (
    exclude_tagged,
    filter_candidates,
    partition_by_category,
)
from tests.conftest import make_constraints, make_item, scenario_catalog


def test_exclude_tagged_drops_items_with_any_excluded_tag() -> None:
    catalog = scenario_catalog()

    kept = exclude_tagged(catalog, ["pork", "cooling"])

    assert [item.id for item in kept] == ["rice", "tofu", "egg-soup"]


def test_exclude_tagged_without_exclusions_keeps_everything() -> None:
    catalog = scenario_catalog()

    assert exclude_tagged(catalog, []) == catalog


def test_filter_candidates_applies_secondary_filters() -> None:
    catalog = [
        make_item("plain", 10),
        make_item("peanut", 10, allergens=("peanuts",)),
        make_item("fiery", 10, spice_level=5),
        make_item("mild", 10, spice_level=2),
        make_item("slow", 10, prep_minutes=90),
        make_item("meat", 10, protein=Protein.MEAT),
    ]
    constraints = make_constraints(
        excluded_allergens=frozenset({"peanuts"}),
        max_spice_level=3,
        max_prep_minutes=30,
        proteins={Protein.MEAT: EXCLUDED, Protein.VEGETARIAN: AUTO},
    )

    kept = filter_candidates(catalog, constraints)

    assert [item.id for item in kept] == ["plain", "mild"]


def test_filter_candidates_skips_given_ids() -> None:
    kept = filter_candidates(
        scenario_catalog(), make_constraints(), skip_ids={"rice", "tofu"}
    )

    assert "rice" not in {item.id for item in kept}
    assert "tofu" not in {item.id for item in kept}
    assert len(kept) == 3


def test_partition_by_category_groups_and_omits_missing_categories() -> None:
    catalog = [
        make_item("a", 5, Category.MAIN),
        make_item("b", 6, Category.SIDE),
        make_item("c", 7, Category.MAIN),
    ]

    partitions = partition_by_category(catalog)

    assert [item.id for item in partitions[Category.MAIN]] == ["a", "c"]
    assert [item.id for item in partitions[Category.SIDE]] == ["b"]
    assert partitions.get(Category.SOUP, []) == []
