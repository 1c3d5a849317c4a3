"""Tests for the budget-maximization pass."""

from dish_planner.domain.constraints import EXCLUDED, Exact
from dish_planner.domain.menu import Category, Temperature
from dish_planner.services.allocation import AllocationLedger, build_line
from dish_planner.services.budget import BudgetMaximizer, utilization_warning
from dish_planner.services.filters import partition_by_category
from dish_planner.services.temperature import TemperatureQuotaTracker
from tests.conftest import make_constraints, make_item


def _maximize(catalog, categories, budget, selected=(), temperatures=None):
    constraints = make_constraints(
        budget=budget,
        headcount=1,
        categories=categories,
        temperatures=temperatures or {},
    )
    ledger = AllocationLedger(budget=budget, headcount=1)
    for item in selected:
        ledger.add(build_line(item, 1))
    added = BudgetMaximizer(
        constraints=constraints,
        partitions=partition_by_category(catalog),
        tracker=TemperatureQuotaTracker(constraints.temperatures),
    ).run(ledger)
    return ledger, added


def test_picks_candidate_closest_to_target_each_round() -> None:
    main = make_item("m1", 10, Category.MAIN)
    catalog = [
        main,
        make_item("s1", 5, Category.SIDE),
        make_item("s2", 20, Category.SIDE),
        make_item("s3", 30, Category.SIDE),
    ]

    ledger, added = _maximize(catalog, {Category.MAIN: Exact(1)}, 50, [main])

    assert added == 2
    assert [line.item.id for line in ledger.lines] == ["m1", "s3", "s1"]
    assert ledger.spent == 45
    assert "Auto-added s3 to fill the side category" in ledger.warnings


def test_extra_items_of_exact_categories_are_reported() -> None:
    main = make_item("m1", 10, Category.MAIN)
    catalog = [main, make_item("m2", 15, Category.MAIN)]

    ledger, added = _maximize(catalog, {Category.MAIN: Exact(1)}, 30, [main])

    assert added == 1
    assert ledger.warnings == [
        "Added extra main dish m2 to use the remaining budget"
    ]


def test_nothing_added_once_target_is_reached() -> None:
    main = make_item("m1", 95, Category.MAIN)
    catalog = [main, make_item("s1", 1, Category.SIDE)]

    ledger, added = _maximize(catalog, {Category.MAIN: Exact(1)}, 100, [main])

    assert added == 0
    assert len(ledger.lines) == 1


def test_candidates_beyond_target_are_never_taken() -> None:
    catalog = [make_item("s1", 95, Category.SIDE)]

    ledger, added = _maximize(catalog, {}, 100)

    assert added == 0
    assert ledger.spent == 0


def test_excluded_categories_are_not_topped_up() -> None:
    catalog = [make_item("d1", 5, Category.DESSERT)]

    _, added = _maximize(catalog, {Category.DESSERT: EXCLUDED}, 100)

    assert added == 0


def test_excluded_temperatures_are_not_topped_up() -> None:
    catalog = [
        make_item("cold", 5, Category.SIDE, temperature=Temperature.COLD),
        make_item("hot", 6, Category.SIDE, temperature=Temperature.HOT),
    ]

    ledger, _ = _maximize(
        catalog, {}, 100, temperatures={Temperature.COLD: EXCLUDED}
    )

    assert [line.item.id for line in ledger.lines] == ["hot"]


def test_utilization_warning_bands() -> None:
    low = utilization_warning(50, 100)
    good = utilization_warning(95, 100)

    assert low is not None and low.startswith("Budget utilization is low (50.0%)")
    assert good == "Budget utilization is good (95.0%)"
    assert utilization_warning(87, 100) is None
    assert utilization_warning(10, 0) is None
