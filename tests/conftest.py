"""Shared test fixtures."""

from collections.abc import MutableSequence
from dataclasses import dataclass, field

import pytest

from dish_planner.config import Settings
from dish_planner.domain.constraints import EXCLUDED, ConstraintSpec, Exact, Quota
from dish_planner.domain.menu import Category, MenuItem, Protein, Temperature
from dish_planner.services.adjustments import AdjustmentService
from dish_planner.services.generation import GenerationService


@dataclass
class SequenceRandom:
    """Deterministic random source: cycles through fixed rolls, never shuffles."""

    rolls: list[float] = field(default_factory=lambda: [0.0])
    calls: int = 0

    def random(self) -> float:
        value = self.rolls[self.calls % len(self.rolls)]
        self.calls += 1
        return value

    def shuffle(self, x: MutableSequence[object]) -> None:
        return None


def make_item(  # noqa: PLR0913
    item_id: str,
    price: float,
    category: Category = Category.MAIN,
    *,
    name: str | None = None,
    temperature: Temperature | None = None,
    protein: Protein | None = None,
    tags: tuple[str, ...] = (),
    base_quantity: int = 1,
    scales: bool = False,
    allergens: tuple[str, ...] = (),
    spice_level: int | None = None,
    prep_minutes: int | None = None,
    popularity: float | None = None,
) -> MenuItem:
    return MenuItem(
        id=item_id,
        name=name or item_id,
        price=price,
        category=category,
        temperature=temperature,
        protein=protein,
        tags=frozenset(tags),
        base_quantity=base_quantity,
        scales_with_headcount=scales,
        allergens=frozenset(allergens),
        spice_level=spice_level,
        prep_minutes=prep_minutes,
        popularity=popularity,
    )


def make_constraints(
    budget: float = 200,
    headcount: int = 4,
    categories: dict[Category, Quota] | None = None,
    **kwargs: object,
) -> ConstraintSpec:
    return ConstraintSpec(
        headcount=headcount,
        budget=budget,
        categories=categories or {},
        **kwargs,
    )


def scenario_catalog() -> list[MenuItem]:
    """One dish per category, staple and soup scaling with headcount."""
    return [
        make_item(
            "rice",
            3,
            Category.STAPLE,
            name="Steamed rice",
            temperature=Temperature.HOT,
            protein=Protein.VEGETARIAN,
            tags=("rice", "staple"),
            scales=True,
        ),
        make_item(
            "pork",
            38,
            Category.MAIN,
            name="Braised pork belly",
            temperature=Temperature.HOT,
            protein=Protein.MEAT,
            tags=("pork", "braised", "hearty"),
        ),
        make_item(
            "tofu",
            22,
            Category.SIDE,
            name="Mapo tofu",
            temperature=Temperature.HOT,
            protein=Protein.VEGETARIAN,
            tags=("tofu", "sichuan", "vegetarian"),
        ),
        make_item(
            "egg-soup",
            15,
            Category.SOUP,
            name="Seaweed egg drop soup",
            temperature=Temperature.HOT,
            protein=Protein.VEGETARIAN,
            tags=("seaweed", "egg", "soup"),
            scales=True,
        ),
        make_item(
            "mung-bean",
            8,
            Category.DESSERT,
            name="Mung bean dessert",
            temperature=Temperature.COLD,
            protein=Protein.VEGETARIAN,
            tags=("mung-bean", "sweet", "cooling"),
        ),
    ]


def scenario_constraints(budget: float = 200) -> ConstraintSpec:
    return make_constraints(
        budget=budget,
        headcount=4,
        categories={
            Category.STAPLE: Exact(1),
            Category.MAIN: Exact(2),
            Category.SIDE: Exact(1),
            Category.SOUP: Exact(1),
            Category.DESSERT: EXCLUDED,
        },
    )


def category_counts(result) -> dict[Category, int]:
    counts: dict[Category, int] = {}
    for line in result.items:
        counts[line.item.category] = counts.get(line.item.category, 0) + 1
    return counts


@pytest.fixture
def settings() -> Settings:
    return Settings()


@pytest.fixture
def generation_service(settings: Settings) -> GenerationService:
    return GenerationService(settings=settings)


@pytest.fixture
def adjustment_service() -> AdjustmentService:
    return AdjustmentService()
