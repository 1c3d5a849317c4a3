"""Pydantic models for JSON/form payloads at the engine boundary."""

from typing import Annotated, TypeVar

from pydantic import BaseModel, Field

from dish_planner.domain.constraints import ConstraintSpec, Quota, quota_from_count
from dish_planner.domain.menu import Category, MenuItem, Protein, Temperature
from dish_planner.domain.results import Adjustment, AdjustmentKind, GenerationResult

QuotaCount = Annotated[int, Field(ge=-1)]
_Key = TypeVar("_Key")


class MenuItemPayload(BaseModel):
    """Menu item payload."""

    id: str
    name: str = Field(min_length=1)
    price: float = Field(gt=0)
    category: Category
    temperature: Temperature | None = None
    protein: Protein | None = None
    tags: list[str] = Field(default_factory=list)
    base_quantity: int = Field(default=1, ge=1)
    scales_with_headcount: bool = False
    description: str | None = None
    allergens: list[str] = Field(default_factory=list)
    spice_level: int | None = Field(default=None, ge=1, le=5)
    prep_minutes: int | None = Field(default=None, gt=0)
    popularity: float | None = None

    def to_domain(self) -> MenuItem:
        return MenuItem(
            id=self.id,
            name=self.name,
            price=self.price,
            category=self.category,
            temperature=self.temperature,
            protein=self.protein,
            tags=frozenset(self.tags),
            base_quantity=self.base_quantity,
            scales_with_headcount=self.scales_with_headcount,
            description=self.description,
            allergens=frozenset(self.allergens),
            spice_level=self.spice_level,
            prep_minutes=self.prep_minutes,
            popularity=self.popularity,
        )


class ConstraintPayload(BaseModel):
    """Constraint payload using -1 (auto), 0 (exclude) and n (exact) counts."""

    headcount: int = Field(ge=1)
    budget: float = Field(gt=0)
    categories: dict[Category, QuotaCount] = Field(default_factory=dict)
    temperatures: dict[Temperature, QuotaCount] = Field(default_factory=dict)
    proteins: dict[Protein, QuotaCount] = Field(default_factory=dict)
    tag_minimums: dict[str, int] = Field(default_factory=dict)
    excluded_tags: list[str] = Field(default_factory=list)
    excluded_allergens: list[str] = Field(default_factory=list)
    max_spice_level: int | None = Field(default=None, ge=1, le=5)
    max_prep_minutes: int | None = Field(default=None, gt=0)
    prefer_popular: bool = False

    def to_domain(self) -> ConstraintSpec:
        return ConstraintSpec(
            headcount=self.headcount,
            budget=self.budget,
            categories=_quotas(self.categories),
            temperatures=_quotas(self.temperatures),
            proteins=_quotas(self.proteins),
            tag_minimums=dict(self.tag_minimums),
            excluded_tags=frozenset(self.excluded_tags),
            excluded_allergens=frozenset(self.excluded_allergens),
            max_spice_level=self.max_spice_level,
            max_prep_minutes=self.max_prep_minutes,
            prefer_popular=self.prefer_popular,
        )


class AdjustmentPayload(BaseModel):
    """Manual adjustment payload."""

    kind: AdjustmentKind
    item_id: str
    replacement: MenuItemPayload | None = None

    def to_domain(self) -> Adjustment:
        replacement = self.replacement.to_domain() if self.replacement else None
        return Adjustment(kind=self.kind, item_id=self.item_id, replacement=replacement)


def _quotas(counts: dict[_Key, int]) -> dict[_Key, Quota]:
    return {key: quota_from_count(value) for key, value in counts.items()}


class SelectedItemView(BaseModel):
    """Rendered result line."""

    item: MenuItemPayload
    quantity: int
    total_price: float
    is_fixed: bool
    can_replace: bool
    alternatives: list[MenuItemPayload]


class GenerationResultView(BaseModel):
    """Rendered generation result for display layers."""

    items: list[SelectedItemView]
    total_cost: float
    generation_ms: int
    algorithm_version: str
    satisfied_categories: list[Category]
    warnings: list[str]

    @classmethod
    def from_domain(cls, result: GenerationResult) -> "GenerationResultView":
        return cls(
            items=[
                SelectedItemView(
                    item=_item_view(line.item),
                    quantity=line.quantity,
                    total_price=line.total_price,
                    is_fixed=line.is_fixed,
                    can_replace=line.can_replace,
                    alternatives=[_item_view(alt) for alt in line.alternatives],
                )
                for line in result.items
            ],
            total_cost=result.total_cost,
            generation_ms=result.metadata.generation_ms,
            algorithm_version=result.metadata.algorithm_version,
            satisfied_categories=list(result.metadata.satisfied_categories),
            warnings=list(result.metadata.warnings),
        )


def _item_view(item: MenuItem) -> MenuItemPayload:
    return MenuItemPayload.model_construct(
        id=item.id,
        name=item.name,
        price=item.price,
        category=item.category,
        temperature=item.temperature,
        protein=item.protein,
        tags=sorted(item.tags),
        base_quantity=item.base_quantity,
        scales_with_headcount=item.scales_with_headcount,
        description=item.description,
        allergens=sorted(item.allergens),
        spice_level=item.spice_level,
        prep_minutes=item.prep_minutes,
        popularity=item.popularity,
    )
