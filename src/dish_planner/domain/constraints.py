"""Domain models for generation constraints."""

from dataclasses import dataclass, field

from dish_planner.domain.menu import Category, Protein, Temperature

AUTO_SENTINEL = -1
EXCLUDED_SENTINEL = 0


@dataclass(frozen=True)
class Exact:
    """Request exactly ``count`` dishes."""

    count: int

    @property
    def limit(self) -> int | None:
        return self.count

    @property
    def is_excluded(self) -> bool:
        return False


@dataclass(frozen=True)
class Auto:
    """Let the engine decide how many dishes, bounded by budget."""

    @property
    def limit(self) -> int | None:
        return None

    @property
    def is_excluded(self) -> bool:
        return False


@dataclass(frozen=True)
class Excluded:
    """Never select dishes of this kind."""

    @property
    def limit(self) -> int | None:
        return 0

    @property
    def is_excluded(self) -> bool:
        return True


Quota = Exact | Auto | Excluded

AUTO = Auto()
EXCLUDED = Excluded()


def quota_from_count(value: int) -> Quota:
    """Map a form/JSON sentinel count (-1, 0 or n) to a quota."""
    if value == AUTO_SENTINEL:
        return AUTO
    if value == EXCLUDED_SENTINEL:
        return EXCLUDED
    if value > 0:
        return Exact(value)
    raise ValueError(f"Invalid quota count: {value}")


def quota_to_count(quota: Quota) -> int:
    """Map a quota back to its sentinel count."""
    if isinstance(quota, Exact):
        return quota.count
    if isinstance(quota, Auto):
        return AUTO_SENTINEL
    return EXCLUDED_SENTINEL


@dataclass(frozen=True)
class ConstraintSpec:
    """Input configuration for a generation run.

    A missing category key is not the same as ``EXCLUDED``: missing categories
    may still be filled by the budget-maximization pass.
    """

    headcount: int
    budget: float
    categories: dict[Category, Quota] = field(default_factory=dict)
    temperatures: dict[Temperature, Quota] = field(default_factory=dict)
    proteins: dict[Protein, Quota] = field(default_factory=dict)
    tag_minimums: dict[str, int] = field(default_factory=dict)
    excluded_tags: frozenset[str] = field(default_factory=frozenset)
    excluded_allergens: frozenset[str] = field(default_factory=frozenset)
    max_spice_level: int | None = None
    max_prep_minutes: int | None = None
    prefer_popular: bool = False

    def excluded_temperatures(self) -> set[Temperature]:
        """Return temperatures that are hard-excluded."""
        return {temp for temp, quota in self.temperatures.items() if quota.is_excluded}

    def excluded_proteins(self) -> set[Protein]:
        """Return protein types that are hard-excluded."""
        return {
            protein for protein, quota in self.proteins.items() if quota.is_excluded
        }
