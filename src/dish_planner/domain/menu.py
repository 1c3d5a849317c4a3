"""Domain models for menu candidates."""

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Role a dish plays in a meal."""

    STAPLE = "staple"
    MAIN = "main"
    SIDE = "side"
    SOUP = "soup"
    DESSERT = "dessert"


class Temperature(str, Enum):
    """Serving temperature of a dish."""

    HOT = "hot"
    COLD = "cold"
    NONE = "none"


class Protein(str, Enum):
    """Protein type of a dish."""

    MEAT = "meat"
    VEGETARIAN = "vegetarian"
    NONE = "none"


@dataclass(frozen=True)
class MenuItem:
    """Candidate dish supplied by the catalog."""

    id: str
    name: str
    price: float
    category: Category
    temperature: Temperature | None = None
    protein: Protein | None = None
    tags: frozenset[str] = field(default_factory=frozenset)
    base_quantity: int = 1
    scales_with_headcount: bool = False
    description: str | None = None
    allergens: frozenset[str] = field(default_factory=frozenset)
    spice_level: int | None = None
    prep_minutes: int | None = None
    popularity: float | None = None

    @property
    def serving_temperature(self) -> Temperature:
        """Temperature used for quota matching; untagged items count as none."""
        return self.temperature or Temperature.NONE

    def resolve_quantity(self, headcount: int) -> int:
        """Return the ordered quantity for a party of the given size."""
        if self.scales_with_headcount:
            return self.base_quantity * headcount
        return self.base_quantity
