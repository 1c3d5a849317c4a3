"""Domain models for generation results and manual adjustments."""

from dataclasses import dataclass, field
from enum import Enum

from dish_planner.domain.menu import Category, MenuItem


@dataclass(frozen=True)
class SelectedItem:
    """One line of a generated menu."""

    item: MenuItem
    quantity: int
    total_price: float
    is_fixed: bool = False
    can_replace: bool = True
    alternatives: tuple[MenuItem, ...] = ()


@dataclass(frozen=True)
class GenerationMetadata:
    """Bookkeeping attached to a generation result."""

    generation_ms: int
    algorithm_version: str
    satisfied_categories: tuple[Category, ...] = ()
    warnings: tuple[str, ...] = ()


@dataclass(frozen=True)
class GenerationResult:
    """Selected menu lines plus metadata."""

    items: tuple[SelectedItem, ...]
    metadata: GenerationMetadata

    @property
    def total_cost(self) -> float:
        """Literal sum of line prices."""
        return sum(line.total_price for line in self.items)

    @property
    def pinned(self) -> tuple[SelectedItem, ...]:
        """Lines the user has locked against regeneration."""
        return tuple(line for line in self.items if line.is_fixed)

    def find(self, item_id: str) -> SelectedItem | None:
        """Return the line for an item id, if present."""
        for line in self.items:
            if line.item.id == item_id:
                return line
        return None


class AdjustmentKind(str, Enum):
    """Kind of manual edit applied to a result."""

    PIN = "pin"
    UNPIN = "unpin"
    REPLACE = "replace"
    REMOVE = "remove"


@dataclass(frozen=True)
class Adjustment:
    """A single user edit targeting a result line."""

    kind: AdjustmentKind
    item_id: str
    replacement: MenuItem | None = field(default=None)

    @classmethod
    def pin(cls, item_id: str) -> "Adjustment":
        return cls(AdjustmentKind.PIN, item_id)

    @classmethod
    def unpin(cls, item_id: str) -> "Adjustment":
        return cls(AdjustmentKind.UNPIN, item_id)

    @classmethod
    def replace(cls, item_id: str, replacement: MenuItem) -> "Adjustment":
        return cls(AdjustmentKind.REPLACE, item_id, replacement)

    @classmethod
    def remove(cls, item_id: str) -> "Adjustment":
        return cls(AdjustmentKind.REMOVE, item_id)
