"""Domain models for parsed catalogs and validation outcomes."""

from dataclasses import dataclass, field

from dish_planner.domain.menu import MenuItem


@dataclass(frozen=True)
class RowError:
    """A catalog row that could not be turned into a menu item."""

    row: int
    field: str
    message: str


@dataclass(frozen=True)
class ParsedCatalog:
    """Outcome of parsing a catalog file."""

    items: list[MenuItem]
    errors: list[RowError]
    warnings: list[str]
    total_rows: int
    valid_rows: int
    parse_ms: int


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating constraints or a menu item."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors
