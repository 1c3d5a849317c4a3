"""Advisory validation for constraints and menu items."""

from dish_planner.domain.catalog import ValidationResult
from dish_planner.domain.constraints import Auto, ConstraintSpec, Exact
from dish_planner.domain.menu import MenuItem

MIN_SPICE_LEVEL = 1
MAX_SPICE_LEVEL = 5


def validate_constraints(constraints: ConstraintSpec) -> ValidationResult:
    """Check constraints for values the engine cannot honour."""
    errors: list[str] = []
    warnings: list[str] = []

    if constraints.headcount < 1:
        errors.append("Headcount must be at least 1")
    if constraints.budget <= 0:
        errors.append("Budget must be greater than 0")
    for tag, minimum in constraints.tag_minimums.items():
        if minimum < 0:
            errors.append(f"Minimum count for tag {tag} cannot be negative")
    if constraints.max_spice_level is not None and not _valid_spice(
        constraints.max_spice_level
    ):
        errors.append(
            f"Maximum spice level must be between {MIN_SPICE_LEVEL} "
            f"and {MAX_SPICE_LEVEL}"
        )
    if constraints.max_prep_minutes is not None and constraints.max_prep_minutes <= 0:
        errors.append("Maximum prep time must be greater than 0")

    if not any(
        isinstance(quota, Exact | Auto) for quota in constraints.categories.values()
    ):
        warnings.append(
            "No dish categories requested; the menu may not be a sensible meal"
        )

    return ValidationResult(errors=errors, warnings=warnings)


def validate_menu_item(item: MenuItem) -> ValidationResult:
    """Check a menu item for values the engine cannot use."""
    errors: list[str] = []
    if not item.name.strip():
        errors.append("Dish name cannot be empty")
    if item.price <= 0:
        errors.append("Price must be greater than 0")
    if item.base_quantity < 1:
        errors.append("Base quantity must be at least 1")
    if item.spice_level is not None and not _valid_spice(item.spice_level):
        errors.append(
            f"Spice level must be between {MIN_SPICE_LEVEL} and {MAX_SPICE_LEVEL}"
        )
    return ValidationResult(errors=errors)


def _valid_spice(level: int) -> bool:
    return MIN_SPICE_LEVEL <= level <= MAX_SPICE_LEVEL
