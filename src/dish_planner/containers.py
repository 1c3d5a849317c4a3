"""Dependency container wiring for the engine."""

import random
from collections.abc import Callable
from dataclasses import dataclass

from dish_planner.app_logging import configure_logging
from dish_planner.config import Settings
from dish_planner.domain.catalog import ParsedCatalog, ValidationResult
from dish_planner.domain.constraints import ConstraintSpec
from dish_planner.domain.menu import MenuItem
from dish_planner.services.adjustments import AdjustmentService
from dish_planner.services.catalog import parse_catalog_csv
from dish_planner.services.generation import GenerationService
from dish_planner.services.tiers import RandomSource
from dish_planner.services.validation import (
    validate_constraints,
    validate_menu_item,
)


@dataclass
class AppContainer:
    """Holds engine-wide dependencies."""

    settings: Settings
    generation_service: GenerationService
    adjustment_service: AdjustmentService
    parse_catalog: Callable[[str], ParsedCatalog]
    validate_constraints: Callable[[ConstraintSpec], ValidationResult]
    validate_menu_item: Callable[[MenuItem], ValidationResult]


def build_container(
    settings: Settings | None = None, rng: RandomSource | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(resolved_settings.log_level)
    generation_service = GenerationService(
        settings=resolved_settings,
        rng=rng or random.Random(),
    )
    return AppContainer(
        settings=resolved_settings,
        generation_service=generation_service,
        adjustment_service=AdjustmentService(),
        parse_catalog=parse_catalog_csv,
        validate_constraints=validate_constraints,
        validate_menu_item=validate_menu_item,
    )
