"""Manual adjustment service for generated menus."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, replace

from dish_planner.domain.constraints import ConstraintSpec
from dish_planner.domain.results import (
    Adjustment,
    AdjustmentKind,
    GenerationResult,
    SelectedItem,
)
from dish_planner.services.allocation import build_line
from dish_planner.services.generation import satisfied_categories

_logger = logging.getLogger(__name__)


@dataclass
class AdjustmentService:
    """Applies pin/unpin/replace/remove edits to a result."""

    def apply(
        self,
        result: GenerationResult,
        adjustments: Sequence[Adjustment],
        constraints: ConstraintSpec,
    ) -> GenerationResult:
        """Return a new result with the edits applied in order.

        Edits targeting an id that is not in the result are skipped. The
        input result is never modified.
        """
        lines = result.items
        warnings = list(result.metadata.warnings)
        applied = 0
        for adjustment in adjustments:
            index = _index_of(lines, adjustment.item_id)
            if index is None:
                _logger.debug(
                    "Skipping %s for unknown item %s",
                    adjustment.kind.value,
                    adjustment.item_id,
                )
                continue
            current = lines[index]
            if adjustment.kind is AdjustmentKind.PIN:
                lines = _replace_at(lines, index, replace(current, is_fixed=True))
            elif adjustment.kind is AdjustmentKind.UNPIN:
                lines = _replace_at(lines, index, replace(current, is_fixed=False))
            elif adjustment.kind is AdjustmentKind.REPLACE:
                if adjustment.replacement is None:
                    _logger.debug("Skipping replace without a replacement dish")
                    continue
                duplicate = _index_of(lines, adjustment.replacement.id)
                if duplicate is not None and duplicate != index:
                    _logger.debug(
                        "Skipping replace of %s: %s is already on the menu",
                        adjustment.item_id,
                        adjustment.replacement.id,
                    )
                    continue
                lines = _replace_at(
                    lines,
                    index,
                    _replacement_line(current, adjustment, constraints.headcount),
                )
            elif adjustment.kind is AdjustmentKind.REMOVE:
                if current.is_fixed:
                    warnings.append(
                        f"Cannot remove pinned dish {current.item.name}; unpin it first"
                    )
                    continue
                lines = lines[:index] + lines[index + 1 :]
                warnings.append(f"Removed: {current.item.name}")
            applied += 1

        adjusted = GenerationResult(
            items=lines,
            metadata=replace(
                result.metadata,
                satisfied_categories=satisfied_categories(lines),
                warnings=tuple(warnings),
            ),
        )
        _logger.info(
            "Applied %s of %s adjustment(s): total=%.2f",
            applied,
            len(adjustments),
            adjusted.total_cost,
        )
        return adjusted


def _index_of(lines: tuple[SelectedItem, ...], item_id: str) -> int | None:
    for index, line in enumerate(lines):
        if line.item.id == item_id:
            return index
    return None


def _replace_at(
    lines: tuple[SelectedItem, ...], index: int, line: SelectedItem
) -> tuple[SelectedItem, ...]:
    return (*lines[:index], line, *lines[index + 1 :])


def _replacement_line(
    current: SelectedItem, adjustment: Adjustment, headcount: int
) -> SelectedItem:
    new_item = adjustment.replacement
    alternatives = [alt for alt in current.alternatives if alt.id != new_item.id]
    return build_line(new_item, headcount, alternatives, is_fixed=False)
