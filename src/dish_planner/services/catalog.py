"""CSV catalog parsing into menu items."""

import csv
import io
import logging
import re
import time
from pathlib import Path
from uuid import uuid4

from dish_planner.domain.catalog import ParsedCatalog, RowError
from dish_planner.domain.menu import Category, MenuItem, Protein, Temperature
from dish_planner.services.validation import validate_menu_item

_logger = logging.getLogger(__name__)

_COLUMN_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("name", "dish", "dish name", "item"),
    "price": ("price", "unit price", "cost"),
    "category": ("category", "type", "dish type"),
    "temperature": ("temperature", "temp", "hot cold"),
    "protein": ("protein", "meat type", "meat veg"),
    "tags": ("tags", "tag", "features"),
    "base_quantity": ("base quantity", "quantity", "qty", "count"),
    "scales_with_headcount": (
        "scales with headcount",
        "scale with people",
        "per person",
        "scale",
    ),
    "description": ("description", "notes"),
    "allergens": ("allergens", "allergen"),
    "spice_level": ("spice level", "spicy level", "spice"),
    "prep_minutes": ("prep minutes", "prep time", "cooking time"),
    "popularity": ("popularity",),
}

REQUIRED_FIELDS = ("name", "price", "category")
REPORTED_OPTIONAL_FIELDS = (
    "temperature",
    "protein",
    "tags",
    "base_quantity",
    "scales_with_headcount",
)

_TRUE_VALUES = {"yes", "y", "true", "1"}
_FALSE_VALUES = {"no", "n", "false", "0", ""}
_PROTEIN_SYNONYMS = {"veg": Protein.VEGETARIAN, "vegan": Protein.VEGETARIAN}
_LIST_SPLIT = re.compile(r"[,;\s]+")
_HEADER_CLEAN = re.compile(r"[\s_\-/]+")


class _RowProblem(ValueError):
    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field
        self.message = message


def load_catalog(path: str | Path) -> ParsedCatalog:
    """Read and parse a CSV catalog file."""
    text = Path(path).read_text(encoding="utf-8-sig")
    return parse_catalog_csv(text)


def parse_catalog_csv(text: str) -> ParsedCatalog:
    """Parse CSV text into menu items, reporting malformed rows as errors."""
    started = time.perf_counter()
    reader = csv.reader(io.StringIO(text.strip()))
    rows = [row for row in reader if any(cell.strip() for cell in row)]
    if not rows:
        return ParsedCatalog([], [], [], 0, 0, _elapsed_ms(started))

    columns = _map_columns(rows[0])
    missing = [name for name in REQUIRED_FIELDS if name not in columns]
    if missing:
        error = RowError(
            row=0,
            field=",".join(missing),
            message=f"Missing required column(s): {', '.join(missing)}",
        )
        return ParsedCatalog(
            [], [error], [], len(rows), 0, _elapsed_ms(started)
        )

    warnings = [
        f'Column "{name}" not found, using default values'
        for name in REPORTED_OPTIONAL_FIELDS
        if name not in columns
    ]
    items: list[MenuItem] = []
    errors: list[RowError] = []
    for row_number, row in enumerate(rows[1:], start=2):
        values = {
            name: row[index].strip() if index < len(row) else ""
            for name, index in columns.items()
        }
        try:
            item = _build_item(values)
        except _RowProblem as problem:
            errors.append(RowError(row_number, problem.field, problem.message))
            continue
        validation = validate_menu_item(item)
        if not validation.is_valid:
            for message in validation.errors:
                errors.append(RowError(row_number, "item", message))
            continue
        items.append(item)

    _logger.info(
        "Parsed catalog: rows=%s items=%s errors=%s",
        len(rows) - 1,
        len(items),
        len(errors),
    )
    return ParsedCatalog(
        items=items,
        errors=errors,
        warnings=warnings,
        total_rows=len(rows),
        valid_rows=len(items),
        parse_ms=_elapsed_ms(started),
    )


def split_list(raw: str) -> frozenset[str]:
    """Split a tag/allergen cell on commas, semicolons or whitespace."""
    return frozenset(part for part in _LIST_SPLIT.split(raw) if part)


def _parse_bool(raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise _RowProblem("scales_with_headcount", f"Unrecognised yes/no value: {raw}")


def _map_columns(header: list[str]) -> dict[str, int]:
    lookup = {
        alias: name for name, aliases in _COLUMN_ALIASES.items() for alias in aliases
    }
    columns: dict[str, int] = {}
    for index, title in enumerate(header):
        normalised = _HEADER_CLEAN.sub(" ", title.strip().lower()).strip()
        name = lookup.get(normalised)
        if name is not None and name not in columns:
            columns[name] = index
    return columns


def _build_item(values: dict[str, str]) -> MenuItem:
    name = values.get("name", "")
    if not name:
        raise _RowProblem("name", "Dish name cannot be empty")
    return MenuItem(
        id=str(uuid4()),
        name=name,
        price=_parse_price(values.get("price", "")),
        category=_parse_category(values.get("category", "")),
        temperature=_parse_temperature(values.get("temperature", "")),
        protein=_parse_protein(values.get("protein", "")),
        tags=split_list(values.get("tags", "")),
        base_quantity=_parse_int(values.get("base_quantity", ""), "base_quantity", 1),
        scales_with_headcount=_parse_bool(values.get("scales_with_headcount", "")),
        description=values.get("description") or None,
        allergens=split_list(values.get("allergens", "")),
        spice_level=_parse_optional_int(values.get("spice_level", ""), "spice_level"),
        prep_minutes=_parse_optional_int(
            values.get("prep_minutes", ""), "prep_minutes"
        ),
        popularity=_parse_optional_float(values.get("popularity", ""), "popularity"),
    )


def _parse_price(raw: str) -> float:
    try:
        price = float(raw.lstrip("$"))
    except ValueError as exc:
        raise _RowProblem("price", f"Invalid price: {raw!r}") from exc
    if price <= 0:
        raise _RowProblem("price", "Price must be greater than 0")
    return price


def _parse_category(raw: str) -> Category:
    try:
        return Category(raw.lower())
    except ValueError as exc:
        allowed = ", ".join(category.value for category in Category)
        raise _RowProblem(
            "category", f"Category must be one of: {allowed}"
        ) from exc


def _parse_temperature(raw: str) -> Temperature | None:
    if not raw:
        return None
    try:
        return Temperature(raw.lower())
    except ValueError as exc:
        raise _RowProblem("temperature", f"Unknown temperature: {raw}") from exc


def _parse_protein(raw: str) -> Protein | None:
    if not raw:
        return None
    value = raw.lower()
    if value in _PROTEIN_SYNONYMS:
        return _PROTEIN_SYNONYMS[value]
    try:
        return Protein(value)
    except ValueError as exc:
        raise _RowProblem("protein", f"Unknown protein type: {raw}") from exc


def _parse_int(raw: str, field: str, default: int) -> int:
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise _RowProblem(field, f"Invalid whole number for {field}: {raw}") from exc


def _parse_optional_int(raw: str, field: str) -> int | None:
    if not raw:
        return None
    return _parse_int(raw, field, 0)


def _parse_optional_float(raw: str, field: str) -> float | None:
    if not raw:
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise _RowProblem(field, f"Invalid number for {field}: {raw}") from exc


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)
