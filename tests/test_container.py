"""Tests for container wiring."""

from dish_planner.containers import build_container
from dish_planner.sample_data import SAMPLE_CSV
from tests.conftest import SequenceRandom


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.settings is settings
    assert container.generation_service.settings is settings
    assert container.adjustment_service is not None


def test_build_container_uses_given_random_source(settings) -> None:
    rng = SequenceRandom()

    container = build_container(settings, rng=rng)

    assert container.generation_service.rng is rng


def test_container_parses_catalog(settings) -> None:
    container = build_container(settings)

    parsed = container.parse_catalog(SAMPLE_CSV)

    assert parsed.valid_rows == 10
