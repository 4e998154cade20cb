"""Tests for catalog validation."""

import pytest

from dessert_clicker.domain.catalog import DEFAULT_CATALOG, build_catalog
from dessert_clicker.domain.desserts import DessertTier
from dessert_clicker.domain.errors import CatalogError


def test_default_catalog_is_ordered() -> None:
    thresholds = [tier.activation_threshold for tier in DEFAULT_CATALOG]

    assert len(DEFAULT_CATALOG) == 13
    assert thresholds[0] == 0
    assert thresholds == sorted(set(thresholds))
    assert DEFAULT_CATALOG[0].image_reference == "cupcake"
    assert DEFAULT_CATALOG[-1].image_reference == "oreo"


def test_build_catalog_accepts_generators() -> None:
    catalog = build_catalog(DessertTier(f"d{i}", i, i * 10) for i in range(3))

    assert isinstance(catalog, tuple)
    assert len(catalog) == 3


def test_build_catalog_rejects_empty() -> None:
    with pytest.raises(CatalogError):
        build_catalog([])


def test_build_catalog_requires_zero_first_threshold() -> None:
    with pytest.raises(CatalogError, match="0 units"):
        build_catalog([DessertTier("cupcake", 5, 1)])


@pytest.mark.parametrize("second_threshold", [0, 5])
def test_build_catalog_rejects_unsorted_or_duplicate(second_threshold) -> None:
    with pytest.raises(CatalogError, match="unlocks at"):
        build_catalog(
            [
                DessertTier("cupcake", 5, 0),
                DessertTier("donut", 10, 5),
                DessertTier("eclair", 15, second_threshold),
            ]
        )


def test_build_catalog_rejects_negative_price() -> None:
    with pytest.raises(CatalogError, match="negative price"):
        build_catalog([DessertTier("cupcake", -1, 0)])
