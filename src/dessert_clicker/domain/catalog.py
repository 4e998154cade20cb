"""Dessert catalog construction and validation."""

from collections.abc import Iterable

from dessert_clicker.domain.desserts import DessertTier
from dessert_clicker.domain.errors import CatalogError

Catalog = tuple[DessertTier, ...]


def build_catalog(tiers: Iterable[DessertTier]) -> Catalog:
    """Return the tiers as a catalog, rejecting ones tier selection can't scan.

    The first tier must unlock at zero units and thresholds must be strictly
    ascending, so a scan can stop at the first tier it can't afford.
    """
    catalog = tuple(tiers)
    if not catalog:
        raise CatalogError("Catalog must contain at least one dessert.")
    if catalog[0].activation_threshold != 0:
        raise CatalogError(
            "First dessert must unlock at 0 units, "
            f"got {catalog[0].activation_threshold}."
        )
    previous: DessertTier | None = None
    for tier in catalog:
        if tier.unit_price < 0:
            raise CatalogError(f"{tier.image_reference} has a negative price.")
        if tier.activation_threshold < 0:
            raise CatalogError(f"{tier.image_reference} has a negative threshold.")
        if (
            previous is not None
            and tier.activation_threshold <= previous.activation_threshold
        ):
            raise CatalogError(
                f"{tier.image_reference} unlocks at {tier.activation_threshold}, "
                f"not after {previous.image_reference} "
                f"({previous.activation_threshold})."
            )
        previous = tier
    return catalog


DEFAULT_CATALOG: Catalog = build_catalog(
    [
        DessertTier("cupcake", 5, 0),
        DessertTier("donut", 10, 5),
        DessertTier("eclair", 15, 20),
        DessertTier("froyo", 30, 50),
        DessertTier("gingerbread", 50, 100),
        DessertTier("honeycomb", 100, 200),
        DessertTier("icecreamsandwich", 500, 500),
        DessertTier("jellybean", 1000, 1000),
        DessertTier("kitkat", 2000, 2000),
        DessertTier("lollipop", 3000, 4000),
        DessertTier("marshmallow", 4000, 8000),
        DessertTier("nougat", 5000, 16000),
        DessertTier("oreo", 6000, 20000),
    ]
)
