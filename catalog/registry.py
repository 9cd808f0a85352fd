"""
Catalog registry — maps app variants to catalog instances.

Same pattern as the scheduler factory: one place that knows all the demos.
Catalogs are immutable, so each one is instantiated once and shared.
"""

from catalog.base import AbstractCatalog
from catalog.railway import RailwayRoutes
from catalog.restaurant import RestaurantMenu
from models.enums import AppVariant

_REGISTRY: dict[AppVariant, AbstractCatalog] = {}


def _register_defaults() -> None:
    for catalog_cls in [RestaurantMenu, RailwayRoutes]:
        catalog = catalog_cls()
        _REGISTRY[catalog.variant] = catalog


_register_defaults()


def get_catalog(variant: AppVariant | str) -> AbstractCatalog:
    """Look up a catalog by variant. Raises ValueError if unknown."""
    try:
        key = AppVariant(variant)
    except ValueError:
        raise ValueError(
            f"Unknown app variant: '{variant}'. Available: {[v.value for v in _REGISTRY]}"
        ) from None
    return _REGISTRY[key]


def available_variants() -> list[AppVariant]:
    return list(_REGISTRY)
