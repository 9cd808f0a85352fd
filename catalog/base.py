"""
Abstract base class for catalogs (menu, train routes, ...).

A catalog is the list of line items a user can put in a cart. Every item
carries a price and a service-time cost; a submitted cart becomes a Job whose
service time is the sum of its items' costs.

The restaurant and railway demos are the same simulation with different
catalogs. Each one implements this interface:
- AbstractCatalog = interface
- RestaurantMenu, RailwayRoutes = implementations
- registry.py = factory lookup

To add a new demo:
1. Create a class that inherits AbstractCatalog
2. Implement variant, vocabulary and items()
3. Add it to the registry
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from models.enums import AppVariant


@dataclass(frozen=True)
class CatalogItem:
    id: int
    name: str
    cost: float          # price shown in the cart
    service_time: int    # time units this item adds to a job
    category: str


@dataclass(frozen=True)
class Vocabulary:
    """Wording used when describing timeline events for one demo."""
    job_noun: str = "Job"
    owner_noun: str = "customer"
    service_noun: str = "service"
    time_unit: str = "min"


class AbstractCatalog(ABC):

    @property
    @abstractmethod
    def variant(self) -> AppVariant:
        """Which demo this catalog backs."""
        ...

    @property
    @abstractmethod
    def vocabulary(self) -> Vocabulary:
        ...

    @abstractmethod
    def items(self) -> tuple[CatalogItem, ...]:
        """All items, in display order."""
        ...

    def get(self, item_id: int) -> CatalogItem:
        """Look up an item by id. Raises KeyError if unknown."""
        for item in self.items():
            if item.id == item_id:
                return item
        raise KeyError(f"Unknown {self.variant.value} catalog item: {item_id}")

    def grouped(self) -> dict[str, list[CatalogItem]]:
        """Items by category, categories in first-seen order."""
        groups: dict[str, list[CatalogItem]] = {}
        for item in self.items():
            groups.setdefault(item.category, []).append(item)
        return groups
