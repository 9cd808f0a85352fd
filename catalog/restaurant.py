"""
Restaurant menu.

Service time is the dish's prep time in minutes. A kitchen with one cook
prepares orders strictly in arrival order, so a steak order blocks the
coffee behind it (the convoy effect the demo is meant to show).
"""

from catalog.base import AbstractCatalog, CatalogItem, Vocabulary
from models.enums import AppVariant


MENU: tuple[CatalogItem, ...] = (
    CatalogItem(1, "Caesar Salad", 8.99, 5, "Appetizers"),
    CatalogItem(2, "Garlic Bread", 6.99, 3, "Appetizers"),
    CatalogItem(3, "Buffalo Wings", 12.99, 8, "Appetizers"),
    CatalogItem(4, "Grilled Chicken", 18.99, 15, "Main Courses"),
    CatalogItem(5, "Beef Steak", 24.99, 20, "Main Courses"),
    CatalogItem(6, "Salmon Fillet", 22.99, 12, "Main Courses"),
    CatalogItem(7, "Pasta Carbonara", 16.99, 10, "Main Courses"),
    CatalogItem(8, "Vegetable Stir Fry", 14.99, 8, "Main Courses"),
    CatalogItem(9, "Chocolate Cake", 7.99, 2, "Desserts"),
    CatalogItem(10, "Ice Cream Sundae", 5.99, 3, "Desserts"),
    CatalogItem(11, "Coffee", 3.99, 1, "Beverages"),
    CatalogItem(12, "Fresh Juice", 4.99, 2, "Beverages"),
)


class RestaurantMenu(AbstractCatalog):

    @property
    def variant(self) -> AppVariant:
        return AppVariant.RESTAURANT

    @property
    def vocabulary(self) -> Vocabulary:
        return Vocabulary(job_noun="Order", owner_noun="customer", service_noun="prep")

    def items(self) -> tuple[CatalogItem, ...]:
        return MENU
