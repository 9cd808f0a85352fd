"""
Railway route catalog.

Each route is a ticket a passenger can add to a booking. Service time is the
booking counter's processing time for that ticket in minutes; cost is the
fare in rupees. One counter serves bookings in the order they were made.
"""

from catalog.base import AbstractCatalog, CatalogItem, Vocabulary
from models.enums import AppVariant


ROUTES: tuple[CatalogItem, ...] = (
    CatalogItem(1, "Delhi → Mumbai Rajdhani", 2850.0, 6, "Rajdhani"),
    CatalogItem(2, "Delhi → Kolkata Rajdhani", 2650.0, 6, "Rajdhani"),
    CatalogItem(3, "Mumbai → Bengaluru Rajdhani", 2450.0, 5, "Rajdhani"),
    CatalogItem(4, "Delhi → Bhopal Shatabdi", 1450.0, 4, "Shatabdi"),
    CatalogItem(5, "Chennai → Mysuru Shatabdi", 1200.0, 4, "Shatabdi"),
    CatalogItem(6, "Mumbai → Ahmedabad Shatabdi", 1100.0, 3, "Shatabdi"),
    CatalogItem(7, "Howrah → Puri Superfast", 650.0, 3, "Superfast"),
    CatalogItem(8, "Chennai → Hyderabad Superfast", 720.0, 3, "Superfast"),
    CatalogItem(9, "Pune → Nagpur Express", 540.0, 2, "Express"),
    CatalogItem(10, "Jaipur → Agra Express", 380.0, 2, "Express"),
    CatalogItem(11, "Mumbai CST → Thane Local", 15.0, 1, "Suburban"),
    CatalogItem(12, "Chennai Beach → Tambaram Local", 10.0, 1, "Suburban"),
)


class RailwayRoutes(AbstractCatalog):

    @property
    def variant(self) -> AppVariant:
        return AppVariant.RAILWAY

    @property
    def vocabulary(self) -> Vocabulary:
        return Vocabulary(job_noun="Booking", owner_noun="passenger", service_noun="processing")

    def items(self) -> tuple[CatalogItem, ...]:
        return ROUTES
