"""
SQLAlchemy models for the dish search service.
"""
from dish_search.models.restaurant import Restaurant
from dish_search.models.menu import MenuItem
from dish_search.models.order import Order


__all__ = [
    "Restaurant",
    "MenuItem",
    "Order",
]
