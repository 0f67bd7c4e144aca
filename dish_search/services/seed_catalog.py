"""
Sample data loaded by the seeder.

Restaurants are referenced by their 1-based position in RESTAURANTS, since
database identifiers are only known after insertion.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional


@dataclass(frozen=True)
class RestaurantSeed:
    name: str
    city: str


@dataclass(frozen=True)
class MenuItemSeed:
    restaurant: int
    dish_name: str
    price: Decimal


@dataclass(frozen=True)
class OrderVolume:
    """Number of orders to generate for one menu item.

    Without a price the first menu item with a matching name is used.
    """
    restaurant: int
    dish_name: str
    price: Optional[Decimal]
    count: int


RESTAURANTS: List[RestaurantSeed] = [
    RestaurantSeed("Hyderabadi Spice House", "Hyderabad"),
    RestaurantSeed("Delhi Darbar", "Delhi"),
    RestaurantSeed("Mumbai Masala", "Mumbai"),
    RestaurantSeed("Chennai Curry Point", "Chennai"),
    RestaurantSeed("Bangalore Biryani", "Bangalore"),
    RestaurantSeed("Pune Palace", "Pune"),
    RestaurantSeed("Kolkata Kitchen", "Kolkata"),
    RestaurantSeed("Jaipur Junction", "Jaipur"),
    RestaurantSeed("Ahmedabad Aroma", "Ahmedabad"),
    RestaurantSeed("Lucknow Legacy", "Lucknow"),
]


def _items(restaurant: int, *dishes) -> List[MenuItemSeed]:
    return [MenuItemSeed(restaurant, name, Decimal(price)) for name, price in dishes]


MENU_ITEMS: List[MenuItemSeed] = [
    *_items(1, ("Chicken Biryani", 220), ("Mutton Biryani", 280), ("Veg Biryani", 150),
            ("Butter Chicken", 250), ("Paneer Tikka", 180)),
    # Delhi Darbar sells a regular and a premium Chicken Biryani
    *_items(2, ("Chicken Biryani", 200), ("Chicken Biryani", 240), ("Veg Biryani", 160),
            ("Dal Makhani", 180), ("Naan", 50)),
    *_items(3, ("Chicken Biryani", 230), ("Fish Biryani", 260), ("Pav Bhaji", 120),
            ("Vada Pav", 30), ("Dosa", 80)),
    *_items(4, ("Chicken Biryani", 210), ("Egg Biryani", 190), ("Idli", 60),
            ("Sambar", 40), ("Rasam", 35)),
    *_items(5, ("Chicken Biryani", 225), ("Mutton Biryani", 290), ("Veg Biryani", 155),
            ("Chicken Curry", 200), ("Roti", 20)),
    *_items(6, ("Chicken Biryani", 215), ("Veg Biryani", 145), ("Misal Pav", 100),
            ("Bhel Puri", 60), ("Puran Poli", 80)),
    *_items(7, ("Chicken Biryani", 205), ("Fish Biryani", 250), ("Rasgulla", 50),
            ("Sandesh", 60), ("Kathi Roll", 90)),
    *_items(8, ("Chicken Biryani", 235), ("Dal Baati", 180), ("Gatte Ki Sabzi", 160),
            ("Rajasthani Thali", 300), ("Lassi", 40)),
    *_items(9, ("Chicken Biryani", 195), ("Dhokla", 70), ("Gujarati Thali", 250),
            ("Fafda", 50), ("Jalebi", 40)),
    *_items(10, ("Chicken Biryani", 240), ("Mutton Biryani", 300), ("Kebabs", 220),
            ("Nihari", 180), ("Sheermal", 30)),
]


ORDER_VOLUMES: List[OrderVolume] = [
    # Chicken Biryani across all restaurants
    OrderVolume(1, "Chicken Biryani", Decimal(220), 96),
    OrderVolume(2, "Chicken Biryani", Decimal(200), 85),
    OrderVolume(3, "Chicken Biryani", Decimal(230), 72),
    OrderVolume(4, "Chicken Biryani", Decimal(210), 68),
    OrderVolume(5, "Chicken Biryani", Decimal(225), 91),
    OrderVolume(6, "Chicken Biryani", Decimal(215), 55),
    OrderVolume(7, "Chicken Biryani", Decimal(205), 63),
    OrderVolume(8, "Chicken Biryani", Decimal(235), 78),
    OrderVolume(9, "Chicken Biryani", Decimal(195), 45),
    OrderVolume(10, "Chicken Biryani", Decimal(240), 88),
    # Other biryanis
    OrderVolume(1, "Mutton Biryani", Decimal(280), 45),
    OrderVolume(5, "Mutton Biryani", Decimal(290), 52),
    OrderVolume(10, "Mutton Biryani", Decimal(300), 60),
    OrderVolume(3, "Fish Biryani", Decimal(260), 38),
    OrderVolume(4, "Egg Biryani", Decimal(190), 42),
    OrderVolume(1, "Veg Biryani", Decimal(150), 35),
    OrderVolume(2, "Veg Biryani", Decimal(160), 28),
    OrderVolume(5, "Veg Biryani", Decimal(155), 31),
    OrderVolume(6, "Veg Biryani", Decimal(145), 22),
    # A few other popular dishes
    OrderVolume(1, "Butter Chicken", Decimal(250), 15),
    OrderVolume(1, "Paneer Tikka", Decimal(180), 12),
    OrderVolume(2, "Dal Makhani", Decimal(180), 8),
    OrderVolume(3, "Pav Bhaji", Decimal(120), 10),
]
