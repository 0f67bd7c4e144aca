"""
Dish search: validates the name/price filters and ranks matching menu items
by how many orders they have received.
"""
import math
from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from dish_search.models import MenuItem, Order, Restaurant

RESULT_LIMIT = 10


class SearchValidationError(ValueError):
    """Rejected search parameters. `error` is the client-facing category."""

    error = "Invalid request"

    def __init__(self, message: str, reason: str):
        super().__init__(message)
        self.message = message
        self.reason = reason


class MissingParametersError(SearchValidationError):
    error = "Missing required parameters"

    def __init__(self):
        super().__init__("name, minPrice, and maxPrice are required", "missing_parameters")


class InvalidPriceRangeError(SearchValidationError):
    error = "Invalid price range"

    MESSAGES = {
        "not_a_number": "minPrice and maxPrice must be valid numbers",
        "negative": "Prices must be non-negative",
        "min_exceeds_max": "minPrice must be less than or equal to maxPrice",
    }

    def __init__(self, reason: str):
        super().__init__(self.MESSAGES[reason], reason)


@dataclass(frozen=True)
class SearchFilters:
    name: str
    min_price: Decimal
    max_price: Decimal


@dataclass(frozen=True)
class DishResult:
    restaurant_id: int
    restaurant_name: str
    city: str
    dish_name: str
    price: Decimal
    order_count: int


def _parse_price(raw: str) -> Optional[Decimal]:
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return Decimal(str(value))


def validate_search_params(
    name: Optional[str],
    min_price: Optional[str],
    max_price: Optional[str],
) -> SearchFilters:
    """
    Turn raw query parameters into search filters.

    Checks run in a fixed order and the first failure wins: missing values,
    then unparseable prices, then negative prices, then min > max.
    """
    if name is None or min_price is None or max_price is None or not name.strip():
        raise MissingParametersError()

    low = _parse_price(min_price)
    high = _parse_price(max_price)
    if low is None or high is None:
        raise InvalidPriceRangeError("not_a_number")
    if low < 0 or high < 0:
        raise InvalidPriceRangeError("negative")
    if low > high:
        raise InvalidPriceRangeError("min_exceeds_max")

    return SearchFilters(name=name.strip(), min_price=low, max_price=high)


class SearchService:
    """Read-only queries over restaurants, menu items and orders."""

    def __init__(self, db: Session):
        self.db = db

    def search_dishes(self, filters: SearchFilters, limit: int = RESULT_LIMIT) -> List[DishResult]:
        """
        Menu items whose name contains `filters.name` (case-insensitive) and
        whose price is within [min_price, max_price], most ordered first.

        Items without orders are kept with a count of zero. Equal counts are
        ordered by menu item id.
        """
        order_count = func.count(Order.id).label("order_count")
        stmt = (
            select(
                Restaurant.id.label("restaurant_id"),
                Restaurant.name.label("restaurant_name"),
                Restaurant.city,
                MenuItem.dish_name,
                MenuItem.price,
                order_count,
            )
            .join(MenuItem, MenuItem.restaurant_id == Restaurant.id)
            .outerjoin(Order, Order.menu_item_id == MenuItem.id)
            .where(
                MenuItem.dish_name.icontains(filters.name, autoescape=True),
                MenuItem.price.between(filters.min_price, filters.max_price),
            )
            .group_by(
                Restaurant.id,
                Restaurant.name,
                Restaurant.city,
                MenuItem.id,
                MenuItem.dish_name,
                MenuItem.price,
            )
            .order_by(order_count.desc(), MenuItem.id.asc())
            .limit(limit)
        )

        rows = self.db.execute(stmt).all()
        return [
            DishResult(
                restaurant_id=row.restaurant_id,
                restaurant_name=row.restaurant_name,
                city=row.city,
                dish_name=row.dish_name,
                price=row.price,
                order_count=row.order_count,
            )
            for row in rows
        ]
