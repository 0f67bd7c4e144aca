"""
Unit tests for search parameter validation and the ranking query.
"""
from decimal import Decimal

import pytest
from sqlalchemy import insert

from dish_search.models import MenuItem, Order, Restaurant
from dish_search.services.search import (
    InvalidPriceRangeError,
    MissingParametersError,
    SearchFilters,
    SearchService,
    validate_search_params,
)


class TestValidateSearchParams:
    """Tests for validate_search_params."""

    def test_valid_params(self):
        """Should return the trimmed name and parsed prices."""
        filters = validate_search_params(" Biryani ", "150", "300.5")

        assert filters == SearchFilters(
            name="Biryani",
            min_price=Decimal("150.0"),
            max_price=Decimal("300.5"),
        )

    def test_equal_bounds_allowed(self):
        """Should accept equal minimum and maximum prices."""
        filters = validate_search_params("dosa", "80", "80")
        assert filters.min_price == filters.max_price

    @pytest.mark.parametrize("name,min_price,max_price", [
        (None, "0", "10"),
        ("dosa", None, "10"),
        ("dosa", "0", None),
        ("", "0", "10"),
        ("\t ", "0", "10"),
    ])
    def test_missing(self, name, min_price, max_price):
        """Should reject a missing or blank parameter."""
        with pytest.raises(MissingParametersError) as exc_info:
            validate_search_params(name, min_price, max_price)
        assert exc_info.value.reason == "missing_parameters"

    def test_missing_checked_before_prices(self):
        """A missing name wins over an unparseable price."""
        with pytest.raises(MissingParametersError):
            validate_search_params(None, "abc", "-1")

    @pytest.mark.parametrize("min_price,max_price,reason", [
        ("abc", "10", "not_a_number"),
        ("10abc", "20", "not_a_number"),
        ("0", "", "not_a_number"),
        ("-inf", "10", "not_a_number"),
        ("-1", "abc", "not_a_number"),
        ("-1", "10", "negative"),
        ("0", "-0.01", "negative"),
        ("-5", "-10", "negative"),
        ("10.01", "10", "min_exceeds_max"),
    ])
    def test_invalid_price_range(self, min_price, max_price, reason):
        """Should reject prices that are not a valid range."""
        with pytest.raises(InvalidPriceRangeError) as exc_info:
            validate_search_params("dosa", min_price, max_price)
        assert exc_info.value.reason == reason
        assert exc_info.value.error == "Invalid price range"


class TestSearchService:
    """Tests for SearchService.search_dishes."""

    def _search(self, db, name, low, high):
        filters = SearchFilters(name=name, min_price=Decimal(low), max_price=Decimal(high))
        return SearchService(db).search_dishes(filters)

    def test_zero_order_items_are_kept(self, db):
        """Delhi Darbar's premium Chicken Biryani has no orders but still matches."""
        results = self._search(db, "chicken biryani", 240, 240)

        by_restaurant = {r.restaurant_name: r.order_count for r in results}
        assert by_restaurant == {"Delhi Darbar": 0, "Lucknow Legacy": 88}
        assert [r.restaurant_name for r in results] == ["Lucknow Legacy", "Delhi Darbar"]

    def test_duplicate_dish_names_are_separate_rows(self, db):
        """Should return same-named dishes as separate results."""
        results = self._search(db, "Chicken Biryani", 0, 1000)
        delhi = [r for r in results if r.restaurant_name == "Delhi Darbar"]
        assert [(r.price, r.order_count) for r in delhi] == [(Decimal("200.00"), 85)]

        results = self._search(db, "Chicken Biryani", 200, 240)
        delhi = [r for r in results if r.restaurant_name == "Delhi Darbar"]
        assert len(results) == 10
        assert sorted((r.price, r.order_count) for r in delhi) == [
            (Decimal("200.00"), 85),
            (Decimal("240.00"), 0),
        ]

    def test_price_bounds_are_inclusive(self, db):
        """Should include dishes priced exactly at either bound."""
        results = self._search(db, "Chicken Biryani", 195, 195)
        assert [(r.city, r.order_count) for r in results] == [("Ahmedabad", 45)]

    def test_result_cap(self, db):
        """More than ten matches are cut to the ten most ordered."""
        results = self._search(db, "i", 0, 1000)

        assert len(results) == 10
        counts = [r.order_count for r in results]
        assert counts == sorted(counts, reverse=True)
        assert counts[0] == 96

    def test_ties_ordered_by_menu_item(self, db):
        """Items without orders come back in a stable order across runs."""
        first = self._search(db, "a", 0, 60)
        second = self._search(db, "a", 0, 60)

        assert first == second
        assert all(r.order_count == 0 for r in first)

    def test_wildcards_match_literally(self, db):
        """Should treat % and _ in the name as plain characters."""
        assert self._search(db, "%", 0, 1000) == []
        assert self._search(db, "_", 0, 1000) == []

    def test_counts_every_order(self, db):
        """Should count each order row once."""
        restaurant_id = db.execute(
            insert(Restaurant).values(name="Test Kitchen", city="Goa").returning(Restaurant.id)
        ).scalar_one()
        item_id = db.execute(
            insert(MenuItem)
            .values(restaurant_id=restaurant_id, dish_name="Prawn Curry", price=Decimal("310.00"))
            .returning(MenuItem.id)
        ).scalar_one()
        db.execute(insert(Order), [{"menu_item_id": item_id}] * 3)
        db.commit()

        results = self._search(db, "prawn", 300, 320)

        assert len(results) == 1
        assert results[0].restaurant_id == restaurant_id
        assert results[0].order_count == 3
