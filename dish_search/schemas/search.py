"""
Dish search Pydantic schemas for API responses.
"""
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class DishResultResponse(BaseModel):
    """One ranked menu item and the restaurant serving it."""
    restaurant_id: int = Field(alias="restaurantId")
    restaurant_name: str = Field(alias="restaurantName")
    city: str
    dish_name: str = Field(alias="dishName")
    dish_price: float = Field(alias="dishPrice")
    order_count: int = Field(alias="orderCount")

    model_config = ConfigDict(populate_by_name=True)


class DishSearchResponse(BaseModel):
    """Response model for GET /search/dishes."""
    restaurants: List[DishResultResponse]


class ErrorResponse(BaseModel):
    error: str
    message: str


class HealthResponse(BaseModel):
    status: str
    message: str
