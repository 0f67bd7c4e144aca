"""
Dish search router.

Validation failures raise SearchValidationError, which the application
turns into a 400 response.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dish_search.db.session import get_db
from dish_search.schemas.search import DishResultResponse, DishSearchResponse, ErrorResponse
from dish_search.services.search import SearchService, validate_search_params

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/search", tags=["search"])


@router.get(
    "/dishes",
    response_model=DishSearchResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def search_dishes(
    name: Optional[str] = Query(None, description="Text the dish name must contain"),
    min_price: Optional[str] = Query(None, alias="minPrice", description="Lowest price, inclusive"),
    max_price: Optional[str] = Query(None, alias="maxPrice", description="Highest price, inclusive"),
    db: Session = Depends(get_db),
):
    """
    Search dishes by name within a price range.

    Returns at most 10 matches ranked by order count, most popular first.
    """
    filters = validate_search_params(name, min_price, max_price)

    try:
        results = SearchService(db).search_dishes(filters)
    except SQLAlchemyError as e:
        logger.error(f"Error in search: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal server error",
                "message": "An error occurred while searching for dishes",
            },
        )

    return DishSearchResponse(
        restaurants=[
            DishResultResponse(
                restaurant_id=r.restaurant_id,
                restaurant_name=r.restaurant_name,
                city=r.city,
                dish_name=r.dish_name,
                dish_price=float(r.price),
                order_count=r.order_count,
            )
            for r in results
        ]
    )
