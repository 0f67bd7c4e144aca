"""
Run the API with uvicorn on HOST:PORT.

Usage:
    dish-search-serve
"""
import uvicorn

from dish_search.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "dish_search.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
