import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dish_search.core.config import get_settings
from dish_search.core.logging import configure_logging
from dish_search.db.session import dispose_engine, engine
from dish_search.routers.health import router as health_router
from dish_search.routers.search import router as search_router
from dish_search.services.bootstrap import bootstrap_database
from dish_search.services.search import SearchValidationError

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.AUTO_SEED:
        logger.info("Checking whether the database needs seeding")
        bootstrap_database(engine, settings)
    logger.info("Ready")
    yield
    dispose_engine()
    logger.info("Shutdown")


app = FastAPI(
    title=settings.APP_NAME,
    description="Search restaurant dishes by name and price, ranked by popularity.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(SearchValidationError)
async def search_validation_exception_handler(request: Request, exc: SearchValidationError):
    """Rejected search parameters become a 400 with a category and a reason."""
    return JSONResponse(
        status_code=400,
        content={"error": exc.error, "message": exc.message},
    )


# Global exception handler for unhandled errors
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle unexpected server errors with structured response."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "message": "An unexpected error occurred. Please try again later.",
        }
    )

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(search_router)


@app.get("/")
def read_root():
    return {
        "message": "Welcome to the Dish Search API",
        "docs": "/docs",
        "health": "/health",
    }
