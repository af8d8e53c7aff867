"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from larder.api import (
    auth,
    catalog,
    categories,
    ingredients,
    products,
    recipes,
    shopping_lists,
    stored,
    tags,
)
from larder.config import get_settings
from larder.database import dispose_engine

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    logger.info(f"Starting Larder API ({settings.environment})")
    yield
    dispose_engine()


app = FastAPI(
    title="Larder API",
    description="Recipes, shopping lists and home storage backed by a shared ingredient catalog",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS middleware for development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["http://localhost:3000", "http://localhost:5173"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

# Register routers
app.include_router(auth.router)
app.include_router(categories.router)
app.include_router(catalog.router)
app.include_router(ingredients.router)
app.include_router(tags.router)
app.include_router(recipes.router)
app.include_router(shopping_lists.router)
app.include_router(stored.router)
app.include_router(stored.stored_ingredients_router)
app.include_router(products.router)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}
