"""
FastAPI main application for the Environmental Data API.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from tortoise.contrib.fastapi import RegisterTortoise

from api.database import TORTOISE_ORM
from api.dependencies import get_api_config
from api.routes import environmental, health, weather
from src.utils.logger import get_logger


api_config = get_api_config()
logger = get_logger("envdata_api", api_config.get('logging'))


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for FastAPI.
    Opens and closes the Tortoise ORM connections.
    """
    logger.info("Starting up API...")
    async with RegisterTortoise(
        app,
        config=TORTOISE_ORM,
        generate_schemas=False,  # Aerich handles schema generation
        add_exception_handlers=True,
    ):
        yield
    logger.info("Shutting down API...")


# Create FastAPI application
app = FastAPI(
    title=api_config['title'],
    version=api_config['version'],
    description=api_config['description'],
    lifespan=lifespan,
)

# Configure CORS
if api_config['cors']['enabled']:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config['cors']['origins'],
        allow_credentials=api_config['cors']['allow_credentials'],
        allow_methods=api_config['cors']['allow_methods'],
        allow_headers=api_config['cors']['allow_headers'],
    )

# Include routers
app.include_router(health.router, prefix="/api", tags=["Health"])
app.include_router(environmental.router, prefix="/api", tags=["Environmental Data"])
app.include_router(weather.router, prefix="/api", tags=["Weather"])


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": api_config['title'],
        "version": api_config['version'],
        "description": api_config['description'],
        "docs": "/docs",
        "health": "/api/health"
    }
