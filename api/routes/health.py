"""
Health check endpoint for monitoring API status.
"""
from fastapi import APIRouter, status
from tortoise import connections

from api.dependencies import get_openweather_api_key
from src.utils.helpers import utc_now

router = APIRouter()


@router.get("/health", status_code=status.HTTP_200_OK)
async def health_check():
    """
    Health check endpoint to verify API status.

    Returns:
        dict: System health status including database and weather API configuration
    """
    health_status = {
        "status": "healthy",
        "timestamp": utc_now().isoformat(),
        "database": "unknown",
        "weather_api": "unknown"
    }

    # Check database connection
    try:
        conn = connections.get("default")
        await conn.execute_query("SELECT 1")
        health_status["database"] = "connected"
    except Exception as e:
        health_status["database"] = f"error: {str(e)}"
        health_status["status"] = "degraded"

    # Check weather API key
    if get_openweather_api_key():
        health_status["weather_api"] = "configured"
    else:
        health_status["weather_api"] = "missing api key"
        health_status["status"] = "degraded"

    return health_status
