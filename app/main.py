import logging
from pathlib import Path

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.rest_routes.crop_calendar import router as crop_calendar_router
from app.api.rest_routes.crop_disease_detection import (
    router as crop_disease_detection_router,
)
from app.api.rest_routes.crop_recommendation import (
    router as crop_recommendation_router,
)
from app.api.rest_routes.fertilizer_recommendation import (
    router as fertilizer_recommendation_router,
)
from app.api.rest_routes.government_schemes import (
    router as government_schemes_router,
)
from app.api.rest_routes.market_price import router as market_price_router
from app.api.rest_routes.weather_forecast import router as weather_forecast_router
from app.api.web.routes import router as web_router
from app.core.config import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

STATIC_DIR = Path(__file__).resolve().parent / "static"

app = FastAPI(title=settings.APP_NAME)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

app.include_router(web_router)
app.include_router(crop_recommendation_router)
app.include_router(fertilizer_recommendation_router)
app.include_router(crop_disease_detection_router)
app.include_router(market_price_router)
app.include_router(weather_forecast_router)
app.include_router(government_schemes_router)
app.include_router(crop_calendar_router)


@app.get("/api")
async def root():
    return {"message": f"Welcome to {settings.APP_NAME}, your smart farming assistant!"}
