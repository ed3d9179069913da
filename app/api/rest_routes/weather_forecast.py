from fastapi import APIRouter

from app.models.weather_forecast import WeatherForecastInput, WeatherForecastOutput
from app.services.weather_service import weather_forecast

router = APIRouter(prefix="/weather-forecasts", tags=["Weather"])


@router.post(
    "",
    response_model=WeatherForecastOutput,
    response_model_exclude_none=True,
)
async def create_weather_forecast(request: WeatherForecastInput) -> WeatherForecastOutput:
    """
    Current weather, a 3-day forecast and alerts for a location.
    """
    return await weather_forecast(request)
