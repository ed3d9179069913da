import logging
from datetime import date, timedelta
from typing import Optional

from langchain_core.tools import tool

from app.models.weather_forecast import (
    AlertSeverity,
    AlertType,
    CurrentWeather,
    DailyForecast,
    WeatherAlert,
    WeatherForecastInput,
    WeatherForecastOutput,
)

logger = logging.getLogger(__name__)

# (condition, max_temp, min_temp, chance_of_rain) for the next three days
_MUMBAI_FORECAST = [
    ("Light Rain Possible", 31, 26, 40),
    ("Showers", 30, 25, 60),
    ("Cloudy", 31, 26, 30),
]
_DEFAULT_FORECAST = [
    ("Mostly Sunny", 28, 22, 10),
    ("Sunny", 29, 21, 5),
    ("Partly Cloudy", 29, 22, 15),
]


def build_weather_data(
    location: str, today: Optional[date] = None
) -> WeatherForecastOutput:
    """
    Synthetic weather for a location. Nothing here talks to a real weather
    provider; locations mentioning Mumbai get monsoon-like values.
    """
    today = today or date.today()
    is_mumbai = "mumbai" in location.lower()
    days = _MUMBAI_FORECAST if is_mumbai else _DEFAULT_FORECAST

    if is_mumbai:
        current = CurrentWeather(
            temperature_celsius=29,
            condition="Partly Cloudy",
            humidity_percent=75,
            wind_speed_kph=15,
        )
        alerts = [
            WeatherAlert(
                type=AlertType.HEAVY_RAIN,
                severity=AlertSeverity.MODERATE,
                description="Possibility of heavy showers in the next 48 hours. Monitor local updates.",
            )
        ]
    else:
        current = CurrentWeather(
            temperature_celsius=25,
            condition="Sunny",
            humidity_percent=60,
            wind_speed_kph=10,
        )
        alerts = [
            WeatherAlert(
                type=AlertType.NONE,
                description="No severe weather alerts currently.",
            )
        ]

    forecast = [
        DailyForecast(
            date=(today + timedelta(days=offset)).isoformat(),
            day_condition=condition,
            max_temp_celsius=max_temp,
            min_temp_celsius=min_temp,
            chance_of_rain_percent=rain,
        )
        for offset, (condition, max_temp, min_temp, rain) in enumerate(days, start=1)
    ]

    return WeatherForecastOutput(
        location=location,
        current_weather=current,
        forecast=forecast,
        alerts=alerts,
    )


@tool("get_weather_data", args_schema=WeatherForecastInput)
def get_weather_data_tool(location: str) -> dict:
    """Fetches current weather, forecast, and alerts for a given location."""
    logger.info("Simulating weather API call for: %s", location)
    return build_weather_data(location).model_dump(mode="json")


async def weather_forecast(request: WeatherForecastInput) -> WeatherForecastOutput:
    logger.info("Weather forecast requested for location=%s", request.location)
    weather_data = await get_weather_data_tool.ainvoke({"location": request.location})
    logger.debug("Weather data received from tool: %s", weather_data)
    return WeatherForecastOutput.model_validate(weather_data)
