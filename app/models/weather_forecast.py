from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class AlertType(str, Enum):
    STORM = "Storm"
    DROUGHT = "Drought"
    HEAVY_RAIN = "Heavy Rain"
    HEATWAVE = "Heatwave"
    FROST = "Frost"
    NONE = "None"


class AlertSeverity(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    SEVERE = "Severe"


class WeatherForecastInput(BaseModel):
    location: str = Field(
        min_length=1,
        description="The city or geographical area for the weather forecast (e.g., Mumbai, Maharashtra).",
    )


class CurrentWeather(BaseModel):
    """The current weather conditions."""

    temperature_celsius: float = Field(description="Current temperature in Celsius.")
    condition: str = Field(
        description="Current weather condition (e.g., Sunny, Cloudy, Light Rain)."
    )
    humidity_percent: float = Field(description="Current humidity percentage.")
    wind_speed_kph: float = Field(
        description="Current wind speed in kilometers per hour."
    )


class DailyForecast(BaseModel):
    date: str = Field(description="Date of the forecast (YYYY-MM-DD).")
    day_condition: str = Field(description="Predicted weather condition for the day.")
    max_temp_celsius: float = Field(
        description="Maximum predicted temperature in Celsius."
    )
    min_temp_celsius: float = Field(
        description="Minimum predicted temperature in Celsius."
    )
    chance_of_rain_percent: float = Field(
        description="Chance of precipitation percentage."
    )


class WeatherAlert(BaseModel):
    type: AlertType = Field(description="Type of weather alert.")
    severity: Optional[AlertSeverity] = Field(
        default=None, description="Severity of the alert."
    )
    description: str = Field(
        description="Description of the alert and potential impact."
    )


class WeatherForecastOutput(BaseModel):
    location: str = Field(description="The location for which the forecast is provided.")
    current_weather: CurrentWeather
    forecast: List[DailyForecast] = Field(
        min_length=3, max_length=3, description="A 3-day weather forecast."
    )
    alerts: List[WeatherAlert] = Field(
        default_factory=list,
        description="Any severe weather alerts for the location.",
    )
