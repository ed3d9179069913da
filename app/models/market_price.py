from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class PriceTrend(str, Enum):
    RISING = "rising"
    FALLING = "falling"
    STABLE = "stable"


class MarketPriceInput(BaseModel):
    crop_name: str = Field(
        min_length=1,
        description="The name of the crop for which to fetch market prices (e.g., Wheat, Corn).",
    )
    location: str = Field(
        min_length=1,
        description="The geographical area or market location (e.g., Chicago, Midwest USA, Local Farmers Market).",
    )


class MarketData(BaseModel):
    crop_name: str = Field(description="The name of the crop.")
    location: str = Field(description="The location for which the price is relevant.")
    price: str = Field(
        description='The current market price (e.g., "$4.50", "€150"). Include currency symbol.'
    )
    unit: str = Field(
        description="The unit of measurement for the price (e.g., bushel, metric ton, kg)."
    )
    date: Optional[str] = Field(
        default=None,
        description="The date for which the price is current (e.g., YYYY-MM-DD or Month DD, YYYY).",
    )
    trend: Optional[PriceTrend] = Field(
        default=None,
        description="The current price trend (rising, falling, or stable).",
    )
    analysis: str = Field(
        description="A brief analysis or commentary on the market price and trend, considering factors like supply, demand, and recent events."
    )


class MarketPriceOutput(BaseModel):
    market_data: MarketData = Field(
        description="Detailed market price information for the specified crop and location."
    )
