from datetime import date
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

PLANTING_DATE_FORMAT = "%Y-%m-%d"


class CropCalendarInput(BaseModel):
    crop_type: str = Field(
        min_length=1,
        description="The specific crop being grown (e.g., Tomato, Wheat, Cotton).",
    )
    planting_date: str = Field(
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="The date the crop was planted or is planned to be planted (YYYY-MM-DD).",
    )
    location: str = Field(
        min_length=1,
        description="The general geographical location or climate zone to tailor the schedule (e.g., Punjab, India; Coastal California; Hardiness Zone 7b).",
    )
    growing_season_length_days: Optional[int] = Field(
        default=None,
        gt=0,
        description="Optional: Estimated number of days in the growing season for this crop in this location.",
    )

    @field_validator("planting_date")
    @classmethod
    def _validate_planting_date(cls, value: str) -> str:
        date.fromisoformat(value)
        return value


class CalendarTask(BaseModel):
    task_name: str = Field(
        description="The name of the agricultural task (e.g., Planting, First Fertilization, Pest Scouting, Irrigation Check, Harvesting Window)."
    )
    description: str = Field(
        description="A brief description of the task and why it is important."
    )
    estimated_date_range: str = Field(
        description='The estimated date or date range (e.g., "YYYY-MM-DD", "Late June", "Week of YYYY-MM-DD", "Approx. 45-60 days after planting") for performing the task.'
    )
    details: Optional[str] = Field(
        default=None,
        description='Optional: Specific details or considerations for the task (e.g., "Apply Nitrogen-rich fertilizer", "Look for aphids and whiteflies").',
    )


class CropCalendarOutput(BaseModel):
    crop_type: str = Field(description="The crop for which the calendar is generated.")
    planting_date: str = Field(description="The provided planting date (YYYY-MM-DD).")
    location: str = Field(description="The location context used for the calendar.")
    schedule: List[CalendarTask] = Field(
        default_factory=list,
        description="A list of key tasks and their estimated timing throughout the growing season.",
    )
    notes: Optional[str] = Field(
        default=None,
        description="General notes or advice related to managing this crop in the specified location (e.g., common pests/diseases to watch for, specific watering advice).",
    )
