"""
Form schemas for the dashboard pages.

These validate raw form fields (everything arrives as a string) and produce
the messages shown next to each input. The validated forms are converted into
the request schemas in ``app.models`` before a flow is called.
"""

import math
from datetime import date
from typing import Any, Optional, Type, TypeVar

from fastapi import HTTPException
from pydantic import (
    BaseModel,
    ValidationError,
    ValidationInfo,
    field_validator,
)
from starlette.datastructures import FormData, UploadFile

from app.services.files import is_image_upload, upload_to_data_uri

FormT = TypeVar("FormT", bound=BaseModel)

_NUMBER_LABELS = {
    "nitrogen_level": "Nitrogen level",
    "phosphorus_level": "Phosphorus level",
    "potassium_level": "Potassium level",
    "moisture_level": "Moisture level",
    "rainfall": "Rainfall",
}

SOIL_TYPES = ["sandy", "loamy", "clayey", "silt", "peat", "chalky"]


class FormValidationError(Exception):
    def __init__(self, errors: dict[str, str], values: Optional[dict[str, Any]] = None):
        super().__init__("; ".join(f"{k}: {v}" for k, v in errors.items()))
        self.errors = errors
        self.values = values or {}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_number(value: Any, label: str) -> float:
    if _is_blank(value):
        raise ValueError(f"{label} is required.")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be a number.")
    if not math.isfinite(number):
        raise ValueError(f"{label} must be a number.")
    return number


def _required_text(value: Any, message: str) -> str:
    if _is_blank(value):
        raise ValueError(message)
    return str(value).strip()


def _optional_text(value: Any) -> Optional[str]:
    if _is_blank(value):
        return None
    return str(value).strip()


class CropRecommendationForm(BaseModel):
    nitrogen_level: float
    phosphorus_level: float
    potassium_level: float
    moisture_level: float
    temperature: float
    rainfall: float

    @field_validator(
        "nitrogen_level",
        "phosphorus_level",
        "potassium_level",
        "moisture_level",
        "rainfall",
        mode="before",
    )
    @classmethod
    def _non_negative(cls, value: Any, info: ValidationInfo) -> float:
        label = _NUMBER_LABELS[info.field_name]
        number = _parse_number(value, label)
        if number < 0:
            raise ValueError(f"{label} cannot be negative.")
        return number

    @field_validator("temperature", mode="before")
    @classmethod
    def _temperature(cls, value: Any) -> float:
        return _parse_number(value, "Temperature")


class FertilizerSuggestionForm(BaseModel):
    soil_type: str
    ph: float
    temperature: float
    crop: str

    @field_validator("soil_type", mode="before")
    @classmethod
    def _soil_type(cls, value: Any) -> str:
        return _required_text(value, "Soil type is required.")

    @field_validator("ph", mode="before")
    @classmethod
    def _ph(cls, value: Any) -> float:
        number = _parse_number(value, "pH")
        if not 0 <= number <= 14:
            raise ValueError("pH must be between 0 and 14.")
        return number

    @field_validator("temperature", mode="before")
    @classmethod
    def _temperature(cls, value: Any) -> float:
        return _parse_number(value, "Temperature")

    @field_validator("crop", mode="before")
    @classmethod
    def _crop(cls, value: Any) -> str:
        return _required_text(value, "Crop name is required.")


class MarketPriceForm(BaseModel):
    crop_name: str
    location: str

    @field_validator("crop_name", mode="before")
    @classmethod
    def _crop_name(cls, value: Any) -> str:
        return _required_text(value, "Crop name is required.")

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> str:
        return _required_text(value, "Location is required (e.g., city, region).")


class WeatherForecastForm(BaseModel):
    location: str

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> str:
        return _required_text(value, "Location is required (e.g., city, region).")


class GovernmentSchemesForm(BaseModel):
    location: str
    crop_type: Optional[str] = None
    farmer_category: Optional[str] = None

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> str:
        return _required_text(value, "Location (State/Region) is required.")

    @field_validator("crop_type", "farmer_category", mode="before")
    @classmethod
    def _optional(cls, value: Any) -> Optional[str]:
        return _optional_text(value)


class CropCalendarForm(BaseModel):
    crop_type: str
    planting_date: date
    location: str
    growing_season_length_days: Optional[int] = None

    @field_validator("crop_type", mode="before")
    @classmethod
    def _crop_type(cls, value: Any) -> str:
        return _required_text(value, "Crop type is required.")

    @field_validator("planting_date", mode="before")
    @classmethod
    def _planting_date(cls, value: Any) -> date:
        if _is_blank(value):
            raise ValueError("Planting date is required.")
        if isinstance(value, date):
            return value
        try:
            return date.fromisoformat(str(value).strip())
        except ValueError:
            raise ValueError("Invalid planting date. Please use YYYY-MM-DD.")

    @field_validator("location", mode="before")
    @classmethod
    def _location(cls, value: Any) -> str:
        return _required_text(value, "Location/Climate context is required.")

    @field_validator("growing_season_length_days", mode="before")
    @classmethod
    def _season_length(cls, value: Any) -> Optional[int]:
        if _is_blank(value):
            return None
        number = _parse_number(value, "Growing season length")
        if not number.is_integer() or number <= 0:
            raise ValueError("Growing season length must be a positive whole number of days.")
        return int(number)


class CropDiseaseDetectionForm(BaseModel):
    photo_data_uri: str


async def read_crop_image_form(form_data: FormData) -> CropDiseaseDetectionForm:
    upload = form_data.get("crop_image")
    if not isinstance(upload, UploadFile) or not is_image_upload(upload):
        raise FormValidationError({"crop_image": "Please select an image file."})
    try:
        photo_data_uri = await upload_to_data_uri(upload)
    except HTTPException as exc:
        raise FormValidationError({"crop_image": str(exc.detail)}) from exc
    return CropDiseaseDetectionForm(photo_data_uri=photo_data_uri)


def _error_message(error: dict) -> str:
    if error["type"] == "value_error":
        return str(error["ctx"]["error"])
    return error["msg"]


def field_errors(
    exc: ValidationError, field_names: Optional[dict[str, str]] = None
) -> dict[str, str]:
    """First message per field; ``field_names`` renames schema fields to form inputs."""
    field_names = field_names or {}
    errors: dict[str, str] = {}
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "__all__"
        errors.setdefault(field_names.get(field, field), _error_message(error))
    return errors


def validate_form(form_cls: Type[FormT], data: dict[str, Any]) -> FormT:
    """Validates submitted fields, raising FormValidationError with one message per field."""
    data = {name: data.get(name) for name in form_cls.model_fields}
    try:
        return form_cls.model_validate(data)
    except ValidationError as exc:
        raise FormValidationError(field_errors(exc), values=data) from exc
