from typing import List

from pydantic import BaseModel, Field


class CropRecommendationInput(BaseModel):
    """Soil and climate readings the farmer enters for a crop recommendation."""

    nitrogen_level: float = Field(ge=0, description="Nitrogen level in the soil.")
    phosphorus_level: float = Field(ge=0, description="Phosphorus level in the soil.")
    potassium_level: float = Field(ge=0, description="Potassium level in the soil.")
    moisture_level: float = Field(ge=0, description="Moisture level in the soil.")
    temperature: float = Field(description="Temperature of the soil in Celsius.")
    rainfall: float = Field(ge=0, description="Rainfall in mm.")


class RecommendedCrop(BaseModel):
    crop_name: str = Field(description="The name of the recommended crop.")
    suitability_score: float = Field(
        description="A score indicating the suitability of the crop (0-100)."
    )
    justification: str = Field(
        description="Why the crop is recommended for the given soil properties."
    )


class CropRecommendationOutput(BaseModel):
    crops: List[RecommendedCrop] = Field(
        default_factory=list,
        description="A list of recommended crops and their suitability scores.",
    )
