from pydantic import BaseModel, Field


class FertilizerRecommendationInput(BaseModel):
    soil_type: str = Field(
        min_length=1,
        description="The type of soil (e.g., sandy, loamy, clayey, silt, peat).",
    )
    ph: float = Field(ge=0, le=14, description="The pH level of the soil (0-14).")
    temperature: float = Field(description="The temperature of the soil in Celsius.")
    crop: str = Field(min_length=1, description="The name of the crop being grown.")


class FertilizerRecommendationOutput(BaseModel):
    fertilizer_type: str = Field(
        description="The specific type or blend of fertilizer recommended (e.g., Urea, 10-20-10 NPK, Superphosphate)."
    )
    quantity_kg_per_hectare: float = Field(
        description="The recommended application quantity in kilograms per hectare."
    )
    justification: str = Field(
        description="Explanation for why this fertilizer and quantity are recommended based on the inputs."
    )
