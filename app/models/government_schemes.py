from typing import List, Optional

from pydantic import BaseModel, Field


class GovernmentSchemesInput(BaseModel):
    location: str = Field(
        description="The state or region in India for which to find schemes (e.g., Maharashtra, Punjab, North India)."
    )
    crop_type: Optional[str] = Field(
        default=None,
        description="Optional: Specific crop type to filter schemes (e.g., Rice, Cotton, Wheat).",
    )
    farmer_category: Optional[str] = Field(
        default=None,
        description="Optional: Category of the farmer if relevant (e.g., Smallholder, Marginal, Organic, Female Farmer).",
    )


class GovernmentScheme(BaseModel):
    scheme_name: str = Field(
        description="The official name of the government scheme, subsidy, or insurance plan."
    )
    description: str = Field(
        description="A brief summary of the scheme, its objectives, and key benefits offered to farmers."
    )
    eligibility: str = Field(
        description="Key eligibility criteria for farmers to qualify for this scheme (e.g., landholding size, specific crops, location requirements)."
    )
    how_to_apply: str = Field(
        description="Information on the application process, relevant department to contact, or official website URL for more details."
    )
    relevant_for: Optional[str] = Field(
        default=None,
        description='Briefly explains why this scheme is relevant based on the input (location, crop, category). E.g., "Specific to Maharashtra" or "Beneficial for Cotton growers".',
    )


class GovernmentSchemesOutput(BaseModel):
    schemes: List[GovernmentScheme] = Field(
        default_factory=list,
        description="A list of relevant, currently active government schemes, subsidies, insurance plans, and MSP-related information for farmers in the specified Indian location.",
    )
