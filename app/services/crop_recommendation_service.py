import logging

from fastapi import HTTPException, status

from app.core.flows import PromptFlow
from app.models.crop_recommendation import (
    CropRecommendationInput,
    CropRecommendationOutput,
)
from app.prompts.crop_recommendation_prompt import CROP_RECOMMENDATION_PROMPT

logger = logging.getLogger(__name__)

crop_recommendation_flow = PromptFlow(
    name="crop_recommendation",
    template=CROP_RECOMMENDATION_PROMPT,
    output_schema=CropRecommendationOutput,
    failure_detail="AI model could not generate crop recommendations. Please try again.",
)


async def crop_recommendation(
    request: CropRecommendationInput,
) -> CropRecommendationOutput:
    logger.info(
        "Crop recommendation requested (N=%s, P=%s, K=%s, rainfall=%s)",
        request.nitrogen_level,
        request.phosphorus_level,
        request.potassium_level,
        request.rainfall,
    )
    output = await crop_recommendation_flow.ainvoke(request.model_dump())
    if output is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AI returned an empty crop recommendation.",
        )
    return output
