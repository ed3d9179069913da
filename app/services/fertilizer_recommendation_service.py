import logging

from fastapi import HTTPException, status

from app.core.flows import PromptFlow
from app.models.fertilizer_recommendation import (
    FertilizerRecommendationInput,
    FertilizerRecommendationOutput,
)
from app.prompts.fertilizer_recommendation_prompt import (
    FERTILIZER_RECOMMENDATION_PROMPT,
)

logger = logging.getLogger(__name__)

fertilizer_recommendation_flow = PromptFlow(
    name="fertilizer_recommendation",
    template=FERTILIZER_RECOMMENDATION_PROMPT,
    output_schema=FertilizerRecommendationOutput,
    failure_detail="AI model could not generate a fertilizer recommendation. Please try again later.",
)


async def fertilizer_recommendation(
    request: FertilizerRecommendationInput,
) -> FertilizerRecommendationOutput:
    logger.info(
        "Fertilizer recommendation requested for crop=%s soil_type=%s ph=%s",
        request.crop,
        request.soil_type,
        request.ph,
    )
    output = await fertilizer_recommendation_flow.ainvoke(request.model_dump())
    if output is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AI returned an empty fertilizer recommendation.",
        )

    if output.quantity_kg_per_hectare < 0:
        logger.warning(
            "Clamping negative fertilizer quantity %s to 0",
            output.quantity_kg_per_hectare,
        )
        output.quantity_kg_per_hectare = 0
    return output
