from fastapi import APIRouter

from app.models.fertilizer_recommendation import FertilizerRecommendationInput, FertilizerRecommendationOutput
from app.services.fertilizer_recommendation_service import fertilizer_recommendation

router = APIRouter(prefix="/fertilizer-recommendations", tags=["Fertilizer Recommendation"])


@router.post(
    "",
    response_model=FertilizerRecommendationOutput,
    response_model_exclude_none=True,
)
async def create_fertilizer_recommendation(request: FertilizerRecommendationInput) -> FertilizerRecommendationOutput:
    """
    Suggests a fertilizer and quantity per hectare for a crop and soil.
    """
    return await fertilizer_recommendation(request)
