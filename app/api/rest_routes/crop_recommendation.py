from fastapi import APIRouter

from app.models.crop_recommendation import CropRecommendationInput, CropRecommendationOutput
from app.services.crop_recommendation_service import crop_recommendation

router = APIRouter(prefix="/crop-recommendations", tags=["Crop Recommendation"])


@router.post(
    "",
    response_model=CropRecommendationOutput,
    response_model_exclude_none=True,
)
async def create_crop_recommendation(request: CropRecommendationInput) -> CropRecommendationOutput:
    """
    Recommends crops for the given soil nutrients, moisture, temperature and rainfall.
    """
    return await crop_recommendation(request)
