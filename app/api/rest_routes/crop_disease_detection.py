from fastapi import APIRouter

from app.models.crop_disease_detection import DetectCropDiseaseInput, DetectCropDiseaseOutput
from app.services.crop_disease_detection_service import detect_crop_disease

router = APIRouter(prefix="/crop-disease-detections", tags=["Crop Disease Detection"])


@router.post(
    "",
    response_model=DetectCropDiseaseOutput,
    response_model_exclude_none=True,
)
async def create_crop_disease_detection(request: DetectCropDiseaseInput) -> DetectCropDiseaseOutput:
    """
    Identifies crop disease from a photo sent as a base64 data URI.
    """
    return await detect_crop_disease(request)
