import logging

from fastapi import HTTPException, status

from app.core.flows import PromptFlow
from app.models.crop_disease_detection import (
    DATA_URI_PATTERN,
    DetectCropDiseaseInput,
    DetectCropDiseaseOutput,
)
from app.prompts.crop_disease_detection_prompt import CROP_DISEASE_DETECTION_PROMPT

logger = logging.getLogger(__name__)

crop_disease_detection_flow = PromptFlow(
    name="crop_disease_detection",
    template=CROP_DISEASE_DETECTION_PROMPT,
    output_schema=DetectCropDiseaseOutput,
    failure_detail="Could not analyze the image. Please ensure the image is clear and try again.",
)


async def detect_crop_disease(request: DetectCropDiseaseInput) -> DetectCropDiseaseOutput:
    match = DATA_URI_PATTERN.match(request.photo_data_uri)
    logger.info(
        "Crop disease detection requested (mime_type=%s, encoded_length=%d)",
        match.group("mime_type") if match else "unknown",
        len(request.photo_data_uri),
    )
    output = await crop_disease_detection_flow.ainvoke(
        {}, media_urls=[request.photo_data_uri]
    )
    if output is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AI returned an empty disease identification.",
        )
    return output
