from fastapi import APIRouter

from app.models.crop_calendar import CropCalendarInput, CropCalendarOutput
from app.services.crop_calendar_service import crop_calendar

router = APIRouter(prefix="/crop-calendars", tags=["Crop Calendar"])


@router.post(
    "",
    response_model=CropCalendarOutput,
    response_model_exclude_none=True,
)
async def create_crop_calendar(request: CropCalendarInput) -> CropCalendarOutput:
    """
    Builds a task schedule from planting to harvest for a crop.
    """
    return await crop_calendar(request)
