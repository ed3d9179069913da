import logging

from fastapi import HTTPException, status

from app.core.flows import PromptFlow
from app.models.crop_calendar import CropCalendarInput, CropCalendarOutput
from app.prompts.crop_calendar_prompt import CROP_CALENDAR_PROMPT

logger = logging.getLogger(__name__)

crop_calendar_flow = PromptFlow(
    name="crop_calendar",
    template=CROP_CALENDAR_PROMPT,
    output_schema=CropCalendarOutput,
    failure_detail="Could not create the crop calendar. Please try again later.",
)


async def crop_calendar(request: CropCalendarInput) -> CropCalendarOutput:
    logger.info(
        "Crop calendar requested for crop=%s planting=%s location=%s",
        request.crop_type,
        request.planting_date,
        request.location,
    )

    if not request.crop_type.strip() or not request.location.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing required input fields for crop calendar generation.",
        )

    growing_season_line = ""
    if request.growing_season_length_days:
        growing_season_line = (
            "\n- Estimated Growing Season Length: "
            f"{request.growing_season_length_days} days"
        )

    output = await crop_calendar_flow.ainvoke(
        {
            "crop_type": request.crop_type,
            "planting_date": request.planting_date,
            "location": request.location,
            "growing_season_line": growing_season_line,
        }
    )
    if output is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to generate crop calendar from the AI model.",
        )

    # The model tends to paraphrase these; the request values win.
    output.crop_type = request.crop_type
    output.planting_date = request.planting_date
    output.location = request.location
    return output
