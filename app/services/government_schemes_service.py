import logging

from app.core.flows import PromptFlow
from app.models.government_schemes import (
    GovernmentSchemesInput,
    GovernmentSchemesOutput,
)
from app.prompts.government_schemes_prompt import GOVERNMENT_SCHEMES_PROMPT

logger = logging.getLogger(__name__)

government_schemes_flow = PromptFlow(
    name="government_schemes",
    template=GOVERNMENT_SCHEMES_PROMPT,
    output_schema=GovernmentSchemesOutput,
    failure_detail="Could not retrieve government schemes information. Please try again later.",
)


def _optional_line(label: str, value: str | None) -> str:
    if value and value.strip():
        return f"\n- {label}: {value.strip()}"
    return ""


async def government_schemes(request: GovernmentSchemesInput) -> GovernmentSchemesOutput:
    logger.info(
        "Government schemes requested for location=%s crop=%s category=%s",
        request.location,
        request.crop_type,
        request.farmer_category,
    )

    if not request.location.strip():
        logger.error("Location is missing in government schemes request")
        return GovernmentSchemesOutput(schemes=[])

    output = await government_schemes_flow.ainvoke(
        {
            "location": request.location.strip(),
            "crop_type_line": _optional_line("Relevant Crop", request.crop_type),
            "farmer_category_line": _optional_line(
                "Farmer Category", request.farmer_category
            ),
        }
    )

    if output is None:
        logger.warning("No valid schemes returned for location=%s", request.location)
        return GovernmentSchemesOutput(schemes=[])
    return output
