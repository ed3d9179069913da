from fastapi import APIRouter

from app.models.government_schemes import GovernmentSchemesInput, GovernmentSchemesOutput
from app.services.government_schemes_service import government_schemes

router = APIRouter(prefix="/government-schemes", tags=["Government Schemes"])


@router.post(
    "",
    response_model=GovernmentSchemesOutput,
    response_model_exclude_none=True,
)
async def create_government_schemes(request: GovernmentSchemesInput) -> GovernmentSchemesOutput:
    """
    Lists government schemes, subsidies and insurance plans for a location in India.
    """
    return await government_schemes(request)
