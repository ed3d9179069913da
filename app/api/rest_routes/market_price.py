from fastapi import APIRouter

from app.models.market_price import MarketPriceInput, MarketPriceOutput
from app.services.market_price_service import market_price

router = APIRouter(prefix="/market-prices", tags=["Market Price"])


@router.post(
    "",
    response_model=MarketPriceOutput,
    response_model_exclude_none=True,
)
async def create_market_price(request: MarketPriceInput) -> MarketPriceOutput:
    """
    Gets current market price insights for a crop in a location.
    """
    return await market_price(request)
