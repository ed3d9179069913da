import logging
from datetime import date

from fastapi import HTTPException, status

from app.core.flows import PromptFlow
from app.models.market_price import MarketPriceInput, MarketPriceOutput
from app.prompts.market_price_prompt import MARKET_PRICE_PROMPT

logger = logging.getLogger(__name__)

market_price_flow = PromptFlow(
    name="market_price",
    template=MARKET_PRICE_PROMPT,
    output_schema=MarketPriceOutput,
    failure_detail="Could not retrieve market price information. Please try again later.",
)


async def market_price(request: MarketPriceInput) -> MarketPriceOutput:
    logger.info(
        "Market price requested for crop=%s location=%s",
        request.crop_name,
        request.location,
    )
    output = await market_price_flow.ainvoke(request.model_dump())
    if output is None:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="AI returned empty market price data.",
        )

    if not (output.market_data.date or "").strip():
        output.market_data.date = date.today().isoformat()
    return output
