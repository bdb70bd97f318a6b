"""AI-powered routes: deal analysis, insights, price prediction, listing copy."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from dealflip import storage
from dealflip.ai.gateway import AIGateway, get_ai_gateway
from dealflip.database import get_db
from dealflip.errors import AIGatewayError
from dealflip.models import MarketInsight
from dealflip.schemas.ai import (
    DealAnalysisInput,
    GenerateListingRequest,
    MarketInsightOutput,
    MarketInsightsRequest,
    PricePredictionInput,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ai", tags=["ai"])


def _provider_failure(message: str, exc: AIGatewayError) -> JSONResponse:
    logger.error(f"{message}: {exc}")
    return JSONResponse(status_code=500, content={"message": message, "details": str(exc)})


def _wire(model) -> dict:
    """camelCase dict holding only the fields the provider actually sent."""
    return model.model_dump(by_alias=True, exclude_unset=True)


@router.post("/analyze-deal")
async def analyze_deal(
    payload: DealAnalysisInput,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    try:
        analysis = await gateway.analyze_deal(payload)
    except AIGatewayError as e:
        return _provider_failure("Error analyzing deal with AI", e)
    return _wire(analysis)


@router.post("/market-insights")
async def market_insights(
    payload: MarketInsightsRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
    db: Session = Depends(get_db),
):
    try:
        insights = await gateway.generate_market_insights(payload.categories or [])
    except AIGatewayError as e:
        return _provider_failure("Error generating market insights with AI", e)

    if payload.save:
        columns = set(MarketInsightOutput.model_fields)
        for insight in insights:
            storage.create(db, MarketInsight, insight.model_dump(include=columns, exclude_none=True))
        logger.info(f"Stored {len(insights)} generated market insights")

    return [_wire(insight) for insight in insights]


@router.post("/price-prediction")
async def price_prediction(
    payload: PricePredictionInput,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    try:
        prediction = await gateway.predict_price_trend(payload)
    except AIGatewayError as e:
        return _provider_failure("Error predicting price trends with AI", e)
    return _wire(prediction)


@router.post("/generate-listing")
async def generate_listing(
    payload: GenerateListingRequest,
    gateway: AIGateway = Depends(get_ai_gateway),
):
    try:
        listing = await gateway.generate_listing(payload.item, payload.platform, payload.template)
    except AIGatewayError as e:
        return _provider_failure("Error generating listing with AI", e)
    return _wire(listing)
