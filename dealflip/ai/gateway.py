"""AI gateway: prompt, one provider call, validated result.

Every operation raises ``AIGatewayError`` (or its subclass
``MalformedProviderResponse``) on failure. Nothing is retried or cached.
"""

import logging
from typing import Optional

from pydantic import ValidationError

from dealflip.ai import prompts
from dealflip.ai.client import ChatCompletionClient
from dealflip.errors import MalformedProviderResponse
from dealflip.schemas.ai import (
    DealAnalysisInput,
    DealAnalysisOutput,
    GeneratedListingOutput,
    ListingItem,
    MarketInsightOutput,
    MarketInsightsOutput,
    PricePredictionInput,
    PricePredictionOutput,
)

logger = logging.getLogger(__name__)

# Sampling temperatures per operation
ANALYSIS_TEMPERATURE = 0.2
PREDICTION_TEMPERATURE = 0.2
INSIGHTS_TEMPERATURE = 0.4
LISTING_TEMPERATURE = 0.3


def _validate(model, payload: dict, operation: str):
    try:
        return model.model_validate(payload)
    except ValidationError as e:
        logger.error(f"{operation}: provider reply failed validation: {e}")
        raise MalformedProviderResponse(
            f"{operation} reply did not match {model.__name__}: {e.error_count()} error(s)"
        ) from e


class AIGateway:
    """The four AI-backed operations offered to the API layer."""

    def __init__(self, client: Optional[ChatCompletionClient] = None):
        self.client = client or ChatCompletionClient()

    async def analyze_deal(self, deal: DealAnalysisInput) -> DealAnalysisOutput:
        reply = await self.client.complete_json(
            prompts.deal_analysis_prompt(deal), temperature=ANALYSIS_TEMPERATURE
        )
        return _validate(DealAnalysisOutput, reply, "analyze_deal")

    async def predict_price_trend(self, product: PricePredictionInput) -> PricePredictionOutput:
        reply = await self.client.complete_json(
            prompts.price_prediction_prompt(product), temperature=PREDICTION_TEMPERATURE
        )
        return _validate(PricePredictionOutput, reply, "predict_price_trend")

    async def generate_market_insights(self, categories: list[str]) -> list[MarketInsightOutput]:
        reply = await self.client.complete_json(
            prompts.market_insights_prompt(categories), temperature=INSIGHTS_TEMPERATURE
        )
        result = _validate(MarketInsightsOutput, reply, "generate_market_insights")
        logger.info(f"Generated {len(result.insights)} market insights")
        return result.insights

    async def generate_listing(
        self,
        item: ListingItem,
        platform: str,
        template: Optional[str] = None,
    ) -> GeneratedListingOutput:
        reply = await self.client.complete_json(
            prompts.listing_prompt(item, platform, template), temperature=LISTING_TEMPERATURE
        )
        return _validate(GeneratedListingOutput, reply, "generate_listing")


def get_ai_gateway() -> AIGateway:
    """Dependency returning a gateway bound to the configured provider."""
    return AIGateway()
