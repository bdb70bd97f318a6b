"""Input and output contracts of the AI gateway.

Output models are what the provider's JSON reply must look like. Replies
that fail validation are rejected rather than forwarded to clients. Keys the
provider adds beyond the declared fields are kept and returned as sent.
"""

from typing import Optional

from pydantic import ConfigDict, Field

from dealflip.schemas.base import CamelModel


class DealAnalysisInput(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    original_price: Optional[float] = None
    current_price: float = Field(gt=0)
    condition: Optional[str] = None
    source: Optional[str] = None


class CompetitorQuote(CamelModel):
    model_config = ConfigDict(extra="allow")

    platform: str
    price: float


class DealAnalysisOutput(CamelModel):
    model_config = ConfigDict(extra="allow")

    estimated_value: float
    estimated_profit: float
    resell_low: float
    resell_high: float
    demand: str
    market_trend: str
    sell_time_estimate: str
    recommended_platforms: list[str]
    competitor_prices: Optional[list[CompetitorQuote]] = None
    category: str
    tags: list[str]
    risk_assessment: str
    confidence_score: float = Field(ge=0, le=100)
    summary: str


class HistoricalPrice(CamelModel):
    date: str
    price: float
    source: Optional[str] = None


class PricePredictionInput(CamelModel):
    title: str = Field(min_length=1)
    category: Optional[str] = None
    current_price: float = Field(gt=0)
    historical_prices: Optional[list[HistoricalPrice]] = None


class PricePredictionOutput(CamelModel):
    model_config = ConfigDict(extra="allow")

    projected_price30_days: float = Field(alias="projectedPrice30Days")
    projected_price90_days: float = Field(alias="projectedPrice90Days")
    price_direction: str
    seasonality_factor: str
    confidence_score: float = Field(ge=0, le=100)
    recommended_action: str
    reasoning: str
    best_resell_season: str


class MarketInsightsRequest(CamelModel):
    categories: Optional[list[str]] = None
    # Also store the generated insights in market_insights
    save: bool = False


class MarketInsightOutput(CamelModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: str
    category: Optional[str] = None
    change_percentage: Optional[float] = None
    icon_type: str
    color_type: str
    source: Optional[str] = None
    period: Optional[str] = None


class MarketInsightsOutput(CamelModel):
    insights: list[MarketInsightOutput] = Field(max_length=10)


class ListingItem(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    condition: Optional[str] = None
    category: Optional[str] = None
    purchase_price: Optional[float] = None
    estimated_value: Optional[float] = None
    images: Optional[list[str]] = None
    tags: Optional[list[str]] = None


class GenerateListingRequest(CamelModel):
    item: ListingItem
    platform: str = Field(min_length=1)
    template: Optional[str] = None


class GeneratedListingOutput(CamelModel):
    model_config = ConfigDict(extra="allow")

    title: str
    description: str
    suggested_price: float
    tags: list[str]
