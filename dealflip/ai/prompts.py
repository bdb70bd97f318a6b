"""Prompt templates for the AI gateway."""

from typing import Optional

from dealflip.schemas.ai import (
    DealAnalysisInput,
    ListingItem,
    PricePredictionInput,
)


def _money(value: float) -> str:
    return "$" + f"{value:.2f}".rstrip("0").rstrip(".")


def _lines(*lines: Optional[str]) -> str:
    """Join the lines that are present, skipping None."""
    return "\n".join(line for line in lines if line)


def deal_analysis_prompt(deal: DealAnalysisInput) -> str:
    details = _lines(
        f"Product: {deal.title}",
        f"Description: {deal.description}" if deal.description else None,
        f"Original Price: {_money(deal.original_price)}" if deal.original_price else None,
        f"Current Price: {_money(deal.current_price)}",
        f"Condition: {deal.condition}" if deal.condition else None,
        f"Source: {deal.source}" if deal.source else None,
    )
    return f"""As an expert in product valuation and reselling, analyze this potential deal:

{details}

Please provide a comprehensive analysis with these components:
1. Estimated fair market value
2. Estimated profit potential if resold
3. Typical resale price range (low and high)
4. Market demand level (high/medium/low)
5. Current market trend
6. Estimated time to sell
7. Recommended selling platforms
8. Best product category and tags
9. Risk assessment
10. Overall confidence score (0-100)
11. Brief summary of opportunity

Respond in JSON format with these fields:
- estimatedValue: number
- estimatedProfit: number
- resellLow: number
- resellHigh: number
- demand: string (high/medium/low)
- marketTrend: string
- sellTimeEstimate: string
- recommendedPlatforms: string[]
- competitorPrices: {{platform: string, price: number}}[] (optional)
- category: string
- tags: string[]
- riskAssessment: string
- confidenceScore: number
- summary: string
"""


def price_prediction_prompt(product: PricePredictionInput) -> str:
    if product.historical_prices:
        history = "Historical Prices:\n" + "\n".join(
            f"- Date: {p.date}, Price: {_money(p.price)}"
            + (f", Source: {p.source}" if p.source else "")
            for p in product.historical_prices
        )
    else:
        history = "No historical price data available."

    details = _lines(
        f"Product: {product.title}",
        f"Category: {product.category}" if product.category else None,
        f"Current Price: {_money(product.current_price)}",
    )
    return f"""As a market analyst specializing in price projections, predict the price trend for this product:

{details}

{history}

Please provide a detailed price prediction with these components:
1. Projected price in 30 days
2. Projected price in 90 days
3. Overall price direction (up/down/stable)
4. Seasonality impact on pricing
5. Confidence level in prediction (0-100)
6. Recommended action (buy/sell/hold)
7. Reasoning behind prediction
8. Best season to resell this product

Respond in JSON format with these fields:
- projectedPrice30Days: number
- projectedPrice90Days: number
- priceDirection: string
- seasonalityFactor: string
- confidenceScore: number
- recommendedAction: string
- reasoning: string
- bestResellSeason: string
"""


def market_insights_prompt(categories: list[str]) -> str:
    if categories:
        focus = f"Focus on these specific categories: {', '.join(categories)}"
    else:
        focus = (
            "Provide insights across a diverse range of product categories, "
            "especially those popular in resale markets."
        )
    return f"""As a market intelligence expert, generate current market insights for resellers.

{focus}

For each insight, include:
1. Title of the trend or insight
2. Brief description explaining the insight
3. Related product category
4. Percentage change (if applicable)
5. Icon type that would represent this insight (trending_up, trending_down, warning, info, etc.)
6. Color type (success, warning, danger, info)
7. Source of information (if applicable)
8. Time period (daily, weekly, monthly)

Provide 7-10 different insights as a JSON object of this shape:
{{
  "insights": [
    {{
      "title": string,
      "description": string,
      "category": string,
      "changePercentage": number,
      "iconType": string,
      "colorType": string,
      "source": string,
      "period": string
    }}
  ]
}}

Ensure insights are data-driven, actionable for resellers, and represent current market conditions.
"""


def listing_prompt(item: ListingItem, platform: str, template: Optional[str] = None) -> str:
    if item.images:
        images = f"The item has {len(item.images)} image(s) available."
    else:
        images = "No images are available for this item."

    if template:
        guide = f"Use this template as a guide: {template}"
    else:
        guide = "Create a professional listing from scratch."

    details = _lines(
        f"Product: {item.title}",
        f"Description: {item.description}" if item.description else None,
        f"Condition: {item.condition}" if item.condition else None,
        f"Category: {item.category}" if item.category else None,
        f"Purchase Price: {_money(item.purchase_price)}" if item.purchase_price else None,
        f"Estimated Value: {_money(item.estimated_value)}" if item.estimated_value else None,
        f"Tags: {', '.join(item.tags)}" if item.tags else None,
        images,
    )
    return f"""As an expert e-commerce listing writer for {platform}, create an optimized product listing for this item:

{details}

{guide}

Your listing should include:
1. An attention-grabbing title optimized for {platform}'s search algorithm (max 80 characters)
2. A detailed, well-formatted description highlighting key features, condition, and benefits
3. A suggested selling price based on market value and platform
4. Relevant tags/keywords to maximize visibility

Respond in JSON format with these fields:
- title: string
- description: string
- suggestedPrice: number
- tags: string[]
"""
