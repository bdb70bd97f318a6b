from dealflip.ai import prompts
from dealflip.schemas.ai import DealAnalysisInput, ListingItem, PricePredictionInput


def test_money_formatting():
    assert prompts._money(65.0) == "$65"
    assert prompts._money(12.5) == "$12.5"
    assert prompts._money(189.99) == "$189.99"
    assert prompts._money(1250000) == "$1250000"


def test_deal_prompt_skips_missing_fields():
    prompt = prompts.deal_analysis_prompt(DealAnalysisInput(title="Chair", current_price=120))

    assert "Product: Chair" in prompt
    assert "Current Price: $120" in prompt
    assert "Description:" not in prompt
    assert "Original Price:" not in prompt
    assert "- confidenceScore: number" in prompt


def test_prediction_prompt_without_history():
    prompt = prompts.price_prediction_prompt(
        PricePredictionInput(title="MacBook Pro", category="Electronics", current_price=1250)
    )

    assert "Category: Electronics" in prompt
    assert "No historical price data available." in prompt
    assert "- projectedPrice30Days: number" in prompt


def test_market_insights_prompt_without_categories():
    prompt = prompts.market_insights_prompt([])

    assert "diverse range of product categories" in prompt
    assert '"insights": [' in prompt


def test_listing_prompt_from_scratch():
    item = ListingItem(title="Dutch Oven", purchase_price=95, tags=["cookware", "le creuset"])

    prompt = prompts.listing_prompt(item, "Mercari")

    assert "Create a professional listing from scratch." in prompt
    assert "No images are available for this item." in prompt
    assert "Purchase Price: $95" in prompt
    assert "Tags: cookware, le creuset" in prompt
    assert "optimized for Mercari's search algorithm" in prompt
