"""LLM-backed deal analysis, price prediction, insights and listing copy."""

from dealflip.ai.client import ChatCompletionClient
from dealflip.ai.gateway import AIGateway, get_ai_gateway

__all__ = [
    "ChatCompletionClient",
    "AIGateway",
    "get_ai_gateway",
]
