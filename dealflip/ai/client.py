"""Chat completions client for an OpenAI-compatible provider."""

import json
import logging
from typing import Optional

import httpx

from dealflip.config import settings
from dealflip.errors import AIGatewayError, MalformedProviderResponse

logger = logging.getLogger(__name__)


class ChatCompletionClient:
    """Sends one prompt, asks for a JSON object back, returns it parsed."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.base_url = (base_url or settings.openai_base_url).rstrip("/")
        self.model = model or settings.openai_model
        self.timeout = timeout or settings.openai_timeout_seconds
        self._transport = transport

    async def complete_json(self, prompt: str, temperature: float) -> dict:
        """
        Request a JSON-mode completion for a single user message.

        Args:
            prompt: Full user message
            temperature: Sampling temperature

        Returns:
            The reply parsed into a dict

        Raises:
            AIGatewayError: transport failure, non-2xx status or empty reply
            MalformedProviderResponse: reply is not a JSON object
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "response_format": {"type": "json_object"},
            "temperature": temperature,
        }

        logger.info(f"Requesting completion from {self.model} (temperature={temperature})")

        try:
            async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers=headers,
                    json=payload,
                )
        except httpx.HTTPError as e:
            logger.error(f"Provider request failed: {e}")
            raise AIGatewayError(f"Provider request failed: {e}") from e

        if response.status_code != 200:
            logger.error(f"Provider error: {response.status_code} - {response.text}")
            raise AIGatewayError(f"Provider returned {response.status_code}: {response.text}")

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            raise MalformedProviderResponse(f"Unexpected completion envelope: {e}") from e

        if not content:
            raise AIGatewayError("Empty response from provider")

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to parse provider reply as JSON: {e}")
            raise MalformedProviderResponse(f"Reply is not valid JSON: {e}") from e

        if not isinstance(parsed, dict):
            raise MalformedProviderResponse(
                f"Expected a JSON object, got {type(parsed).__name__}"
            )
        return parsed
