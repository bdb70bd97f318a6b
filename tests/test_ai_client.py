import asyncio
import json

import httpx
import pytest

from dealflip.ai.client import ChatCompletionClient
from dealflip.errors import AIGatewayError, MalformedProviderResponse


def _completion(content):
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _client(handler):
    return ChatCompletionClient(
        api_key="sk-test",
        base_url="https://llm.test/v1/",
        model="gpt-test",
        timeout=5,
        transport=httpx.MockTransport(handler),
    )


def _run(client, prompt="Analyze this", temperature=0.2):
    return asyncio.run(client.complete_json(prompt, temperature))


def test_complete_json_sends_json_mode_request():
    seen = {}

    def handler(request):
        seen["url"] = str(request.url)
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json=_completion('{"ok": true}'))

    assert _run(_client(handler), temperature=0.4) == {"ok": True}

    assert seen["url"] == "https://llm.test/v1/chat/completions"
    assert seen["auth"] == "Bearer sk-test"
    assert seen["body"] == {
        "model": "gpt-test",
        "messages": [{"role": "user", "content": "Analyze this"}],
        "response_format": {"type": "json_object"},
        "temperature": 0.4,
    }


def test_non_200_is_gateway_error():
    def handler(request):
        return httpx.Response(429, text="rate limited")

    with pytest.raises(AIGatewayError, match="429") as exc_info:
        _run(_client(handler))

    assert not isinstance(exc_info.value, MalformedProviderResponse)


def test_transport_error_is_gateway_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(AIGatewayError, match="connection refused"):
        _run(_client(handler))


def test_empty_content_is_gateway_error():
    def handler(request):
        return httpx.Response(200, json=_completion(""))

    with pytest.raises(AIGatewayError, match="Empty response"):
        _run(_client(handler))


@pytest.mark.parametrize(
    "body",
    [
        _completion("this is not json"),
        _completion("[1, 2, 3]"),
        {"choices": []},
        {"unexpected": "envelope"},
    ],
)
def test_malformed_replies(body):
    def handler(request):
        return httpx.Response(200, json=body)

    with pytest.raises(MalformedProviderResponse):
        _run(_client(handler))
