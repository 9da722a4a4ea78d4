import asyncio

import httpx
import pytest

from app.config import Config, OpenAIConfig
from app.services.completion_service import CompletionService
from app.utils.exceptions import CompletionFailed
from conftest import TAILORED_TEXT, completion_response


def _service(config, completion_stub):
    return CompletionService(config, transport=httpx.MockTransport(completion_stub))


def test_sends_chat_request(config, completion_stub):
    result = asyncio.run(_service(config, completion_stub).complete("Rewrite this resume"))

    assert result == TAILORED_TEXT
    request = completion_stub.requests[0]
    assert str(request.url) == "https://llm.test/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer sk-test"
    assert completion_stub.payloads[0] == {
        "model": "gpt-4o-mini",
        "messages": [
            {"role": "system", "content": "You are a professional ATS resume writer."},
            {"role": "user", "content": "Rewrite this resume"},
        ],
        "temperature": 0.4,
    }


def test_uses_configured_model(completion_stub):
    config = Config(openai=OpenAIConfig(api_key="sk-test", model="gpt-4o"))
    asyncio.run(_service(config, completion_stub).complete("prompt"))
    assert completion_stub.payloads[0]["model"] == "gpt-4o"


def test_auth_failure(config, completion_stub):
    completion_stub.handler = lambda request: httpx.Response(
        401, json={"error": {"message": "Incorrect API key provided", "type": "invalid_request_error"}}
    )

    with pytest.raises(CompletionFailed) as exc_info:
        asyncio.run(_service(config, completion_stub).complete("prompt"))

    assert "401" in exc_info.value.message
    assert "Incorrect API key provided" in exc_info.value.message


def test_rate_limited(config, completion_stub):
    completion_stub.handler = lambda request: httpx.Response(429, text="Too Many Requests")

    with pytest.raises(CompletionFailed) as exc_info:
        asyncio.run(_service(config, completion_stub).complete("prompt"))

    assert "429" in exc_info.value.message
    assert len(completion_stub.requests) == 1


def test_network_error(config, completion_stub):
    def fail(request):
        raise httpx.ConnectError("connection refused", request=request)

    completion_stub.handler = fail

    with pytest.raises(CompletionFailed) as exc_info:
        asyncio.run(_service(config, completion_stub).complete("prompt"))

    assert "connection refused" in exc_info.value.message


def test_no_choices(config, completion_stub):
    completion_stub.handler = lambda request: httpx.Response(200, json={"choices": []})

    with pytest.raises(CompletionFailed) as exc_info:
        asyncio.run(_service(config, completion_stub).complete("prompt"))

    assert "no choices" in exc_info.value.message


def test_empty_content(config, completion_stub):
    completion_stub.handler = lambda request: completion_response(content="   ")

    with pytest.raises(CompletionFailed):
        asyncio.run(_service(config, completion_stub).complete("prompt"))


def test_non_json_body(config, completion_stub):
    completion_stub.handler = lambda request: httpx.Response(200, text="<html>gateway</html>")

    with pytest.raises(CompletionFailed) as exc_info:
        asyncio.run(_service(config, completion_stub).complete("prompt"))

    assert "invalid JSON" in exc_info.value.message
