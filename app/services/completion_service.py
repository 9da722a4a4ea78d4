"""
Completion Service

Sends the tailoring prompt to an OpenAI-compatible chat-completion
endpoint and returns the first choice's text. Failures are not retried.
"""

from typing import Any, Dict, Optional

import httpx

from app.config import Config
from app.utils.logger import get_logger
from app.utils.exceptions import CompletionFailed

logger = get_logger(__name__)


class CompletionService:
    """Thin async client for the chat-completion API"""

    def __init__(self, config: Config, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.config = config
        self.openai = config.openai
        self.url = f"{self.openai.base_url}/chat/completions"
        # Tests inject httpx.MockTransport here
        self._transport = transport

    def build_payload(self, prompt: str) -> Dict[str, Any]:
        return {
            "model": self.openai.model,
            "messages": [
                {"role": "system", "content": self.openai.system_prompt},
                {"role": "user", "content": prompt},
            ],
            "temperature": self.openai.temperature,
        }

    async def complete(self, prompt: str) -> str:
        """
        Run one chat completion.

        Returns:
            Message content of the first choice

        Raises:
            CompletionFailed: Network, auth, rate-limit or malformed-response errors
        """
        try:
            async with httpx.AsyncClient(timeout=self.openai.timeout, transport=self._transport) as client:
                response = await client.post(
                    self.url,
                    headers={
                        "Authorization": f"Bearer {self.openai.api_key}",
                        "Content-Type": "application/json",
                    },
                    json=self.build_payload(prompt),
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPStatusError as e:
            detail = self._error_detail(e.response)
            logger.error(f"[CompletionService] ❌ Completion API returned {e.response.status_code}: {detail}")
            raise CompletionFailed(f"Completion API error ({e.response.status_code}): {detail}") from e
        except httpx.HTTPError as e:
            logger.error(f"[CompletionService] ❌ Completion request failed: {e!r}")
            raise CompletionFailed(f"Completion request failed: {str(e) or type(e).__name__}") from e
        except ValueError as e:
            logger.error(f"[CompletionService] ❌ Completion API returned invalid JSON: {e}")
            raise CompletionFailed("Completion API returned invalid JSON") from e

        choices = data.get("choices") if isinstance(data, dict) else None
        if not choices:
            logger.warning("[CompletionService] No choices in completion response")
            raise CompletionFailed("Completion response contained no choices")

        content = (choices[0].get("message") or {}).get("content")
        if not content or not content.strip():
            logger.warning("[CompletionService] Empty content in completion response")
            raise CompletionFailed("Completion response was empty")

        usage = data.get("usage") or {}
        logger.info(
            f"[CompletionService] ✅ Completion received: {len(content)} characters "
            f"(model={data.get('model', self.openai.model)}, total_tokens={usage.get('total_tokens', 'n/a')})"
        )
        return content

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text[:500] or response.reason_phrase
        error = body.get("error") if isinstance(body, dict) else None
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        return str(body)[:500]
