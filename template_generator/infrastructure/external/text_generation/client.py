"""Text generation over an OpenAI-compatible /chat/completions endpoint (httpx)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from template_generator.infrastructure.exceptions import TextGenerationException

if TYPE_CHECKING:
    from template_generator.core.config import Settings

logger = logging.getLogger(__name__)


def _content_to_text(content: Any) -> str:
    """Message content is either a string or a list of {type: "text", text} segments."""
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = [
            segment.get("text", "")
            for segment in content
            if isinstance(segment, dict) and segment.get("type") == "text"
        ]
        return "\n".join(p for p in parts if p)
    return ""


class ChatCompletionTextGenerator:
    """ITextGenerator backed by a chat completions API (OpenRouter, OpenAI, ...).

    Uses the process-wide httpx.AsyncClient owned by the lifespan; does not
    close it.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_url: str,
        api_key: str,
        model: str,
        timeout_seconds: float = 60.0,
    ) -> None:
        self.http_client = http_client
        self.api_url = api_url
        self.api_key = api_key
        self.model = model
        self.timeout_seconds = timeout_seconds

    def _build_headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

    async def complete(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float,
        max_output_tokens: int,
    ) -> str:
        payload = {
            "model": self.model,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
            "max_tokens": max_output_tokens,
        }
        try:
            response = await self.http_client.post(
                self.api_url,
                headers=self._build_headers(),
                json=payload,
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            result = response.json()
        except httpx.HTTPStatusError as e:
            raise TextGenerationException(
                f"API error: {e.response.status_code}", e.response.status_code
            ) from e
        except httpx.HTTPError as e:
            raise TextGenerationException(f"transport error: {e}") from e
        except ValueError as e:
            raise TextGenerationException("response body is not JSON") from e

        try:
            content = result["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise TextGenerationException("response has no message content") from e

        text = _content_to_text(content)
        if not text.strip():
            raise TextGenerationException("empty response from text generation model")
        logger.debug("Text generation returned %d characters", len(text))
        return text


def build_text_generator(
    settings: Settings, http_client: httpx.AsyncClient
) -> ChatCompletionTextGenerator | None:
    """Return a configured generator, or None when no API key is set."""
    api_key = settings.text_generation_api_key.get_secret_value()
    if not api_key:
        return None
    return ChatCompletionTextGenerator(
        http_client=http_client,
        api_url=settings.text_generation_api_url,
        api_key=api_key,
        model=settings.text_generation_model,
        timeout_seconds=settings.text_generation_timeout_seconds,
    )
