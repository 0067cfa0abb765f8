"""Google Gemini provider using the generateContent REST API."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from ...config import ProviderConfig
from .base import LLMProvider


DEFAULT_BASE_URL = "https://generativelanguage.googleapis.com"


class GeminiProvider(LLMProvider):
    """Gemini-backed completion provider."""

    def __init__(
        self,
        cfg: ProviderConfig,
        api_key: str | None,
        llm_logger: logging.Logger | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        super().__init__(cfg, api_key, llm_logger)
        self.transport = transport

    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        max_tokens: int,
        json_mode: bool = False,
        task: str = "completion",
    ) -> str:
        generation_config: dict[str, Any] = {
            "temperature": temperature,
            "maxOutputTokens": max_tokens,
        }
        if json_mode:
            generation_config["responseMimeType"] = "application/json"
        payload = {
            "contents": [{"role": "user", "parts": [{"text": prompt}]}],
            "generationConfig": generation_config,
        }
        try:
            data = await self._post(payload)
        except httpx.HTTPError as exc:
            self._log_llm_response(task, "provider_error", prompt, str(exc))
            raise
        content = _extract_text(data)
        self._log_llm_response(task, "ok", prompt, content)
        return content

    async def _post(self, payload: dict[str, Any]) -> dict[str, Any]:
        base_url = (self.cfg.base_url or DEFAULT_BASE_URL).rstrip("/")
        url = f"{base_url}/v1beta/models/{self.cfg.model}:generateContent"
        async with httpx.AsyncClient(
            timeout=self.cfg.timeout_seconds,
            trust_env=self.cfg.trust_env,
            transport=self.transport,
        ) as client:
            resp = await client.post(url, params={"key": self.api_key}, json=payload)
            resp.raise_for_status()
            return resp.json()


def _extract_text(data: dict[str, Any]) -> str:
    """Join the text parts of the first candidate, skipping thought parts.

    Falls back to all text parts when the reply holds nothing but thoughts.
    """
    try:
        parts = data["candidates"][0]["content"]["parts"]
    except (KeyError, IndexError, TypeError):
        return ""
    texts = [part.get("text", "") for part in parts if not part.get("thought")]
    if not any(texts):
        texts = [part.get("text", "") for part in parts]
    return "".join(texts)
