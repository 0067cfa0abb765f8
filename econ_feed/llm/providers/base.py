"""Abstract interface for language-model completion backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging

from ...config import ProviderConfig
from ...logging_utils import log_event, truncate_text


@dataclass(frozen=True)
class ProviderDisabled:
    """Stands in for a provider when AI features cannot run.

    Callers check for this once, at construction time, instead of testing
    for a missing client before every model call.
    """

    reason: str


class LLMProvider(ABC):
    """Provider interface: one prompt in, one text completion out."""

    def __init__(self, cfg: ProviderConfig, api_key: str | None, llm_logger: logging.Logger | None = None):
        if not api_key:
            raise ValueError(f"Missing API key for provider {cfg.name}")
        self.cfg = cfg
        self.api_key = api_key
        self.llm_logger = llm_logger

    @abstractmethod
    async def complete(
        self,
        prompt: str,
        *,
        temperature: float,
        max_tokens: int,
        json_mode: bool = False,
        task: str = "completion",
    ) -> str:
        """Return the completion text ("" when the reply carries none).

        Raises:
            httpx.HTTPError: On transport failure or an error status
        """
        raise NotImplementedError

    def _log_llm_response(self, task: str, status: str, prompt: str, content: str) -> None:
        log_event(
            self.llm_logger,
            "LLM response",
            event="llm_response",
            task=task,
            status=status,
            model=self.cfg.model,
            raw_prompt=truncate_text(prompt),
            raw_response=truncate_text(content),
        )
