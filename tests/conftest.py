"""Shared test doubles."""

from __future__ import annotations

from typing import Callable

import pytest

from econ_feed.config import ProviderConfig
from econ_feed.llm.providers.base import LLMProvider


class FakeProvider(LLMProvider):
    """Records every call and answers from a fixed string or a callable."""

    def __init__(self, reply: str | Callable[[str], str] = "", error: Exception | None = None):
        super().__init__(ProviderConfig(model="fake-model"), "test-key")
        self.reply = reply
        self.error = error
        self.calls: list[dict] = []

    async def complete(self, prompt, *, temperature, max_tokens, json_mode=False, task="completion"):
        self.calls.append(
            {
                "prompt": prompt,
                "temperature": temperature,
                "max_tokens": max_tokens,
                "json_mode": json_mode,
                "task": task,
            }
        )
        if self.error is not None:
            raise self.error
        if callable(self.reply):
            return self.reply(prompt)
        return self.reply


@pytest.fixture
def make_provider():
    return FakeProvider
