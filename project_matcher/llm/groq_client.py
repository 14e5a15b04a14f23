from __future__ import annotations

import logging
from typing import Protocol

from groq import AsyncGroq

from .config import DEFAULT_LLM_CONFIG, LLMConfig

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are an AI project matching expert. "
    "Given a freelancer's survey answers and one candidate project, "
    "explain in 2-3 sentences why the project is a good match. "
    "Be natural and conversational and focus on the strongest matching points. "
    "Return plain text only, no lists or headings."
)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class GroqTextGenerator:
    """Text generator backed by the Groq chat completion API."""

    def __init__(self, config: LLMConfig = DEFAULT_LLM_CONFIG) -> None:
        self.config = config

    async def generate(self, prompt: str) -> str:
        """
        Send *prompt* to the configured Groq model and return the reply text.

        Errors (timeouts, auth, rate limits) propagate to the caller, which
        decides how to degrade. A fresh client per call keeps the HTTP pool
        bound to the running event loop.
        """
        async with AsyncGroq(api_key=self.config.api_key, timeout=self.config.timeout) as client:
            response = await client.chat.completions.create(
                model=self.config.model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                max_tokens=self.config.max_tokens,
                temperature=self.config.temperature,
            )
        content = response.choices[0].message.content or ""
        logger.debug("Groq returned %d characters", len(content))
        return content
