from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_PLACEHOLDER_KEY = "your_groq_api_key_here"


@dataclass(frozen=True)
class LLMConfig:
    api_key: str = os.getenv("GROQ_API_KEY", "")
    model: str = os.getenv("GROQ_MODEL", "llama-3.3-70b-versatile")
    timeout: float = 10.0
    max_tokens: int = 256
    temperature: float = 0.4
    enabled: bool = True

    @property
    def is_configured(self) -> bool:
        """True when the LLM is switched on and a real API key is present."""
        return self.enabled and bool(self.api_key) and self.api_key != _PLACEHOLDER_KEY


DEFAULT_LLM_CONFIG = LLMConfig()
