"""
Ollama language model implementation.

Connects to Ollama instances via the OpenAI-compatible API.
"""

from dataclasses import dataclass
from typing import Any

from agenntic.infrastructure.llm.openai import OpenAIModel, OpenAIModelConfig

DEFAULT_OLLAMA_URL = "http://localhost:11434/v1"


@dataclass
class OllamaModelConfig(OpenAIModelConfig):
    """Configuration for OllamaModel."""

    model: str = "qwen2.5-coder:7b"
    api_key: str | None = "ollama"  # required but unused
    base_url: str | None = DEFAULT_OLLAMA_URL


class OllamaModel(OpenAIModel):
    """Connects to an Ollama instance using the OpenAI-compatible API."""

    config_class = OllamaModelConfig

    def __init__(self, config: OllamaModelConfig | None = None, **kwargs: Any):
        super().__init__(config, **kwargs)
        self.name = "Ollama"
