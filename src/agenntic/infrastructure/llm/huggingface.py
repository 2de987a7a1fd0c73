"""
HuggingFace Inference API language model implementation.

Connects to HuggingFace Inference Providers via the huggingface_hub
AsyncInferenceClient for chat completion.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, cast

from agenntic.domain.exceptions import ConfigurationError
from agenntic.domain.interfaces import LargeLanguageModel
from agenntic.domain.models import ModelResponse

logger = logging.getLogger(__name__)


@dataclass
class HuggingFaceModelConfig:
    """Configuration for HuggingFaceModel.

    This typed config ensures unknown fields are rejected at construction time.
    """

    model: str = "Qwen/Qwen2.5-Coder-32B-Instruct"
    api_key: str | None = None  # Auto-detects from HF_TOKEN env var
    provider: str | None = None  # e.g. "auto", "hf-inference", "together"
    timeout: float = 120.0
    temperature: float = 0.7
    max_tokens: int = 4096


class HuggingFaceModel(LargeLanguageModel):
    """Connects to HuggingFace Inference API using huggingface_hub."""

    config_class = HuggingFaceModelConfig

    def __init__(
        self, config: HuggingFaceModelConfig | None = None, **kwargs: Any
    ) -> None:
        """
        Args:
            config: Typed configuration object (preferred)
            **kwargs: Legacy kwargs for backward compatibility (deprecated)
        """
        if config is None:
            config = HuggingFaceModelConfig(**kwargs)

        super().__init__("HuggingFace")

        try:
            from huggingface_hub import AsyncInferenceClient
        except ImportError as err:
            raise ImportError(
                "huggingface_hub library required: pip install huggingface_hub"
            ) from err

        api_key = config.api_key
        if api_key is None:
            api_key = os.environ.get("HF_TOKEN")
            if not api_key:
                raise ConfigurationError(
                    "HuggingFace API key required: set HF_TOKEN environment "
                    "variable or pass api_key in config"
                )

        client_kwargs: dict[str, Any] = {
            "api_key": api_key,
            "timeout": config.timeout,
        }
        if config.provider is not None:
            client_kwargs["provider"] = config.provider

        self.model = config.model
        self._client = AsyncInferenceClient(**client_kwargs)
        self._temperature = config.temperature
        self._max_tokens = config.max_tokens

    async def generate_response(self, prompt: str) -> Any:
        """Request a chat completion for the prompt."""
        messages: list[dict[str, str]] = [{"role": "system", "content": prompt}]

        return await self._client.chat_completion(
            messages=cast(Any, messages),
            model=self.model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

    def format_response(self, raw_response: Any) -> ModelResponse:
        """Extract content and token usage from a ChatCompletionOutput."""
        usage = getattr(raw_response, "usage", None)
        choices = getattr(raw_response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            logger.warning("No content in the response.")

        return ModelResponse(
            text=content or "",
            input_tokens=getattr(usage, "prompt_tokens", 0) or 0,
            output_tokens=getattr(usage, "completion_tokens", 0) or 0,
        )
