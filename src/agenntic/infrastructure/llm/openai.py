"""
OpenAI language model implementation.

Uses the async client of the official openai SDK. By default the
implementation targets OpenAI's gpt-4o model.
"""

import logging
import os
from dataclasses import dataclass
from typing import Any, cast

from agenntic.domain.exceptions import ConfigurationError
from agenntic.domain.interfaces import LargeLanguageModel
from agenntic.domain.models import ModelResponse

logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "OPENAI_API_KEY"


@dataclass
class OpenAIModelConfig:
    """Configuration for OpenAIModel.

    This typed config ensures unknown fields are rejected at construction time.
    """

    model: str = "gpt-4o"
    api_key: str | None = None  # Auto-detects from OPENAI_API_KEY env var
    base_url: str | None = None
    timeout: float = 120.0


class OpenAIModel(LargeLanguageModel):
    """Sends the composed prompt as a single system message."""

    config_class = OpenAIModelConfig

    def __init__(self, config: OpenAIModelConfig | None = None, **kwargs: Any):
        """
        Args:
            config: Typed configuration object (preferred)
            **kwargs: Legacy kwargs for backward compatibility (deprecated)
        """
        if config is None:
            config = self.config_class(**kwargs)

        super().__init__("OpenAI")

        try:
            from openai import AsyncOpenAI
        except ImportError as err:
            raise ImportError("openai library required: pip install openai") from err

        self.model = config.model
        self._client = AsyncOpenAI(
            api_key=self._resolve_api_key(config),
            base_url=config.base_url,
            timeout=config.timeout,
        )

    def _resolve_api_key(self, config: OpenAIModelConfig) -> str:
        api_key = config.api_key or os.environ.get(API_KEY_ENV_VAR)
        if not api_key:
            raise ConfigurationError(
                f"{API_KEY_ENV_VAR} environment variable is required to use "
                "the OpenAI model"
            )
        return api_key

    async def generate_response(self, prompt: str) -> Any:
        """Request a chat completion for the prompt."""
        messages = [{"role": "system", "content": prompt}]
        try:
            return await self._client.chat.completions.create(
                model=self.model, messages=cast(Any, messages)
            )
        except Exception:
            logger.exception("Error generating response from %s", self.name)
            raise

    def format_response(self, raw_response: Any) -> ModelResponse:
        """Extract content and token usage from a ChatCompletion."""
        usage = getattr(raw_response, "usage", None)
        input_tokens = getattr(usage, "prompt_tokens", 0) or 0
        output_tokens = getattr(usage, "completion_tokens", 0) or 0

        choices = getattr(raw_response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content:
            logger.warning("No content in the response.")
            content = ""

        return ModelResponse(
            text=content, input_tokens=input_tokens, output_tokens=output_tokens
        )
