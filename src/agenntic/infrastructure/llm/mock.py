"""
Mock language model for testing without a provider.

Returns predefined responses in sequence.
"""

from dataclasses import dataclass
from typing import Any

from agenntic.domain.interfaces import LargeLanguageModel
from agenntic.domain.models import ModelResponse


@dataclass(frozen=True)
class MockRawResponse:
    """Raw response shape produced by MockModel."""

    content: str
    prompt_tokens: int
    completion_tokens: int


class MockModel(LargeLanguageModel):
    """Returns predefined responses for testing."""

    def __init__(
        self,
        responses: list[str],
        input_tokens: int = 1,
        output_tokens: int = 1,
        failures: int = 0,
        error: Exception | None = None,
    ):
        """
        Args:
            responses: List of response strings to return in sequence
            input_tokens: Prompt token count reported for every response
            output_tokens: Completion token count reported for every response
            failures: Number of leading calls that raise instead of responding
            error: Exception raised by failing calls (RuntimeError if None)
        """
        super().__init__("Mock")
        self._responses = responses
        self._input_tokens = input_tokens
        self._output_tokens = output_tokens
        self._failures = failures
        self._error = error or RuntimeError("MockModel simulated failure")
        self._call_count = 0
        self.prompts: list[str] = []

    async def generate_response(self, prompt: str) -> MockRawResponse:
        """Return the next predefined response."""
        self._call_count += 1
        self.prompts.append(prompt)

        if self._call_count <= self._failures:
            raise self._error

        index = self._call_count - self._failures - 1
        if index >= len(self._responses):
            raise RuntimeError("MockModel exhausted responses")

        return MockRawResponse(
            content=self._responses[index],
            prompt_tokens=self._input_tokens,
            completion_tokens=self._output_tokens,
        )

    def format_response(self, raw_response: Any) -> ModelResponse:
        return ModelResponse(
            text=raw_response.content,
            input_tokens=raw_response.prompt_tokens,
            output_tokens=raw_response.completion_tokens,
        )

    @property
    def call_count(self) -> int:
        """Number of times generate_response() has been called."""
        return self._call_count

    def reset(self) -> None:
        """Reset the call counter to reuse responses."""
        self._call_count = 0
        self.prompts.clear()
