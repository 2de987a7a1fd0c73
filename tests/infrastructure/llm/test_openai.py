"""Tests for OpenAIModel."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from agenntic.domain.exceptions import ConfigurationError
from agenntic.domain.models import ModelResponse
from agenntic.infrastructure.llm.openai import OpenAIModel, OpenAIModelConfig


def make_completion(
    content: str | None, prompt_tokens: int = 10, completion_tokens: int = 20
) -> SimpleNamespace:
    """Build an object shaped like a ChatCompletion."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(
            prompt_tokens=prompt_tokens, completion_tokens=completion_tokens
        ),
    )


class TestOpenAIModelConfig:
    """Tests for OpenAIModelConfig defaults."""

    def test_defaults(self) -> None:
        config = OpenAIModelConfig()
        assert config.model == "gpt-4o"
        assert config.api_key is None
        assert config.base_url is None
        assert config.timeout == 120.0

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(TypeError):
            OpenAIModelConfig(temperature=0.2)  # type: ignore[call-arg]


class TestOpenAIModelInit:
    """Tests for OpenAIModel initialization."""

    def test_raises_without_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Missing key is a configuration error."""
        pytest.importorskip("openai")
        monkeypatch.delenv("OPENAI_API_KEY", raising=False)

        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            OpenAIModel()

    def test_uses_env_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        openai = pytest.importorskip("openai")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        with patch.object(openai, "AsyncOpenAI", return_value=MagicMock()) as client:
            model = OpenAIModel()

        assert client.call_args.kwargs["api_key"] == "sk-env"
        assert model.name == "OpenAI"
        assert model.model == "gpt-4o"

    def test_explicit_key_wins_over_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        openai = pytest.importorskip("openai")
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        with patch.object(openai, "AsyncOpenAI", return_value=MagicMock()) as client:
            OpenAIModel(OpenAIModelConfig(api_key="sk-explicit"))

        assert client.call_args.kwargs["api_key"] == "sk-explicit"

    def test_legacy_kwargs_init(self) -> None:
        pytest.importorskip("openai")
        model = OpenAIModel(api_key="sk-test", model="gpt-4o-mini")
        assert model.model == "gpt-4o-mini"

    def test_raises_without_openai(self) -> None:
        with (
            patch.dict("sys.modules", {"openai": None}),
            pytest.raises(ImportError, match="openai"),
        ):
            OpenAIModel(OpenAIModelConfig(api_key="sk-test"))


class TestOpenAIModelGenerate:
    """Tests for generate_response() with a mocked client."""

    @pytest.fixture
    def model(self) -> OpenAIModel:
        pytest.importorskip("openai")
        model = OpenAIModel(OpenAIModelConfig(api_key="sk-test"))
        model._client = MagicMock()
        model._client.chat.completions.create = AsyncMock(
            return_value=make_completion("Hello")
        )
        return model

    @pytest.mark.asyncio
    async def test_sends_single_system_message(self, model: OpenAIModel) -> None:
        await model.generate_response("Write a haiku")

        kwargs = model._client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4o"
        assert kwargs["messages"] == [{"role": "system", "content": "Write a haiku"}]

    @pytest.mark.asyncio
    async def test_returns_raw_completion(self, model: OpenAIModel) -> None:
        raw = await model.generate_response("p")

        assert model.format_response(raw).text == "Hello"

    @pytest.mark.asyncio
    async def test_reraises_provider_errors(self, model: OpenAIModel) -> None:
        model._client.chat.completions.create.side_effect = ConnectionError("down")

        with pytest.raises(ConnectionError, match="down"):
            await model.generate_response("p")


class TestOpenAIModelFormat:
    """Tests for format_response()."""

    @pytest.fixture
    def model(self) -> OpenAIModel:
        pytest.importorskip("openai")
        return OpenAIModel(OpenAIModelConfig(api_key="sk-test"))

    def test_extracts_text_and_usage(self, model: OpenAIModel) -> None:
        response = model.format_response(make_completion("Answer", 7, 9))

        assert response == ModelResponse(text="Answer", input_tokens=7, output_tokens=9)

    def test_missing_content_gives_empty_text(self, model: OpenAIModel) -> None:
        response = model.format_response(make_completion(None))

        assert response.text == ""
        assert response.input_tokens == 10

    def test_no_choices_or_usage(self, model: OpenAIModel) -> None:
        response = model.format_response(SimpleNamespace(choices=[], usage=None))

        assert response == ModelResponse(text="")
