"""Tests for the Gemini backend and factory."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, Mock

import pytest
from google.genai import types

from postcraft.errors import ConfigurationError
from postcraft.generate.classifier import classify_result
from postcraft.llm import DEFAULT_MODEL, DEFAULT_SAMPLING, LLMError, create_backend
from postcraft.llm.gemini import GeminiBackend, to_raw_result


def _fake_client(response=None, error: Exception | None = None) -> Mock:
    client = Mock()
    client.aio.models.generate_content = AsyncMock(return_value=response, side_effect=error)
    return client


def _response(text, finish_reason=None, ratings=(), block_reason=None):
    candidate = SimpleNamespace(
        finish_reason=finish_reason,
        safety_ratings=[
            SimpleNamespace(category=category, probability=probability)
            for category, probability in ratings
        ],
    )
    return SimpleNamespace(
        text=text,
        candidates=[candidate],
        prompt_feedback=SimpleNamespace(block_reason=block_reason) if block_reason else None,
    )


class TestGeminiBackend:
    def test_sends_fixed_config(self):
        client = _fake_client(_response("Hello", types.FinishReason.STOP))
        backend = GeminiBackend(api_key="test-key", model="gemini-test", client=client)

        asyncio.run(backend.generate("prompt", DEFAULT_SAMPLING))

        kwargs = client.aio.models.generate_content.call_args.kwargs
        assert kwargs["model"] == "gemini-test"
        assert kwargs["contents"] == "prompt"
        config = kwargs["config"]
        assert config.temperature == 0.7
        assert config.top_k == 32
        assert config.top_p == 0.9
        assert {s.category for s in config.safety_settings} == {
            types.HarmCategory.HARM_CATEGORY_HARASSMENT,
            types.HarmCategory.HARM_CATEGORY_HATE_SPEECH,
            types.HarmCategory.HARM_CATEGORY_SEXUALLY_EXPLICIT,
            types.HarmCategory.HARM_CATEGORY_DANGEROUS_CONTENT,
        }
        assert all(
            s.threshold == types.HarmBlockThreshold.BLOCK_MEDIUM_AND_ABOVE
            for s in config.safety_settings
        )

    def test_wraps_sdk_errors(self):
        client = _fake_client(error=RuntimeError("API key not valid"))
        backend = GeminiBackend(api_key="test-key", model="gemini-test", client=client)

        with pytest.raises(LLMError, match="API key not valid"):
            asyncio.run(backend.generate("prompt", DEFAULT_SAMPLING))


class TestToRawResult:
    def test_converts_sdk_enums_to_strings(self):
        response = _response(
            None,
            types.FinishReason.SAFETY,
            [(types.HarmCategory.HARM_CATEGORY_HATE_SPEECH, types.HarmProbability.HIGH)],
        )

        raw = to_raw_result(response)

        assert raw.text is None
        assert raw.candidates[0].finish_reason == "SAFETY"
        assert raw.candidates[0].safety_ratings[0].category == "HARM_CATEGORY_HATE_SPEECH"
        assert raw.candidates[0].safety_ratings[0].probability == "HIGH"

    def test_missing_probability_is_unspecified(self):
        response = _response(
            None,
            types.FinishReason.SAFETY,
            [(types.HarmCategory.HARM_CATEGORY_HARASSMENT, None)],
        )

        raw = to_raw_result(response)

        assert raw.candidates[0].safety_ratings[0].probability == "HARM_PROBABILITY_UNSPECIFIED"
        assert classify_result(raw).categories == ()

    def test_keeps_text(self):
        raw = to_raw_result(_response("Hello #AI", "STOP"))

        assert raw.text == "Hello #AI"
        assert raw.candidates[0].finish_reason == "STOP"

    def test_prompt_block_reason(self):
        response = SimpleNamespace(
            text=None,
            candidates=None,
            prompt_feedback=SimpleNamespace(block_reason=types.BlockedReason.SAFETY),
        )

        raw = to_raw_result(response)

        assert raw.candidates == ()
        assert raw.block_reason == "SAFETY"


class TestCreateBackend:
    @pytest.mark.parametrize("api_key", [None, "", "   "])
    def test_blank_key_is_configuration_error(self, api_key):
        with pytest.raises(ConfigurationError):
            create_backend(api_key)

    def test_uses_default_model(self):
        backend = create_backend("test-key")

        assert isinstance(backend, GeminiBackend)
        assert backend.model == DEFAULT_MODEL
