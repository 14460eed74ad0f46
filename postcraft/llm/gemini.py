"""Google Gemini implementation of the generation backend."""

from typing import Any

from google import genai
from google.genai import types

from .base import (
    SAFETY_CATEGORIES,
    SAFETY_THRESHOLD,
    LLMError,
    RawCandidate,
    RawResult,
    SafetyRating,
    SamplingConfig,
)

# Ratings without a probability count as unrated, not as harmful.
UNSPECIFIED_PROBABILITY = "HARM_PROBABILITY_UNSPECIFIED"

SAFETY_SETTINGS = [
    types.SafetySetting(
        category=types.HarmCategory(category),
        threshold=types.HarmBlockThreshold(SAFETY_THRESHOLD),
    )
    for category in SAFETY_CATEGORIES
]


class GeminiBackend:
    """Google Gemini generation provider."""

    def __init__(self, api_key: str, model: str, client: Any | None = None):
        self.client = client or genai.Client(api_key=api_key)
        self.model = model

    def build_config(self, sampling: SamplingConfig) -> types.GenerateContentConfig:
        return types.GenerateContentConfig(
            temperature=sampling.temperature,
            top_k=sampling.top_k,
            top_p=sampling.top_p,
            safety_settings=SAFETY_SETTINGS,
        )

    async def generate(self, prompt: str, sampling: SamplingConfig) -> RawResult:
        """Generate text with Gemini and normalize the response."""
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self.build_config(sampling),
            )
        except Exception as exc:
            raise LLMError(f"Gemini API call failed: {exc}") from exc

        return to_raw_result(response)


def to_raw_result(response: Any) -> RawResult:
    """Convert a ``GenerateContentResponse`` into a ``RawResult``."""
    candidates = tuple(
        RawCandidate(
            finish_reason=_enum_text(getattr(candidate, "finish_reason", None)),
            safety_ratings=tuple(
                SafetyRating(
                    category=_enum_text(rating.category) or "",
                    probability=_enum_text(rating.probability) or UNSPECIFIED_PROBABILITY,
                )
                for rating in (getattr(candidate, "safety_ratings", None) or [])
            ),
        )
        for candidate in (getattr(response, "candidates", None) or [])
    )

    feedback = getattr(response, "prompt_feedback", None)
    block_reason = _enum_text(getattr(feedback, "block_reason", None)) if feedback else None

    return RawResult(
        text=_response_text(response),
        candidates=candidates,
        block_reason=block_reason,
    )


def _response_text(response: Any) -> str | None:
    """Read ``response.text``, which the SDK can raise on for odd candidates."""
    try:
        return getattr(response, "text", None)
    except ValueError:
        return None


def _enum_text(value: Any) -> str | None:
    """SDK enums and plain strings both become their string value."""
    if value is None:
        return None
    return str(getattr(value, "value", value))
