"""Generation backend factory and shared exports."""

from postcraft.errors import ConfigurationError

from .base import (
    DEFAULT_SAMPLING,
    SAFETY_CATEGORIES,
    GenerationBackend,
    LLMError,
    RawCandidate,
    RawResult,
    SafetyRating,
    SamplingConfig,
)

DEFAULT_MODEL = "gemini-2.5-flash"


def create_backend(api_key: str | None, model: str | None = None) -> GenerationBackend:
    """Create the Gemini backend. A blank key is a configuration error."""
    if not api_key or not api_key.strip():
        raise ConfigurationError(
            "Gemini API key not configured. Set GEMINI_API_KEY (or GOOGLE_API_KEY / API_KEY)."
        )

    try:
        from .gemini import GeminiBackend
    except ImportError as exc:
        raise LLMError(
            "Missing dependency for Gemini. Install the 'google-genai' package to continue."
        ) from exc

    return GeminiBackend(api_key=api_key, model=model or DEFAULT_MODEL)


__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_SAMPLING",
    "GenerationBackend",
    "LLMError",
    "RawCandidate",
    "RawResult",
    "SAFETY_CATEGORIES",
    "SafetyRating",
    "SamplingConfig",
    "create_backend",
]
