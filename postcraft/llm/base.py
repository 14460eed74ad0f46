"""Provider-agnostic generation interface and shared types."""

from dataclasses import dataclass, field
from typing import Protocol


class LLMError(Exception):
    """Raised when a provider call fails."""


@dataclass(frozen=True)
class SamplingConfig:
    """Sampling parameters, identical for every call."""

    temperature: float = 0.7
    top_k: int = 32
    top_p: float = 0.9


DEFAULT_SAMPLING = SamplingConfig()

# Harm categories blocked at medium probability and above. Not configurable per request.
SAFETY_CATEGORIES: tuple[str, ...] = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)
SAFETY_THRESHOLD = "BLOCK_MEDIUM_AND_ABOVE"


@dataclass(frozen=True)
class SafetyRating:
    category: str
    probability: str


@dataclass(frozen=True)
class RawCandidate:
    finish_reason: str | None = None
    safety_ratings: tuple[SafetyRating, ...] = ()


@dataclass(frozen=True)
class RawResult:
    """Provider-agnostic response from a generation call."""

    text: str | None = None
    candidates: tuple[RawCandidate, ...] = field(default_factory=tuple)
    block_reason: str | None = None


class GenerationBackend(Protocol):
    """Protocol that generation providers implement."""

    async def generate(self, prompt: str, sampling: SamplingConfig) -> RawResult:
        """Run one generation call with the fixed safety policy."""
        ...
