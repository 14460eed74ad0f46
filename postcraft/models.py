"""
Core data models for post generation.

Using Pydantic for validation and serialization.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

if TYPE_CHECKING:
    from postcraft.errors import PostcraftError


class PersonaId(str, Enum):
    """Tone preset applied to generated text."""

    NEUTRAL = "neutral"
    ACTION_ORIENTED = "action-oriented"
    INNOVATIVE = "innovative"
    ANALYTICAL = "analytical"
    EXECUTIVE = "executive"

    @classmethod
    def parse(cls, value: PersonaId | str | None) -> PersonaId:
        """Resolve a persona, falling back to neutral for unknown values."""
        if isinstance(value, cls):
            return value
        if not value:
            return cls.NEUTRAL
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.NEUTRAL


class GenerationMode(str, Enum):
    """Whether to write a new post or optimize an existing draft."""

    FRESH = "fresh"
    IMPROVE = "improve"


class ErrorKind(str, Enum):
    """User-facing failure categories."""

    CONFIGURATION = "configuration"
    CONTENT_BLOCKED = "content_blocked"
    EMPTY_RESPONSE = "empty_response"
    TRANSPORT = "transport"


class NewsCandidate(BaseModel):
    """A news item that can seed a post topic."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="guid from the feed, or a positional token")
    title: str = Field(..., description="Cleaned title")
    description: str = Field(default="", description="Plain-text description")
    link: str = Field(..., description="Item URL")
    published_at: str | None = Field(default=None, description="Raw pubDate text")


class GenerationRequest(BaseModel):
    """One user action: write a post, or improve a draft."""

    model_config = ConfigDict(frozen=True)

    topic: str = Field(default="", description="Source notes; blank lets the model pick")
    persona: PersonaId = Field(default=PersonaId.NEUTRAL)
    mode: GenerationMode = Field(default=GenerationMode.FRESH)
    draft_text: str | None = Field(default=None, description="Draft to optimize")

    @model_validator(mode="after")
    def require_draft_for_improve(self) -> Self:
        """Improve mode has nothing to work on without a draft."""
        if self.mode is GenerationMode.IMPROVE and not (self.draft_text or "").strip():
            raise ValueError("draft_text is required when mode is 'improve'")
        return self


class GenerationOutcome(BaseModel):
    """Result of a generation call: post text, or a classified failure."""

    model_config = ConfigDict(frozen=True)

    text: str | None = None
    error_kind: ErrorKind | None = None
    detail: str = ""
    categories: tuple[str, ...] = ()

    @classmethod
    def success(cls, text: str) -> GenerationOutcome:
        return cls(text=text)

    @classmethod
    def failure(
        cls, kind: ErrorKind, detail: str, categories: tuple[str, ...] = ()
    ) -> GenerationOutcome:
        return cls(error_kind=kind, detail=detail, categories=categories)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def as_error(self) -> PostcraftError | None:
        """Return the matching exception for a failed outcome."""
        if self.ok:
            return None
        from postcraft.errors import error_for_kind

        return error_for_kind(self.error_kind, self.detail, self.categories)

    def raise_for_error(self) -> str:
        """Return the post text, or raise the classified error."""
        error = self.as_error()
        if error is not None:
            raise error
        return self.text or ""
