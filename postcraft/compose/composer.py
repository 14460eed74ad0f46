"""Builds the exact instruction text sent to the model."""

from datetime import date

from postcraft.models import GenerationMode, GenerationRequest, PersonaId

from .personas import persona_directive
from .prompts import (
    DAILY_TOPIC_TEMPLATE,
    DRAFT_TEMPLATE,
    IMPROVE_GUIDELINES,
    STYLE_GUIDELINES,
    SUFFIX_INSTRUCTION,
    TOPIC_TEMPLATE,
)

SECTION_SEPARATOR = "\n\n"


def format_prompt_date(day: date) -> str:
    """Render a date the way prompts mention it, e.g. "October 19, 2026"."""
    return f"{day.strftime('%B')} {day.day}, {day.year}"


def _join_sections(*sections: str) -> str:
    return SECTION_SEPARATOR.join(section for section in sections if section)


def compose_fresh_prompt(persona: PersonaId | str | None, topic: str, today: str) -> str:
    """
    Prompt for writing a new post.

    Args:
        persona: Tone preset; neutral adds nothing
        topic: Source notes, used verbatim; blank lets the model pick a topic
        today: Formatted current date, only used when ``topic`` is blank

    Returns:
        Instruction text ending with the mandatory suffix instruction
    """
    if topic.strip():
        content = TOPIC_TEMPLATE.format(topic=topic)
    else:
        content = DAILY_TOPIC_TEMPLATE.format(today=today)

    return _join_sections(
        persona_directive(persona),
        STYLE_GUIDELINES,
        content,
        SUFFIX_INSTRUCTION,
    )


def compose_improve_prompt(persona: PersonaId | str | None, draft: str) -> str:
    """Prompt for rewriting an existing draft for higher engagement."""
    if not draft.strip():
        raise ValueError("Cannot improve an empty draft")

    return _join_sections(
        persona_directive(persona),
        IMPROVE_GUIDELINES,
        DRAFT_TEMPLATE.format(draft=draft),
        SUFFIX_INSTRUCTION,
    )


def compose_prompt(request: GenerationRequest, today: str) -> str:
    """Dispatch on the request mode."""
    if request.mode is GenerationMode.IMPROVE:
        return compose_improve_prompt(request.persona, request.draft_text or "")
    return compose_fresh_prompt(request.persona, request.topic, today)
