"""Prompt composition: persona directives and instruction templates."""

from .composer import (
    compose_fresh_prompt,
    compose_improve_prompt,
    compose_prompt,
    format_prompt_date,
)
from .personas import PERSONA_DIRECTIVES, PERSONA_LABELS, persona_directive
from .prompts import MANDATORY_SUFFIX, SUFFIX_INSTRUCTION

__all__ = [
    "MANDATORY_SUFFIX",
    "PERSONA_DIRECTIVES",
    "PERSONA_LABELS",
    "SUFFIX_INSTRUCTION",
    "compose_fresh_prompt",
    "compose_improve_prompt",
    "compose_prompt",
    "format_prompt_date",
    "persona_directive",
]
