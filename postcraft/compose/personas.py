"""Persona tone directives."""

from types import MappingProxyType

from postcraft.models import PersonaId

PERSONA_DIRECTIVES = MappingProxyType({
    PersonaId.NEUTRAL: "",
    PersonaId.ACTION_ORIENTED: (
        "Write in an action-oriented, intense, mission-focused voice. "
        "Lead with urgency, use short punchy sentences, and frame the topic as "
        "a challenge to overcome with a clear call to act now."
    ),
    PersonaId.INNOVATIVE: (
        "Write in a witty, confident, tech-savvy and visionary voice. "
        "Show excitement about what the technology makes possible, add a touch "
        "of clever humor, and paint a bold picture of where things are heading."
    ),
    PersonaId.ANALYTICAL: (
        "Write in a smart, empathetic, detailed and insightful voice. "
        "Break the topic down step by step, ground claims in specifics, and "
        "explain why it matters to the people affected."
    ),
    PersonaId.EXECUTIVE: (
        "Write in a confident, direct, assertive and results-driven voice. "
        "Focus on business impact, strategy and outcomes, skip the hedging, "
        "and speak like a leader who expects results."
    ),
})

# (display name, short description) for pickers and listings.
PERSONA_LABELS = MappingProxyType({
    PersonaId.NEUTRAL: ("Neutral (Default)", "Standard professional tone."),
    PersonaId.ACTION_ORIENTED: ("Action-Oriented", "Intense, mission-focused, urgent."),
    PersonaId.INNOVATIVE: ("Innovative", "Witty, confident, tech-savvy, visionary."),
    PersonaId.ANALYTICAL: ("Analytical", "Smart, empathetic, detailed, insightful."),
    PersonaId.EXECUTIVE: ("Executive", "Confident, direct, assertive, results-driven."),
})


def persona_directive(persona: PersonaId | str | None) -> str:
    """Tone instruction for a persona; unknown personas get the neutral (empty) one."""
    return PERSONA_DIRECTIVES[PersonaId.parse(persona)]
