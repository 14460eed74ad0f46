"""Maps raw model results and call exceptions onto ``GenerationOutcome``."""

from postcraft.llm import RawResult
from postcraft.logging_config import get_logger
from postcraft.models import ErrorKind, GenerationOutcome

logger = get_logger("classifier")

NORMAL_FINISH_REASONS = frozenset({"STOP", "FINISH_REASON_UNSPECIFIED"})
SAFETY_FINISH_REASON = "SAFETY"
# Ratings at these levels did not cause the block.
LOW_PROBABILITIES = frozenset({"NEGLIGIBLE", "LOW", "HARM_PROBABILITY_UNSPECIFIED"})

# Best-effort markers in provider error messages; not a stable contract.
INVALID_CREDENTIAL_MARKERS = ("API_KEY_INVALID", "API key not valid")

NO_CONTENT_DETAIL = "The AI model did not provide any text content."
RETRY_HINT = "Please try rephrasing your input or try again later."


def classify_result(raw: RawResult) -> GenerationOutcome:
    """Turn a raw result into success (text untouched) or a typed failure."""
    if raw.text and raw.text.strip():
        return GenerationOutcome.success(raw.text)

    if not raw.candidates and raw.block_reason:
        detail = f"The prompt was blocked ({raw.block_reason}). {RETRY_HINT}"
        logger.warning(detail)
        return GenerationOutcome.failure(ErrorKind.CONTENT_BLOCKED, detail)

    reason = raw.candidates[0].finish_reason if raw.candidates else None

    if not reason or reason in NORMAL_FINISH_REASONS:
        logger.warning("Model returned no text")
        return GenerationOutcome.failure(
            ErrorKind.EMPTY_RESPONSE, f"{NO_CONTENT_DETAIL} {RETRY_HINT}"
        )

    detail = f"Model finished due to {reason}."

    if reason == SAFETY_FINISH_REASON:
        categories = blocked_categories(raw)
        if categories:
            detail += f" Potentially harmful content detected in categories: {', '.join(categories)}."
        logger.warning(detail)
        return GenerationOutcome.failure(
            ErrorKind.CONTENT_BLOCKED, f"{detail} {RETRY_HINT}", tuple(categories)
        )

    logger.warning(detail)
    return GenerationOutcome.failure(ErrorKind.EMPTY_RESPONSE, f"{detail} {RETRY_HINT}")


def blocked_categories(raw: RawResult) -> list[str]:
    """Names of harm categories on the first candidate rated above LOW."""
    if not raw.candidates:
        return []
    return [
        rating.category.removeprefix("HARM_CATEGORY_")
        for rating in raw.candidates[0].safety_ratings
        if rating.probability not in LOW_PROBABILITIES
    ]


def is_invalid_credential_message(message: str) -> bool:
    """Sniff a provider error message for an invalid API key."""
    return any(marker in message for marker in INVALID_CREDENTIAL_MARKERS)


def classify_exception(exc: BaseException) -> GenerationOutcome:
    """Re-classify an exception raised while calling the model."""
    message = str(exc) or exc.__class__.__name__

    if is_invalid_credential_message(message):
        return GenerationOutcome.failure(
            ErrorKind.CONFIGURATION,
            "Invalid API key for text generation. Please check your API key configuration.",
        )

    return GenerationOutcome.failure(
        ErrorKind.TRANSPORT, f"Failed to reach the AI service: {message}"
    )
