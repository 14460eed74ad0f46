"""Generation module - compose, call the model, classify."""

from datetime import date

from postcraft.compose import compose_prompt, format_prompt_date
from postcraft.logging_config import get_logger
from postcraft.models import GenerationOutcome, GenerationRequest

from .classifier import classify_exception, classify_result, is_invalid_credential_message
from .generator import PostGenerator

logger = get_logger("generate")

__all__ = [
    "PostGenerator",
    "classify_exception",
    "classify_result",
    "create_post",
    "is_invalid_credential_message",
]


async def create_post(
    request: GenerationRequest,
    *,
    generator: PostGenerator | None = None,
    today: str | None = None,
) -> GenerationOutcome:
    """
    Compose the prompt for a request and generate the post.

    ``today`` is the formatted date used when the topic is blank; it defaults
    to the current local date.
    """
    generator = generator or PostGenerator()
    today = today or format_prompt_date(date.today())

    logger.info(f"Creating post: mode={request.mode.value} persona={request.persona.value}")
    prompt = compose_prompt(request, today)
    return await generator.generate(prompt)
