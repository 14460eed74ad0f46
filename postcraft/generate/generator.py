"""Post generation via an injected generation backend."""

from postcraft.config import Settings, get_settings
from postcraft.llm import DEFAULT_SAMPLING, GenerationBackend, create_backend
from postcraft.logging_config import get_logger
from postcraft.models import GenerationOutcome

from .classifier import classify_exception, classify_result

logger = get_logger("generator")


class PostGenerator:
    """Runs one model call per prompt and classifies what comes back."""

    def __init__(
        self,
        backend: GenerationBackend | None = None,
        settings: Settings | None = None,
    ):
        self._backend = backend
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    def _resolve_backend(self) -> GenerationBackend:
        """Build the Gemini backend on first use; raises ConfigurationError without a key."""
        if self._backend is None:
            self._backend = create_backend(
                api_key=self.settings.gemini_api_key,
                model=self.settings.gemini_model,
            )
        return self._backend

    async def generate(self, prompt: str) -> GenerationOutcome:
        """
        Send a composed prompt to the model.

        Raises:
            ConfigurationError: If no API key is configured (no call is made)

        Returns:
            Success with the model text, or a classified failure
        """
        backend = self._resolve_backend()

        logger.info(f"Generating post ({len(prompt)} prompt chars)")
        try:
            raw = await backend.generate(prompt, DEFAULT_SAMPLING)
        except Exception as exc:
            logger.error(f"Generation call failed: {exc}")
            return classify_exception(exc)

        outcome = classify_result(raw)
        if outcome.ok:
            logger.debug(f"Post generated ({len(outcome.text or '')} chars)")
        return outcome
