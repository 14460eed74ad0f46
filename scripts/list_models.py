"""List Gemini models that can serve post generation."""

from google import genai

from postcraft.config import get_settings


def main() -> int:
    """Print models supporting generateContent, marking the configured one."""
    settings = get_settings()

    if not settings.has_api_key:
        print("GEMINI_API_KEY is not set; cannot list models.")
        return 1

    client = genai.Client(api_key=settings.gemini_api_key)
    configured = f"models/{settings.gemini_model}"
    print("Available models:")
    for model in client.models.list():
        if "generateContent" in (model.supported_actions or []):
            marker = " (configured)" if model.name == configured else ""
            print(f"- {model.name}{marker}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
