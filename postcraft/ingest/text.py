"""Text cleanup and topic classification for feed entries."""

import re

# Order matters: the double-encoded forms must go before plain "&amp;".
ENTITY_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("[&amp;#8230;]", "..."),
    ("[&#8230;]", "..."),
    ("&amp;#160;", " "),
    ("&amp;#8217;", "'"),
    ("&amp;#8220;", '"'),
    ("&amp;#8221;", '"'),
    ("&amp;#8230;", "..."),
    ("&#160;", " "),
    ("&#8217;", "'"),
    ("&#8220;", '"'),
    ("&#8221;", '"'),
    ("&#8230;", "..."),
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#039;", "'"),
    ("&#39;", "'"),
    ("&nbsp;", " "),
)

AI_KEYWORDS: tuple[str, ...] = (
    "ai",
    "artificial intelligence",
    "machine learning",
    "ml",
    "deep learning",
    "neural network",
    "chatgpt",
    "gpt",
    "openai",
    "gemini",
    "claude",
    "llm",
    "large language model",
    "generative ai",
    "automation",
    "robotics",
    "algorithm",
    "data science",
    "computer vision",
    "natural language processing",
    "nlp",
)

_TAG_RE = re.compile(r"<[^>]+>")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_html_entities(text: str | None) -> str:
    """
    Decode the entities RSS feeds leave behind, including double-encoded ones.

    Replacements repeat until nothing changes, so the result is a fixed point
    and cleaning already-clean text returns it unchanged.
    """
    if not text:
        return ""

    current = text
    while True:
        cleaned = current
        for entity, replacement in ENTITY_REPLACEMENTS:
            cleaned = cleaned.replace(entity, replacement)
        cleaned = cleaned.strip()
        if cleaned == current:
            return cleaned
        current = cleaned


def strip_html(text: str | None) -> str:
    """Remove markup and collapse whitespace."""
    if not text:
        return ""
    return _WHITESPACE_RE.sub(" ", _TAG_RE.sub(" ", text)).strip()


def truncate(text: str, limit: int) -> str:
    """Cut text to ``limit`` characters, marking the cut with an ellipsis."""
    if len(text) <= limit:
        return text
    return text[:limit].rstrip() + "..."


def is_ai_related(text: str | None) -> bool:
    """Case-insensitive substring match against ``AI_KEYWORDS``."""
    if not text:
        return False
    lowered = text.lower()
    return any(keyword in lowered for keyword in AI_KEYWORDS)
