"""News ingestion - feed fetching and candidate selection."""

from .feeds import (
    fallback_candidates,
    fetch_news,
    normalize_feed,
    parse_feed,
    select_candidates,
    topic_from_candidate,
)
from .text import clean_html_entities, is_ai_related

__all__ = [
    "clean_html_entities",
    "fallback_candidates",
    "fetch_news",
    "is_ai_related",
    "normalize_feed",
    "parse_feed",
    "select_candidates",
    "topic_from_candidate",
]
