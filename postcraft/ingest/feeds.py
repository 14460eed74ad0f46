"""
News feed fetching and normalization into post topic candidates.

Feed problems never reach the caller: a failed request or a malformed
document yields the fixed fallback list instead.
"""

from collections.abc import Iterable

import feedparser
import httpx

from postcraft.config import Settings, get_settings
from postcraft.errors import FeedParseError
from postcraft.logging_config import get_logger
from postcraft.models import NewsCandidate

from .text import clean_html_entities, is_ai_related, strip_html, truncate

logger = get_logger("feeds")

FEED_HEADERS = {
    "User-Agent": "Postcraft/1.0",
    "Accept": "application/rss+xml, application/xml, text/xml",
}

MAX_CANDIDATES = 10
MIN_AI_CANDIDATES = 5
DEFAULT_DESCRIPTION_CHARS = 200

# Bozo notices that still leave a usable, well-formed document.
RECOVERABLE_BOZO_EXCEPTIONS = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)

FALLBACK_NEWS: tuple[NewsCandidate, ...] = (
    NewsCandidate(
        id="fallback-1",
        title="AI Technology Continues to Transform Industries",
        description=(
            "Latest developments in artificial intelligence are reshaping how businesses "
            "operate across various sectors, from healthcare to finance."
        ),
        link="https://example.com/ai-transformation",
    ),
    NewsCandidate(
        id="fallback-2",
        title="Machine Learning Breakthroughs Reshape Data Analysis",
        description=(
            "Researchers announce significant advances in machine learning algorithms that "
            "could revolutionize data processing and analysis."
        ),
        link="https://example.com/ml-breakthroughs",
    ),
    NewsCandidate(
        id="fallback-3",
        title="The Future of Generative AI in Content Creation",
        description=(
            "Exploring how generative AI tools are changing the landscape of content "
            "creation and creative industries."
        ),
        link="https://example.com/generative-ai-future",
    ),
    NewsCandidate(
        id="fallback-4",
        title="AI Ethics and Responsible Development",
        description=(
            "Industry leaders discuss the importance of ethical AI development and "
            "responsible deployment of artificial intelligence systems."
        ),
        link="https://example.com/ai-ethics",
    ),
    NewsCandidate(
        id="fallback-5",
        title="Automation and the Future of Work",
        description=(
            "How AI-powered automation is reshaping job markets and creating new "
            "opportunities for workers in the digital age."
        ),
        link="https://example.com/automation-future-work",
    ),
)


def fallback_candidates() -> list[NewsCandidate]:
    """The fixed list shown when the feed cannot be used."""
    return list(FALLBACK_NEWS)


def parse_feed(
    document: bytes | str,
    max_description_chars: int = DEFAULT_DESCRIPTION_CHARS,
) -> list[NewsCandidate]:
    """
    Parse an RSS document into candidates, in source order.

    Args:
        document: Raw feed body
        max_description_chars: Descriptions longer than this are truncated

    Returns:
        Candidates with cleaned title/description and unique ids

    Raises:
        FeedParseError: If the document is not well-formed XML
    """
    if not document or not document.strip():
        raise FeedParseError("Empty feed document")

    feed = feedparser.parse(document)

    if feed.bozo and not isinstance(feed.bozo_exception, RECOVERABLE_BOZO_EXCEPTIONS):
        raise FeedParseError(f"Malformed feed document: {feed.bozo_exception}")

    candidates: list[NewsCandidate] = []
    seen_ids: set[str] = set()

    for index, entry in enumerate(feed.entries):
        title = clean_html_entities(entry.get("title", ""))
        link = (entry.get("link") or "").strip()

        if not title or not link:
            logger.debug(f"Skipping entry {index}: missing title or link")
            continue

        candidate_id = (entry.get("id") or "").strip() or f"item-{index}"
        if candidate_id in seen_ids:
            logger.debug(f"Skipping duplicate entry: {candidate_id}")
            continue
        seen_ids.add(candidate_id)

        # Strip markup before decoding so escaped "<" and ">" in the text survive.
        description = clean_html_entities(strip_html(entry.get("description", "")))

        candidates.append(
            NewsCandidate(
                id=candidate_id,
                title=title,
                description=truncate(description, max_description_chars),
                link=link,
                published_at=(entry.get("published") or "").strip() or None,
            )
        )

    return candidates


def select_candidates(
    candidates: Iterable[NewsCandidate],
    limit: int = MAX_CANDIDATES,
    min_ai: int = MIN_AI_CANDIDATES,
) -> list[NewsCandidate]:
    """
    Prefer AI-related items, padding with general news when AI content is thin.

    Takes up to ``limit`` AI-related candidates in source order. When fewer
    than ``min_ai`` are found, the rest are filled from the remaining
    candidates, still in source order, until ``limit`` is reached.
    """
    pool = list(candidates)
    selected = [c for c in pool if is_ai_related(c.title) or is_ai_related(c.description)][:limit]

    if len(selected) < min_ai:
        chosen = {c.id for c in selected}
        padding = [c for c in pool if c.id not in chosen][: limit - len(selected)]
        selected.extend(padding)

    return selected


def normalize_feed(
    document: bytes | str,
    max_description_chars: int = DEFAULT_DESCRIPTION_CHARS,
) -> list[NewsCandidate]:
    """Turn a raw feed document into the candidate list; never raises on bad input."""
    try:
        candidates = parse_feed(document, max_description_chars=max_description_chars)
    except FeedParseError as exc:
        logger.warning(f"{exc}; using fallback news")
        return fallback_candidates()

    selected = select_candidates(candidates)
    logger.info(f"Selected {len(selected)} of {len(candidates)} feed items")
    return selected


async def fetch_news(
    url: str | None = None,
    *,
    settings: Settings | None = None,
    client: httpx.AsyncClient | None = None,
) -> list[NewsCandidate]:
    """
    Fetch the news feed and normalize it.

    Args:
        url: Feed URL (default: configured ``feed_url``)
        settings: Settings to use instead of the process-wide ones
        client: Pre-configured HTTP client (closed by the caller)

    Returns:
        Candidate list, or the fallback list on any network or parse failure
    """
    settings = settings or get_settings()
    feed_url = url or str(settings.feed_url)
    logger.info(f"Fetching news feed: {feed_url}")

    try:
        if client is None:
            async with httpx.AsyncClient(
                timeout=settings.feed_timeout_seconds,
                follow_redirects=True,
                headers=FEED_HEADERS,
            ) as owned_client:
                response = await owned_client.get(feed_url)
        else:
            response = await client.get(feed_url, headers=FEED_HEADERS)
    except httpx.HTTPError as exc:
        logger.warning(f"Feed request failed ({exc!r}); using fallback news")
        return fallback_candidates()
    except Exception as exc:
        logger.error(f"Failed to fetch news feed: {exc}")
        return fallback_candidates()

    if not response.is_success:
        logger.warning(f"Feed returned HTTP {response.status_code}; using fallback news")
        return fallback_candidates()

    try:
        return normalize_feed(response.content, max_description_chars=settings.max_description_chars)
    except Exception as exc:
        logger.error(f"Failed to normalize news feed: {exc}")
        return fallback_candidates()


def topic_from_candidate(candidate: NewsCandidate) -> str:
    """Build the topic text that pre-fills a post request from a news item."""
    parts = [f'Based on the news titled "{candidate.title}" (Source: {candidate.link}):']
    if candidate.description:
        parts.append(candidate.description)
    parts.append(
        "Please craft an engaging LinkedIn post. "
        "Focus on key insights or implications related to AI."
    )
    return "\n\n".join(parts)
