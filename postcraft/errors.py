"""Error taxonomy for feed and generation failures."""

from postcraft.models import ErrorKind, GenerationOutcome


class PostcraftError(Exception):
    """Base class for classified failures."""

    kind: ErrorKind = ErrorKind.TRANSPORT

    def to_outcome(self) -> GenerationOutcome:
        return GenerationOutcome.failure(self.kind, str(self))


class ConfigurationError(PostcraftError):
    """Missing or invalid credential. Not retried."""

    kind = ErrorKind.CONFIGURATION


class ContentBlockedError(PostcraftError):
    """The safety filter stopped generation."""

    kind = ErrorKind.CONTENT_BLOCKED

    def __init__(self, message: str, categories: list[str] | None = None):
        super().__init__(message)
        self.categories = categories or []

    def to_outcome(self) -> GenerationOutcome:
        return GenerationOutcome.failure(self.kind, str(self), tuple(self.categories))


class EmptyResponseError(PostcraftError):
    """The model returned no text."""

    kind = ErrorKind.EMPTY_RESPONSE


class TransportError(PostcraftError):
    """Network or HTTP failure reaching an endpoint."""

    kind = ErrorKind.TRANSPORT


class FeedParseError(Exception):
    """Raised when a feed document is not well-formed. Always absorbed."""


_ERRORS_BY_KIND: dict[ErrorKind, type[PostcraftError]] = {
    ErrorKind.CONFIGURATION: ConfigurationError,
    ErrorKind.CONTENT_BLOCKED: ContentBlockedError,
    ErrorKind.EMPTY_RESPONSE: EmptyResponseError,
    ErrorKind.TRANSPORT: TransportError,
}


def error_for_kind(
    kind: ErrorKind, detail: str, categories: tuple[str, ...] = ()
) -> PostcraftError:
    """Build the exception that corresponds to an error kind."""
    if kind is ErrorKind.CONTENT_BLOCKED:
        return ContentBlockedError(detail, categories=list(categories))
    return _ERRORS_BY_KIND[kind](detail)
