"""Tests for outcome classification."""

import pytest

from postcraft.errors import ConfigurationError, ContentBlockedError, EmptyResponseError, TransportError
from postcraft.generate.classifier import (
    blocked_categories,
    classify_exception,
    classify_result,
    is_invalid_credential_message,
)
from postcraft.llm import LLMError, RawCandidate, RawResult, SafetyRating
from postcraft.models import ErrorKind, GenerationOutcome


def _result(finish_reason: str | None, *ratings: tuple[str, str], text: str | None = None) -> RawResult:
    return RawResult(
        text=text,
        candidates=(
            RawCandidate(
                finish_reason=finish_reason,
                safety_ratings=tuple(SafetyRating(category=c, probability=p) for c, p in ratings),
            ),
        ),
    )


class TestClassifyResult:
    def test_text_is_returned_unchanged(self):
        outcome = classify_result(RawResult(text="  Hello #AI\n"))

        assert outcome.ok
        assert outcome.text == "  Hello #AI\n"

    def test_safety_block_names_category(self):
        raw = _result(
            "SAFETY",
            ("HARM_CATEGORY_HARASSMENT", "HIGH"),
            ("HARM_CATEGORY_HATE_SPEECH", "NEGLIGIBLE"),
            ("HARM_CATEGORY_DANGEROUS_CONTENT", "LOW"),
        )

        outcome = classify_result(raw)

        assert outcome.error_kind is ErrorKind.CONTENT_BLOCKED
        assert "SAFETY" in outcome.detail
        assert "HARASSMENT" in outcome.detail
        assert "HATE_SPEECH" not in outcome.detail
        assert "DANGEROUS_CONTENT" not in outcome.detail
        assert outcome.categories == ("HARASSMENT",)

    def test_safety_block_without_ratings(self):
        outcome = classify_result(_result("SAFETY"))

        assert outcome.error_kind is ErrorKind.CONTENT_BLOCKED
        assert outcome.categories == ()
        assert "categories" not in outcome.detail

    def test_stop_without_text_is_empty_response(self):
        outcome = classify_result(_result("STOP"))

        assert outcome.error_kind is ErrorKind.EMPTY_RESPONSE
        assert "did not provide any text" in outcome.detail

    @pytest.mark.parametrize("reason", [None, "FINISH_REASON_UNSPECIFIED"])
    def test_unspecified_reason_is_empty_response(self, reason):
        outcome = classify_result(_result(reason, text="   "))

        assert outcome.error_kind is ErrorKind.EMPTY_RESPONSE

    def test_no_candidates_is_empty_response(self):
        outcome = classify_result(RawResult())

        assert outcome.error_kind is ErrorKind.EMPTY_RESPONSE

    def test_abnormal_reason_is_reported(self):
        outcome = classify_result(_result("MAX_TOKENS"))

        assert outcome.error_kind is ErrorKind.EMPTY_RESPONSE
        assert "Model finished due to MAX_TOKENS." in outcome.detail

    def test_blocked_prompt(self):
        outcome = classify_result(RawResult(block_reason="SAFETY"))

        assert outcome.error_kind is ErrorKind.CONTENT_BLOCKED

    def test_blocked_categories_strip_prefix(self):
        raw = _result("SAFETY", ("HARM_CATEGORY_SEXUALLY_EXPLICIT", "MEDIUM"))

        assert blocked_categories(raw) == ["SEXUALLY_EXPLICIT"]


class TestClassifyException:
    def test_invalid_key_is_configuration(self):
        exc = LLMError("Gemini API call failed: 400 INVALID_ARGUMENT {'reason': 'API_KEY_INVALID'}")

        outcome = classify_exception(exc)

        assert outcome.error_kind is ErrorKind.CONFIGURATION
        assert "Invalid API key" in outcome.detail

    def test_other_errors_are_transport(self):
        outcome = classify_exception(ConnectionError("connection reset"))

        assert outcome.error_kind is ErrorKind.TRANSPORT
        assert "connection reset" in outcome.detail

    def test_empty_message_uses_class_name(self):
        outcome = classify_exception(TimeoutError())

        assert "TimeoutError" in outcome.detail

    @pytest.mark.parametrize(
        ("message", "expected"),
        [
            ("API key not valid. Please pass a valid API key.", True),
            ("details: API_KEY_INVALID", True),
            ("503 UNAVAILABLE", False),
        ],
    )
    def test_credential_sniffing(self, message, expected):
        assert is_invalid_credential_message(message) is expected


class TestOutcomeErrors:
    @pytest.mark.parametrize(
        ("kind", "error_type"),
        [
            (ErrorKind.CONFIGURATION, ConfigurationError),
            (ErrorKind.CONTENT_BLOCKED, ContentBlockedError),
            (ErrorKind.EMPTY_RESPONSE, EmptyResponseError),
            (ErrorKind.TRANSPORT, TransportError),
        ],
    )
    def test_raise_for_error_maps_kind(self, kind, error_type):
        outcome = GenerationOutcome.failure(kind, "went wrong")

        with pytest.raises(error_type, match="went wrong"):
            outcome.raise_for_error()

    def test_raise_for_error_returns_text(self):
        assert GenerationOutcome.success("post").raise_for_error() == "post"

    def test_error_round_trips_to_outcome(self):
        outcome = ContentBlockedError("blocked", categories=["HARASSMENT"]).to_outcome()

        assert outcome.error_kind is ErrorKind.CONTENT_BLOCKED
        assert outcome.detail == "blocked"
        assert outcome.categories == ("HARASSMENT",)

    def test_raised_block_carries_categories(self):
        outcome = classify_result(_result("SAFETY", ("HARM_CATEGORY_HARASSMENT", "HIGH")))

        with pytest.raises(ContentBlockedError) as excinfo:
            outcome.raise_for_error()

        assert excinfo.value.categories == ["HARASSMENT"]
        assert excinfo.value.to_outcome() == outcome
