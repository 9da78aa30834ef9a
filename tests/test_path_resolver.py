"""Tests for page path resolution."""

from ga_beacon.application.services import PathResolver
from ga_beacon.application.services.path_resolver import (
    EXPLICIT_PATH_MISSING,
    REFERER_MISSING,
)


class TestUseReferer:
    """Resolution when the useReferer flag is present."""

    def test_when_referer_present_then_uses_referer(self) -> None:
        """Given useReferer and a Referer header, when resolving, then the referer is the path."""
        result = PathResolver().resolve(True, "https://github.com/o/r", "ignored/path")

        assert result.resolved
        assert result.page_path == "https://github.com/o/r"

    def test_when_referer_missing_then_fails_without_fallback(self) -> None:
        """Given useReferer but no Referer, when resolving, then fails even with a URL path."""
        result = PathResolver().resolve(True, None, "docs/readme")

        assert not result.resolved
        assert result.failure_reason == REFERER_MISSING

    def test_when_referer_empty_then_fails(self) -> None:
        """Given useReferer and an empty Referer, when resolving, then fails."""
        result = PathResolver().resolve(True, "", None)

        assert result.failure_reason == REFERER_MISSING


class TestExplicitPath:
    """Resolution when the useReferer flag is absent."""

    def test_when_path_present_then_uses_path(self) -> None:
        """Given a trailing URL path, when resolving, then that path is used."""
        result = PathResolver().resolve(False, "https://ignored", "docs/readme")

        assert result.page_path == "docs/readme"

    def test_when_path_missing_then_fails(self) -> None:
        """Given no trailing URL path, when resolving, then fails even with a referer."""
        result = PathResolver().resolve(False, "https://github.com", None)

        assert not result.resolved
        assert result.failure_reason == EXPLICIT_PATH_MISSING
