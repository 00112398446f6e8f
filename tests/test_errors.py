"""Tests for zenroute.errors — exception hierarchy and error messages."""

import pytest

from zenroute.errors import (
    ConfigurationError,
    ManifestError,
    PatternError,
    RouteConflictError,
    ZenrouteError,
)


class TestHierarchy:
    def test_configuration_error_is_zenroute_error(self) -> None:
        assert issubclass(ConfigurationError, ZenrouteError)

    def test_pattern_error_is_zenroute_error(self) -> None:
        assert issubclass(PatternError, ZenrouteError)

    def test_route_conflict_is_manifest_error(self) -> None:
        assert issubclass(RouteConflictError, ManifestError)
        assert issubclass(ManifestError, ZenrouteError)


class TestPatternError:
    def test_str_with_detail(self) -> None:
        err = PatternError(pattern="^/(", detail="missing )")
        assert str(err) == "Invalid route pattern '^/(': missing )"

    def test_str_without_detail(self) -> None:
        assert str(PatternError(pattern="^/(")) == "Invalid route pattern '^/('"

    def test_raisable(self) -> None:
        with pytest.raises(ZenrouteError):
            raise PatternError(pattern="x")


class TestRouteConflictError:
    def test_message_names_both_files(self) -> None:
        err = RouteConflictError("/posts/:slug", "pages/posts/[id].zen", "pages/posts/[slug].zen")
        assert err.route_path == "/posts/:slug"
        assert "pages/posts/[id].zen" in str(err)
        assert "pages/posts/[slug].zen" in str(err)
