"""Tests for zenroute.pages.discovery — page discovery and route derivation."""

import logging
from pathlib import Path

import pytest

from zenroute.pages.discovery import discover_pages, file_path_to_route_path
from zenroute.routing.segments import SegmentKind, classify_segment, parse_route_path


def _touch(root: Path, *relative: str) -> None:
    for rel in relative:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("<div></div>", encoding="utf-8")


class TestFilePathToRoutePath:
    @pytest.mark.parametrize(
        ("file_path", "route_path"),
        [
            ("pages/index.zen", "/"),
            ("pages/about.zen", "/about"),
            ("pages/posts/index.zen", "/posts"),
            ("pages/posts/[id].zen", "/posts/:id"),
            ("pages/docs/[...path].zen", "/docs/*path"),
            ("pages/[[...slug]].zen", "/*slug?"),
            ("pages/[org]/settings/index.zen", "/:org/settings"),
            ("pages/index/index.zen", "/"),
            ("pages/blog/index/index.zen", "/blog"),
            ("pages/v1.2/page.zen", "/v1.2/page"),
            ("pages/Index.zen", "/Index"),
            ("pages/[oops.zen", "/[oops"),
        ],
    )
    def test_derivation(self, file_path: str, route_path: str) -> None:
        assert file_path_to_route_path(file_path, "pages") == route_path

    def test_trailing_slash_on_pages_dir(self) -> None:
        assert file_path_to_route_path("pages/posts/[id].zen", "pages/") == "/posts/:id"

    def test_index_drop_is_idempotent(self) -> None:
        a = file_path_to_route_path("pages/shop/index.zen", "pages")
        b = file_path_to_route_path("pages/shop/index/index.zen", "pages")
        assert a == b == "/shop"

    def test_outside_pages_dir_uses_path_as_given(self) -> None:
        assert file_path_to_route_path("other/[id].zen", "pages") == "/other/:id"

    def test_custom_extension_and_index(self) -> None:
        route_path = file_path_to_route_path(
            "pages/blog/home.page",
            "pages",
            extension=".page",
            index_name="home",
        )
        assert route_path == "/blog"

    def test_reparse_reflects_brackets(self) -> None:
        brackets = ["shop", "[category]", "[[...filters]]"]
        route_path = file_path_to_route_path("pages/" + "/".join(brackets) + ".zen", "pages")
        parsed = parse_route_path(route_path)
        assert [(s.kind, s.param_name) for s in parsed] == [
            (classify_segment(b).kind, classify_segment(b).param_name) for b in brackets
        ]
        assert parsed[-1].kind is SegmentKind.OPTIONAL_CATCH_ALL


class TestDiscoverPages:
    def test_finds_page_files_recursively(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.zen", "about.zen", "posts/[id].zen", "posts/index.zen")
        pages = discover_pages(tmp_path)
        assert {p.relative_to(tmp_path).as_posix() for p in pages} == {
            "index.zen",
            "about.zen",
            "posts/[id].zen",
            "posts/index.zen",
        }

    def test_filters_extension(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.zen", "notes.md", "style.css", "script.zen.bak")
        pages = discover_pages(tmp_path)
        assert [p.name for p in pages] == ["index.zen"]

    def test_bare_extension_file_is_not_a_page(self, tmp_path: Path) -> None:
        _touch(tmp_path, ".zen", "about.zen", "blog/.zen")
        pages = discover_pages(tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in pages] == ["about.zen"]

    def test_custom_extension(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.zen", "about.page")
        pages = discover_pages(tmp_path, extension=".page")
        assert [p.name for p in pages] == ["about.page"]

    def test_order_files_then_subdirectories(self, tmp_path: Path) -> None:
        _touch(tmp_path, "b.zen", "a/z.zen", "c.zen", "a/y.zen")
        pages = discover_pages(tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in pages] == [
            "b.zen",
            "c.zen",
            "a/y.zen",
            "a/z.zen",
        ]

    def test_paths_rooted_at_pages_dir(self, tmp_path: Path) -> None:
        _touch(tmp_path, "about.zen")
        (page,) = discover_pages(tmp_path)
        assert page == tmp_path / "about.zen"

    def test_missing_directory_is_empty(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="zenroute.pages"):
            pages = discover_pages(tmp_path / "nope")
        assert pages == []
        assert "not found" in caplog.text

    def test_file_as_root_is_empty(self, tmp_path: Path) -> None:
        _touch(tmp_path, "index.zen")
        assert discover_pages(tmp_path / "index.zen") == []

    def test_symlink_loop_terminates(self, tmp_path: Path) -> None:
        _touch(tmp_path, "a/index.zen")
        try:
            (tmp_path / "a" / "loop").symlink_to(tmp_path / "a", target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")
        pages = discover_pages(tmp_path)
        assert [p.relative_to(tmp_path).as_posix() for p in pages] == ["a/index.zen"]

    def test_symlinks_not_followed(self, tmp_path: Path) -> None:
        _touch(tmp_path, "real/page.zen")
        try:
            (tmp_path / "alias").symlink_to(tmp_path / "real", target_is_directory=True)
        except OSError:
            pytest.skip("symlinks not supported")
        pages = discover_pages(tmp_path, follow_symlinks=False)
        assert [p.relative_to(tmp_path).as_posix() for p in pages] == ["real/page.zen"]
