"""Filesystem page discovery for the pages/ directory.

Walks the pages directory tree and collects every page file (``*.zen``
by default).  File paths map to route paths by convention:

    pages/index.zen               -> /
    pages/about.zen               -> /about
    pages/posts/index.zen         -> /posts
    pages/posts/[id].zen          -> /posts/:id
    pages/docs/[...path].zen      -> /docs/*path
    pages/[[...slug]].zen         -> /*slug?

Unreadable entries are skipped with a warning; a missing pages
directory yields no pages rather than an error.
"""

from __future__ import annotations

import logging
from pathlib import Path, PurePath

from zenroute.routing.segments import ParsedSegment, classify_segment, segment_notation

logger = logging.getLogger("zenroute.pages")

PAGE_EXTENSION = ".zen"
INDEX_NAME = "index"


def discover_pages(
    pages_dir: str | Path,
    *,
    extension: str = PAGE_EXTENSION,
    follow_symlinks: bool = True,
) -> list[Path]:
    """Walk a pages directory and discover all page files.

    Args:
        pages_dir: Path to the ``pages/`` directory.
        extension: Page file suffix, leading dot included.
        follow_symlinks: Descend into symlinked directories.

    Returns:
        Page file paths (rooted at *pages_dir* as given), in discovery
        order: within each directory, files by name, then subdirectories
        by name.
    """
    root = Path(pages_dir)
    if not root.is_dir():
        logger.warning("Pages directory not found: %s", root)
        return []

    pages: list[Path] = []
    _walk_directory(
        root,
        extension=extension,
        follow_symlinks=follow_symlinks,
        ancestors=frozenset(),
        pages=pages,
    )
    return pages


def _walk_directory(
    directory: Path,
    *,
    extension: str,
    follow_symlinks: bool,
    ancestors: frozenset[Path],
    pages: list[Path],
) -> None:
    """Recursively walk a directory, collecting page files.

    Args:
        directory: Current directory being walked.
        extension: Page file suffix.
        follow_symlinks: Descend into symlinked directories.
        ancestors: Resolved directories above this one (symlink loop guard).
        pages: Accumulator for discovered page files.
    """
    try:
        real = directory.resolve()
        if real in ancestors:
            logger.warning("Skipping symlink loop at %s", directory)
            return
        entries = sorted(directory.iterdir())
    except OSError as exc:
        logger.warning("Skipping unreadable directory %s: %s", directory, exc)
        return

    subdirectories: list[Path] = []
    for item in entries:
        try:
            if item.is_dir():
                if follow_symlinks or not item.is_symlink():
                    subdirectories.append(item)
                continue
            if item.is_file() and item.name.endswith(extension) and item.name != extension:
                pages.append(item)
        except OSError as exc:
            logger.warning("Skipping unreadable entry %s: %s", item, exc)

    for subdirectory in subdirectories:
        _walk_directory(
            subdirectory,
            extension=extension,
            follow_symlinks=follow_symlinks,
            ancestors=ancestors | {real},
            pages=pages,
        )


def page_segments(
    file_path: str | PurePath,
    pages_dir: str | PurePath,
    *,
    extension: str = PAGE_EXTENSION,
    index_name: str = INDEX_NAME,
) -> list[ParsedSegment]:
    """Classify the bracket-notation components of a page file path.

    ``index`` components are dropped; the last component loses its
    extension.
    """
    path = PurePath(file_path)
    try:
        relative = path.relative_to(pages_dir)
    except ValueError:
        relative = path

    components = list(relative.parts[1:] if relative.anchor else relative.parts)
    if components:
        components[-1] = _strip_extension(components[-1], extension)

    return [
        classify_segment(component)
        for component in components
        if component and component != index_name
    ]


def file_path_to_route_path(
    file_path: str | PurePath,
    pages_dir: str | PurePath,
    *,
    extension: str = PAGE_EXTENSION,
    index_name: str = INDEX_NAME,
) -> str:
    """Convert a page file path to its route path.

    The path is taken relative to *pages_dir* (or as given, when it
    lies outside it), the extension is stripped, ``index`` components
    are dropped, and bracket segments are rewritten::

        "pages/posts/[id].zen"  -> "/posts/:id"
        "pages/index/index.zen" -> "/"
    """
    segments = page_segments(file_path, pages_dir, extension=extension, index_name=index_name)
    route_segments = [segment_notation(segment) for segment in segments]

    route_path = "/" + "/".join(route_segments)
    if len(route_path) > 1 and route_path.endswith("/"):
        route_path = route_path.rstrip("/")
    return route_path


def _strip_extension(name: str, extension: str) -> str:
    if extension and name.endswith(extension):
        return name[: -len(extension)]
    return PurePath(name).stem
