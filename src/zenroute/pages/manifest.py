"""Route manifest generation.

Discovers page files, turns each into a ``RouteRecord`` (route path,
pattern, parameter names, score), and sorts the records so the most
specific route comes first.  Each file is processed independently.
"""

from __future__ import annotations

import logging
from pathlib import Path

from zenroute.config import ManifestConfig
from zenroute.errors import ManifestError, RouteConflictError
from zenroute.pages.discovery import discover_pages, file_path_to_route_path, page_segments
from zenroute.routing.pattern import compile_pattern
from zenroute.routing.route import RouteManifest, RouteRecord
from zenroute.routing.score import score_segments
from zenroute.routing.segments import SegmentKind, parse_route_path

logger = logging.getLogger("zenroute.pages")

_DEFAULT_CONFIG = ManifestConfig()


def build_route_record(
    file_path: str | Path,
    pages_dir: str | Path,
    config: ManifestConfig | None = None,
) -> RouteRecord:
    """Derive, score, and compile the route for one page file.

    A page name that changes kind once written in route path notation
    (a static ``:odd`` reads back as a parameter) is logged, or raised
    as ``ManifestError`` in strict mode.
    """
    cfg = config or _DEFAULT_CONFIG
    route_path = file_path_to_route_path(
        file_path,
        pages_dir,
        extension=cfg.extension,
        index_name=cfg.index_name,
    )
    segments = parse_route_path(route_path)
    declared = page_segments(
        file_path,
        pages_dir,
        extension=cfg.extension,
        index_name=cfg.index_name,
    )
    if [s.kind for s in declared] != [s.kind for s in segments]:
        if cfg.strict:
            msg = f"Page {str(file_path)!r} does not round-trip through route path {route_path!r}"
            raise ManifestError(msg)
        logger.warning("Page %s does not round-trip through route path %s", file_path, route_path)
    compiled = compile_pattern(route_path)
    return RouteRecord(
        route_path=route_path,
        pattern=compiled.source,
        param_names=compiled.param_names,
        score=score_segments(segments),
        source_file=str(file_path),
    )


def generate_manifest(
    pages_dir: str | Path,
    config: ManifestConfig | None = None,
) -> RouteManifest:
    """Build the route manifest for a pages directory.

    Records are sorted by descending score.  The sort is stable, so
    equal-score routes keep discovery order.  A missing pages directory
    produces an empty manifest.

    Raises ``RouteConflictError`` in strict mode when two pages produce
    ambiguous routes.
    """
    cfg = config or _DEFAULT_CONFIG
    pages = discover_pages(
        pages_dir,
        extension=cfg.extension,
        follow_symlinks=cfg.follow_symlinks,
    )

    records: list[RouteRecord] = []
    for page in pages:
        record = build_route_record(page, pages_dir, cfg)
        logger.debug("Route %s (score %d) <- %s", record.route_path, record.score, page)
        records.append(record)

    records.sort(key=lambda r: r.score, reverse=True)
    _check_conflicts(records, strict=cfg.strict)

    logger.info("Generated manifest with %d routes from %s", len(records), pages_dir)
    return RouteManifest(routes=tuple(records))


def route_shape(route_path: str) -> tuple[tuple[SegmentKind, str | None], ...]:
    """Key identifying routes that accept exactly the same paths.

    ``/posts/:id`` and ``/posts/:slug`` share a shape; parameter names
    do not affect matching.
    """
    return tuple(
        (s.kind, s.raw if s.kind is SegmentKind.STATIC else None)
        for s in parse_route_path(route_path)
    )


def _check_conflicts(records: list[RouteRecord], *, strict: bool) -> None:
    """Report pages whose routes are indistinguishable.

    The earlier record always wins resolution; the later one is
    unreachable.
    """
    seen: dict[tuple[tuple[SegmentKind, str | None], ...], RouteRecord] = {}
    for record in records:
        shape = route_shape(record.route_path)
        first = seen.get(shape)
        if first is None:
            seen[shape] = record
            continue
        if strict:
            raise RouteConflictError(record.route_path, first.source_file, record.source_file)
        logger.warning(
            "Route %s from %s is shadowed by %s from %s",
            record.route_path,
            record.source_file,
            first.route_path,
            first.source_file,
        )
