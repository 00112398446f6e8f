"""Request target resolution against a route manifest.

Routes are tried in stored order (already sorted by score) and the
first whose pattern matches the pathname wins.  No backtracking across
routes, no hidden state: the same target against the same manifest
always resolves the same way.
"""

import logging
from collections.abc import Iterable

from zenroute.http.query import parse_query_string
from zenroute.routing.route import ResolvedRouteState, RouteManifest, RouteRecord

logger = logging.getLogger("zenroute.routing")


def split_target(target: str) -> tuple[str, str]:
    """Split a request target at the first ``?`` into (pathname, query)."""
    pathname, _, query_string = target.partition("?")
    return pathname, query_string


def match_route(record: RouteRecord, pathname: str) -> dict[str, str] | None:
    """Match *pathname* against a single route record.

    The whole pathname must match; a trailing newline is not absorbed
    by the pattern's ``$``.  Returns the captured parameters on
    success, ``None`` otherwise.
    Raises ``PatternError`` if the record's pattern does not compile.
    """
    match = record.regex.fullmatch(pathname)
    if match is None:
        return None

    params: dict[str, str] = {}
    for name, value in zip(record.param_names, match.groups(), strict=False):
        # Optional catch-all that matched nothing
        if value is None:
            continue
        params[name] = value
    return params


def resolve_route(
    manifest: RouteManifest | Iterable[RouteRecord],
    target: str,
) -> ResolvedRouteState | None:
    """Resolve a request target (``path`` or ``path?query``).

    Returns a ``ResolvedRouteState`` for the highest-priority matching
    route, or ``None`` if nothing matches.  A stored pattern that fails
    to compile raises ``PatternError`` instead of being skipped.
    """
    pathname, query_string = split_target(target)
    query = parse_query_string(query_string)

    for record in manifest:
        params = match_route(record, pathname)
        if params is None:
            continue
        logger.debug("Resolved %r to %s (%s)", target, record.route_path, record.source_file)
        return ResolvedRouteState(
            path=pathname,
            params=params,
            query=query,
            matched_route=record,
        )

    logger.debug("No route matches %r", target)
    return None
