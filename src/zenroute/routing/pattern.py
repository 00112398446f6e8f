"""Route path to regular expression compilation.

Each route path compiles to an anchored ``re`` pattern source with one
capture group per parameter segment, in left-to-right order::

    "/"               -> ^/$
    "/posts/:id"      -> ^/posts/([^/]+)/?$
    "/docs/*path"     -> ^/docs/(.+)/?$
    "/*slug?"         -> ^(?:/(.+))?/?$

Compilation never fails for a route path.  Turning a stored pattern
source back into a regex can, and raises ``PatternError``.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from zenroute.errors import PatternError
from zenroute.routing.segments import SegmentKind, param_names, parse_route_path

ROOT_PATTERN = r"^/$"

# Regex fragment per parameter kind, separator included
_FRAGMENTS: dict[SegmentKind, str] = {
    SegmentKind.DYNAMIC: r"/([^/]+)",
    SegmentKind.CATCH_ALL: r"/(.+)",
    SegmentKind.OPTIONAL_CATCH_ALL: r"(?:/(.+))?",
}


@dataclass(frozen=True, slots=True)
class CompiledPattern:
    """Pattern source plus the parameter names its groups capture."""

    source: str
    param_names: tuple[str, ...]


def compile_pattern(route_path: str) -> CompiledPattern:
    """Compile a route path into a pattern source and its parameter names."""
    segments = parse_route_path(route_path)
    if not segments:
        return CompiledPattern(source=ROOT_PATTERN, param_names=())

    parts: list[str] = []
    for segment in segments:
        if segment.kind is SegmentKind.STATIC:
            parts.append("/" + re.escape(segment.raw))
        else:
            parts.append(_FRAGMENTS[segment.kind])

    return CompiledPattern(
        source="^" + "".join(parts) + "/?$",
        param_names=param_names(segments),
    )


@lru_cache(maxsize=1024)
def compile_regex(source: str) -> re.Pattern[str]:
    """Compile a stored pattern source, caching by source text.

    Raises ``PatternError`` if *source* is not a valid regular expression.
    """
    try:
        return re.compile(source)
    except re.error as exc:
        raise PatternError(pattern=source, detail=str(exc)) from exc
