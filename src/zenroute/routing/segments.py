"""Segment classification for page file names and route paths.

Two notations describe the same four segment kinds:

    bracket (file names)    route path
    ``about``               ``about``      static
    ``[id]``                ``:id``        dynamic
    ``[...rest]``           ``*rest``      catch-all
    ``[[...rest]]``         ``*rest?``     optional catch-all

``classify_segment`` reads the bracket form, ``parse_route_path``
reads the route path form.  Both produce ``ParsedSegment`` values.
"""

import re
from dataclasses import dataclass
from enum import Enum

# Bracket forms, checked in this order.  Names may not contain brackets.
_OPTIONAL_CATCH_ALL_RE = re.compile(r"^\[\[\.\.\.([^\[\]]+)\]\]$")
_CATCH_ALL_RE = re.compile(r"^\[\.\.\.([^\[\]]+)\]$")
_DYNAMIC_RE = re.compile(r"^\[(?!\.\.\.)([^\[\]]+)\]$")


class SegmentKind(Enum):
    """How a single route path segment matches request path text."""

    STATIC = "static"
    DYNAMIC = "dynamic"
    CATCH_ALL = "catch_all"
    OPTIONAL_CATCH_ALL = "optional_catch_all"


@dataclass(frozen=True, slots=True)
class ParsedSegment:
    """A classified segment of a route.

    Static:             ``posts``     (param_name=None)
    Dynamic:            ``:id``       (param_name="id")
    Catch-all:          ``*path``     (param_name="path")
    Optional catch-all: ``*path?``    (param_name="path")

    ``raw`` is the segment text as it was read.
    """

    kind: SegmentKind
    raw: str
    param_name: str | None = None

    @property
    def is_param(self) -> bool:
        return self.kind is not SegmentKind.STATIC


def classify_segment(segment: str) -> ParsedSegment:
    """Classify one bracket-notation segment (no slashes).

    Anything that is not exactly one of the recognised bracket forms is
    static text, brackets and all::

        "[[...slug]]" -> OPTIONAL_CATCH_ALL, "slug"
        "[...path]"   -> CATCH_ALL, "path"
        "[id]"        -> DYNAMIC, "id"
        "[id"         -> STATIC
    """
    match = _OPTIONAL_CATCH_ALL_RE.match(segment)
    if match:
        return ParsedSegment(SegmentKind.OPTIONAL_CATCH_ALL, segment, match.group(1))

    match = _CATCH_ALL_RE.match(segment)
    if match:
        return ParsedSegment(SegmentKind.CATCH_ALL, segment, match.group(1))

    match = _DYNAMIC_RE.match(segment)
    if match:
        return ParsedSegment(SegmentKind.DYNAMIC, segment, match.group(1))

    return ParsedSegment(SegmentKind.STATIC, segment)


def segment_notation(segment: ParsedSegment) -> str:
    """Render a parsed segment in route path notation."""
    match segment.kind:
        case SegmentKind.OPTIONAL_CATCH_ALL:
            return f"*{segment.param_name}?"
        case SegmentKind.CATCH_ALL:
            return f"*{segment.param_name}"
        case SegmentKind.DYNAMIC:
            return f":{segment.param_name}"
        case _:
            return segment.raw


def parse_route_path(route_path: str) -> list[ParsedSegment]:
    """Parse a route path string into segments.

    Examples::

        "/"              -> []
        "/posts/:id"     -> [STATIC "posts", DYNAMIC "id"]
        "/docs/*path"    -> [STATIC "docs", CATCH_ALL "path"]
        "/*slug?"        -> [OPTIONAL_CATCH_ALL "slug"]
    """
    segments: list[ParsedSegment] = []
    for part in route_path.split("/"):
        if not part:
            continue
        if part.startswith("*") and part.endswith("?") and len(part) > 2:
            segments.append(ParsedSegment(SegmentKind.OPTIONAL_CATCH_ALL, part, part[1:-1]))
        elif part.startswith("*") and len(part) > 1:
            segments.append(ParsedSegment(SegmentKind.CATCH_ALL, part, part[1:]))
        elif part.startswith(":") and len(part) > 1:
            segments.append(ParsedSegment(SegmentKind.DYNAMIC, part, part[1:]))
        else:
            segments.append(ParsedSegment(SegmentKind.STATIC, part))
    return segments


def param_names(segments: list[ParsedSegment]) -> tuple[str, ...]:
    """Parameter names in left-to-right capture order."""
    return tuple(s.param_name for s in segments if s.param_name is not None)
