"""Routing — segment classification, scoring, pattern compilation, and resolution.

Route records are built once per page file and collected into an
immutable, score-ordered manifest that resolution scans in order.
"""

from zenroute.routing.pattern import CompiledPattern, compile_pattern, compile_regex
from zenroute.routing.resolver import match_route, resolve_route, split_target
from zenroute.routing.route import ResolvedRouteState, RouteManifest, RouteRecord
from zenroute.routing.score import score_segments
from zenroute.routing.segments import (
    ParsedSegment,
    SegmentKind,
    classify_segment,
    parse_route_path,
    segment_notation,
)

__all__ = [
    "CompiledPattern",
    "ParsedSegment",
    "ResolvedRouteState",
    "RouteManifest",
    "RouteRecord",
    "SegmentKind",
    "classify_segment",
    "compile_pattern",
    "compile_regex",
    "match_route",
    "parse_route_path",
    "resolve_route",
    "score_segments",
    "segment_notation",
    "split_target",
]
