"""Route specificity scoring.

Higher scores are tried first during resolution.  The score has no
meaning beyond ordering.
"""

from collections.abc import Sequence

from zenroute.routing.segments import ParsedSegment, SegmentKind

# Points per segment kind
SEGMENT_SCORES: dict[SegmentKind, int] = {
    SegmentKind.STATIC: 10,
    SegmentKind.DYNAMIC: 5,
    SegmentKind.CATCH_ALL: 1,
    SegmentKind.OPTIONAL_CATCH_ALL: 0,
}

# Extra points per static segment
STATIC_BONUS = 2

# The root route has no segments and is scored separately
ROOT_SCORE = 100


def score_segments(segments: Sequence[ParsedSegment]) -> int:
    """Compute the specificity score of a parsed route.

    ``/posts/:id`` scores ``10 + 5 + 2 = 17`` and so outranks ``/:slug``
    (``5``); ``/a/b/:id`` (``29``) outranks ``/a/:x/:y`` (``22``).
    """
    if not segments:
        return ROOT_SCORE

    score = 0
    static_count = 0
    for segment in segments:
        score += SEGMENT_SCORES[segment.kind]
        if segment.kind is SegmentKind.STATIC:
            static_count += 1
    return score + STATIC_BONUS * static_count
