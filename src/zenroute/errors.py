"""zenroute exception hierarchy.

Shared across discovery, manifest building, and resolution so every
module raises and catches the same types.
"""

from dataclasses import dataclass


class ZenrouteError(Exception):
    """Base for all zenroute-specific errors."""


class ConfigurationError(ZenrouteError):
    """Raised when a ``ManifestConfig`` is invalid.

    Typically raised from ``ManifestConfig.__post_init__`` at construction.
    """


@dataclass(frozen=True, slots=True)
class PatternError(ZenrouteError):
    """A stored route matcher could not be compiled.

    Raised at resolution time.  Fatal for that resolution call: it means
    the manifest was built (or edited) outside the route path grammar.
    """

    pattern: str
    detail: str = ""

    def __str__(self) -> str:
        if self.detail:
            return f"Invalid route pattern {self.pattern!r}: {self.detail}"
        return f"Invalid route pattern {self.pattern!r}"


class ManifestError(ZenrouteError):
    """A serialized manifest or route record is malformed."""


class RouteConflictError(ManifestError):
    """Two discovered pages produce ambiguous routes (strict mode only).

    Carries both source files so the caller can point at the collision.
    """

    def __init__(self, route_path: str, first: str, second: str) -> None:
        self.route_path = route_path
        self.first = first
        self.second = second
        super().__init__(
            f"Ambiguous route {route_path!r}: {first!r} and {second!r} "
            "match the same paths with the same priority"
        )
