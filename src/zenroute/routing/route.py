"""RouteRecord, RouteManifest, and ResolvedRouteState frozen dataclasses.

The dict forms (``to_dict`` / ``from_dict``) are the serialization
contract for handing a manifest to another process.  Field names there
are camelCase and stable.
"""

from __future__ import annotations

import json
import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from zenroute.errors import ManifestError
from zenroute.http.query import QueryParams
from zenroute.routing.pattern import compile_regex


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """A compiled route for one page file.

    Created during manifest generation, never mutated afterwards.

    Attributes:
        route_path: Route path notation (e.g. ``/posts/:id``).
        pattern: Regex source compiled from ``route_path``.
        param_names: Captured parameter names, in group order.
        score: Specificity score; higher is tried first.
        source_file: Path of the page file this route came from.
    """

    route_path: str
    pattern: str
    param_names: tuple[str, ...]
    score: int
    source_file: str

    @property
    def regex(self) -> re.Pattern[str]:
        """The compiled ``pattern``.  Raises ``PatternError`` if malformed."""
        return compile_regex(self.pattern)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.route_path,
            "regex": self.pattern,
            "paramNames": list(self.param_names),
            "score": self.score,
            "filePath": self.source_file,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RouteRecord:
        """Rebuild a record from its ``to_dict`` form.

        Raises ``ManifestError`` on missing keys or wrong types.
        """
        if not isinstance(data, Mapping):
            msg = f"Malformed route record: expected an object, got {type(data).__name__}"
            raise ManifestError(msg)
        if isinstance(data.get("paramNames"), str):
            msg = "Malformed route record: 'paramNames' must be a list"
            raise ManifestError(msg)
        try:
            record = cls(
                route_path=data["path"],
                pattern=data["regex"],
                param_names=tuple(data["paramNames"]),
                score=data["score"],
                source_file=data["filePath"],
            )
        except (KeyError, TypeError) as exc:
            msg = f"Malformed route record: {exc}"
            raise ManifestError(msg) from exc

        if not isinstance(record.route_path, str) or not record.route_path.startswith("/"):
            msg = f"Route path must start with '/', got {record.route_path!r}"
            raise ManifestError(msg)
        if not isinstance(record.pattern, str) or not isinstance(record.source_file, str):
            msg = f"Malformed route record for {record.route_path!r}"
            raise ManifestError(msg)
        if not all(isinstance(name, str) for name in record.param_names):
            msg = f"Parameter names must be strings for {record.route_path!r}"
            raise ManifestError(msg)
        if isinstance(record.score, bool) or not isinstance(record.score, int):
            msg = f"Score must be an integer for {record.route_path!r}"
            raise ManifestError(msg)
        return record


@dataclass(frozen=True, slots=True)
class RouteManifest:
    """Priority-ordered route table for a page tree.

    ``routes`` is sorted by descending score; equal scores keep discovery
    order.  Read-only once built; regenerate it when the page set changes.
    """

    routes: tuple[RouteRecord, ...] = ()
    generated_at: datetime = field(default_factory=_utcnow)

    def __iter__(self) -> Iterator[RouteRecord]:
        return iter(self.routes)

    def __len__(self) -> int:
        return len(self.routes)

    def find(self, route_path: str) -> RouteRecord | None:
        """Return the first record with this exact route path, if any."""
        for record in self.routes:
            if record.route_path == route_path:
                return record
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "routes": [record.to_dict() for record in self.routes],
            "generatedAt": int(self.generated_at.timestamp() * 1000),
        }

    def to_json(self, indent: int | None = None) -> str:
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RouteManifest:
        """Rebuild a manifest from its ``to_dict`` form.

        Stored route order is kept as is; it is not re-sorted.
        """
        try:
            raw_routes = data["routes"]
            generated_ms = data["generatedAt"]
        except (KeyError, TypeError) as exc:
            msg = f"Malformed manifest: {exc}"
            raise ManifestError(msg) from exc

        if not isinstance(raw_routes, list):
            msg = "Manifest 'routes' must be a list"
            raise ManifestError(msg)
        if isinstance(generated_ms, bool) or not isinstance(generated_ms, int | float):
            msg = "Manifest 'generatedAt' must be a number of milliseconds"
            raise ManifestError(msg)

        return cls(
            routes=tuple(RouteRecord.from_dict(item) for item in raw_routes),
            generated_at=datetime.fromtimestamp(generated_ms / 1000, UTC),
        )

    @classmethod
    def from_json(cls, text: str) -> RouteManifest:
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"Manifest is not valid JSON: {exc}"
            raise ManifestError(msg) from exc
        if not isinstance(data, dict):
            msg = "Manifest JSON must be an object"
            raise ManifestError(msg)
        return cls.from_dict(data)


@dataclass(frozen=True, slots=True)
class ResolvedRouteState:
    """Result of resolving a request target against a manifest.

    Attributes:
        path: The pathname that was matched (query string removed).
        params: Captured path parameters.  Optional captures that did
            not participate in the match are absent, not empty.
        query: Parsed query string, last value wins.
        matched_route: The winning route record.
    """

    path: str
    params: dict[str, str] = field(default_factory=dict)
    query: QueryParams = field(default_factory=QueryParams)
    matched_route: RouteRecord | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "params": dict(self.params),
            "query": self.query.to_dict(),
            "matched": self.matched_route.to_dict() if self.matched_route else None,
        }
