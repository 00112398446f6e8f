"""zenroute — file-system routing core for page trees.

Turns a directory of ``.zen`` page files into a score-ordered route
manifest and resolves request targets against it.

Basic usage::

    from zenroute import generate_manifest, resolve_route

    manifest = generate_manifest("pages")
    state = resolve_route(manifest, "/posts/42?sort=new")
    if state is not None:
        state.matched_route.source_file  # "pages/posts/[id].zen"
        state.params                     # {"id": "42"}
        state.query["sort"]              # "new"
"""

__version__ = "0.1.0-dev"
__all__ = [
    "ConfigurationError",
    "ManifestConfig",
    "ManifestError",
    "PatternError",
    "QueryParams",
    "ResolvedRouteState",
    "RouteConflictError",
    "RouteManifest",
    "RouteRecord",
    "ZenrouteError",
    "generate_manifest",
    "resolve_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import zenroute`` fast while providing a clean top-level API.
    """
    if name == "ManifestConfig":
        from zenroute.config import ManifestConfig

        return ManifestConfig

    if name == "QueryParams":
        from zenroute.http.query import QueryParams

        return QueryParams

    if name in ("ResolvedRouteState", "RouteManifest", "RouteRecord"):
        from zenroute.routing import route as _route

        return getattr(_route, name)

    if name == "generate_manifest":
        from zenroute.pages.manifest import generate_manifest

        return generate_manifest

    if name == "resolve_route":
        from zenroute.routing.resolver import resolve_route

        return resolve_route

    if name in (
        "ConfigurationError",
        "ManifestError",
        "PatternError",
        "RouteConflictError",
        "ZenrouteError",
    ):
        from zenroute import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
