"""Filesystem-based route manifest generation.

The ``pages/`` directory structure defines the route table.

Usage::

    from zenroute.pages import generate_manifest
    from zenroute.routing import resolve_route

    manifest = generate_manifest("pages")
    state = resolve_route(manifest, "/posts/42?sort=new")

Conventions:

    pages/
      index.zen            # /
      about.zen            # /about
      posts/
        index.zen          # /posts
        [id].zen           # /posts/:id
      docs/
        [...path].zen      # /docs/*path
      [[...slug]].zen      # /*slug?   (also matches /)
"""

from zenroute.pages.discovery import discover_pages, file_path_to_route_path, page_segments
from zenroute.pages.manifest import build_route_record, generate_manifest, route_shape

__all__ = [
    "build_route_record",
    "discover_pages",
    "file_path_to_route_path",
    "generate_manifest",
    "page_segments",
    "route_shape",
]
