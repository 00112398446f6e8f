"""``zenroute resolve`` — resolve one request target against a pages tree."""

import argparse
import json
import sys

from zenroute.errors import PatternError
from zenroute.pages.manifest import generate_manifest
from zenroute.routing.resolver import resolve_route


def run_resolve(args: argparse.Namespace) -> None:
    """Resolve ``args.target`` and print the match.

    Exits with code 1 when no route matches.
    """
    manifest = generate_manifest(args.pages_dir)
    try:
        state = resolve_route(manifest, args.target)
    except PatternError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    route = state.matched_route if state is not None else None
    if state is None or route is None:
        print(f"No route matches {args.target!r}", file=sys.stderr)
        raise SystemExit(1)

    if args.json:
        print(json.dumps(state.to_dict(), indent=2))
        return

    print(f"route:  {route.route_path}")
    print(f"file:   {route.source_file}")
    print(f"score:  {route.score}")
    for name, value in state.params.items():
        print(f"param:  {name} = {value}")
    for name, value in state.query.items():
        print(f"query:  {name} = {value}")
