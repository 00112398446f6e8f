"""``zenroute routes`` — list routes in priority order.

Builds the manifest for a pages directory and prints a table of
SCORE, PATH, and source file, or the manifest JSON.
"""

import argparse
import sys

from zenroute.config import ManifestConfig
from zenroute.errors import ManifestError
from zenroute.pages.manifest import generate_manifest


def run_routes(args: argparse.Namespace) -> None:
    """List the routes generated for ``args.pages_dir``.

    Exits with code 1 when strict mode rejects the page tree.
    """
    try:
        manifest = generate_manifest(args.pages_dir, ManifestConfig(strict=args.strict))
    except ManifestError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.json:
        print(manifest.to_json(indent=2))
        return

    if not manifest.routes:
        print("No routes found.")
        return

    rows = [(str(r.score), r.route_path, r.source_file) for r in manifest.routes]

    # Column widths
    max_score = max(max(len(r[0]) for r in rows), 5)  # "SCORE" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:>{max_score}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("SCORE", "PATH", "FILE"))
    sep_len = max_score + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for score, path, source in rows:
        print(fmt.format(score, path, source))
