"""zenroute CLI — inspect route manifests and resolve request targets.

Entry point registered as ``zenroute`` in ``pyproject.toml``::

    [project.scripts]
    zenroute = "zenroute.cli:main"
"""

import argparse
import logging
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``zenroute`` command."""
    parser = argparse.ArgumentParser(
        prog="zenroute",
        description="zenroute — file-system routing for page trees.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and resolution details to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- zenroute routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List routes in priority order")
    routes_parser.add_argument("pages_dir", help="Pages directory")
    routes_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the manifest as JSON",
    )
    routes_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on ambiguous routes instead of warning",
    )

    # -- zenroute resolve -------------------------------------------------
    resolve_parser = subparsers.add_parser("resolve", help="Resolve a request target")
    resolve_parser.add_argument("pages_dir", help="Pages directory")
    resolve_parser.add_argument("target", help="Request target (e.g. /posts/42?sort=new)")
    resolve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the resolved route state as JSON",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "routes":
        from zenroute.cli._routes import run_routes

        run_routes(args)
    elif args.command == "resolve":
        from zenroute.cli._resolve import run_resolve

        run_resolve(args)
