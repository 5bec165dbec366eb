"""flashapi CLI — serve an app or list its routes.

Entry point registered as ``flashapi`` in ``pyproject.toml``::

    [project.scripts]
    flashapi = "flashapi.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``flashapi`` command."""
    parser = argparse.ArgumentParser(
        prog="flashapi",
        description="flashapi — a minimal HTTP API framework.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- flashapi run -----------------------------------------------------
    run_parser = subparsers.add_parser("run", help="Start a server for an app")
    run_parser.add_argument("app", help="Import string (e.g. myapp:app)")
    run_parser.add_argument(
        "--adapter",
        default=None,
        help="Server adapter name (default: the app's config, usually asgi)",
    )
    run_parser.add_argument("--host", default=None, help="Bind host address")
    run_parser.add_argument("--port", type=int, default=None, help="Bind port number")
    run_parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (debug, info, warning, error)",
    )
    run_parser.add_argument(
        "--debug",
        action="store_true",
        help="Include exception messages in 500 responses",
    )

    # -- flashapi routes --------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered routes")
    routes_parser.add_argument("app", help="Import string (e.g. myapp:app)")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "run":
        from flashapi.cli._run import run_server

        run_server(args)
    elif args.command == "routes":
        from flashapi.cli._routes import run_routes

        run_routes(args)
