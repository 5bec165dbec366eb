"""``flashapi routes`` — list registered routes.

Resolves an import string to a flashapi App and prints all registered
routes with method, path, and responder name.
"""

import argparse
import sys

from flashapi.cli._resolve import resolve_app


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of METHOD, PATH, and RESPONDER for an app."""
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    table = app.routes
    if table is None or len(table) == 0:
        print("No routes registered.")
        return

    rows = [(route.method, route.path, route.responder) for route in table.routes]

    # Column widths
    max_method = max(max(len(r[0]) for r in rows), 6)  # "METHOD" header
    max_path = max(max(len(r[1]) for r in rows), 4)  # "PATH" header

    fmt = f"{{:<{max_method}}}  {{:<{max_path}}}  {{}}"
    print(fmt.format("METHOD", "PATH", "RESPONDER"))
    sep_len = max_method + max_path + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for method, path, responder in rows:
        print(fmt.format(method, path, responder))
