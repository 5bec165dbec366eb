"""``flashapi run`` — start a server for an app."""

import argparse
import dataclasses
import logging
import sys

from flashapi.cli._resolve import resolve_app
from flashapi.errors import ConfigurationError


def run_server(args: argparse.Namespace) -> None:
    """Resolve ``args.app`` and serve it with the requested adapter.

    CLI flags override app config. Configuration errors (no routes,
    unregistered responders, unknown adapter) exit with status 1.
    """
    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if getattr(args, "debug", False):
        app.config = dataclasses.replace(app.config, debug=True)

    level = (args.log_level or app.config.log_level).upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    adapter = args.adapter or app.config.adapter
    host = args.host or app.config.host
    port = args.port or app.config.port

    try:
        app.freeze()
        server = app.adapter(adapter, host=host, port=port)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"flashapi {adapter} server running on {host}:{port}", file=sys.stderr)
    try:
        server.start()
    except KeyboardInterrupt:
        server.stop()
