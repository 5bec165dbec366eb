"""Development server for the ASGI adapter.

Builds a pounce ASGI server around a live ASGI callable.
"""

from typing import Any


def build_pounce_server(
    asgi_app: Any,
    host: str,
    port: int,
    *,
    workers: int = 1,
    reload: bool = False,
) -> Any:
    """Create a pounce server for the given ASGI callable.

    Pounce's ``run()`` takes an import string (e.g., ``"myapp:app"``),
    but adapters hold a live callable. We use ``pounce.Server`` directly;
    the caller runs it with ``server.run()``.
    """
    from pounce.config import ServerConfig
    from pounce.server import Server

    config = ServerConfig(
        host=host,
        port=port,
        workers=workers,
        reload=reload,
    )
    return Server(config, asgi_app)
