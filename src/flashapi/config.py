"""Application configuration.

AppConfig is a frozen dataclass — immutable after creation, IDE-autocompletable,
no string-key dict lookups.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class AppConfig:
    """Application configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = AppConfig(debug=True, port=8080, adapter="wsgi")
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 3000
    adapter: str = "asgi"

    # Include raw exception messages in 500 bodies (never enable in production)
    debug: bool = False

    # Logging
    log_level: str = "info"

    # Limits
    max_content_length: int = 16 * 1024 * 1024  # 16 MB
