"""Cookie header parsing for inbound requests."""


def parse_cookies(header: str | None) -> dict[str, str]:
    """``"a=1; b=2"`` -> ``{"a": "1", "b": "2"}``.

    Segments without ``=`` or without a name are dropped; a missing
    header gives ``{}``.
    """
    cookies: dict[str, str] = {}
    for segment in (header or "").split(";"):
        name, sep, value = segment.partition("=")
        name = name.strip()
        if sep and name:
            cookies[name] = value.strip()
    return cookies
