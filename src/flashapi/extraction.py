"""Parameter extraction — one mapping of request parameters for responders.

Read-only methods see the query string only. Body-bearing methods see
the query string overlaid with the JSON body.
"""

from typing import Any

from flashapi.http.request import Request

BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def extract_params(request: Request) -> dict[str, Any]:
    """Build the parameter dict for *request*.

    For POST/PUT/PATCH, JSON body keys win over query keys. A body that
    is not JSON, or not valid JSON, adds nothing.
    """
    params: dict[str, Any] = request.query_params
    if request.method is not None and request.method.upper() in BODY_METHODS:
        params.update(request.json_body())
    return params
