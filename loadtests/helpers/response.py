"""Response error extraction for load test observability.

The review endpoints answer 404 with an empty body, so most failures carry
no detail. Handles the two shapes that can carry one:

- FastAPI validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Unhandled errors (500): plain text from the server
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response."""
    text = getattr(response, "text", "") or ""
    if not text:
        return "(empty response body)"

    try:
        body = response.json()
    except ValueError:
        return text[:300]

    if isinstance(body, dict) and isinstance(body.get("detail"), list):
        parts = []
        for err in body["detail"]:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])

    return str(body)[:300]
