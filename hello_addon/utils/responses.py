from typing import Any

from fastapi.responses import JSONResponse, PlainTextResponse

# Sent with every add-on resource so Stremio web and desktop clients can read it
ADDON_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "*",
}


def addon_response(content: Any) -> JSONResponse:
    """200 JSON response carrying the add-on CORS headers."""
    return JSONResponse(status_code=200, content=content, headers=dict(ADDON_HEADERS))


def not_found_response() -> PlainTextResponse:
    """Terminal fallback: plain text, no add-on headers."""
    return PlainTextResponse("404 Not Found", status_code=404)
