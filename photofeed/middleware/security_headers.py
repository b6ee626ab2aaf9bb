"""Security headers middleware for a JSON-only API.

Responses never render HTML, so the CSP denies everything except the
interactive docs, which are served from the same origin.
Uses raw ASGI (no BaseHTTPMiddleware).
"""

from typing import Callable

API_SECURITY_HEADERS: tuple[tuple[bytes, bytes], ...] = (
    (b"x-content-type-options", b"nosniff"),
    (b"x-frame-options", b"DENY"),
    (b"referrer-policy", b"no-referrer"),
    (b"strict-transport-security", b"max-age=31536000; includeSubDomains"),
    (b"cache-control", b"no-store"),
)

_DOCS_PREFIXES = ("/docs", "/redoc", "/openapi.json")


def SecurityHeadersMiddleware(app: Callable) -> Callable:
    """Set API security headers on every HTTP response unless already present."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        is_docs = scope.get("path", "").startswith(_DOCS_PREFIXES)

        async def send_wrapper(message: dict) -> None:
            if message["type"] == "http.response.start":
                headers = list(message.get("headers", []))
                present = {name.lower() for name, _ in headers}
                for name, value in API_SECURITY_HEADERS:
                    if name not in present:
                        headers.append((name, value))
                if not is_docs and b"content-security-policy" not in present:
                    headers.append((b"content-security-policy", b"default-src 'none'"))
                message["headers"] = headers
            await send(message)

        await app(scope, receive, send_wrapper)

    return asgi_app
