"""Request body size limit middleware.

Rejects bodies larger than the upload cap plus a fixed allowance for
multipart framing (boundaries, part headers, other form fields). Handles
both Content-Length and chunked bodies. Raw ASGI.
"""

import json
from typing import Any, Callable

from template_generator.middleware._headers import get_header

MULTIPART_OVERHEAD_BYTES = 64 * 1024


async def _send_413(send: Callable, max_bytes: int, actual: int | None = None) -> None:
    """Send 413 in the API error envelope."""
    details: dict[str, Any] = {"max_bytes": max_bytes}
    if actual is not None:
        details["content_length"] = actual
    body = json.dumps(
        {
            "success": False,
            "error": {
                "error": f"Request body must be at most {max_bytes} bytes",
                "status": 413,
                "details": details,
            },
        }
    ).encode()
    await send({
        "type": "http.response.start",
        "status": 413,
        "headers": [
            (b"content-type", b"application/json"),
            (b"content-length", str(len(body)).encode()),
        ],
    })
    await send({"type": "http.response.body", "body": body, "more_body": False})


def _replay(chunks: list[bytes]) -> Callable:
    """receive() that hands buffered chunks back to the app in order."""
    index = 0

    async def receive() -> dict:
        nonlocal index
        if index < len(chunks):
            body = chunks[index]
            index += 1
            return {"type": "http.request", "body": body, "more_body": index < len(chunks)}
        return {"type": "http.request", "body": b"", "more_body": False}

    return receive


def RequestSizeLimitMiddleware(
    app: Callable,
    max_bytes: int,
    overhead_bytes: int = MULTIPART_OVERHEAD_BYTES,
) -> Callable:
    """Reject requests whose body exceeds max_bytes + overhead_bytes. Raw ASGI."""
    limit = max_bytes + overhead_bytes

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        content_length = get_header(scope, "content-length")
        if content_length is not None:
            try:
                length = int(content_length)
            except ValueError:
                length = None
            if length is not None and length > limit:
                await _send_413(send, max_bytes, length)
                return
            await app(scope, receive, send)
            return

        if scope.get("method") in ("GET", "HEAD", "OPTIONS", "DELETE"):
            await app(scope, receive, send)
            return

        # No Content-Length (chunked): buffer while counting.
        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            if message["type"] != "http.request":
                continue
            body = message.get("body", b"")
            total += len(body)
            if total > limit:
                await _send_413(send, max_bytes, total)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        await app(scope, _replay(chunks), send)

    return asgi_app
