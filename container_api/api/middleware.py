"""Request middleware parsing JSON bodies ahead of routing."""

from __future__ import annotations

import json
import logging
from typing import Any

from fastapi import status
from starlette.datastructures import Headers
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from .errors import api_error_response

logger = logging.getLogger(__name__)


class MalformedJsonBodyError(ValueError):
    """Raised when a JSON body is not a strict JSON object or array."""


def _is_json_media_type(content_type: str) -> bool:
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def _reject_constant(constant_name: str) -> Any:
    raise MalformedJsonBodyError(f"non-standard JSON constant {constant_name}")


def api_parse_json_body(body_bytes: bytes) -> Any:
    """Parse a request body in strict mode.

    Only a top-level object or array is accepted, and the `NaN`/`Infinity`
    extensions are rejected.

    Args:
        body_bytes: Raw request body.

    Returns:
        Any: Parsed `dict` or `list`.

    Raises:
        ValueError: Raised when the body is not strict JSON.
    """

    document = json.loads(body_bytes, parse_constant=_reject_constant)
    if not isinstance(document, (dict, list)):
        raise MalformedJsonBodyError("top-level JSON value must be an object or array")
    return document


class JsonBodyMiddleware:
    """Parse JSON request bodies and reject malformed or oversized ones.

    The body is read in chunks and the request is refused with 413 as soon as
    the running size passes the limit. The parsed document is exposed as
    `request.state.json_body`, `None` when the request carries no JSON body.
    Downstream handlers receive the buffered body unchanged.
    """

    def __init__(self, app: ASGIApp, body_limit_bytes: int):
        if body_limit_bytes < 1:
            raise ValueError("body_limit_bytes must be >= 1")
        self.app = app
        self._body_limit_bytes = body_limit_bytes

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        scope.setdefault("state", {})["json_body"] = None
        headers = Headers(scope=scope)
        if not _is_json_media_type(headers.get("content-type", "")):
            await self.app(scope, receive, send)
            return

        declared_length = headers.get("content-length")
        if declared_length is not None and declared_length.isdigit() and int(declared_length) > self._body_limit_bytes:
            await self._send_too_large(scope, receive, send)
            return

        chunks: list[bytes] = []
        received_bytes = 0
        more_body = True
        while more_body:
            message = await receive()
            if message["type"] == "http.disconnect":
                return
            chunk = message.get("body", b"")
            received_bytes += len(chunk)
            if received_bytes > self._body_limit_bytes:
                await self._send_too_large(scope, receive, send)
                return
            chunks.append(chunk)
            more_body = message.get("more_body", False)
        body_bytes = b"".join(chunks)

        if body_bytes.strip():
            try:
                scope["state"]["json_body"] = api_parse_json_body(body_bytes)
            except ValueError as error:
                logger.info("Rejected malformed JSON body on %s %s: %s", scope["method"], scope["path"], error)
                response = api_error_response(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    message="malformed JSON request body",
                )
                await response(scope, receive, send)
                return

        body_replayed = False

        async def replay_receive() -> Message:
            nonlocal body_replayed
            if not body_replayed:
                body_replayed = True
                return {"type": "http.request", "body": body_bytes, "more_body": False}
            return await receive()

        await self.app(scope, replay_receive, send)

    async def _send_too_large(self, scope: Scope, receive: Receive, send: Send) -> None:
        logger.info("Rejected oversized JSON body on %s %s", scope["method"], scope["path"])
        response = api_error_response(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            message="request body too large",
        )
        await response(scope, receive, send)
