"""Interpretation of HTTP responses into typed values or classified errors."""

from functools import lru_cache
from typing import Any

import httpx
from pydantic import TypeAdapter, ValidationError

from served_sdk.exceptions import (
    ServedAPIError,
    ServedContentTypeError,
    ServedDeserializationError,
)

SNIPPET_MAX_LENGTH = 200

_PRIMITIVE_DEFAULTS: dict[type, Any] = {int: 0, float: 0.0, bool: False}


def truncate_snippet(text: str, max_length: int = SNIPPET_MAX_LENGTH) -> str:
    """Cut ``text`` to ``max_length`` characters, marking the cut with ``...``."""
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def default_for(target: Any) -> Any:
    """Value returned for 204 / empty bodies: 0, 0.0, False, or None."""
    return _PRIMITIVE_DEFAULTS.get(target)


@lru_cache(maxsize=None)
def _adapter_for(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _ensure_success(response: httpx.Response) -> None:
    if response.is_success:
        return
    body = response.text
    raise ServedAPIError(
        f"API Error: {response.status_code} {response.reason_phrase} - {body}",
        status_code=response.status_code,
        response_content=body,
    )


def _convert_primitive(body: str, target: type) -> Any:
    trimmed = body.strip().strip('"')
    try:
        if target is bool:
            lowered = trimmed.lower()
            if lowered not in ("true", "false"):
                raise ValueError(f"invalid boolean literal {trimmed!r}")
            return lowered == "true"
        return target(trimmed)
    except ValueError as e:
        raise ServedDeserializationError(
            f"Could not convert response to {target.__name__}: {e}. "
            f"Content: {truncate_snippet(body)}",
            snippet=truncate_snippet(body),
        ) from e


def interpret_response(response: httpx.Response, target: Any = None) -> Any:
    """Turn ``response`` into a value of ``target`` or raise.

    Checks run in a fixed order: status, 204, empty body, content type,
    then decoding. A JSON ``null`` body decodes to the default.
    ``target=None`` only checks the status.

    Args:
        response: A fully read httpx response.
        target: Expected result type (``str``, ``int``, a pydantic model,
            ``list[Model]``, ...).

    Returns:
        The decoded value, or the target's default for 204/empty bodies.

    Raises:
        ServedAPIError: Non-2xx status.
        ServedContentTypeError: 2xx with a declared non-JSON content type.
        ServedDeserializationError: Body does not match ``target``.
    """
    _ensure_success(response)

    if target is None:
        return None

    if response.status_code == 204:
        return default_for(target)

    body = response.text
    if not body or not body.strip():
        return default_for(target)

    content_type = response.headers.get("content-type")
    if content_type is not None:
        media_type = content_type.split(";", 1)[0].strip()
        if "json" not in media_type:
            snippet = truncate_snippet(body)
            raise ServedContentTypeError(
                f"API Returned Non-JSON Content ({media_type}): {snippet}",
                status_code=response.status_code,
                response_content=snippet,
                content_type=media_type,
            )

    if target is str:
        return body

    if target in _PRIMITIVE_DEFAULTS:
        return _convert_primitive(body, target)

    if body.strip() == "null":
        return default_for(target)

    try:
        return _adapter_for(target).validate_json(body)
    except ValidationError as e:
        snippet = truncate_snippet(body)
        raise ServedDeserializationError(
            f"JSON Parse Error: {e}. Content: {snippet}",
            snippet=snippet,
        ) from e
