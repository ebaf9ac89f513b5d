"""JSON encoding of cache records."""

import json
from collections.abc import Sequence
from typing import Any

from infra_common.exceptions import DeserializationError, SerializationError


def encode_single(key: str, value: Any) -> bytes:
    try:
        return json.dumps(value).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(key, cause=e) from e


def encode_multiple(key: str, values: Sequence[Any]) -> bytes:
    # str and bytes are sequences too, but never a record list
    if not isinstance(values, Sequence) or isinstance(values, (str, bytes, bytearray)):
        raise SerializationError(
            key, cause=TypeError(f"expected a sequence, got {type(values).__name__}")
        )
    return encode_single(key, list(values))


def decode_single(key: str, raw: bytes | str) -> Any:
    try:
        return json.loads(raw)
    except ValueError as e:
        raise DeserializationError(key, cause=e) from e


def decode_multiple(key: str, raw: bytes | str) -> list[Any]:
    result = decode_single(key, raw)
    if not isinstance(result, list):
        raise DeserializationError(
            key, cause=TypeError(f"expected a JSON array, got {type(result).__name__}")
        )
    return result
