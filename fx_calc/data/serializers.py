"""JSON serialization of calculation inputs and results."""

from typing import Any

import orjson


class SerializationError(Exception):
    """Raised when a payload cannot be encoded or decoded."""
    pass


def parse_json_payload(raw_data: str | bytes) -> dict[str, Any]:
    """
    Parse a raw JSON document of calculator parameters.

    Args:
        raw_data: JSON object as str or bytes

    Returns:
        Parsed dictionary

    Raises:
        SerializationError: If the payload is not valid JSON or not an object
    """
    try:
        payload = orjson.loads(raw_data)
    except orjson.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}")

    if not isinstance(payload, dict):
        raise SerializationError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload


def serialize_result(result: Any, pretty: bool = False) -> bytes:
    """
    Encode a calculation result (dataclass, dict or list) as JSON bytes.

    Non-finite floats are emitted as null by orjson.
    """
    option = orjson.OPT_INDENT_2 if pretty else 0
    try:
        return orjson.dumps(result, option=option)
    except TypeError as e:
        raise SerializationError(f"Result is not serializable: {e}")
