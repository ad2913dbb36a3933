"""
Wire codec - the one shared JSON encoder plus response decoders.

All request bodies go through encode_json_body() whether they come from a
typed request model or a plain mapping.
"""

import io
import json
from functools import lru_cache
from typing import Any, Dict, Mapping, Optional, Type, TypeVar, Union

from PIL import Image  # type: ignore
from pydantic import BaseModel, TypeAdapter, ValidationError  # type: ignore

from core.errors import ParsingFailedError
from core.messages import ErrorMessages

T = TypeVar("T")

# Exceptions Pillow raises for bytes that are not a usable image
IMAGE_DECODE_ERRORS = (OSError, ValueError, Image.DecompressionBombError)


def encode_json_body(
    params: Union[BaseModel, Mapping[str, Any]], path: str = ""
) -> bytes:
    """
    Encode request parameters as a JSON object.

    None fields of request models are left out of the body. NaN and
    infinity are rejected, matching strict JSON.

    Raises:
        ParsingFailedError: If the parameters are not JSON-serializable
    """
    try:
        if isinstance(params, BaseModel):
            payload = params.model_dump(mode="json", exclude_none=True)
        else:
            payload = dict(params)
        return json.dumps(payload, allow_nan=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ParsingFailedError(
            ErrorMessages.BODY_ENCODE_FAILED.format(path=path, error=e), path=path
        ) from e


@lru_cache(maxsize=64)
def _adapter_for(response_type: Any) -> TypeAdapter:
    return TypeAdapter(response_type)


def decode_json_response(content: bytes, response_type: Type[T], path: str = "") -> T:
    """
    Decode a JSON response body into response_type.

    Raises:
        ParsingFailedError: If the body is not valid JSON or does not match the schema
    """
    try:
        return _adapter_for(response_type).validate_json(content)
    except ValidationError as e:
        type_name = getattr(response_type, "__name__", str(response_type))
        raise ParsingFailedError(
            ErrorMessages.RESPONSE_DECODE_FAILED.format(
                path=path, type_name=type_name, error=e.errors()[0]["msg"]
            ),
            path=path,
        ) from e


def decode_json_object(content: bytes, path: str = "") -> Optional[Dict[str, Any]]:
    """
    Decode a JSON body, returning None when it is not a JSON object.

    Raises:
        ParsingFailedError: If the body is not valid JSON
    """
    try:
        data = json.loads(content)
    except ValueError as e:
        raise ParsingFailedError(
            ErrorMessages.RESPONSE_JSON_INVALID.format(path=path, error=e), path=path
        ) from e
    return data if isinstance(data, dict) else None


def decode_image(content: bytes) -> Image.Image:
    """
    Decode image bytes into a fully loaded Pillow image.

    Raises:
        One of IMAGE_DECODE_ERRORS if the bytes are not a decodable image
    """
    image = Image.open(io.BytesIO(content))
    image.load()
    return image
