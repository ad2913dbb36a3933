"""
HTTP Infrastructure - Backend gateway and wire codec.

This module provides:
- RequestGateway: httpx-based gateway (implements IRequestGateway)
- encode_json_body / decode_json_response / decode_image: shared codec
"""

from .codec import decode_image, decode_json_object, decode_json_response, encode_json_body
from .gateway import RequestGateway, get_request_gateway

__all__ = [
    "RequestGateway",
    "get_request_gateway",
    "encode_json_body",
    "decode_json_response",
    "decode_json_object",
    "decode_image",
]
