"""Endpoint definitions and response handling for the ClearlyDefined API."""

from . import definitions
from .responses import classify_response, decode_api_error, parse_definitions

__all__ = [
    "definitions",
    "classify_response",
    "decode_api_error",
    "parse_definitions",
]
