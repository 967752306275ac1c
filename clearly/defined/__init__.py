"""Clearly Defined - Client library for the ClearlyDefined definitions API."""

from .api import classify_response, decode_api_error, definitions, parse_definitions
from .clients import DefinitionsClient
from .config import DEFAULT_ROOT, DEV_ROOT, MAX_COORDINATES_PER_REQUEST
from .core import (
    ApiError,
    ClearlyDefinedError,
    Coord,
    Coordinate,
    CoordVersion,
    DeserializationError,
    HttpError,
    HttpStatusError,
    Provider,
    Shape,
    format_coordinate,
    parse_coordinate,
)
from .models import (
    Coordinates,
    Definition,
    Described,
    FileEntry,
    GetResponse,
    Licensed,
    LicenseScore,
)
from .runtime.rest import HTTPClient, HTTPRequest, HTTPResponse

__version__ = "0.1.0"

__all__ = [
    # Core enums
    "Shape",
    "Provider",
    # Coordinates
    "Coord",
    "Coordinate",
    "CoordVersion",
    "format_coordinate",
    "parse_coordinate",
    # Config
    "DEFAULT_ROOT",
    "DEV_ROOT",
    "MAX_COORDINATES_PER_REQUEST",
    # Models
    "Coordinates",
    "Definition",
    "Described",
    "Licensed",
    "LicenseScore",
    "FileEntry",
    "GetResponse",
    # Requests
    "definitions",
    "classify_response",
    "decode_api_error",
    "parse_definitions",
    "HTTPRequest",
    "HTTPResponse",
    # Clients
    "HTTPClient",
    "DefinitionsClient",
    # Exceptions
    "ClearlyDefinedError",
    "HttpError",
    "HttpStatusError",
    "ApiError",
    "DeserializationError",
]
