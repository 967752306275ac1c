"""Core components."""

from .coordinate import (
    NO_NAMESPACE,
    Coord,
    Coordinate,
    CoordVersion,
    format_coordinate,
    format_version,
    parse_coordinate,
    parse_version,
)
from .enums import Provider, Shape
from .exceptions import (
    ApiError,
    ClearlyDefinedError,
    DeserializationError,
    HttpError,
    HttpStatusError,
)

__all__ = [
    "Shape",
    "Provider",
    # Coordinates
    "Coord",
    "Coordinate",
    "CoordVersion",
    "NO_NAMESPACE",
    "format_coordinate",
    "format_version",
    "parse_coordinate",
    "parse_version",
    # Exceptions
    "ClearlyDefinedError",
    "HttpError",
    "HttpStatusError",
    "ApiError",
    "DeserializationError",
]
