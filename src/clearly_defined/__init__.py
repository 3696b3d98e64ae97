from clearly_defined.core.client import AsyncClient, Client
from clearly_defined.core.coordinates import AnyVersion, Coordinate, CoordVersion, Provider, SemverVersion, Shape
from clearly_defined.core.definitions import (
    MAX_COORDINATES_PER_REQUEST,
    ROOT_URI,
    GetResponse,
    build_get_requests,
)
from clearly_defined.core.http import ApiResponse, HttpRequest, HttpResponse, Method
from clearly_defined.errors import (
    ClearlyDefinedError,
    DecodeError,
    ErrorKind,
    GenericError,
    HttpStatusError,
    TransportError,
)
from clearly_defined.models import Date, DefCoords, Definition, Description, File, License

__all__ = [
    "MAX_COORDINATES_PER_REQUEST",
    "ROOT_URI",
    "AnyVersion",
    "ApiResponse",
    "AsyncClient",
    "ClearlyDefinedError",
    "Client",
    "CoordVersion",
    "Coordinate",
    "Date",
    "DecodeError",
    "DefCoords",
    "Definition",
    "Description",
    "ErrorKind",
    "File",
    "GenericError",
    "GetResponse",
    "HttpRequest",
    "HttpResponse",
    "HttpStatusError",
    "License",
    "Method",
    "Provider",
    "SemverVersion",
    "Shape",
    "TransportError",
    "build_get_requests",
]
