"""Fetch and reshape museum collection data."""

from .client import LouvreClient
from .errors import (
    CollectionError,
    FetchError,
    NotFoundError,
    ParseError,
    UpstreamError,
    ValidationError,
)
from .service import CollectionService
from .settings import CollectionSettings

__all__ = [
    "CollectionError",
    "CollectionService",
    "CollectionSettings",
    "FetchError",
    "LouvreClient",
    "NotFoundError",
    "ParseError",
    "UpstreamError",
    "ValidationError",
]
