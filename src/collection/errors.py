"""Exceptions raised while fetching and reshaping collection data."""


class CollectionError(Exception):
    """Base exception for collection errors."""

    status_code = 500


class ValidationError(CollectionError):
    """A required request parameter is missing."""

    status_code = 400


class NotFoundError(CollectionError):
    """The requested sub-resource does not exist (e.g. an image position)."""

    status_code = 404


class UpstreamError(CollectionError):
    """The collections website or its JSON API failed us."""

    pass


class FetchError(UpstreamError):
    """Transport failure, non-2xx status or undecodable body."""

    pass


class ParseError(UpstreamError):
    """Upstream data did not have the shape we expect."""

    pass
