"""Exceptions raised by the read-API client and response transformers."""


class ReadApiError(Exception):
    """
    Base exception for every read-API failure.

    Callers that only need to know "the read API call failed" can catch this
    single type; the subclasses below let newer callers tell the failure kinds
    apart without parsing the message.

    Parameters
    ----------
    message : str
        Human-readable description
    cause : BaseException | None
        Underlying exception, if any

    """

    def __init__(self, message: str, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ReadApiTransportError(ReadApiError):
    """Network failure, non-2xx HTTP status, or an undecodable response body."""


class ReadApiResponseError(ReadApiError):
    """Response decoded but carried no usable ``result``."""


class PaginationError(ReadApiError):
    """Mutually exclusive pagination parameters were combined."""

    def __init__(self, message: str = "Pagination Error. Only one pagination parameter supported per query.") -> None:
        super().__init__(message)


class AssetMappingError(ReadApiError):
    """A fetched asset lacks a field required to build a domain view."""
