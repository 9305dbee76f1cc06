"""Catalog failures surfaced to callers of the client and store."""


class CatalogError(Exception):
    """Base class for catalog fetch failures."""


class TransportError(CatalogError):
    """The request failed: connection error, timeout or non-2xx status."""


class DecodeError(CatalogError):
    """The response body was not valid product JSON."""
