"""Domain errors raised by the catalog services.

Callers translate these into user-facing responses; the services never
retry or swallow them.
"""


class SelectShopError(Exception):
    """Base class for all catalog errors."""


class InvalidArgumentError(SelectShopError, ValueError):
    """A business rule rejected the request."""


class NotFoundError(SelectShopError, LookupError):
    """A referenced product or folder does not exist."""
