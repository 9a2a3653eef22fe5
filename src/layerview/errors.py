"""Exceptions raised inside layerview.

Capabilities lookups catch these and log them; URL building and session
validation let them reach the caller.
"""

from typing import Optional


class LayerViewError(Exception):
    """Root of the layerview exceptions; ``cause`` keeps the wrapped error."""

    def __init__(self, message: str, cause: Optional[Exception] = None):
        super().__init__(message)
        self.cause = cause


class ServiceError(LayerViewError):
    """The map server answered, but not with what was asked for."""


class LayerNotFoundError(ServiceError):
    """The requested layer is not declared in the capabilities document."""


class ValidationError(LayerViewError):
    """Input values rejected before a lookup or URL is built."""


class NetworkError(LayerViewError):
    """The capabilities request failed at the HTTP level."""


class ParseError(LayerViewError):
    """The capabilities body is not well-formed XML."""


class ConfigurationError(LayerViewError):
    """Viewer settings are incomplete, e.g. a blank server URL or layer name."""
