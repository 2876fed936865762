"""src/uriparts/exceptions.py

uriparts Exceptions hierarchy.
"""

from typing import AbstractSet, Optional


class UriError(Exception):
    """Base exception for all uriparts errors."""


class UriParseError(UriError, ValueError):
    """General exception for URI decomposition errors."""


class MalformedPortError(UriParseError):
    """
    The text between ``:`` and ``/`` in the authority is not a port.

    A port must be ASCII decimal digits with a value in ``0..65535``.
    """

    def __init__(self, port_text: str, message: Optional[str] = None):
        self.port_text = port_text
        super().__init__(message or f"'{port_text}' is not a valid port")


class UriTooLongError(UriParseError):
    """Input exceeds the parser's configured maximum length."""


class SchemeValidationError(UriError, ValueError):
    """Base exception for scheme validation failures."""


class InvalidSchemeCharacterError(SchemeValidationError):
    """A scheme contains a character outside ASCII ALPHA."""

    def __init__(self, scheme: str, character: str):
        self.scheme = scheme
        self.character = character
        super().__init__(f"'{character}' is not valid in a URI scheme ('{scheme}')")


class DisallowedSchemeError(SchemeValidationError):
    """A scheme is not in the caller's set of allowed schemes."""

    def __init__(self, scheme: str, allowed: AbstractSet[str]):
        self.scheme = scheme
        self.allowed = allowed
        super().__init__(f"'{scheme}' is not in the set of allowed schemes")


class UriBuildError(UriError, ValueError):
    """Invalid argument passed to a UriBuilder setter."""
