"""utils/validators.py

Scheme validation utilities for uriparts.
"""

import logging
from typing import TYPE_CHECKING, Iterable

from uriparts.exceptions import DisallowedSchemeError, InvalidSchemeCharacterError
from uriparts.utils.abnf import ALPHA

if TYPE_CHECKING:
    from uriparts.core.uri import Uri

__all__ = ["validate_scheme", "validate_scheme_one_of"]

logger = logging.getLogger(__name__)


def validate_scheme(uri: "Uri") -> "Uri":
    """
    Check that the scheme is made only of ASCII letters.

    RFC 3986 also allows digits, ``+``, ``-`` and ``.`` after the first
    letter; those are rejected here on purpose.

    Args:
        uri: Record to check. A record without a scheme always passes.

    Returns:
        The same record, for chaining.

    Raises:
        InvalidSchemeCharacterError: On the first non-ALPHA character.
    """
    if uri.scheme is None:
        return uri

    for character in uri.scheme:
        if character not in ALPHA:
            logger.debug("Rejected scheme %r: bad character %r", uri.scheme, character)
            raise InvalidSchemeCharacterError(uri.scheme, character)
    return uri


def validate_scheme_one_of(uri: "Uri", allowed: Iterable[str]) -> "Uri":
    """
    Check that the scheme is one of ``allowed`` (case-sensitive).

    Args:
        uri: Record to check. A record without a scheme always passes.
        allowed: Accepted scheme strings.

    Returns:
        The same record, for chaining.

    Raises:
        DisallowedSchemeError: If the scheme is not in ``allowed``.
    """
    if uri.scheme is None:
        return uri

    allowed_schemes = frozenset(allowed)
    if uri.scheme not in allowed_schemes:
        logger.debug("Rejected scheme %r: not in %s", uri.scheme, sorted(allowed_schemes))
        raise DisallowedSchemeError(uri.scheme, allowed_schemes)
    return uri
