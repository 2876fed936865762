"""src/uriparts/core/parser.py

Delimiter-search URI parser.

Scheme, userinfo and host/port are found scanning left-to-right for the first
delimiter. Fragment and query are found scanning right-to-left for the last
one, so a stray ``#`` or ``?`` inside the path does not end it early.
"""

import logging
from typing import Optional, Tuple

from uriparts.core.uri import Uri
from uriparts.exceptions import MalformedPortError, UriTooLongError
from uriparts.utils.abnf import is_digits

__all__ = ["MAX_PORT", "UriParser", "decompose"]

logger = logging.getLogger(__name__)

MAX_PORT = 65535


class UriParser:
    """
    RFC 3986 URI decomposer.

    Handles:
    - Absolute URIs (``scheme://authority/path?query#fragment``).
    - Network-path references (``//authority/path``).
    - Scheme-less references (``authority/path``).
    - ``host:port`` with no path.
    """

    def __init__(self, max_length: Optional[int] = None):
        self.max_length = max_length

    def parse(self, text: str) -> Uri:
        """
        Decompose ``text`` into a :class:`Uri`.

        Returns:
            The decomposed record.

        Raises:
            TypeError: If ``text`` is not a str.
            UriTooLongError: If ``text`` is longer than ``max_length``.
            MalformedPortError: If the port is not a decimal in 0..65535.
        """
        if not isinstance(text, str):
            raise TypeError(f"URI must be str, not {type(text).__name__}")

        if self.max_length is not None and len(text) > self.max_length:
            raise UriTooLongError(
                f"URI exceeds maximum length of {self.max_length} characters"
            )

        scheme, rest = self._split_scheme(text)

        # Network-path reference: "//" without an explicit scheme
        if scheme is None and rest.startswith("//"):
            rest = rest[2:]

        userinfo, rest = self._split_userinfo(rest)
        host, port, rest = self._split_host_port(rest)

        fragment: Optional[str] = None
        query: Optional[str] = None
        if rest:
            fragment, rest = self._split_fragment(rest)
            query, rest = self._split_query(rest)

        uri = Uri(
            scheme=scheme,
            userinfo=userinfo,
            host=host,
            port=port,
            path=rest or None,
            query=query,
            fragment=fragment,
        )
        logger.debug("Decomposed %r into %r", text, uri)
        return uri

    @staticmethod
    def _split_scheme(text: str) -> Tuple[Optional[str], str]:
        """Split on the first "://"."""
        scheme, sep, rest = text.partition("://")
        if not sep:
            return None, text
        return scheme, rest

    @staticmethod
    def _split_userinfo(rest: str) -> Tuple[Optional[str], str]:
        """Split on the first "@"; later "@" characters are left alone."""
        userinfo, sep, remainder = rest.partition("@")
        if not sep:
            return None, rest
        return userinfo, remainder

    def _split_host_port(self, rest: str) -> Tuple[str, Optional[int], str]:
        """
        Split host, port and the text after the authority.

        When a ":" has no "/" after it, everything after the ":" is the port
        and the remainder is empty.
        """
        if ":" in rest:
            host, _, after_colon = rest.partition(":")
            port_text, _, remainder = after_colon.partition("/")
            return host, self._parse_port(port_text), remainder

        if "/" in rest:
            host, _, remainder = rest.partition("/")
            return host, None, remainder

        return rest, None, ""

    @staticmethod
    def _parse_port(port_text: str) -> int:
        if not is_digits(port_text):
            logger.debug("Malformed port %r", port_text)
            raise MalformedPortError(port_text)

        # int() rejects digit strings past the interpreter's length limit
        significant = port_text.lstrip("0") or "0"
        if len(significant) > len(str(MAX_PORT)) or int(significant) > MAX_PORT:
            logger.debug("Port %.20s out of range", port_text)
            raise MalformedPortError(
                port_text, f"Port exceeds maximum of {MAX_PORT}"
            )
        return int(significant)

    @staticmethod
    def _split_fragment(rest: str) -> Tuple[Optional[str], str]:
        """Split on the last "#"."""
        remainder, sep, fragment = rest.rpartition("#")
        if not sep:
            return None, rest
        return fragment, remainder

    @staticmethod
    def _split_query(rest: str) -> Tuple[Optional[str], str]:
        """Split on the last "?"."""
        remainder, sep, query = rest.rpartition("?")
        if not sep:
            return None, rest
        return query, remainder


_default_parser = UriParser()


def decompose(text: str) -> Uri:
    """
    Decompose a URI string into its components.

    Example::

        >>> decompose("https://github.com/sigmavirus24")
        Uri(scheme='https', userinfo=None, host='github.com', port=None, path='sigmavirus24', query=None, fragment=None)

    Raises:
        MalformedPortError: If the port is not a decimal in 0..65535.
    """
    return _default_parser.parse(text)
