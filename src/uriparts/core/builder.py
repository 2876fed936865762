"""src/uriparts/core/builder.py

Fluent builder for Uri records.
"""

import logging
from collections.abc import Sequence as SequenceABC
from typing import Mapping, Optional, Sequence

from uriparts.core.uri import Uri
from uriparts.exceptions import UriBuildError

__all__ = ["UriBuilder"]

logger = logging.getLogger(__name__)


class UriBuilder:
    """
    Mutable accumulator for the components of a :class:`Uri`.

    Every ``add_*`` method returns the builder so calls can be chained;
    :meth:`finalize` produces the immutable record. A builder has no locking
    and should be owned by a single caller.

    No percent-encoding is applied to any component.

    Example::

        >>> uri = (
        ...     UriBuilder()
        ...     .add_scheme("https")
        ...     .add_host("example.com")
        ...     .add_path("/index.html")
        ...     .finalize()
        ... )
        >>> uri.path
        'index.html'
    """

    __slots__ = ("scheme", "userinfo", "host", "port", "path", "query", "fragment")

    def __init__(self) -> None:
        self.scheme: Optional[str] = None
        self.userinfo: Optional[str] = None
        self.host: Optional[str] = None
        self.port: Optional[int] = None
        self.path: Optional[str] = None
        self.query: Optional[str] = None
        self.fragment: Optional[str] = None

    def add_scheme(self, scheme: str) -> "UriBuilder":
        """Set the scheme, stored as given."""
        self.scheme = scheme
        return self

    def add_userinfo(self, username: str, password: Optional[str] = None) -> "UriBuilder":
        """
        Set userinfo to ``username`` or ``username:password``.

        Args:
            username: User name, stored as given.
            password: Optional password, stored as given.
        """
        if password is None:
            self.userinfo = username
        else:
            self.userinfo = f"{username}:{password}"
        return self

    def add_host(self, host: str) -> "UriBuilder":
        """Set the host. The value is not validated."""
        self.host = host
        return self

    def add_port(self, port: int) -> "UriBuilder":
        """Set the port, stored as given."""
        self.port = port
        return self

    def add_path(self, path: str) -> "UriBuilder":
        """Set the path, dropping one leading "/" if present."""
        if path.startswith("/"):
            path = path[1:]
        self.path = path
        return self

    def add_query_string(self, query: str) -> "UriBuilder":
        """Set a raw, already-formatted query string."""
        self.query = query
        return self

    def add_query_map(self, params: Mapping[str, str]) -> "UriBuilder":
        """
        Set the query from a mapping as ``key=value`` pairs joined by "&".

        Pairs are emitted in the mapping's iteration order. That order is
        not guaranteed for arbitrary mappings; use :meth:`add_query_list`
        when the order of the generated string matters.

        Args:
            params: Query parameter names and values.
        """
        self.query = "&".join(f"{key}={value}" for key, value in params.items())
        return self

    def add_query_list(self, pairs: Sequence[Sequence[str]]) -> "UriBuilder":
        """
        Set the query from ordered ``[key, value]`` pairs.

        Args:
            pairs: Sequence of two-element sequences, emitted in order.

        Raises:
            UriBuildError: If an item is not a two-element pair.
        """
        parts = []
        for pair in pairs:
            if not isinstance(pair, SequenceABC) or isinstance(pair, str) or len(pair) != 2:
                raise UriBuildError(f"Query parameter must be a [key, value] pair: {pair!r}")
            key, value = pair
            parts.append(f"{key}={value}")
        self.query = "&".join(parts)
        return self

    def add_fragment(self, fragment: str) -> "UriBuilder":
        """Set the fragment, stored as given."""
        self.fragment = fragment
        return self

    def finalize(self) -> Uri:
        """
        Build the immutable :class:`Uri`.

        The builder is left untouched and can keep being used.

        Returns:
            New record with ``host`` defaulting to "".
        """
        uri = Uri(
            scheme=self.scheme,
            userinfo=self.userinfo,
            host=self.host if self.host is not None else "",
            port=self.port,
            path=self.path,
            query=self.query,
            fragment=self.fragment,
        )
        logger.debug("Built %r", uri)
        return uri
