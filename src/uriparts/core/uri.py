"""src/uriparts/core/uri.py

Decomposed URI record for uriparts.
"""

from dataclasses import dataclass
from typing import Iterable, Optional

from uriparts.utils.validators import validate_scheme, validate_scheme_one_of

__all__ = ["Uri", "authority"]


@dataclass(frozen=True)
class Uri:
    """
    Immutable, decomposed URI.

    Per RFC 3986 a URI has five parts: scheme, authority, path, query and
    fragment. The authority (``userinfo@host:port``) is stored split into its
    components and can be regenerated with :meth:`generate_authority`.

    ``None`` means the component was not present in the source text, which is
    not the same as an empty string. ``host`` is always present.

    Attributes:
        scheme: Token before ``://`` (e.g. "https").
        userinfo: Text before the first ``@`` of the authority.
        host: Registered name or address, "" when unspecified.
        port: Port number in ``0..65535``.
        path: Path after the authority, without its leading "/".
        query: Text between ``?`` and ``#`` (or end).
        fragment: Text after the last ``#``.

    Example::

        >>> uri = Uri.from_str("https://github.com/rust-lang/rust")
        >>> uri.host
        'github.com'
    """

    scheme: Optional[str] = None
    userinfo: Optional[str] = None
    host: str = ""
    port: Optional[int] = None
    path: Optional[str] = None
    query: Optional[str] = None
    fragment: Optional[str] = None

    @classmethod
    def from_str(cls, text: str) -> "Uri":
        """Parse ``text`` into a Uri. See :func:`uriparts.core.parser.decompose`."""
        # pylint: disable=import-outside-toplevel,cyclic-import
        from uriparts.core.parser import decompose

        return decompose(text)

    def generate_authority(self) -> str:
        """
        Generate the authority for this URI.

        Separators are only emitted for components that are present, and no
        encoding is applied.

        Returns:
            ``userinfo@host:port`` with absent parts left out.
        """
        parts = []
        if self.userinfo is not None:
            parts.append(f"{self.userinfo}@")

        parts.append(self.host)

        if self.port is not None:
            parts.append(f":{self.port}")

        return "".join(parts)

    @property
    def authority(self) -> str:
        """``userinfo@host:port`` for this URI."""
        return self.generate_authority()

    def validate_scheme(self) -> "Uri":
        """Validate the scheme is ASCII alphabetic. Returns self."""
        return validate_scheme(self)

    def validate_scheme_one_of(self, allowed: Iterable[str]) -> "Uri":
        """Validate the scheme is one of ``allowed``. Returns self."""
        return validate_scheme_one_of(self, allowed)


def authority(uri: Uri) -> str:
    """Return the ``userinfo@host:port`` authority of ``uri``."""
    return uri.generate_authority()
