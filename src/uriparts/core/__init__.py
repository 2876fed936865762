"""src/uriparts/core/__init__.py

URI record, parser and builder.
"""

from .builder import UriBuilder
from .parser import MAX_PORT, UriParser, decompose
from .uri import Uri, authority

__all__ = ["Uri", "authority", "UriParser", "decompose", "MAX_PORT", "UriBuilder"]
