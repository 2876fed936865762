"""src/uriparts/utils/__init__.py"""

from .validators import validate_scheme, validate_scheme_one_of

__all__ = ["validate_scheme", "validate_scheme_one_of"]
