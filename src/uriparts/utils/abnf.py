"""utils/abnf.py

Core character classes from RFC 3986 Appendix A and RFC 2234 Section 6.1.

RFC 3986 builds on the RFC 2234 core rules (``ALPHA``, ``DIGIT``); keeping
both in one place lets validators share them.
"""

import string

__all__ = ["ALPHA", "DIGIT", "UNRESERVED", "is_digits"]

# ALPHA = %x41-5A / %x61-7A
ALPHA = frozenset(string.ascii_letters)

# DIGIT = %x30-39
DIGIT = frozenset(string.digits)

# unreserved = ALPHA / DIGIT / "-" / "." / "_" / "~"
UNRESERVED = ALPHA | DIGIT | frozenset("-._~")


def is_digits(text: str) -> bool:
    """Return True if ``text`` is non-empty and made only of ASCII DIGIT."""
    return bool(text) and all(char in DIGIT for char in text)
