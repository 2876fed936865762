"""tests/unit/test_validators.py"""

import pytest

from uriparts.core.parser import decompose
from uriparts.core.uri import Uri
from uriparts.exceptions import (
    DisallowedSchemeError,
    InvalidSchemeCharacterError,
    SchemeValidationError,
)
from uriparts.utils.validators import validate_scheme, validate_scheme_one_of


@pytest.mark.parametrize("scheme", ["https", "HTTP", "git", "a", None])
def test_validate_scheme_accepts(scheme):
    """Test that alphabetic or absent schemes pass and return the record."""
    uri = Uri(scheme=scheme, host="example.com")
    assert validate_scheme(uri) is uri


@pytest.mark.parametrize(
    "scheme, character",
    [
        ("h0tps", "0"),
        ("git+ssh", "+"),
        ("x-y", "-"),
        ("a.b", "."),
        ("htt p", " "),
        ("héllo", "é"),
    ],
)
def test_validate_scheme_rejects(scheme, character):
    """Test that non-ALPHA characters are rejected, even legal RFC ones."""
    with pytest.raises(InvalidSchemeCharacterError) as exc_info:
        validate_scheme(Uri(scheme=scheme))
    assert exc_info.value.character == character
    assert exc_info.value.scheme == scheme
    assert f"'{character}' is not valid" in str(exc_info.value)


def test_validate_scheme_parsed():
    """Test validating a decomposed URI with a digit in its scheme."""
    with pytest.raises(SchemeValidationError):
        decompose("h0tps://github.com").validate_scheme()


def test_validate_scheme_one_of_accepts():
    """Test that an allowed scheme passes and returns the record."""
    uri = decompose("https://github.com/rust-lang/rust")
    assert validate_scheme_one_of(uri, {"https", "http", "git"}) is uri


def test_validate_scheme_one_of_rejects():
    """Test that a scheme outside the allow-list is rejected."""
    uri = decompose("https+git://github.com/rust-lang/rust")
    with pytest.raises(DisallowedSchemeError) as exc_info:
        uri.validate_scheme_one_of({"https", "http", "git"})
    assert exc_info.value.scheme == "https+git"
    assert exc_info.value.allowed == frozenset({"https", "http", "git"})
    assert "https+git" in str(exc_info.value)


def test_validate_scheme_one_of_case_sensitive():
    """Test that matching is exact and case-sensitive."""
    with pytest.raises(DisallowedSchemeError):
        validate_scheme_one_of(Uri(scheme="HTTPS"), ["https"])


def test_validate_scheme_one_of_no_scheme():
    """Test that a record without a scheme always passes."""
    uri = decompose("//example.com/")
    assert validate_scheme_one_of(uri, []) is uri


def test_validate_scheme_one_of_accepts_iterables():
    """Test that any iterable of strings works as the allow-list."""
    uri = Uri(scheme="git")
    assert validate_scheme_one_of(uri, (s for s in ["http", "git"])) is uri


def test_chaining():
    """Test that both checks chain on the record."""
    uri = decompose("https://example.com")
    assert uri.validate_scheme().validate_scheme_one_of(["https"]) is uri
