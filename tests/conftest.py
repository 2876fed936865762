import pytest

from uriparts import Uri


@pytest.fixture
def full_uri():
    """Fixture providing a record with every component set."""
    return Uri(
        scheme="https",
        userinfo="username:password",
        host="github.com",
        port=443,
        path="path/to",
        query="query=foo",
        fragment="fragment",
    )
