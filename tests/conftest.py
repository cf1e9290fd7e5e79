import pytest

from tinyquery import QueryString, StaticSource

ENCODED = (
    "http%3A%2F%2Fwww.example.com%2Fpage%2F%3Ff%C3%B6o%3Dbar%20%C3%AFs%20"
    "%C3%A1%20pr%C3%A9tty%20c%C3%B6%C3%B6l%20w%C4%93bsite!"
)
DECODED = "http://www.example.com/page/?föo=bar ïs á prétty cööl wēbsite!"


@pytest.fixture
def qs() -> QueryString:
    """Engine with an empty default source, so omitted text means ""."""
    return QueryString(StaticSource(""))


@pytest.fixture
def encoded() -> str:
    return ENCODED


@pytest.fixture
def decoded() -> str:
    return DECODED
