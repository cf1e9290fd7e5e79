"""Tests for tinyquery.reader - single, multiple and full lookups."""

import pytest

from tinyquery.errors import QueryDecodeError
from tinyquery.reader import entry_names


class TestGetOne:
    """Test single-key lookup."""

    @pytest.mark.parametrize(
        "text",
        [
            "?foo=bar",
            "?foo=bar&baz=qux",
            "?baz=qux&foo=bar",
            "http://example.com/page/?foo=bar&baz=qux",
            "http://www.example.com?foo=bar&baz=qux",
            "example.com?foo=bar",
        ],
    )
    def test_named_value(self, qs, text):
        assert qs.get_one("foo", text) == "bar"

    def test_missing_key(self, qs):
        assert qs.get_one("foo", "?bar=foo") is False
        assert qs.get_one("foo", "?bar") is False
        assert qs.get_one("foo", "") is False

    @pytest.mark.parametrize(
        "text",
        ["?foo", "http://www.example.com/page/?foo", "?foo&bar", "?foo&bar=baz", "?foo="],
    )
    def test_flag_present(self, qs, text):
        assert qs.get_one("foo", text) is True

    def test_case_insensitive(self, qs):
        assert qs.get_one("FOO", "?foo=bar") == "bar"
        assert qs.get_one("foo", "?FOO=bar") == "bar"

    def test_decodes_value(self, qs, encoded, decoded):
        assert qs.get_one("foo", "?foo=" + encoded) == decoded

    def test_value_may_contain_equals(self, qs):
        assert qs.get_one("foo", "?foo=a=b&c") == "a=b"

    def test_fragment_not_part_of_value(self, qs):
        assert qs.get_one("foo", "/?foo=bar#section") == "bar"

    def test_first_occurrence_wins(self, qs):
        assert qs.get_one("foo", "?foo=1&FOO=2") == "1"

    def test_malformed_escape_raises(self, qs):
        with pytest.raises(QueryDecodeError):
            qs.get_one("foo", "?foo=100%")

    def test_omitted_text_uses_source(self, qs):
        assert qs.get_one("foo") is False


@pytest.mark.parametrize("text", ["   ", "\t", " \n "])
def test_whitespace_only_text_has_no_query(qs, text) -> None:
    assert qs.get_one("foo", text) is False
    assert qs.get_many(["foo"], text) == {"foo": False}
    assert qs.get_all(text) == {}
    assert not qs.has("foo", text)


class TestHas:
    def test_has(self, qs):
        assert qs.has("foo", "?foo")
        assert qs.has("foo", "?a&foo=")
        assert not qs.has("foo", "?bar")

    def test_does_not_decode(self, qs):
        assert qs.has("foo", "?foo=%zz")


class TestGetMany:
    """Test multiple-key lookup."""

    def test_values(self, qs):
        assert qs.get_many(["foo"], "?foo=bar") == {"foo": "bar"}
        assert qs.get_many(["foo", "baz"], "?foo=bar&baz=qux") == {"foo": "bar", "baz": "qux"}
        assert qs.get_many(["foo", "baz"], "?foo=bar&quux=qux") == {"foo": "bar", "baz": False}

    def test_flags(self, qs):
        assert qs.get_many(["foo"], "?foo") == {"foo": True}
        assert qs.get_many(["foo"], "?bar") == {"foo": False}
        assert qs.get_many(["foo", "bar"], "?foo&bar") == {"foo": True, "bar": True}
        assert qs.get_many(["foo", "bar"], "?foo&baz") == {"foo": True, "bar": False}

    def test_keeps_requested_order(self, qs):
        assert list(qs.get_many(["b", "a"], "?a=1&b=2")) == ["b", "a"]

    def test_accepts_any_iterable(self, qs):
        assert qs.get_many(iter(("foo",)), "?foo=1") == {"foo": "1"}

    def test_empty_names(self, qs):
        assert qs.get_many([], "?foo") == {}


class TestGetAll:
    """Test full-query lookup."""

    def test_flags(self, qs):
        assert qs.get_all("?foo&bar") == {"foo": True, "bar": True}

    def test_values(self, qs):
        assert qs.get_all("?foo=bar&baz=qux") == {"foo": "bar", "baz": "qux"}

    @pytest.mark.parametrize(
        "text",
        ["", "/", "?", "http://www.example.com/page/", "http://www.example.com/page/?"],
    )
    def test_no_entries(self, qs, text):
        assert qs.get_all(text) == {}

    def test_preserves_name_case(self, qs):
        assert qs.get_all("?Foo=bar") == {"Foo": "bar"}

    def test_case_variants_resolve_to_first(self, qs):
        assert qs.get_all("?Foo=1&foo=2") == {"Foo": "1", "foo": "1"}

    def test_skips_empty_entries_and_fragment(self, qs):
        assert qs.get_all("?a=1&&b#frag=x") == {"a": "1", "b": True}

    def test_malformed_escape_raises(self, qs):
        with pytest.raises(QueryDecodeError):
            qs.get_all("?a=%zz")
        with pytest.raises(QueryDecodeError):
            qs.get_all("/p?ok=1&bad=%E0%A4")


class TestGetManyErrors:
    def test_malformed_escape_raises(self, qs):
        with pytest.raises(QueryDecodeError):
            qs.get_many(["ok", "bad"], "?ok=1&bad=%zz")

    def test_unrequested_bad_value_is_not_decoded(self, qs):
        assert qs.get_many(["ok"], "?ok=1&bad=%zz") == {"ok": "1"}


def test_entry_names() -> None:
    assert entry_names("/p?a=1&b&c=x=y") == ["a", "b", "c"]
    assert entry_names("/p") == []
    assert entry_names("?") == []
    assert entry_names("?=1&a") == ["a"]
