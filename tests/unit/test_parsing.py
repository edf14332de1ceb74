import click
import pytest

from httpeek.errors import InvalidUrlError, MalformedPairError, ParseError
from httpeek.http.parsing import KV_PAIR, URL, KvPair, ValidatedUrl, parse_kv_pair, validate_url


@pytest.mark.parametrize("token", ["a", "", "abc", "key:value"])
def test_pair_without_separator_fails(token):
    with pytest.raises(MalformedPairError) as exc:
        parse_kv_pair(token)
    assert exc.value.token == token
    assert isinstance(exc.value, ParseError)


def test_pair_key_and_value():
    assert parse_kv_pair("a=1") == KvPair(key="a", value="1")


def test_pair_empty_value():
    assert parse_kv_pair("b=") == KvPair(key="b", value="")


def test_pair_splits_on_first_separator():
    # Base64 padding and query strings keep their '='
    assert parse_kv_pair("token=abc==") == KvPair(key="token", value="abc==")
    assert parse_kv_pair("q=a=b") == KvPair(key="q", value="a=b")


def test_pair_empty_key_is_allowed():
    assert parse_kv_pair("=x") == KvPair(key="", value="x")


@pytest.mark.parametrize("token", ["abc", "", "/relative/path", "http://", "https://:80/"])
def test_invalid_urls(token):
    with pytest.raises(InvalidUrlError):
        validate_url(token)


@pytest.mark.parametrize("token", [
    "http://abc.xyz",
    "https://httpbin.org/post",
    "HTTPS://Example.COM:8443/a/../b?x=1#frag",
    "http://127.0.0.1:8080",
])
def test_valid_urls_returned_unchanged(token):
    url = validate_url(token)
    assert isinstance(url, ValidatedUrl)
    assert url == token


def test_url_param_type_reports_usage_error():
    with pytest.raises(click.BadParameter) as exc:
        URL.convert("abc", None, None)
    assert "abc" in exc.value.message


def test_kv_param_type_reports_usage_error():
    with pytest.raises(click.BadParameter):
        KV_PAIR.convert("novalue", None, None)
    assert KV_PAIR.convert("a=1", None, None) == KvPair("a", "1")
