from jdb_client import as_key_seq, base_url, connect, encode_key_seq, url

c = connect("http://127.0.0.1:6001", "n1")


def test_base_url_is_the_endpoint():
    assert base_url(c) == "http://127.0.0.1:6001"


def test_url_escapes_segments():
    assert url(c, ["a", "b c"]) == "http://127.0.0.1:6001/a/b%20c"
    assert url(c, ["a/b", "é?&"]) == "http://127.0.0.1:6001/a%2Fb/%C3%A9%3F%26"


def test_empty_key_seq_gives_trailing_slash():
    assert url(c, []) == "http://127.0.0.1:6001/"


def test_flat_key_is_one_segment():
    assert as_key_seq("foo") == ["foo"]
    assert encode_key_seq("foo bar") == "foo%20bar"
    assert url(c, "get") == "http://127.0.0.1:6001/get"
