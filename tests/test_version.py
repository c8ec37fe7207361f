import pytest

from httptypes.version import Version


@pytest.mark.parametrize(
    ("version", "text"),
    [
        (Version.HTTP0_9, "HTTP/0.9"),
        (Version.HTTP1_0, "HTTP/1.0"),
        (Version.HTTP1_1, "HTTP/1.1"),
        (Version.HTTP2_0, "HTTP/2"),
        (Version.HTTP3_0, "HTTP/3"),
    ],
)
def test_as_ref(version, text):
    assert version.__str__() == text
    assert Version.parse(text) is version


def test_to_string():
    parsed = [
        Version.parse(text)
        for text in ("HTTP/0.9", "HTTP/1.0", "HTTP/1.1", "HTTP/2", "HTTP/3")
    ]
    output = "{} {} {} {} {}".format(*parsed)
    assert output == "HTTP/0.9 HTTP/1.0 HTTP/1.1 HTTP/2 HTTP/3"


def test_ord():
    http0_9 = Version.parse("HTTP/0.9")
    http1_0 = Version.parse("HTTP/1.0")
    http1_1 = Version.parse("HTTP/1.1")
    http2 = Version.parse("HTTP/2")
    http3 = Version.parse("HTTP/3")
    assert http3 > http2
    assert http2 > http1_1
    assert http1_1 > http1_0
    assert http1_0 > http0_9
    assert http0_9 <= http0_9
    assert http2.__lt__(http1_1) is False
    assert http1_1.__lt__(http2) is True


def test_sorted_order():
    shuffled = [
        Version.parse(text)
        for text in ("HTTP/2", "HTTP/0.9", "HTTP/3", "HTTP/1.1", "HTTP/1.0")
    ]
    assert sorted(shuffled) == [
        Version.HTTP0_9,
        Version.HTTP1_0,
        Version.HTTP1_1,
        Version.HTTP2_0,
        Version.HTTP3_0,
    ]


def test_serde_equivalent():
    assert str(Version.HTTP3_0) == "HTTP/3"
    assert Version.parse("HTTP/1.1") is Version.HTTP1_1


@pytest.mark.parametrize("version", list(Version))
def test_parse_round_trip(version):
    assert Version.parse(str(version)) is version


@pytest.mark.parametrize("text", ["HTTP/2.0", "http/1.1", "", "HTTP/4"])
def test_parse_invalid(text):
    with pytest.raises(ValueError):
        Version.parse(text)