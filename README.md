# httptypes

Small, dependency-free building blocks for working with HTTP:

- `httptypes.version.Version`: the HTTP protocol versions, ordered oldest to
  newest and rendered as they appear on the wire (`HTTP/1.1`, `HTTP/2`, ...).
- `httptypes.date`: parse and format HTTP dates. IMF-fixdate, RFC 850 and
  asctime are accepted; output is always IMF-fixdate.
- `httptypes.transfer`: the `Transfer-Encoding` and `TE` headers, weighted
  encoding proposals and negotiation.
- `httptypes.upgrade`: a one-shot asyncio channel for handing over an
  upgraded connection.
- `httptypes.utils.HttpError`: the exception raised throughout, carrying the
  HTTP status code (`.status`) the failure should produce.

## Installation

```
pip install httptypes
```

## Examples

### Dates

```python
from httptypes.date import HttpDate, parse_http_date, fmt_http_date

moment = parse_http_date("Sunday, 06-Nov-94 08:49:37 GMT")
assert fmt_http_date(moment) == "Sun, 06 Nov 1994 08:49:37 GMT"

date = HttpDate.parse("Sun Nov  6 08:49:37 1994")
assert str(date) == "Sun, 06 Nov 1994 08:49:37 GMT"
```

`parse_http_date` returns an aware UTC `datetime`. Two-digit years map to
1970 through 2069, and only years 1970 to 9999 are accepted. A date that
cannot be parsed raises `HttpError` with status 400 (`HttpDate.parse`
raises it with status 500). `fmt_http_date` treats a naive `datetime` as UTC
and raises `ValueError` for instants before 1970. `HttpDate` values compare
and sort by the instant they describe.

### Versions

```python
from httptypes.version import Version

assert str(Version.HTTP1_1) == "HTTP/1.1"
assert Version.parse("HTTP/2") > Version.HTTP1_1
```

The members are `HTTP0_9`, `HTTP1_0`, `HTTP1_1`, `HTTP2_0` and `HTTP3_0`.
`Version.parse` raises `ValueError` for any other text.

### Encodings and proposals

```python
from httptypes.transfer.encoding import Encoding
from httptypes.transfer.encoding_proposal import EncodingProposal

assert Encoding.parse(" br ") is Encoding.BROTLI
assert Encoding.parse("unknown") is None

proposal = EncodingProposal.parse("gzip;q=0.5")
assert proposal == Encoding.GZIP
assert proposal.header_value() == "gzip;q=0.500"
```

A weight outside 0.0 to 1.0 (including `-0.0`) raises `HttpError` with
status 500; a malformed `q=` part raises `HttpError` with status 400.

### Negotiating a transfer encoding

```python
from httptypes.transfer.encoding import Encoding
from httptypes.transfer.encoding_proposal import EncodingProposal
from httptypes.transfer.te import TE

te = TE()
te.push(EncodingProposal(Encoding.BROTLI, 0.8))
te.push(EncodingProposal(Encoding.GZIP, 0.4))
te.push(Encoding.IDENTITY)

chosen = te.negotiate([Encoding.BROTLI, Encoding.GZIP])
assert chosen.header_name() == "transfer-encoding"
assert chosen.header_value() == "br"
```

`TE.sort` puts higher weights first; among equal or unweighted entries the
one pushed later comes first. When nothing matches and `te.wildcard` is
false, `negotiate` raises `HttpError` with status 406; with the wildcard set
it picks the first available encoding.

### Reading headers

`TE.from_headers` and `TransferEncoding.from_headers` take a mapping of
header names (matched case-insensitively) to a value or a list of values, or
an object with a `get_all` method such as `email.message.Message`. They
return `None` if the header is absent:

```python
from httptypes.transfer.te import TE
from httptypes.transfer.transfer_encoding import TransferEncoding
from httptypes.transfer.encoding import Encoding

te = TE.from_headers({"TE": ["gzip;q=0.5, br, *"]})
assert te.wildcard
assert [str(p) for p in te] == ["gzip;q=0.500", "br"]
assert te.header_value() == "gzip;q=0.500, br, *"

encoding = TransferEncoding.from_headers({"Transfer-Encoding": "chunked"})
assert encoding == Encoding.CHUNKED
```

For `Transfer-Encoding` the last recognised value wins; if the header is
present but holds no recognised value, `HttpError` is raised.

### Upgrades

```python
import asyncio
from httptypes.upgrade import Connection, channel

async def handover(reader: asyncio.StreamReader, writer: asyncio.StreamWriter):
    sender, receiver = channel()
    await sender.send(Connection(reader, writer))
    conn = await receiver
    async with conn:
        await conn.write(b"ping")
        await conn.flush()
```

A `Sender` may send only once; a second `send` raises `RuntimeError`.

## What this package does not do

It has no request or response types, no header collection of its own, no
body handling and no client or server. It provides the value types above
for use inside such code.

## Running the tests

```
pip install -e .[test]
pytest
```