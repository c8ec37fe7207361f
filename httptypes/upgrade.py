"""Primitives for upgrading an HTTP exchange to another protocol.

After the handshake a connection becomes a plain byte stream, which is
handed from one side to the other over a single-use channel.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import Any, Generator, Optional, Tuple

__all__ = ["Connection", "Sender", "Receiver", "channel"]


async def _maybe_await(result: Any) -> Any:
    if inspect.isawaitable(result):
        return await result
    return result


class Connection:
    """An upgraded HTTP connection over a reader and a writer.

    The reader needs an async ``read(n)``; the writer needs ``write``,
    ``drain`` and ``close`` in the manner of :class:`asyncio.StreamWriter`.
    """

    __slots__ = ("_reader", "_writer")

    def __init__(self, reader: Any, writer: Any) -> None:
        self._reader = reader
        self._writer = writer

    async def read(self, n: int = -1) -> bytes:
        """Read up to ``n`` bytes, or until end of stream when ``n`` is -1."""
        return await _maybe_await(self._reader.read(n))

    async def write(self, data: bytes) -> int:
        """Write ``data`` and return the number of bytes written."""
        await _maybe_await(self._writer.write(data))
        return len(data)

    async def flush(self) -> None:
        """Flush buffered output to the peer."""
        drain = getattr(self._writer, "drain", None)
        if drain is not None:
            await _maybe_await(drain())

    async def close(self) -> None:
        """Close the writing side and wait until it is closed."""
        await _maybe_await(self._writer.close())
        wait_closed = getattr(self._writer, "wait_closed", None)
        if wait_closed is not None:
            await _maybe_await(wait_closed())

    async def __aenter__(self) -> "Connection":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def __repr__(self) -> str:
        return "Connection(inner=<stream>)"


class Sender:
    """The sending half of an upgrade channel; it may send only once."""

    __slots__ = ("_queue", "_used")

    def __init__(self, queue: asyncio.Queue) -> None:
        self._queue = queue
        self._used = False

    async def send(self, conn: Connection) -> None:
        """Send the connection, consuming this sender."""
        if self._used:
            raise RuntimeError("Sender has already sent a connection")
        self._used = True
        await self._queue.put(conn)

    def __repr__(self) -> str:
        return f"Sender(used={self._used})"


class Receiver:
    """The receiving half of an upgrade channel.

    Awaiting it yields the connection; a ``None`` item in the queue means
    no connection will arrive.
    """

    __slots__ = ("_queue",)

    def __init__(self, queue: asyncio.Queue) -> None:
        self._queue = queue

    def __await__(self) -> Generator[Any, None, Optional[Connection]]:
        return self._queue.get().__await__()

    def __repr__(self) -> str:
        return "Receiver()"


def channel() -> Tuple[Sender, Receiver]:
    """Create a connected sender and receiver pair."""
    queue: asyncio.Queue = asyncio.Queue()
    return Sender(queue), Receiver(queue)