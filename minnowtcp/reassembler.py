"""Reassembly of indexed, possibly overlapping substrings into a byte stream."""

from __future__ import annotations

from minnowtcp.byte_stream import ByteStream


class Reassembler:
    """Put substrings back in order and write them to an output stream."""

    def __init__(self, output: ByteStream) -> None:
        self._output = output
        self._next = 0
        self._end: int | None = None
        self._pending: dict[int, int] = {}

    def insert(self, first_index: int, data: bytes, is_last_substring: bool) -> None:
        """Insert ``data`` starting at stream index ``first_index``.

        Bytes beyond the output's available capacity are discarded; the stream
        is closed once its last byte has been written.
        """
        if is_last_substring:
            self._end = first_index + len(data)

        window_end = self._next + self._output.available_capacity()
        start = max(first_index, self._next)
        stop = min(first_index + len(data), window_end)
        for index in range(start, stop):
            self._pending.setdefault(index, data[index - first_index])

        ready = bytearray()
        while self._next in self._pending:
            ready.append(self._pending.pop(self._next))
            self._next += 1
        self._output.push(bytes(ready))

        if self._next == self._end:
            self._output.close()

    def count_bytes_pending(self) -> int:
        """Number of bytes held here that cannot yet be written."""
        return len(self._pending)

    def output(self) -> ByteStream:
        """The stream the reassembled bytes are written to."""
        return self._output