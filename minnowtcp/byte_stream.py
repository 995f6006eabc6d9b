"""A bounded in-memory byte stream with a writing and a reading side."""

from __future__ import annotations


class ByteStream:
    """Bytes are pushed in at one end and popped out at the other, up to a fixed capacity."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._buffer = bytearray()
        self._pushed = 0
        self._popped = 0
        self._closed = False
        self._error = False

    # Writing side

    def push(self, data: bytes) -> None:
        """Push as much of ``data`` as the available capacity allows."""
        accepted = data[: self.available_capacity()]
        self._buffer += accepted
        self._pushed += len(accepted)

    def close(self) -> None:
        """Signal that nothing more will be written."""
        self._closed = True

    def is_closed(self) -> bool:
        return self._closed

    def available_capacity(self) -> int:
        return self.capacity - len(self._buffer)

    def bytes_pushed(self) -> int:
        """Total number of bytes accepted by the stream so far."""
        return self._pushed

    # Reading side

    def peek(self) -> bytes:
        """Return the bytes currently buffered, without removing them."""
        return bytes(self._buffer)

    def pop(self, length: int) -> None:
        """Remove up to ``length`` bytes from the front of the buffer."""
        count = min(length, len(self._buffer))
        del self._buffer[:count]
        self._popped += count

    def is_finished(self) -> bool:
        """True once the stream is closed and fully drained."""
        return not self._buffer and self._closed

    def bytes_buffered(self) -> int:
        return len(self._buffer)

    def bytes_popped(self) -> int:
        return self._popped

    # Error state

    def set_error(self) -> None:
        self._error = True

    def has_error(self) -> bool:
        return self._error


def read(stream: ByteStream, max_len: int) -> bytes:
    """Peek and pop up to ``max_len`` bytes from ``stream``."""
    out = bytearray()
    while stream.bytes_buffered() and len(out) < max_len:
        view = stream.peek()
        if not view:
            raise RuntimeError("peek() returned nothing while bytes are buffered")
        chunk = view[: max_len - len(out)]
        out += chunk
        stream.pop(len(chunk))
    return bytes(out)