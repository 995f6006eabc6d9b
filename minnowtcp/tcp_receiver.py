"""The receiving half of a TCP endpoint."""

from __future__ import annotations

from minnowtcp.byte_stream import ByteStream
from minnowtcp.messages import TCPReceiverMessage, TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

MAX_WINDOW_SIZE = 65535
_MASK64 = (1 << 64) - 1


class TCPReceiver:
    """Feed incoming segments into a reassembler and produce acknowledgments."""

    def __init__(self, reassembler: Reassembler) -> None:
        self._reassembler = reassembler
        self._zero_point = Wrap32(0)
        self._syn = False

    def receive(self, message: TCPSenderMessage) -> None:
        """Insert the segment's payload at its stream index."""
        if message.syn:
            self._syn = True
            self._zero_point = message.seqno
        if message.rst:
            self.stream().set_error()
        if not self._syn:
            return
        absolute = message.seqno.unwrap(self._zero_point, self.stream().bytes_pushed())
        index = (absolute - 1 + int(message.syn)) & _MASK64
        self._reassembler.insert(index, message.payload, message.fin)

    def send(self) -> TCPReceiverMessage:
        """Build the acknowledgment to send back to the peer's sender."""
        stream = self.stream()
        ackno = None
        if self._syn:
            ackno = Wrap32.wrap(
                stream.bytes_pushed() + 1 + int(stream.is_closed()), self._zero_point
            )
        return TCPReceiverMessage(
            ackno=ackno,
            window_size=min(stream.available_capacity(), MAX_WINDOW_SIZE),
            rst=stream.has_error(),
        )

    def reassembler(self) -> Reassembler:
        return self._reassembler

    def stream(self) -> ByteStream:
        """The inbound byte stream."""
        return self._reassembler.output()