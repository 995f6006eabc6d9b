# minnowtcp

Core pieces of a TCP implementation, in pure Python with no dependencies:

- `minnowtcp.wrapping_integers.Wrap32`: 32-bit sequence numbers that wrap at
  2**32. `Wrap32.wrap(n, zero_point)` turns an absolute sequence number into a
  `Wrap32`; `unwrap(zero_point, checkpoint)` returns the absolute sequence
  number closest to `checkpoint`. `Wrap32 + n` adds modulo 2**32.
- `minnowtcp.byte_stream.ByteStream`: a bounded in-memory byte stream. The
  writing side has `push`, `close`, `is_closed`, `available_capacity` and
  `bytes_pushed`; the reading side has `peek`, `pop`, `is_finished`,
  `bytes_buffered` and `bytes_popped`; `set_error` and `has_error` carry an
  error flag. `push` keeps only as much data as fits in the remaining capacity.
  The helper `read(stream, max_len)` pops and returns up to `max_len` bytes.
- `minnowtcp.reassembler.Reassembler`: puts indexed, possibly overlapping or
  out-of-order substrings back in order and writes them to its output
  `ByteStream`. Bytes beyond the stream's available capacity are discarded, and
  the stream is closed once the last byte has been written.
  `count_bytes_pending()` reports how many bytes are held waiting for a gap to
  be filled.
- `minnowtcp.messages`: the dataclasses `TCPSenderMessage` (`seqno`, `syn`,
  `payload`, `fin`, `rst`, and `sequence_length()`) and `TCPReceiverMessage`
  (`ackno`, `window_size`, `rst`).
- `minnowtcp.tcp_receiver.TCPReceiver`: takes `TCPSenderMessage`s, inserts
  their payloads into a `Reassembler` at the right stream index, and builds
  `TCPReceiverMessage`s with the acknowledgment number and a window size capped
  at 65535. An incoming RST sets the stream's error flag.

## Installing

```
pip install .
```

## Example

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.reassembler import Reassembler
from minnowtcp.wrapping_integers import Wrap32

r = Reassembler(ByteStream(64))
r.insert(3, b"def", True)       # last piece arrives first and is held
r.insert(0, b"abc", False)      # fills the gap; everything is written
print(read(r.output(), 100))    # b"abcdef"
print(r.output().is_finished()) # True

isn = Wrap32(2**32 - 2)
seq = Wrap32.wrap(5, isn)
print(seq.raw_value)            # 3
print(seq.unwrap(isn, 0))       # 5
```

A receiver on top of a reassembler:

```python
from minnowtcp.byte_stream import ByteStream, read
from minnowtcp.messages import TCPSenderMessage
from minnowtcp.reassembler import Reassembler
from minnowtcp.tcp_receiver import TCPReceiver
from minnowtcp.wrapping_integers import Wrap32

receiver = TCPReceiver(Reassembler(ByteStream(64)))
receiver.receive(TCPSenderMessage(seqno=Wrap32(100), syn=True, payload=b"hi"))
reply = receiver.send()
print(reply.ackno.raw_value, reply.window_size)  # 103 62
print(read(receiver.stream(), 10))               # b"hi"
```

## What it does not do

There is no sending side: the package has no TCP sender, so nothing here fills
a peer's window, tracks outstanding segments or retransmits on a timer. It also
does not put segments on a network or read them from one; messages are plain
Python objects passed in and returned by the caller.

## Running the tests

```
pip install .[test]
pytest
```