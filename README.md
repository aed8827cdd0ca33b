# sponge_tcp

The sending side of a TCP endpoint, in plain Python with no dependencies.
You write bytes into an outbound stream. The sender cuts them into segments
that fit the receiver's advertised window and keeps track of the segments that
have not been acknowledged yet. When the retransmission timer expires, it
resends the oldest outstanding segment and doubles the timeout.

## Installation

```
pip install .
```

## Overview

Module `sponge_tcp.sender`:

- `TCPSender(capacity=64000, retx_timeout=1000, fixed_isn=None)` handles
  segmentation, the window, acknowledgements and retransmission. If you leave
  out `fixed_isn`, it picks a random 32-bit initial sequence number.
  - `fill_window()` sends the SYN first. After that it sends data segments of
    at most 1000 bytes each, as far as the window allows. It adds a FIN once
    the stream has ended and there is room for it.
  - `ack_received(ackno, window_size)` drops every outstanding segment that is
    fully acknowledged and records the new window. A window of zero is treated
    as one byte when sending. An ackno beyond anything sent is ignored.
  - `tick(ms_since_last_tick)` moves time forward. When the timer expires it
    resends the oldest outstanding segment. If the window is nonzero, it also
    counts a consecutive retransmission and doubles the timeout.
  - `send_empty_segment()` queues a segment with no payload and no flags at
    the next sequence number.
  - `bytes_in_flight()`, `consecutive_retransmissions()`,
    `next_seqno_absolute()`, `next_seqno()`, `stream_in()` and
    `segments_out()` (a `collections.deque` of `TCPSegment`).
- `OutboundStream(capacity)` is the bounded byte stream the sender reads
  from. Its methods are `write`, `read`, `end_input`, `eof`, `bytes_written`
  and `buffer_size`. `write` accepts only as many bytes as fit and returns
  that count. Writing after `end_input()` raises `ValueError`.
- `TCPSegment` is a dataclass with `seqno`, `syn`, `fin`, `payload`, `ack`,
  `ackno` and `win`. `length_in_sequence_space()` is the payload length plus
  one each for SYN and FIN.
- `wrap(n, isn)` and `unwrap(seqno, isn, checkpoint)` convert between
  absolute sequence numbers and 32-bit wrapped ones.

Module `sponge_tcp.timer`:

- `RetransmissionTimer(initial_timeout)` has `start`, `stop`,
  `elapse(ms)`, `running`, `expired`, `rto`, `reset_rto`, `double_rto` and
  `halve_rto`.

## Example

```python
from sponge_tcp.sender import TCPSender, wrap

sender = TCPSender(capacity=64000, retx_timeout=1000, fixed_isn=0)

sender.fill_window()                 # sends the SYN
syn = sender.segments_out().popleft()

sender.ack_received(wrap(1, 0), 1000)
sender.stream_in().write(b"hello")
sender.fill_window()                 # sends "hello"
data = sender.segments_out().popleft()
print(data.payload, sender.bytes_in_flight())   # b'hello' 5

sender.tick(1000)                    # timer expires: "hello" is resent
print(sender.consecutive_retransmissions())     # 1
```

## Sequence numbers

```python
from sponge_tcp.sender import wrap, unwrap

wrap(3 * 2**32 + 17, 15)             # 32
unwrap(2**32 - 1, 10, 3 * 2**32)     # 3 * 2**32 - 11
```

`unwrap` returns the absolute sequence number closest to the checkpoint.

## What this package does not do

It is only the sending half of an endpoint. It has no receiver, no
connection state machine, and no code that serialises or parses segments on
the wire. It opens no sockets. Segments are placed in `segments_out()`, and
your own code has to deliver them.

## Running the tests

```
pip install .[test]
pytest
```