"""The sending half of a TCP endpoint, with sequence-number helpers and an outbound byte stream."""

import secrets
from collections import deque
from dataclasses import dataclass, replace

from .timer import RetransmissionTimer

DEFAULT_CAPACITY = 64000
MAX_PAYLOAD_SIZE = 1000
TIMEOUT_DFLT = 1000

_MOD = 1 << 32
_MASK = _MOD - 1


def wrap(n, isn):
    """Convert absolute sequence number ``n`` to a 32-bit relative seqno."""
    return (isn + n) & _MASK


def unwrap(seqno, isn, checkpoint):
    """Return the absolute sequence number for ``seqno`` that is closest to ``checkpoint``."""
    offset = (seqno - isn) & _MASK
    candidate = (checkpoint & ~_MASK) + offset
    options = [c for c in (candidate - _MOD, candidate, candidate + _MOD) if c >= 0]
    return min(options, key=lambda c: (abs(c - checkpoint), c))


@dataclass
class TCPSegment:
    """A TCP segment as produced by the sender."""

    seqno: int = 0
    syn: bool = False
    fin: bool = False
    payload: bytes = b""
    ack: bool = False
    ackno: int = 0
    win: int = 0

    def length_in_sequence_space(self):
        """Payload length plus one for each of SYN and FIN."""
        return len(self.payload) + int(self.syn) + int(self.fin)


class OutboundStream:
    """A bounded in-memory byte stream written by the application and read by the sender."""

    def __init__(self, capacity):
        self._capacity = capacity
        self._buffer = bytearray()
        self._ended = False
        self._bytes_written = 0
        self._bytes_read = 0

    def write(self, data):
        """Append as much of ``data`` as fits; return the number of bytes accepted."""
        if self._ended:
            raise ValueError("stream input has ended")
        accepted = bytes(data[: self._capacity - len(self._buffer)])
        self._buffer += accepted
        self._bytes_written += len(accepted)
        return len(accepted)

    def read(self, size):
        """Remove and return up to ``size`` bytes from the front of the stream."""
        out = bytes(self._buffer[:size])
        del self._buffer[:size]
        self._bytes_read += len(out)
        return out

    def end_input(self):
        """Signal that no more data will be written."""
        self._ended = True

    def eof(self):
        """True once input has ended and everything has been read."""
        return self._ended and not self._buffer

    def bytes_written(self):
        return self._bytes_written

    def buffer_size(self):
        return len(self._buffer)


class TCPSender:
    """Splits an outbound byte stream into segments, tracks them and retransmits on timeout."""

    def __init__(self, capacity=DEFAULT_CAPACITY, retx_timeout=TIMEOUT_DFLT, fixed_isn=None):
        self._isn = secrets.randbits(32) if fixed_isn is None else fixed_isn & _MASK
        self._initial_retransmission_timeout = retx_timeout
        self._stream = OutboundStream(capacity)
        self._timer = RetransmissionTimer(retx_timeout)
        self._outstanding = deque()
        self._segments_out = deque()
        self._window_size = 1
        self._upper_bound = 0
        self._consecutive_retransmissions = 0
        self._bytes_in_flight = 0
        self._next_seqno = 0

    def stream_in(self):
        """The stream the application writes into."""
        return self._stream

    def segments_out(self):
        """Queue of segments ready to be handed to the connection."""
        return self._segments_out

    def bytes_in_flight(self):
        """Sequence numbers sent but not yet acknowledged (SYN and FIN count one each)."""
        return self._bytes_in_flight

    def consecutive_retransmissions(self):
        return self._consecutive_retransmissions

    def next_seqno_absolute(self):
        return self._next_seqno

    def next_seqno(self):
        return wrap(self._next_seqno, self._isn)

    def _send(self, segment):
        self._segments_out.append(replace(segment))
        if not self._timer.running():
            self._timer.start()

    def _track(self, segment):
        self._outstanding.append(segment)
        self._bytes_in_flight += segment.length_in_sequence_space()

    def fill_window(self):
        """Send as many segments as the receiver's window allows."""
        stream = self._stream
        if stream.eof() and self._next_seqno == stream.bytes_written() + 2:
            return
        if self._next_seqno > 0 and self._next_seqno == self._bytes_in_flight:
            return

        if self._next_seqno == 0:
            segment = TCPSegment(seqno=self._isn, syn=True)
            self._next_seqno += 1
            self._send(segment)
            self._track(segment)
        elif self._next_seqno > self._bytes_in_flight:
            while self._upper_bound > self._next_seqno:
                size = min(self._upper_bound - self._next_seqno, MAX_PAYLOAD_SIZE)
                segment = TCPSegment(seqno=self.next_seqno(), payload=stream.read(size))
                self._next_seqno += segment.length_in_sequence_space()
                if stream.eof() and self._upper_bound > self._next_seqno:
                    segment.fin = True
                    self._next_seqno += 1
                if segment.length_in_sequence_space():
                    self._send(segment)
                    self._track(segment)
                if stream.buffer_size() == 0:
                    break

    def ack_received(self, ackno, window_size):
        """Process the receiver's acknowledgment number and advertised window."""
        abs_ackno = unwrap(ackno, self._isn, self._next_seqno)
        if abs_ackno > self._next_seqno:
            return

        self._window_size = window_size
        self._upper_bound = abs_ackno + (window_size or 1)

        acked_new = False
        while self._outstanding:
            front = self._outstanding[0]
            abs_seqno = unwrap(front.seqno, self._isn, self._next_seqno)
            length = front.length_in_sequence_space()
            if abs_seqno + length - 1 >= abs_ackno:
                break
            self._outstanding.popleft()
            self._bytes_in_flight -= length
            acked_new = True

        if acked_new:
            self._timer.reset_rto()
            self._timer.start()
            self._consecutive_retransmissions = 0
        if not self._outstanding:
            self._timer.stop()

    def tick(self, ms_since_last_tick):
        """Advance time; retransmit the oldest outstanding segment if the timer expires."""
        if not self._timer.running():
            return
        self._timer.elapse(ms_since_last_tick)
        if not self._timer.expired():
            return
        if self._outstanding:
            self._send(self._outstanding[0])
        if self._window_size != 0:
            self._consecutive_retransmissions += 1
            self._timer.double_rto()
        self._timer.start()

    def send_empty_segment(self):
        """Queue a segment with no payload or flags at the next sequence number."""
        self._segments_out.append(TCPSegment(seqno=self.next_seqno()))