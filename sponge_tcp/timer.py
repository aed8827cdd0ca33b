"""Retransmission timer used by the TCP sender."""


class RetransmissionTimer:
    """An alarm that goes off once the retransmission timeout (RTO) has elapsed."""

    def __init__(self, initial_timeout):
        self._initial_timeout = int(initial_timeout)
        self._rto = self._initial_timeout
        self._remaining = 0
        self._running = False
        self._expired = False

    def reset_rto(self):
        """Set the RTO back to its initial value."""
        self._rto = self._initial_timeout

    def halve_rto(self):
        """Halve the RTO, rounding down."""
        self._rto //= 2

    def double_rto(self):
        """Double the RTO (exponential backoff)."""
        self._rto *= 2

    def start(self):
        """(Re)start the countdown from the current RTO."""
        self._remaining = self._rto
        self._running = True
        self._expired = False

    def stop(self):
        """Stop the timer."""
        self._running = False

    def elapse(self, ms):
        """Let ``ms`` milliseconds pass; marks the timer expired once the RTO is used up."""
        if self._remaining > ms:
            self._remaining -= ms
        else:
            self._expired = True

    def running(self):
        """Whether the timer is currently started."""
        return self._running

    def expired(self):
        """Whether the timer has gone off since it was last started."""
        return self._expired

    def rto(self):
        """The current retransmission timeout in milliseconds."""
        return self._rto