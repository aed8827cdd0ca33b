"""The sending half of a TCP endpoint: segmentation, windowing and retransmission."""

__version__ = "0.1.0"
__all__ = ["sender", "timer"]