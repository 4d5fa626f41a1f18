"""Building blocks of a reliable large datagram protocol: compression, packet history, transfer state, timing, query dispatch and options."""

__version__ = "0.1.0"