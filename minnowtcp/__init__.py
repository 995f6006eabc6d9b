"""Wrapping sequence numbers, byte streams, reassembly and a TCP receiver."""

__version__ = "0.1.0"