"""Bit-by-bit text messaging between processes over SIGUSR1 and SIGUSR2, with small text and formatting helpers."""

__version__ = "0.1.0"