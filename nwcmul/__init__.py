"""Exact polynomial and big-integer multiplication via negatively wrapped convolutions over Z[x]/(x^2m + 1)."""

__version__ = "0.1.0"
__all__ = ["polyring", "fft", "product"]