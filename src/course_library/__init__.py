"""Course library: PDF hosting for course material."""

__version__ = "0.1.0"
