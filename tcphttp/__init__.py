"""Incremental HTTP/1.1 request parsing over raw byte streams."""

__version__ = "0.1.0"
__all__ = ["headers", "request", "tcplistener", "udpsender"]