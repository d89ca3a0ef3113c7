"""
Transports for fetch-lifecycle.
"""

from .http_transport import HttpTransport, format_body

__all__ = ["HttpTransport", "format_body"]
