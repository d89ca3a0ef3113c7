"""
Fetch identity tracking.

Only `path` and `refetch` identify a fetch. Params, headers and delivery
channels may change freely without a new request being issued.
"""
from typing import Optional

from .config import FetchConfig
from .types import FetchIdentity


def identity_of(config: FetchConfig) -> FetchIdentity:
    return FetchIdentity(path=config.path or "", refetch=config.refetch)


def needs_fetch(previous: Optional[FetchConfig], next: FetchConfig) -> bool:
    """Return True on initial activation or when the identity changed."""
    if previous is None:
        return True
    return identity_of(previous) != identity_of(next)
