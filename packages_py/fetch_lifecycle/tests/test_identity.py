"""
Tests for identity tracking.
"""
from fetch_lifecycle.config import FetchConfig
from fetch_lifecycle.identity import identity_of, needs_fetch
from fetch_lifecycle.types import FetchIdentity


def _cb(value):
    return value


def test_identity_of():
    config = FetchConfig(path="/users", refetch=True, on_fetch=_cb)
    assert identity_of(config) == FetchIdentity(path="/users", refetch=True)


def test_initial_activation_needs_fetch():
    assert needs_fetch(None, FetchConfig(path="/users", on_fetch=_cb)) is True


def test_path_or_refetch_change_needs_fetch():
    base = FetchConfig(path="/users", on_fetch=_cb)
    assert needs_fetch(base, FetchConfig(path="/teams", on_fetch=_cb)) is True
    assert needs_fetch(base, FetchConfig(path="/users", refetch=True, on_fetch=_cb)) is True


def test_non_identity_changes_do_not_need_fetch():
    base = FetchConfig(path="/users", on_fetch=_cb)
    changed = FetchConfig(
        path="/users",
        params={"method": "POST", "body": {"name": "x"}},
        headers={"Authorization": "Bearer token"},
        result_only=True,
        render=lambda value: value,
    )
    assert needs_fetch(base, changed) is False
