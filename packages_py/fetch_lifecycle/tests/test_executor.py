"""
Tests for RequestExecutor.
"""
import logging

import httpx
import pytest
from unittest.mock import AsyncMock

from fetch_lifecycle.executor import RequestExecutor
from fetch_lifecycle.types import TRANSPORT_FAILURE_MESSAGE, ApiResponse, Outcome


@pytest.mark.asyncio
async def test_success_outcome(ok_response):
    transport = AsyncMock(return_value=ok_response)
    executor = RequestExecutor(transport)

    outcome = await executor.execute("/users", "GET", {}, {"Accept": "application/json"})

    transport.assert_awaited_once_with("/users", "GET", {}, {"Accept": "application/json"})
    assert outcome == Outcome(
        data=[{"id": 1}],
        error=None,
        is_ok=True,
        loaded=True,
        status=200,
        response="raw",
    )


@pytest.mark.asyncio
async def test_application_error_outcome():
    api_response = ApiResponse(result=None, error={"detail": "nope"}, is_ok=False, status=403)
    executor = RequestExecutor(AsyncMock(return_value=api_response))

    outcome = await executor.execute("/users", "GET", {})

    assert outcome.data is None
    assert outcome.error is api_response
    assert outcome.is_ok is False
    assert outcome.loaded is True
    assert outcome.status is False


@pytest.mark.asyncio
async def test_transport_exception_outcome(caplog):
    transport = AsyncMock(side_effect=httpx.ConnectError("refused"))
    executor = RequestExecutor(transport)

    with caplog.at_level(logging.ERROR, logger="fetch_lifecycle.executor"):
        outcome = await executor.execute("/users", "GET", {})

    assert outcome == Outcome(
        data=None,
        error=TRANSPORT_FAILURE_MESSAGE,
        is_ok=False,
        loaded=True,
        status=False,
    )
    records = [r for r in caplog.records if r.name == "fetch_lifecycle.executor"]
    assert len(records) == 1
    assert "/users" in records[0].getMessage()
    assert records[0].exc_info is not None
