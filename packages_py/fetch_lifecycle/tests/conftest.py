"""
Shared fixtures for fetch-lifecycle tests.
"""
import asyncio
from typing import Any, Dict, List, Optional, Tuple

import pytest

from fetch_lifecycle.types import ApiResponse


class GatedTransport:
    """Transport whose calls stay pending until the test settles them."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, Dict[str, Any], Optional[Dict[str, str]]]] = []
        self._gates: List[asyncio.Future] = []

    async def __call__(self, path, method, body, headers):
        gate = asyncio.get_running_loop().create_future()
        self.calls.append((path, method, body, headers))
        self._gates.append(gate)
        return await gate

    async def wait_for_calls(self, count: int) -> None:
        for _ in range(100):
            if len(self.calls) >= count:
                return
            await asyncio.sleep(0)
        raise AssertionError(f"expected {count} transport calls, got {len(self.calls)}")

    def resolve(self, index: int, response: ApiResponse) -> None:
        self._gates[index].set_result(response)

    def fail(self, index: int, exc: BaseException) -> None:
        self._gates[index].set_exception(exc)


@pytest.fixture
def gated_transport():
    return GatedTransport()


@pytest.fixture
def ok_response():
    return ApiResponse(result=[{"id": 1}], error=None, is_ok=True, status=200, response="raw")
