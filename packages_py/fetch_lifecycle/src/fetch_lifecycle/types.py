"""
Core type definitions for fetch-lifecycle.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Dict, Literal, Mapping, Optional, Protocol, Union, runtime_checkable

# HTTP Methods (FORM_DATA is a POST with a form-encoded body)
HttpMethod = Literal["DELETE", "FORM_DATA", "GET", "HEAD", "PATCH", "POST", "PUT", "TRACE"]

TRANSPORT_FAILURE_MESSAGE = "Something went wrong during the request"


class ControllerState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERRORED = "errored"


@dataclass(frozen=True)
class FetchIdentity:
    """The configuration fields whose change triggers a new fetch."""
    path: str
    refetch: bool = False


@dataclass
class ApiResponse:
    """Settled transport call."""
    result: Any = None
    error: Any = None  # Application-level error payload, None on success
    is_ok: bool = False
    status: Union[int, bool] = False
    response: Any = None


@dataclass
class Outcome:
    """Normalized result of one fetch attempt."""
    data: Any = None
    error: Any = None
    is_ok: Optional[bool] = None
    loaded: bool = False
    status: Union[int, bool] = False
    response: Any = None

    @classmethod
    def reset(cls) -> "Outcome":
        """Placeholder emitted when identity changes while a fetch is pending."""
        return cls(data=None, error=None, is_ok=None, loaded=False, status=False)

    @property
    def failed(self) -> bool:
        return bool(self.error)


@dataclass
class ErrorReport:
    """Payload handed to the on_error channel."""
    error: Any
    status: Union[int, bool]


@runtime_checkable
class Transport(Protocol):
    """Async request primitive used by the executor."""
    def __call__(
        self,
        path: str,
        method: str,
        body: Mapping[str, Any],
        headers: Optional[Dict[str, str]],
    ) -> Awaitable[ApiResponse]: ...
