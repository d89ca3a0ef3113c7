"""
Fetch Lifecycle - declarative, lifecycle-bound data fetching
"""

__version__ = "0.1.0"

from .config import FetchConfig, RequestParams, coerce_config
from .types import (
    ApiResponse,
    ControllerState,
    ErrorReport,
    FetchIdentity,
    HttpMethod,
    Outcome,
    Transport,
    TRANSPORT_FAILURE_MESSAGE,
)
from .errors import FetchConfigError, FetchLifecycleError, LifecycleError, SingleChildError
from .identity import identity_of, needs_fetch
from .executor import RequestExecutor
from .dispatcher import ResultDispatcher, only_child, validate_config
from .controller import FetchController
from .settings import TransportSettings, configure_logging, load_settings
from .transport import HttpTransport

__all__ = [
    "FetchConfig", "RequestParams", "coerce_config",
    "ApiResponse", "ControllerState", "ErrorReport", "FetchIdentity",
    "HttpMethod", "Outcome", "Transport", "TRANSPORT_FAILURE_MESSAGE",
    "FetchConfigError", "FetchLifecycleError", "LifecycleError", "SingleChildError",
    "identity_of", "needs_fetch",
    "RequestExecutor",
    "ResultDispatcher", "only_child", "validate_config",
    "FetchController",
    "TransportSettings", "configure_logging", "load_settings",
    "HttpTransport",
]
