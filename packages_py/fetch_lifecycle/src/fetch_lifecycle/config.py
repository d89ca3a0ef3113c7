"""
Configuration models for fetch-lifecycle.
"""
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .types import HttpMethod

DEFAULT_METHOD: HttpMethod = "GET"


class RequestParams(BaseModel):
    """Method and body of the request."""
    model_config = ConfigDict(frozen=True)

    method: HttpMethod = DEFAULT_METHOD
    body: Dict[str, Any] = Field(default_factory=dict)


class FetchConfig(BaseModel):
    """
    Caller-supplied configuration. Replaced wholesale on every reconfigure.

    `path` is optional here so that a missing path surfaces as a
    FetchConfigError from validation rather than a parsing error.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    path: Optional[str] = None
    params: RequestParams = Field(default_factory=RequestParams)
    headers: Optional[Dict[str, str]] = None
    refetch: bool = False
    result_only: bool = False

    # Delivery channels
    on_load: Optional[Callable[[], Any]] = None
    on_fetch: Optional[Callable[[Any], Any]] = None
    on_error: Optional[Callable[[Any], Any]] = None
    render: Optional[Callable[[Any], Any]] = None
    children: Optional[Callable[[Any], Any]] = None

    @property
    def method(self) -> HttpMethod:
        return self.params.method

    @property
    def body(self) -> Dict[str, Any]:
        return self.params.body


def coerce_config(config: Union[FetchConfig, Mapping[str, Any]]) -> FetchConfig:
    """Accept either a FetchConfig or a plain mapping."""
    if isinstance(config, FetchConfig):
        return config
    return FetchConfig.model_validate(dict(config))
