"""
Result dispatcher and configuration preconditions.
"""
import inspect
from typing import Any, Optional

from .config import FetchConfig
from .errors import FetchConfigError, SingleChildError
from .types import ErrorReport, Outcome


def validate_config(config: FetchConfig) -> None:
    """Raise FetchConfigError if the config cannot produce a deliverable fetch."""
    if not config.path:
        raise FetchConfigError("You must provide a path to FetchController", field="path")

    if not (config.children or config.on_fetch or config.render):
        raise FetchConfigError(
            "You must provide at least one of the following to FetchController: "
            "children, on_fetch, render",
            field="children",
        )


def only_child(value: Any) -> Any:
    """Return value if it is exactly one downstream value."""
    if value is None:
        raise SingleChildError(value)
    if isinstance(value, (list, tuple, set, frozenset)) or inspect.isgenerator(value):
        raise SingleChildError(value)
    return value


class ResultDispatcher:
    """Fans a single Outcome out to every registered channel."""

    def __init__(self) -> None:
        self.last_child: Optional[Any] = None

    def dispatch(self, outcome: Outcome, config: FetchConfig) -> None:
        if outcome.error and config.on_error:
            config.on_error(ErrorReport(error=outcome.error, status=outcome.status))

        payload = outcome.data if config.result_only else outcome

        if config.on_fetch:
            config.on_fetch(payload)
        if config.render:
            config.render(payload)
        if config.children:
            self.last_child = only_child(config.children(payload))
