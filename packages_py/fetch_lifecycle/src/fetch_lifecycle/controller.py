"""
Lifecycle-bound fetch controller.

Driven by three external events: activate, reconfigure and deactivate. Each
identity change schedules exactly one transport call; its Outcome is
delivered only if the controller is still active and the call is the most
recently issued one.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Mapping, Optional, Set, Union

from .config import FetchConfig, coerce_config
from .dispatcher import ResultDispatcher, validate_config
from .errors import LifecycleError
from .executor import RequestExecutor
from .identity import identity_of, needs_fetch
from .transport import HttpTransport
from .types import ControllerState, FetchIdentity, Outcome, Transport

logger = logging.getLogger(__name__)

LOG_PREFIX = "[fetch-lifecycle]"

ConfigInput = Union[FetchConfig, Mapping[str, Any]]


class FetchController:
    """
    State machine: IDLE -> LOADING -> LOADED | ERRORED, back to LOADING
    whenever the identity changes while active.
    """

    def __init__(
        self,
        transport: Optional[Transport] = None,
        executor: Optional[RequestExecutor] = None,
        dispatcher: Optional[ResultDispatcher] = None,
    ):
        # Flag to track if we own the transport (created it)
        self._own_transport = executor is None and transport is None

        if executor is None:
            executor = RequestExecutor(transport or HttpTransport())

        self._executor = executor
        self._dispatcher = dispatcher or ResultDispatcher()
        self._config: Optional[FetchConfig] = None
        self._state = ControllerState.IDLE
        self._alive = False
        self._torn_down = False
        self._generation = 0
        self._tasks: Set[asyncio.Task] = set()

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def config(self) -> Optional[FetchConfig]:
        return self._config

    @property
    def identity(self) -> Optional[FetchIdentity]:
        return identity_of(self._config) if self._config else None

    @property
    def is_active(self) -> bool:
        return self._alive

    @property
    def dispatcher(self) -> ResultDispatcher:
        return self._dispatcher

    def activate(self, config: ConfigInput) -> None:
        if self._alive or self._torn_down:
            raise LifecycleError("activate", self._lifecycle_label())

        config = coerce_config(config)
        validate_config(config)

        self._config = config
        self._alive = True
        logger.debug(f"{LOG_PREFIX} Activated for {config.params.method} {config.path}")
        self._fetch(config)

    def reconfigure(self, config: ConfigInput) -> None:
        if not self._alive:
            raise LifecycleError("reconfigure", self._lifecycle_label())

        config = coerce_config(config)
        validate_config(config)

        previous = self._config
        self._config = config

        if not needs_fetch(previous, config):
            return

        logger.debug(f"{LOG_PREFIX} Identity changed to {identity_of(config)}, refetching")
        try:
            self._handle_outcome(Outcome.reset())
        except Exception:
            # Keep the old identity so the next reconfigure retries the change
            self._config = previous
            raise
        self._fetch(config)

    def deactivate(self) -> None:
        if self._torn_down:
            return
        self._alive = False
        self._torn_down = True
        logger.debug(f"{LOG_PREFIX} Deactivated with {len(self._tasks)} fetch(es) in flight")

    def render(self) -> Any:
        """Presentation hook: on_load() while nothing has loaded yet."""
        if self._state in (ControllerState.IDLE, ControllerState.LOADING):
            if self._config and self._config.on_load:
                return self._config.on_load()
        return None

    async def settle(self) -> None:
        """Wait for every scheduled fetch, re-raising dispatch errors."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    async def close(self) -> None:
        """
        Close the transport if we own it.

        In-flight fetches are not cancelled; they finish (and are dropped once
        deactivated) before the underlying client is closed.
        """
        if not self._own_transport:
            return
        if self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)
        await self._executor.transport.close()

    @asynccontextmanager
    async def bound(self, config: ConfigInput) -> AsyncIterator["FetchController"]:
        """Activate for the duration of the block."""
        self.activate(config)
        try:
            yield self
        finally:
            self.deactivate()
            await self.close()

    def _lifecycle_label(self) -> str:
        if self._torn_down:
            return "deactivated"
        return self._state.value

    def _fetch(self, config: FetchConfig) -> None:
        self._generation += 1
        self._state = ControllerState.LOADING

        task = asyncio.get_running_loop().create_task(
            self._run(self._generation, config)
        )
        self._tasks.add(task)
        task.add_done_callback(self._task_done)

    def _task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            logger.error(f"{LOG_PREFIX} Delivery failed: {exc!r}", exc_info=exc)

    async def _run(self, generation: int, config: FetchConfig) -> None:
        outcome = await self._executor.execute(
            config.path, config.method, config.body, config.headers
        )

        if generation != self._generation:
            logger.debug(f"{LOG_PREFIX} Dropping superseded result for {config.path}")
            return

        self._handle_outcome(outcome)

    def _handle_outcome(self, outcome: Outcome) -> None:
        config = self._config
        if not self._alive or config is None:
            logger.debug(f"{LOG_PREFIX} Dropping result after deactivate")
            return

        if outcome.loaded:
            self._state = ControllerState.ERRORED if outcome.failed else ControllerState.LOADED

        self._dispatcher.dispatch(outcome, config)
