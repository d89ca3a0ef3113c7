"""
Request executor: one transport call, one normalized Outcome.
"""
import logging
from typing import Any, Dict, Mapping, Optional

from .types import TRANSPORT_FAILURE_MESSAGE, Outcome, Transport

logger = logging.getLogger(__name__)

LOG_PREFIX = "[fetch-lifecycle]"


class RequestExecutor:
    """
    Wraps the transport and folds its three possible results into an Outcome:
    success, application-level error, and raised exception.
    """

    def __init__(self, transport: Transport):
        self._transport = transport

    @property
    def transport(self) -> Transport:
        return self._transport

    async def execute(
        self,
        path: str,
        method: str,
        body: Mapping[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> Outcome:
        try:
            api_response = await self._transport(path, method, body, headers)
        except Exception:
            # Should never happen; report loudly, deliver the generic message.
            logger.error(f"{LOG_PREFIX} Route \"{path}\" resolved with an exception", exc_info=True)
            return Outcome(
                data=None,
                error=TRANSPORT_FAILURE_MESSAGE,
                is_ok=False,
                loaded=True,
                status=False,
            )

        if api_response.error:
            logger.debug(f"{LOG_PREFIX} {method} {path} failed with status {api_response.status}")
            return Outcome(
                data=None,
                error=api_response,
                is_ok=False,
                loaded=True,
                status=False,
            )

        return Outcome(
            data=api_response.result,
            error=None,
            is_ok=api_response.is_ok,
            loaded=True,
            status=api_response.status,
            response=api_response.response,
        )
