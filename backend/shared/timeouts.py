"""
Bounded waiting on external collaborators.

Every call into a simulated (or future real) backend goes through
with_timeout so a slow collaborator surfaces as RequestTimeoutError
instead of hanging the request.
"""

import asyncio
from typing import Awaitable, Optional, TypeVar

from .config import get_settings
from .exceptions import RequestTimeoutError

T = TypeVar("T")


async def with_timeout(
    awaitable: Awaitable[T],
    service: str,
    timeout: Optional[float] = None,
) -> T:
    """
    Await a collaborator call, bounded by a timeout.

    Args:
        awaitable: The pending collaborator call
        service: Collaborator name used in the error
        timeout: Seconds to wait; defaults to settings.request_timeout_seconds

    Raises:
        RequestTimeoutError: If the call does not finish in time
    """
    if timeout is None:
        timeout = get_settings().request_timeout_seconds

    try:
        return await asyncio.wait_for(awaitable, timeout=timeout)
    except asyncio.TimeoutError:
        raise RequestTimeoutError(service, timeout) from None
