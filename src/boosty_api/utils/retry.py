"""One-shot retry for content that comes back 200 but gated."""

from __future__ import annotations

import logging
from typing import Awaitable, Callable, Protocol, TypeVar

from boosty_api.utils.errors import EmptyRefreshTokenError

T = TypeVar("T")

logger = logging.getLogger(__name__)


class RefreshCapable(Protocol):
    async def has_refresh_capability(self) -> bool: ...

    async def force_refresh(self) -> str: ...


async def fetch_with_refresh(
    auth: RefreshCapable,
    fetch: Callable[[], Awaitable[T]],
    is_unavailable: Callable[[T], bool],
) -> T:
    """Fetch a resource, refreshing the token and retrying once if it looks stale.

    Args:
        auth: Token owner; must expose ``has_refresh_capability`` and ``force_refresh``.
        fetch: Performs one full request/parse cycle.
        is_unavailable: True when the parsed result indicates missing access.

    Returns:
        The first result if it is available or no refresh flow is configured,
        otherwise the result of the single retry, whatever its availability.

    Raises:
        Whatever ``fetch`` raises (never retried), or an AuthError if the
        forced refresh fails.
    """
    result = await fetch()
    if not is_unavailable(result):
        return result

    if not await auth.has_refresh_capability():
        return result

    logger.info("Resource not available, forcing token refresh and retrying once")
    try:
        await auth.force_refresh()
    except EmptyRefreshTokenError:
        # Credentials were cleared after the capability check.
        return result
    return await fetch()
