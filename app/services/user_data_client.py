"""
User data client.

Fetches member data from the backend over HTTP:
- GET /user_data/{id} returns plan state and the 7-level downline
- Payloads are parsed into earnings models
"""

import asyncio
from collections.abc import Callable
from datetime import datetime
from typing import Any
from urllib.parse import quote

import aiohttp
from loguru import logger

from app.config.settings import settings
from app.utils.datetime_utils import utc_now
from earnings import (
    AccountSnapshot,
    DownlineTree,
    parse_account_snapshot,
    parse_downline,
)


class UserDataFetchError(Exception):
    """Raised when user data cannot be fetched from the backend."""

    def __init__(self, user_id: str, reason: str, status: int | None = None) -> None:
        self.user_id = user_id
        self.reason = reason
        self.status = status
        super().__init__(f"Failed to fetch user data for {user_id}: {reason}")


class UserDataClient:
    """
    HTTP client for the user-data backend.

    One aiohttp session is created lazily and reused until close().
    Failures are raised as UserDataFetchError; retrying is left
    to the caller.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.base_url = (base_url or settings.backend_base_url).rstrip("/")
        self.timeout_seconds = timeout_seconds or settings.backend_timeout_seconds
        self._clock = clock
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds),
            )
        return self._session

    async def close(self) -> None:
        """Close the HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def __aenter__(self) -> "UserDataClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    def user_data_url(self, user_id: str) -> str:
        """Build the user-data URL for a member id."""
        return f"{self.base_url}/user_data/{quote(str(user_id), safe='')}"

    async def fetch_user_data(self, user_id: str) -> dict[str, Any]:
        """
        Fetch the raw user-data payload.

        Args:
            user_id: Member id

        Returns:
            Decoded JSON object

        Raises:
            UserDataFetchError: On transport errors, non-200 responses
                or a body that is not a JSON object
        """
        url = self.user_data_url(user_id)
        session = await self._get_session()

        try:
            async with session.get(url, headers={"Accept": "application/json"}) as response:
                if response.status != 200:
                    logger.warning(f"User data request failed: HTTP {response.status} for {user_id}")
                    raise UserDataFetchError(
                        user_id, f"HTTP {response.status}", status=response.status
                    )
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"User data request failed for {user_id}: {e!r}")
            raise UserDataFetchError(user_id, repr(e)) from e
        except ValueError as e:
            logger.error(f"User data for {user_id} is not valid JSON: {e}")
            raise UserDataFetchError(user_id, "invalid JSON body") from e

        if not isinstance(data, dict):
            raise UserDataFetchError(user_id, f"expected JSON object, got {type(data).__name__}")

        logger.debug(f"Fetched user data for {user_id}")
        return data

    async def fetch_account_snapshot(self, user_id: str) -> AccountSnapshot:
        """
        Fetch plan state for a member.

        Raises:
            UserDataFetchError: If the request fails
            InvalidSnapshot: If the payload holds unusable values
        """
        payload = await self.fetch_user_data(user_id)
        return parse_account_snapshot(payload, now=self._clock())

    async def fetch_downline(self, user_id: str) -> DownlineTree:
        """
        Fetch the 7-level downline for a member.

        Raises:
            UserDataFetchError: If the request fails
            InvalidSnapshot: If the downline is malformed
        """
        payload = await self.fetch_user_data(user_id)
        return parse_downline(payload)

    async def fetch_member(self, user_id: str) -> tuple[AccountSnapshot, DownlineTree]:
        """
        Fetch plan state and downline from a single backend read.

        Raises:
            UserDataFetchError: If the request fails
            InvalidSnapshot: If the payload holds unusable values
        """
        payload = await self.fetch_user_data(user_id)
        return parse_account_snapshot(payload, now=self._clock()), parse_downline(payload)



class InMemoryUserDataSource:
    """
    User-data source backed by payloads already in memory.

    Serves saved /user_data/{id} bodies keyed by member id, e.g. for
    offline reports.
    """

    def __init__(
        self,
        payloads: dict[str, dict[str, Any]],
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.payloads = payloads
        self._clock = clock

    def _payload(self, user_id: str) -> dict[str, Any]:
        try:
            return self.payloads[user_id]
        except KeyError:
            raise UserDataFetchError(user_id, "unknown user", status=404) from None

    async def fetch_account_snapshot(self, user_id: str) -> AccountSnapshot:
        return parse_account_snapshot(self._payload(user_id), now=self._clock())

    async def fetch_downline(self, user_id: str) -> DownlineTree:
        return parse_downline(self._payload(user_id))

    async def fetch_member(self, user_id: str) -> tuple[AccountSnapshot, DownlineTree]:
        payload = self._payload(user_id)
        return parse_account_snapshot(payload, now=self._clock()), parse_downline(payload)
