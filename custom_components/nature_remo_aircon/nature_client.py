"""Client for the Nature Remo cloud API."""

from __future__ import annotations

import json
import logging
from typing import Any

import aiohttp

from .const import DEFAULT_API_HOST, REQUEST_TIMEOUT_SECONDS
from .errors import AuthenticationError, ParseError, TransportError
from .models import Appliance, ControlCommand

_LOGGER = logging.getLogger(__name__)


class NatureRemoClient:
    """Client for interacting with the Nature Remo API."""

    def __init__(self, access_token: str, host: str = DEFAULT_API_HOST) -> None:
        """Initialize the client."""
        self.host = host.rstrip("/")
        self.access_token = access_token

    async def async_get_appliances(self) -> list[Appliance]:
        """Get all appliances registered to the account."""
        body = await self._request("GET", "/appliances")
        data = self._parse_json(body)
        if not isinstance(data, list):
            raise ParseError(f"failed to parse response: {body}")
        try:
            return [Appliance.from_dict(item) for item in data]
        except (AttributeError, KeyError, TypeError) as err:
            raise ParseError(f"failed to parse response: {body}") from err

    async def async_update_aircon_settings(
        self, appliance_id: str, command: ControlCommand
    ) -> dict[str, Any] | None:
        """Send new aircon settings and return the response object.

        The response is either the new settings or an error object carrying
        a `code` field. Returns None when the response body is empty.
        """
        body = await self._request(
            "POST", f"/appliances/{appliance_id}/aircon_settings", data=command
        )
        if not body.strip():
            return None
        data = self._parse_json(body)
        if data is None:
            return None
        if not isinstance(data, dict):
            raise ParseError(f"failed to parse response: {body}")
        return data

    async def _request(
        self, method: str, path: str, data: ControlCommand | None = None
    ) -> str:
        """Make an authenticated request and return the response body."""
        url = f"{self.host}{path}"
        headers = {"Authorization": f"Bearer {self.access_token}"}
        timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)
        _LOGGER.debug("Making %s request to %s with %s", method, path, data)
        try:
            async with (
                aiohttp.ClientSession(timeout=timeout) as session,
                session.request(method, url, headers=headers, data=data) as response,
            ):
                body = await response.text()
                if response.status == 401:
                    raise AuthenticationError("Access token was rejected")
                if response.status >= 400 and not self._is_error_object(body):
                    raise TransportError(
                        f"Request to {path} failed with status code {response.status}"
                    )
                return body
        except aiohttp.ClientError as err:
            raise TransportError(f"Request to {path} failed: {err}") from err
        except TimeoutError as err:
            raise TransportError(f"Request to {path} timed out") from err

    @staticmethod
    def _is_error_object(body: str) -> bool:
        """Return whether the body is a JSON object with an error code."""
        try:
            data = json.loads(body)
        except ValueError:
            return False
        return isinstance(data, dict) and "code" in data

    @staticmethod
    def _parse_json(body: str) -> Any:
        try:
            return json.loads(body)
        except ValueError as err:
            raise ParseError(f"failed to parse response: {body}") from err
