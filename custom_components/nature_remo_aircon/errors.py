"""Errors raised by the Nature Remo Aircon integration."""

from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError


class NatureRemoError(HomeAssistantError):
    """Base error for the integration."""


class TransportError(NatureRemoError):
    """Error to indicate the Nature API could not be reached."""


class AuthenticationError(TransportError):
    """Error to indicate the access token was rejected."""


class ParseError(NatureRemoError):
    """Error to indicate a response body could not be parsed."""


class VendorError(NatureRemoError):
    """Error to indicate the Nature API rejected a request."""

    def __init__(self, message: str, code: str | None = None) -> None:
        """Initialize the error with the vendor error code."""
        super().__init__(message)
        self.code = code


class UpdateFailedError(NatureRemoError):
    """Error to indicate an aircon settings update did not go through."""


class TranslationError(NatureRemoError):
    """Error to indicate aircon settings have no thermostat equivalent."""


class UnsupportedOperationError(NatureRemoError):
    """Error to indicate the aircon cannot perform the operation."""


class InvalidValueError(NatureRemoError):
    """Error to indicate a value outside the thermostat vocabulary."""


class DeviceNotReadyError(NatureRemoError):
    """Error to indicate no aircon has been fetched yet."""
