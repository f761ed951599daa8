"""
Photon Geocoding Exceptions

This module contains custom exception classes for the Photon geocoding client.
Transport failures are not wrapped: they surface as the original httpx exceptions.
"""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)


class PhotonError(Exception):
    """Base exception class for all Photon client errors.

    Attributes:
        message: Human-readable error message
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        logger.debug(f"{type(self).__name__}: {message}")

    def __str__(self) -> str:
        return self.message


class PhotonServiceError(PhotonError):
    """Raised when the service answered with an error message instead of features.

    Photon reports bad requests (unknown layer, malformed bbox, ...) as
    ``{"message": "..."}`` bodies.

    Attributes:
        message: Message text reported by the service
        response: Raw decoded response body (if available)
    """

    def __init__(self, message: str, response: Optional[Any] = None) -> None:
        super().__init__(message)
        self.response = response


class PhotonDecodeError(PhotonError):
    """Raised when a response does not match the feature collection shape.

    Also raised for malformed values inside an otherwise valid response:
    unknown OSM type codes, too short coordinate or extent arrays.
    """

    pass


class PhotonConfigError(PhotonError):
    """Raised when configuration can't be loaded."""

    pass
