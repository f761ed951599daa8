"""
Photon Geocoding Async Client

This module provides the main PhotonApiClient class for forward and reverse
geocoding against a Photon instance (https://photon.komoot.io by default).
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .decoder import Decoded, MalformedResponse, ServiceError, decodeResponseText
from .exceptions import PhotonDecodeError, PhotonServiceError
from .filters import ForwardFilter, QueryParams, ReverseFilter, buildForwardParams, buildReverseParams
from .models import LatLon, PhotonFeature

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://photon.komoot.io"
DEFAULT_USER_AGENT = "photon-geocoding-python"
DEFAULT_REQUEST_TIMEOUT = 10


class PhotonApiClient:
    """Async client for the Photon geocoding API.

    Creates new HTTP session for each request, so a single client may be used
    by concurrent tasks. The client keeps no per-call state.

    Example:
        >>> from photon_geocoding import ForwardFilter, LatLon, PhotonApiClient, PhotonLayer
        >>>
        >>> client = PhotonApiClient()  # public komoot instance
        >>>
        >>> # Forward geocoding
        >>> features = await client.forwardSearch("munich", ForwardFilter(limit=2))
        >>>
        >>> # Reverse geocoding
        >>> features = await client.reverseSearch(LatLon(48.14368, 11.58775))
    """

    def __init__(
        self,
        baseUrl: str = DEFAULT_BASE_URL,
        *,
        requestTimeout: Optional[float] = DEFAULT_REQUEST_TIMEOUT,
        userAgent: str = DEFAULT_USER_AGENT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize Photon client.

        Args:
            baseUrl: Photon instance URL, trailing slashes are ignored (default: public komoot instance)
            requestTimeout: HTTP request timeout in seconds, None disables it (default: 10)
            userAgent: User-Agent header sent with every request
            transport: Optional httpx transport for every request (proxies, mocks, ...)
        """
        self.baseUrl = baseUrl.rstrip("/")
        self.forwardUrl = f"{self.baseUrl}/api"
        self.reverseUrl = f"{self.baseUrl}/reverse"
        self.requestTimeout = requestTimeout
        self.userAgent = userAgent
        self.transport = transport

    @classmethod
    def fromConfig(
        cls, config: Dict[str, Any], transport: Optional[httpx.AsyncBaseTransport] = None
    ) -> "PhotonApiClient":
        """Create client from ``[photon]`` configuration section.

        Args:
            config: Section dict with optional keys ``base-url``, ``request-timeout``, ``user-agent``
            transport: Optional httpx transport

        Returns:
            Configured PhotonApiClient
        """
        return cls(
            config.get("base-url", DEFAULT_BASE_URL),
            requestTimeout=config.get("request-timeout", DEFAULT_REQUEST_TIMEOUT),
            userAgent=config.get("user-agent", DEFAULT_USER_AGENT),
            transport=transport,
        )

    async def forwardSearch(self, query: str, searchFilter: Optional[ForwardFilter] = None) -> List[PhotonFeature]:
        """Forward geocoding: find places matching free-form text.

        Args:
            query: Search text (e.g. "munich"), not validated client-side
            searchFilter: Optional search options

        Returns:
            Features in service order, empty list if nothing matched

        Raises:
            PhotonServiceError: Service reported an error message
            PhotonDecodeError: Response has unexpected shape
            httpx.HTTPError: Transport failure

        Example:
            >>> features = await client.forwardSearch("bayern", ForwardFilter(layers=[PhotonLayer.STATE]))
            >>> print(features[0].type)
            state
        """
        return await self._makeRequest(self.forwardUrl, buildForwardParams(query, searchFilter))

    async def reverseSearch(
        self, coords: LatLon, searchFilter: Optional[ReverseFilter] = None
    ) -> List[PhotonFeature]:
        """Reverse geocoding: find places at given coordinates.

        Args:
            coords: Point to look up
            searchFilter: Optional search options

        Returns:
            Features in service order, empty list if nothing is near

        Raises:
            PhotonServiceError: Service reported an error message
            PhotonDecodeError: Response has unexpected shape
            httpx.HTTPError: Transport failure
        """
        return await self._makeRequest(self.reverseUrl, buildReverseParams(coords, searchFilter))

    async def _makeRequest(self, url: str, params: QueryParams) -> List[PhotonFeature]:
        """Make HTTP request and decode its response.

        Photon reports errors as ``{"message": ...}`` bodies with 4xx status,
        so the body is decoded regardless of status code.
        """
        logger.debug(f"Making request to {url} with params: {params}")
        headers = {"User-Agent": self.userAgent}

        try:
            async with httpx.AsyncClient(timeout=self.requestTimeout, transport=self.transport) as session:
                response = await session.get(url, params=params, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {type(e).__name__}: {e}")
            raise

        logger.debug(f"Got response {response.status_code} from {response.url}")

        match decodeResponseText(response.text):
            case Decoded(features=features):
                return features
            case ServiceError(message=message, response=body):
                raise PhotonServiceError(message, response=body)
            case MalformedResponse(cause=cause):
                raise PhotonDecodeError(
                    f"Unexpected response from {url} (status {response.status_code}): {cause}"
                ) from cause
