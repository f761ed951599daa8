"""
Photon Geocoding API Client Library

This module provides a Python async client library for the Photon geocoding
API (https://photon.komoot.io) with typed, immutable results.

Example usage:
    from photon_geocoding import ForwardFilter, LatLon, PhotonApiClient, PhotonLayer, ReverseFilter

    client = PhotonApiClient()  # or PhotonApiClient("https://photon.example.org")

    # Forward geocoding
    features = await client.forwardSearch("munich", ForwardFilter(limit=2, language="de"))

    # Only states
    states = await client.forwardSearch("bayern", ForwardFilter(layers=[PhotonLayer.STATE]))

    # Reverse geocoding
    features = await client.reverseSearch(LatLon(48.14368, 11.58775), ReverseFilter(radius=1))
"""

from .client import DEFAULT_BASE_URL, PhotonApiClient
from .config import ConfigManager, loadConfig
from .decoder import DecodeResult, Decoded, MalformedResponse, ServiceError, decodeResponse, decodeResponseText
from .exceptions import PhotonConfigError, PhotonDecodeError, PhotonError, PhotonServiceError
from .filters import ForwardFilter, PhotonLayer, ReverseFilter, buildForwardParams, buildReverseParams
from .logging_utils import initLogging
from .models import BoundingBox, LatLon, OsmType, PhotonFeature

__all__ = [
    # Client
    "DEFAULT_BASE_URL",
    "PhotonApiClient",
    # Filters
    "ForwardFilter",
    "ReverseFilter",
    "PhotonLayer",
    "buildForwardParams",
    "buildReverseParams",
    # Models
    "BoundingBox",
    "LatLon",
    "OsmType",
    "PhotonFeature",
    # Decoding
    "DecodeResult",
    "Decoded",
    "ServiceError",
    "MalformedResponse",
    "decodeResponse",
    "decodeResponseText",
    # Errors
    "PhotonError",
    "PhotonServiceError",
    "PhotonDecodeError",
    "PhotonConfigError",
    # Setup
    "ConfigManager",
    "loadConfig",
    "initLogging",
]
