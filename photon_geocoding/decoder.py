"""
Photon Response Decoder

This module validates raw Photon JSON bodies with pydantic models and converts
them into PhotonFeature records.

Decoding has exactly two outcomes for a body:
    1. It is a feature collection: all features are converted, order preserved.
    2. It isn't: the ``message`` string is extracted if the service sent one,
       otherwise the original validation error is reported.

The outcome is returned as a tagged DecodeResult instead of being raised, so
callers can handle every case with a single ``match``.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Annotated, Any, List, Optional, TypeAlias, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import PhotonDecodeError
from .models import PhotonFeature

logger = logging.getLogger(__name__)

# OSM ids are unsigned 64-bit integers
OsmId = Annotated[int, Field(ge=0, lt=2**64)]

# Wire models


class WireModel(BaseModel):
    """Base for Photon wire records. Values are not coerced between JSON types"""

    model_config = ConfigDict(strict=True)


class GeometryModel(WireModel):
    """GeoJSON point geometry, coordinates are ``[lon, lat]``"""

    type: str
    coordinates: List[float]


class PropertiesModel(WireModel):
    """Feature properties as sent by Photon"""

    osm_id: OsmId
    osm_type: str  # "R", "W" or "N", checked on conversion
    osm_key: str
    osm_value: str
    type: str

    extent: Optional[List[float]] = None  # [sw_lon, sw_lat, ne_lon, ne_lat]
    name: Optional[str] = None

    country: Optional[str] = None
    countrycode: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None
    locality: Optional[str] = None
    postcode: Optional[str] = None
    district: Optional[str] = None
    street: Optional[str] = None
    housenumber: Optional[str] = None


class FeatureModel(WireModel):
    """Single GeoJSON feature"""

    type: str
    geometry: GeometryModel
    properties: PropertiesModel


class FeatureCollectionModel(WireModel):
    """Top-level search response"""

    features: List[FeatureModel]


# Decode results


@dataclass(frozen=True)
class Decoded:
    """Response was a feature collection"""

    features: List[PhotonFeature] = field(default_factory=list)


@dataclass(frozen=True)
class ServiceError:
    """Service reported an error message"""

    message: str
    response: Any = None


@dataclass(frozen=True)
class MalformedResponse:
    """Response is neither a feature collection nor an error message"""

    cause: Exception


DecodeResult: TypeAlias = Union[Decoded, ServiceError, MalformedResponse]


def _extractMessage(body: Any) -> Optional[str]:
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str):
            return message
    return None


def decodeResponse(body: Any) -> DecodeResult:
    """Decode an already parsed JSON body.

    Args:
        body: Parsed JSON value (usually a dict)

    Returns:
        Decoded, ServiceError or MalformedResponse
    """
    cause: Exception
    try:
        collection = FeatureCollectionModel.model_validate(body)
        return Decoded(features=[PhotonFeature.fromRaw(raw) for raw in collection.features])
    except (ValidationError, PhotonDecodeError) as e:
        cause = e

    message = _extractMessage(body)
    if message is not None:
        logger.warning(f"Photon reported error: {message}")
        return ServiceError(message=message, response=body)

    logger.error(f"Malformed Photon response: {cause}")
    return MalformedResponse(cause=cause)


def decodeResponseText(text: str) -> DecodeResult:
    """Decode a raw response body.

    Args:
        text: Response body as text

    Returns:
        Decoded, ServiceError or MalformedResponse (also for non-JSON text)
    """
    try:
        body = json.loads(text)
    except json.JSONDecodeError as e:
        logger.error(f"Failed to parse JSON response: {e}")
        return MalformedResponse(cause=e)

    return decodeResponse(body)
