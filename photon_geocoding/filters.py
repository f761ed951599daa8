"""
Photon Request Filters

This module defines immutable filter records for forward and reverse search
and the pure functions serializing them into query parameters.

Parameters are returned as an ordered list of ``(key, value)`` pairs: the
``layer`` parameter and additional query pairs may repeat keys, which a dict
can't express. Unset fields are omitted from the request.

Example:
    >>> searchFilter = ForwardFilter(limit=2, language="DE", layers=[PhotonLayer.CITY])
    >>> buildForwardParams("munich", searchFilter)
    [('q', 'munich'), ('limit', '2'), ('lang', 'de'), ('layer', 'city')]
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import List, Optional, Sequence, Tuple

from .models import BoundingBox, LatLon

QueryParams = List[Tuple[str, str]]


class PhotonLayer(StrEnum):
    """Result granularity filter, values are the wire representation"""

    HOUSE = "house"
    STREET = "street"
    LOCALITY = "locality"
    DISTRICT = "district"
    CITY = "city"
    COUNTY = "county"
    STATE = "state"
    COUNTRY = "country"


def _freezeLayers(layers: Optional[Sequence[PhotonLayer | str]]) -> Optional[Tuple[PhotonLayer, ...]]:
    if layers is None:
        return None
    return tuple(PhotonLayer(layer) for layer in layers)


def _freezePairs(pairs: Optional[Sequence[Tuple[str, str]]]) -> Optional[Tuple[Tuple[str, str], ...]]:
    if pairs is None:
        return None
    return tuple((str(key), str(value)) for key, value in pairs)


@dataclass(frozen=True, slots=True)
class ForwardFilter:
    """Options for forward (text) search.

    Attributes:
        locationBias: Prefer results near this point
        locationBiasZoom: Radius of the bias area as map zoom level (only sent with locationBias)
        locationBiasScale: Weight of the bias against result importance (only sent with locationBias)
        boundingBox: Restrict results to this area
        limit: Maximum number of results
        language: Preferred result language, e.g. "en" (sent lower-cased)
        layers: Restrict results to these layers
        additionalQuery: Extra ``(key, value)`` pairs appended verbatim
    """

    locationBias: Optional[LatLon] = None
    locationBiasZoom: Optional[int] = None
    locationBiasScale: Optional[float] = None
    boundingBox: Optional[BoundingBox] = None
    limit: Optional[int] = None
    language: Optional[str] = None
    layers: Optional[Sequence[PhotonLayer]] = None
    additionalQuery: Optional[Sequence[Tuple[str, str]]] = None

    def __post_init__(self):
        """Copy mutable sequences into tuples"""
        object.__setattr__(self, "layers", _freezeLayers(self.layers))
        object.__setattr__(self, "additionalQuery", _freezePairs(self.additionalQuery))


@dataclass(frozen=True, slots=True)
class ReverseFilter:
    """Options for reverse (coordinate) search.

    Attributes:
        radius: Search radius in kilometers
        limit: Maximum number of results
        language: Preferred result language (sent lower-cased)
        layers: Restrict results to these layers
        additionalQuery: Extra ``(key, value)`` pairs appended verbatim
    """

    radius: Optional[float] = None
    limit: Optional[int] = None
    language: Optional[str] = None
    layers: Optional[Sequence[PhotonLayer]] = None
    additionalQuery: Optional[Sequence[Tuple[str, str]]] = None

    def __post_init__(self):
        """Copy mutable sequences into tuples"""
        object.__setattr__(self, "layers", _freezeLayers(self.layers))
        object.__setattr__(self, "additionalQuery", _freezePairs(self.additionalQuery))


def _appendCommon(
    params: QueryParams,
    limit: Optional[int],
    language: Optional[str],
    layers: Optional[Sequence[PhotonLayer]],
    additionalQuery: Optional[Sequence[Tuple[str, str]]],
) -> None:
    if limit is not None:
        params.append(("limit", str(limit)))
    if language is not None:
        params.append(("lang", language.lower()))
    if layers is not None:
        for layer in layers:
            params.append(("layer", PhotonLayer(layer).value))
    # Additional pairs always go last and never override
    if additionalQuery is not None:
        params.extend((key, value) for key, value in additionalQuery)


def buildForwardParams(query: str, searchFilter: Optional[ForwardFilter] = None) -> QueryParams:
    """Build query parameters for ``/api``.

    Args:
        query: Free-form search text, sent as is
        searchFilter: Optional search options

    Returns:
        Ordered list of (key, value) pairs
    """
    params: QueryParams = [("q", query)]
    if searchFilter is None:
        return params

    if searchFilter.locationBias is not None:
        params.append(("lat", str(searchFilter.locationBias.lat)))
        params.append(("lon", str(searchFilter.locationBias.lon)))
        # zoom and scale refine the bias and mean nothing without it
        if searchFilter.locationBiasZoom is not None:
            params.append(("zoom", str(searchFilter.locationBiasZoom)))
        if searchFilter.locationBiasScale is not None:
            params.append(("location_bias_scale", str(searchFilter.locationBiasScale)))

    if searchFilter.boundingBox is not None:
        params.append(("bbox", searchFilter.boundingBox.toParam()))

    _appendCommon(
        params, searchFilter.limit, searchFilter.language, searchFilter.layers, searchFilter.additionalQuery
    )
    return params


def buildReverseParams(coords: LatLon, searchFilter: Optional[ReverseFilter] = None) -> QueryParams:
    """Build query parameters for ``/reverse``.

    Args:
        coords: Point to look up
        searchFilter: Optional search options

    Returns:
        Ordered list of (key, value) pairs
    """
    params: QueryParams = [("lat", str(coords.lat)), ("lon", str(coords.lon))]
    if searchFilter is None:
        return params

    if searchFilter.radius is not None:
        params.append(("radius", str(searchFilter.radius)))

    _appendCommon(
        params, searchFilter.limit, searchFilter.language, searchFilter.layers, searchFilter.additionalQuery
    )
    return params
