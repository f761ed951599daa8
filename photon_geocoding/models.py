"""
Photon Geocoding Data Models

This module defines immutable value types for search results: coordinates,
bounding boxes, OSM entity types and the resulting features.
"""

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, Optional, Sequence

from .exceptions import PhotonDecodeError

if TYPE_CHECKING:
    from .decoder import FeatureModel


@dataclass(frozen=True, slots=True)
class LatLon:
    """Latitude/longitude pair"""

    lat: float
    lon: float

    @classmethod
    def fromWire(cls, values: Sequence[float]) -> "LatLon":
        """Create LatLon from a wire ``[lon, lat]`` array.

        Raises:
            PhotonDecodeError: If the array holds less than 2 values
        """
        if len(values) < 2:
            raise PhotonDecodeError(f"Coordinate array needs 2 values, got {len(values)}")
        # API format is [lon, lat]
        return cls(lat=float(values[1]), lon=float(values[0]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Rectangle given by its south-west and north-east corners"""

    southWest: LatLon
    northEast: LatLon

    @classmethod
    def fromWire(cls, values: Sequence[float]) -> "BoundingBox":
        """Create BoundingBox from a wire ``[sw_lon, sw_lat, ne_lon, ne_lat]`` array.

        Raises:
            PhotonDecodeError: If the array holds less than 4 values
        """
        if len(values) < 4:
            raise PhotonDecodeError(f"Bounding box array needs 4 values, got {len(values)}")
        return cls(
            southWest=LatLon.fromWire(values[0:2]),
            northEast=LatLon.fromWire(values[2:4]),
        )

    def toParam(self) -> str:
        """Serialize as ``sw_lon,sw_lat,ne_lon,ne_lat`` for the ``bbox`` query parameter"""
        return ",".join(
            str(v) for v in (self.southWest.lon, self.southWest.lat, self.northEast.lon, self.northEast.lat)
        )


class OsmType(StrEnum):
    """OSM entity kind, encoded on the wire as a single letter"""

    RELATION = "R"
    WAY = "W"
    NODE = "N"

    @classmethod
    def fromCode(cls, code: str) -> "OsmType":
        """Convert wire code to OsmType.

        Raises:
            PhotonDecodeError: If the code is not one of R/W/N
        """
        try:
            return cls(code)
        except ValueError as e:
            raise PhotonDecodeError(f"Unexpected OSM type: {code!r}") from e


@dataclass(frozen=True, slots=True)
class PhotonFeature:
    """Single geocoding result.

    Address fields are optional: the service omits absent values instead of
    sending empty strings.
    """

    coords: LatLon
    osmId: int
    osmKey: str
    osmType: OsmType
    osmValue: str
    type: str  # Place type (e.g. "city", "state", "house")

    extent: Optional[BoundingBox] = None
    name: Optional[str] = None

    country: Optional[str] = None
    countryIsoCode: Optional[str] = None
    state: Optional[str] = None
    county: Optional[str] = None
    city: Optional[str] = None
    locality: Optional[str] = None
    postcode: Optional[str] = None
    district: Optional[str] = None
    street: Optional[str] = None
    houseNumber: Optional[str] = None

    @classmethod
    def fromRaw(cls, raw: "FeatureModel") -> "PhotonFeature":
        """Create PhotonFeature from a validated wire record.

        Raises:
            PhotonDecodeError: On unknown OSM type or too short arrays
        """
        props = raw.properties
        return cls(
            coords=LatLon.fromWire(raw.geometry.coordinates),
            osmId=props.osm_id,
            osmKey=props.osm_key,
            osmType=OsmType.fromCode(props.osm_type),
            osmValue=props.osm_value,
            type=props.type,
            extent=BoundingBox.fromWire(props.extent) if props.extent is not None else None,
            name=props.name,
            country=props.country,
            countryIsoCode=props.countrycode,
            state=props.state,
            county=props.county,
            city=props.city,
            locality=props.locality,
            postcode=props.postcode,
            district=props.district,
            street=props.street,
            houseNumber=props.housenumber,
        )
