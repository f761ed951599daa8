"""Golden data tests for Photon client.

These tests use recorded Photon responses to check end-to-end behaviour of
the client without making actual API calls.
"""

import pytest

from photon_geocoding import (
    ForwardFilter,
    LatLon,
    OsmType,
    PhotonLayer,
    PhotonServiceError,
    ReverseFilter,
)


@pytest.mark.golden("forward_munich")
@pytest.mark.asyncio
async def test_forward_search_not_empty(goldenClient):
    """Search for munich without filter returns features"""
    features = await goldenClient.forwardSearch("munich")

    assert len(features) == 5
    first = features[0]
    assert first.name == "München"
    assert first.type == "city"
    assert first.osmType is OsmType.RELATION
    assert first.osmId == 62428
    assert first.coords == LatLon(lat=48.1371079, lon=11.5753822)
    assert first.extent is not None
    assert first.extent.southWest == LatLon(lat=48.0616018, lon=11.360777)
    assert first.countryIsoCode == "DE"


@pytest.mark.golden("forward_munich")
@pytest.mark.asyncio
async def test_forward_search_keeps_service_order(goldenClient):
    """Features come in relevance order"""
    features = await goldenClient.forwardSearch("munich")

    assert [f.osmId for f in features] == [62428, 2145268, 21564785, 151506523, 23035795]
    assert [f.osmType for f in features] == [
        OsmType.RELATION,
        OsmType.RELATION,
        OsmType.NODE,
        OsmType.NODE,
        OsmType.WAY,
    ]
    assert features[2].houseNumber == "10a"
    assert features[4].locality == "Schwaigermoos"


@pytest.mark.golden("forward_munich")
@pytest.mark.asyncio
async def test_forward_search_limit(goldenClient, replayTransport):
    """Limit reduces number of results"""
    withoutFilter = await goldenClient.forwardSearch("munich")
    withFilter = await goldenClient.forwardSearch("munich", ForwardFilter(limit=2))

    assert len(withFilter) == 2
    assert len(withFilter) <= len(withoutFilter)
    assert len(replayTransport.requests) == 2


@pytest.mark.golden("forward_munich")
@pytest.mark.asyncio
async def test_forward_search_location_bias(goldenClient):
    """Bias towards North Dakota ranks Munich, ND first"""
    features = await goldenClient.forwardSearch("munich", ForwardFilter(locationBias=LatLon(48.6701, -98.8485)))

    assert features
    assert features[0].countryIsoCode == "US"
    assert features[0].state == "North Dakota"


@pytest.mark.golden("forward_munich")
@pytest.mark.asyncio
async def test_forward_search_language(goldenClient, replayTransport):
    """Language code is lower-cased and used by service"""
    features = await goldenClient.forwardSearch("münchen", ForwardFilter(language="FR"))

    assert features[0].country == "Allemagne"
    assert replayTransport.requests[0].url.params["lang"] == "fr"


@pytest.mark.golden("forward_bayern")
@pytest.mark.asyncio
async def test_forward_search_layers(goldenClient):
    """State layer returns only states"""
    withoutFilter = await goldenClient.forwardSearch("bayern")
    withFilter = await goldenClient.forwardSearch("bayern", ForwardFilter(layers=[PhotonLayer.STATE]))

    assert len(withFilter) == 1
    assert all(f.type == "state" for f in withFilter)
    assert len(withFilter) != len(withoutFilter)


@pytest.mark.golden("forward_bayern")
@pytest.mark.asyncio
async def test_forward_search_service_error(goldenClient):
    """Invalid layer sent through additional query is reported by service"""
    with pytest.raises(PhotonServiceError) as excInfo:
        await goldenClient.forwardSearch("bayern", ForwardFilter(additionalQuery=[("layer", "planet")]))

    assert excInfo.value.message.startswith("Invalid layer 'planet'")


@pytest.mark.golden("reverse_munich")
@pytest.mark.asyncio
async def test_reverse_search_place(goldenClient):
    """Reverse search near Englischer Garten finds a building"""
    features = await goldenClient.reverseSearch(LatLon(48.14368, 11.58775))

    assert len(features) == 1
    feature = features[0]
    assert feature.type == "house"
    assert feature.street == "Prinzregentenstraße"
    assert feature.houseNumber == "1"
    assert feature.postcode == "80538"


@pytest.mark.golden("reverse_munich")
@pytest.mark.asyncio
async def test_reverse_search_no_data(goldenClient):
    """Place with no data gives empty list"""
    assert await goldenClient.reverseSearch(LatLon(1.0, 1.0)) == []


@pytest.mark.golden("reverse_munich")
@pytest.mark.asyncio
async def test_reverse_search_radius(goldenClient):
    """Radius finds places further away"""
    features = await goldenClient.reverseSearch(LatLon(47.8912, 12.4639), ReverseFilter(radius=8))

    assert features
    assert features[0].name == "Herreninsel"


@pytest.mark.golden("reverse_munich")
@pytest.mark.asyncio
async def test_reverse_search_layers(goldenClient):
    """City layer returns the city instead of a building"""
    features = await goldenClient.reverseSearch(LatLon(48.1379, 11.5734), ReverseFilter(layers=[PhotonLayer.CITY]))

    assert len(features) == 1
    assert features[0].type == "city"
