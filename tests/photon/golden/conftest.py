"""Fixtures for Photon golden data tests."""

import pytest

from photon_geocoding import PhotonApiClient
from tests.photon.golden import ReplayTransport, loadRecordings


@pytest.fixture
def replayTransport(request) -> ReplayTransport:
    """Transport replaying scenario given by ``@pytest.mark.golden("scenario")``"""
    marker = request.node.get_closest_marker("golden")
    if marker is None or not marker.args:
        raise ValueError("replayTransport fixture requires @pytest.mark.golden('<scenario>') decorator")

    return ReplayTransport(loadRecordings(marker.args[0]))


@pytest.fixture
def goldenClient(replayTransport) -> PhotonApiClient:
    """Client for default public instance answering from golden data"""
    return PhotonApiClient(transport=replayTransport)
