"""Golden data for Photon client tests.

Each file under ``data/`` holds Photon traffic recorded by ``collect.py``:

    {
        "description": "...",
        "recordings": [
            {
                "request": {"method": "GET", "url": "...", "params": [["q", "munich"]]},
                "response": {"status_code": 200, "headers": {...}, "content": {...}}
            }
        ]
    }

ReplayTransport answers requests from these recordings without network access.
Run ``python -m tests.photon.golden.collect`` to record them again.
"""

import json
from pathlib import Path
from typing import Any, Dict, List

import httpx

GOLDEN_DATA_PATH = Path(__file__).parent / "data"


def loadRecordings(scenarioName: str) -> List[Dict[str, Any]]:
    """Load recordings of a scenario file (name without ``.json``).

    Raises:
        FileNotFoundError: If there is no such scenario
    """
    filepath = GOLDEN_DATA_PATH / f"{scenarioName}.json"
    if not filepath.exists():
        raise FileNotFoundError(f"Golden data file not found: {filepath}")

    with open(filepath, "r", encoding="utf-8") as f:
        return json.load(f)["recordings"]


class ReplayTransport(httpx.AsyncBaseTransport):
    """httpx transport that replays recorded Photon responses.

    Requests are matched by method, URL without query and the ordered list of
    query parameters. Every handled request is kept in ``requests``.
    """

    def __init__(self, recordings: List[Dict[str, Any]]):
        self.recordings = recordings
        self.requests: List[httpx.Request] = []

    def _matches(self, recording: Dict[str, Any], request: httpx.Request) -> bool:
        recorded = recording["request"]
        return (
            recorded["method"] == request.method
            and recorded["url"] == str(request.url).split("?", 1)[0]
            and [tuple(pair) for pair in recorded.get("params", [])] == request.url.params.multi_items()
        )

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        """Return recorded response for matching request.

        Raises:
            ValueError: If no matching recording is found
        """
        self.requests.append(request)
        for recording in self.recordings:
            if self._matches(recording, request):
                response = recording["response"]
                return httpx.Response(
                    status_code=response["status_code"],
                    headers=response.get("headers", {}),
                    content=json.dumps(response["content"]).encode(),
                )

        raise ValueError(f"No recorded call found for {request.method} {request.url}")
