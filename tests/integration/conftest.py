"""Integration-test fixtures.

The app runs in-process over httpx ASGITransport with the settlement service
bound to an in-memory repository (see tests/conftest.py), so no Redis is needed.
"""

import pytest_asyncio
from httpx import AsyncClient

FOURSOME = [
    {"id": "al", "first_name": "Al", "last_name": "Arnold"},
    {"id": "bo", "first_name": "Bo", "last_name": "Baker", "nickname": "Boom"},
    {"id": "cy", "first_name": "Cy", "last_name": "Carter"},
    {"id": "di", "first_name": "Di", "last_name": "Dunn"},
]


@pytest_asyncio.fixture
async def round_client(client: AsyncClient) -> AsyncClient:
    """Client with the Blue tees selected and a foursome registered."""
    resp = await client.put("/api/v1/round/tee-box", json={"tee_box_name": "Blue"})
    assert resp.status_code == 200
    for player in FOURSOME:
        resp = await client.post("/api/v1/round/players", json=player)
        assert resp.status_code == 201
    return client
