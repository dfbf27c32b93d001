"""Shared test fixtures."""

import pytest
from httpx import ASGITransport, AsyncClient

from src.gw_settlement.application.service import SettlementService, get_settlement_service
from src.gw_settlement.domain.repository import RoundState
from src.main import app


class InMemoryRoundRepository:
    """RoundRepositoryProtocol over a plain attribute; counts saves."""

    def __init__(self, state: RoundState | None = None) -> None:
        self.state = state or RoundState()
        self.saves = 0

    async def load_state(self) -> RoundState:
        return self.state

    async def save_state(self, state: RoundState) -> None:
        self.state = state
        self.saves += 1


@pytest.fixture
def repo() -> InMemoryRoundRepository:
    return InMemoryRoundRepository()


@pytest.fixture
def service(repo: InMemoryRoundRepository) -> SettlementService:
    return SettlementService(repo=repo)


@pytest.fixture
async def client(service: SettlementService) -> AsyncClient:
    """Async HTTP client for testing FastAPI endpoints against an in-memory round."""
    app.dependency_overrides[get_settlement_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
