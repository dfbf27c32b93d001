"""Pydantic schemas for gw_wagers API requests and responses.

Stakes are accepted as given; negative stakes and roster checks are
rejected by the settlement service with InvalidWagerError / PlayerNotFoundError.
"""

import dataclasses
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.gw_wagers.domain.models import (
    AlabamaBet,
    CircusBet,
    DoDaBet,
    FourBallMatchBet,
    IndividualMatchBet,
    PuttingLedgerBet,
    SkinsBet,
    Wager,
)


class CreateIndividualMatchRequest(BaseModel):
    player1_id: str
    player2_id: str
    per_hole_amount: float
    per_birdie_amount: float = 0.0
    press_on_9_and_18: bool = False

    def to_domain(self) -> IndividualMatchBet:
        return IndividualMatchBet(**self.model_dump())


class CreateFourBallMatchRequest(BaseModel):
    team1: list[str]
    team2: list[str]
    per_hole_amount: float
    per_birdie_amount: float = 0.0
    press_on_9_and_18: bool = False

    def to_domain(self) -> FourBallMatchBet:
        return FourBallMatchBet(**self.model_dump())


class CreateAlabamaRequest(BaseModel):
    teams: list[list[str]]
    swing_man_id: str | None = None
    swing_man_team_index: int | None = None
    counting_scores: int = 1
    front_nine_amount: float = 0.0
    back_nine_amount: float = 0.0
    low_ball_amount: float = 0.0
    per_birdie_amount: float = 0.0

    def to_domain(self) -> AlabamaBet:
        return AlabamaBet(**self.model_dump())


class CreateDoDaRequest(BaseModel):
    is_pool: bool
    amount: float
    players: list[str]

    def to_domain(self) -> DoDaBet:
        return DoDaBet(**self.model_dump())


class CreateSkinsRequest(BaseModel):
    amount: float
    players: list[str]

    def to_domain(self) -> SkinsBet:
        return SkinsBet(**self.model_dump())


class CreatePuttingLedgerRequest(BaseModel):
    players: list[str]
    amount: float

    def to_domain(self) -> PuttingLedgerBet:
        return PuttingLedgerBet(**self.model_dump())


class CreateCircusRequest(BaseModel):
    players: list[str]
    amount: float = 0.0

    def to_domain(self) -> CircusBet:
        return CircusBet(**self.model_dump())


class PuttingOutcomeRequest(BaseModel):
    winners: list[str] = Field(default_factory=list)
    amount: float | None = None


class PuttingOutcomeResponse(BaseModel):
    bet_id: str
    deltas: dict[str, float]
    totals: dict[str, float]


class WagerResponse(BaseModel):
    id: str
    kind: str
    participants: list[str]
    side_bet: bool
    posted: bool
    posted_at: datetime | None = None
    terms: dict[str, Any]

    @classmethod
    def from_domain(cls, wager: Wager) -> "WagerResponse":
        terms = {
            f.name: getattr(wager, f.name)
            for f in dataclasses.fields(wager)
            if f.name not in ("id", "kind", "snapshot")
        }
        return cls(
            id=wager.id,
            kind=wager.kind,
            participants=wager.participant_ids(),
            side_bet=wager.is_side_bet,
            posted=wager.is_posted,
            posted_at=wager.snapshot.posted_at if wager.snapshot is not None else None,
            terms=terms,
        )


class WagerListResponse(BaseModel):
    items: list[WagerResponse]
