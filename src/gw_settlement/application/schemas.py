"""Pydantic schemas for the round, player and sheet endpoints."""

from pydantic import BaseModel, Field, field_validator

from src.gw_scoring.domain.scores import is_valid_token
from src.gw_settlement.domain.bet_manager import BetLineItem
from src.gw_wagers.domain.models import Player


class SelectTeeBoxRequest(BaseModel):
    tee_box_name: str
    course_id: str | None = None  # falls back to settings.DEFAULT_COURSE_ID


class RegisterPlayerRequest(BaseModel):
    id: str
    first_name: str
    last_name: str = ""
    nickname: str | None = None

    def to_domain(self) -> Player:
        return Player(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            nickname=self.nickname,
        )


class SetScoresRequest(BaseModel):
    scores: list[str] = Field(max_length=18)


class SetHoleScoreRequest(BaseModel):
    token: str

    @field_validator("token")
    @classmethod
    def known_token(cls, v: str) -> str:
        v = v.strip().upper()
        if not is_valid_token(v):
            raise ValueError("token must be empty, a stroke count or X")
        return v


class GroupScoresRequest(BaseModel):
    scores: dict[str, list[str]]


class ImportScoresRequest(BaseModel):
    payload: str  # the shared-card JSON exactly as scanned


class ShareScoresResponse(BaseModel):
    payload: str


class PlayerResponse(BaseModel):
    id: str
    first_name: str
    last_name: str
    nickname: str | None = None
    full_name: str
    scorecard_name: str

    @classmethod
    def from_domain(cls, player: Player) -> "PlayerResponse":
        return cls(
            id=player.id,
            first_name=player.first_name,
            last_name=player.last_name,
            nickname=player.nickname,
            full_name=player.full_name,
            scorecard_name=player.scorecard_name,
        )


class LineItemResponse(BaseModel):
    wager_id: str
    kind: str
    amount: float
    posted: bool
    side_bet: bool

    @classmethod
    def from_domain(cls, item: BetLineItem) -> "LineItemResponse":
        return cls(
            wager_id=item.wager_id,
            kind=item.kind.value,
            amount=item.amount,
            posted=item.posted,
            side_bet=item.side_bet,
        )


class BalanceResponse(BaseModel):
    player_id: str
    total_winnings: float
    round_winnings: float
    side_bet_winnings: float
    breakdown: list[LineItemResponse]


class SheetRow(BaseModel):
    player: PlayerResponse
    total_winnings: float
    side_bet_winnings: float


class SheetResponse(BaseModel):
    tee_box_name: str | None
    rows: list[SheetRow]
    violations: list[str]


class RoundResponse(BaseModel):
    tee_box_name: str | None
    scores: dict[str, list[str]]
    players: list[PlayerResponse]


class PostRoundResponse(BaseModel):
    wagers_affected: int


class ImportScoresResponse(BaseModel):
    accepted: bool
    players_imported: int


class MergeGroupsResponse(BaseModel):
    cards_merged: int


class AlabamaMatchupResponse(BaseModel):
    other_team_index: int
    front: float
    back: float
    low_ball_front: float
    low_ball_back: float
    birdies: float
    total: float
