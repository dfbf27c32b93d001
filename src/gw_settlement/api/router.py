"""gw_settlement REST endpoints: the live round, players and the sheet.

GET  /round                                       — tee box, cards, roster
PUT  /round/tee-box                               — select course tee box
POST /round/players                               — register / update a player
PUT  /round/scores/{player_id}                    — replace a whole card
PUT  /round/scores/{player_id}/holes/{hole_number} — set one hole
POST /round/post | /round/unpost                  — attach / clear snapshots
GET  /round/share                                 — shareable score payload
POST /round/import                                — import another group's payload
PUT  /round/groups/{index}                        — stage one group's cards
POST /round/groups/merge                          — merge staged groups into the round
GET  /players                                     — roster + wager participants
GET  /players/{player_id}/balance                 — totals and per-wager breakdown
GET  /sheet                                       — every player's balance
GET  /players/{player_id}/alabama/{bet_id}        — per-opponent Alabama results
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from src.gw_common.response import ApiResponse, respond
from src.gw_settlement.application.schemas import (
    GroupScoresRequest,
    ImportScoresRequest,
    RegisterPlayerRequest,
    SelectTeeBoxRequest,
    SetHoleScoreRequest,
    SetScoresRequest,
)
from src.gw_settlement.application.service import SettlementService, get_settlement_service

Service = Annotated[SettlementService, Depends(get_settlement_service)]

round_router = APIRouter(prefix="/round", tags=["round"])
players_router = APIRouter(tags=["players"])


@round_router.get("")
async def get_round(request: Request, service: Service) -> ApiResponse:
    result = await service.get_round()
    return respond(request, result.model_dump())


@round_router.put("/tee-box")
async def select_tee_box(req: SelectTeeBoxRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.select_tee_box(req.tee_box_name, req.course_id)
    return respond(request, result.model_dump())


@round_router.post("/players", status_code=201)
async def register_player(
    req: RegisterPlayerRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.register_player(req.to_domain())
    return respond(request, result.model_dump())


@round_router.put("/scores/{player_id}")
async def set_scores(
    player_id: str, req: SetScoresRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.set_scores(player_id, req.scores)
    return respond(request, result.model_dump())


@round_router.put("/scores/{player_id}/holes/{hole_number}")
async def set_hole_score(
    player_id: str,
    hole_number: int,
    req: SetHoleScoreRequest,
    request: Request,
    service: Service,
) -> ApiResponse:
    result = await service.set_hole_score(player_id, hole_number, req.token)
    return respond(request, result.model_dump())


@round_router.post("/post")
async def post_round(request: Request, service: Service) -> ApiResponse:
    result = await service.post_round()
    return respond(request, result.model_dump())


@round_router.post("/unpost")
async def unpost_round(request: Request, service: Service) -> ApiResponse:
    result = await service.unpost_round()
    return respond(request, result.model_dump())


@round_router.get("/share")
async def share_scores(
    request: Request,
    service: Service,
    group_id: str = Query("1", description="Label carried in the payload"),
) -> ApiResponse:
    result = await service.share_scores(group_id)
    return respond(request, result.model_dump())


@round_router.post("/import")
async def import_scores(req: ImportScoresRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.import_scores(req.payload)
    return respond(request, result.model_dump())


@round_router.put("/groups/{index}")
async def update_group_scores(
    index: int, req: GroupScoresRequest, request: Request, service: Service
) -> ApiResponse:
    await service.update_group_scores(index, req.scores)
    return respond(request, {"group_index": index, "cards": len(req.scores)})


@round_router.post("/groups/merge")
async def merge_group_scores(request: Request, service: Service) -> ApiResponse:
    result = await service.merge_group_scores()
    return respond(request, result.model_dump())


@players_router.get("/players")
async def list_players(request: Request, service: Service) -> ApiResponse:
    players = await service.list_players()
    return respond(request, {"items": [p.model_dump() for p in players]})


@players_router.get("/players/{player_id}/balance")
async def player_balance(player_id: str, request: Request, service: Service) -> ApiResponse:
    result = await service.player_balance(player_id)
    return respond(request, result.model_dump())


@players_router.get("/sheet")
async def sheet(request: Request, service: Service) -> ApiResponse:
    result = await service.sheet()
    return respond(request, result.model_dump())


@players_router.get("/players/{player_id}/alabama/{bet_id}")
async def alabama_matchups(
    player_id: str, bet_id: str, request: Request, service: Service
) -> ApiResponse:
    result = await service.alabama_matchups(bet_id, player_id)
    return respond(request, {"items": [m.model_dump() for m in result]})
