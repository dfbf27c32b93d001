"""gw_wagers REST endpoints.

POST   /bets/{individual|four-ball|alabama|do-da|skins|putting|circus} — create
GET    /bets                                 — every wager in the round
DELETE /bets/{bet_id}                        — remove one wager
DELETE /bets                                 — clear wagers, scores and tee box
POST   /bets/putting/{bet_id}/outcomes       — record one putting outcome
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from src.gw_common.response import ApiResponse, respond
from src.gw_settlement.application.service import SettlementService, get_settlement_service
from src.gw_wagers.application.schemas import (
    CreateAlabamaRequest,
    CreateCircusRequest,
    CreateDoDaRequest,
    CreateFourBallMatchRequest,
    CreateIndividualMatchRequest,
    CreatePuttingLedgerRequest,
    CreateSkinsRequest,
    PuttingOutcomeRequest,
)

Service = Annotated[SettlementService, Depends(get_settlement_service)]

router = APIRouter(prefix="/bets", tags=["bets"])


@router.post("/individual", status_code=201)
async def create_individual_match(
    req: CreateIndividualMatchRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/four-ball", status_code=201)
async def create_four_ball_match(
    req: CreateFourBallMatchRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/alabama", status_code=201)
async def create_alabama(req: CreateAlabamaRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/do-da", status_code=201)
async def create_do_da(req: CreateDoDaRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/skins", status_code=201)
async def create_skins(req: CreateSkinsRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/putting", status_code=201)
async def create_putting_ledger(
    req: CreatePuttingLedgerRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.post("/circus", status_code=201)
async def create_circus(req: CreateCircusRequest, request: Request, service: Service) -> ApiResponse:
    result = await service.create_wager(req.to_domain())
    return respond(request, result.model_dump())


@router.get("")
async def list_bets(request: Request, service: Service) -> ApiResponse:
    result = await service.list_wagers()
    return respond(request, result.model_dump())


@router.delete("/{bet_id}")
async def remove_bet(bet_id: str, request: Request, service: Service) -> ApiResponse:
    result = await service.remove_wager(bet_id)
    return respond(request, result.model_dump())


@router.delete("")
async def clear_all_bets(request: Request, service: Service) -> ApiResponse:
    await service.clear_all_bets()
    return respond(request, None)


@router.post("/putting/{bet_id}/outcomes")
async def record_putting_outcome(
    bet_id: str, req: PuttingOutcomeRequest, request: Request, service: Service
) -> ApiResponse:
    result = await service.record_putting_outcome(bet_id, req.winners, req.amount)
    return respond(request, result.model_dump())
