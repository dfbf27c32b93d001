"""Integration tests: creating wagers, posting the round and reading the sheet."""

import pytest
from httpx import AsyncClient


async def _card(client: AsyncClient, player_id: str, scores: list[str]) -> None:
    resp = await client.put(f"/api/v1/round/scores/{player_id}", json={"scores": scores})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_individual_match_settles_live(round_client: AsyncClient) -> None:
    await _card(round_client, "al", ["3"] * 18)
    await _card(round_client, "bo", ["4"] * 18)
    resp = await round_client.post(
        "/api/v1/bets/individual",
        json={"player1_id": "al", "player2_id": "bo", "per_hole_amount": 5},
    )
    assert resp.status_code == 201
    wager = resp.json()["data"]
    assert wager["kind"] == "INDIVIDUAL"
    assert wager["participants"] == ["al", "bo"]
    assert wager["posted"] is False

    resp = await round_client.get("/api/v1/players/al/balance")
    data = resp.json()["data"]
    assert data["total_winnings"] == 80.0
    assert data["round_winnings"] == 80.0
    assert data["breakdown"][0]["wager_id"] == wager["id"]


@pytest.mark.asyncio
async def test_pool_games_count_after_posting(round_client: AsyncClient) -> None:
    await _card(round_client, "al", ["2"] + ["4"] * 17)
    for pid in ("bo", "cy"):
        await _card(round_client, pid, ["4"] * 18)
    players = ["al", "bo", "cy"]
    await round_client.post("/api/v1/bets/skins", json={"amount": 10, "players": players})
    await round_client.post(
        "/api/v1/bets/do-da", json={"is_pool": True, "amount": 10, "players": players}
    )

    resp = await round_client.get("/api/v1/sheet")
    rows = {r["player"]["id"]: r["total_winnings"] for r in resp.json()["data"]["rows"]}
    assert rows["al"] == 0.0

    resp = await round_client.post("/api/v1/round/post")
    assert resp.json()["data"]["wagers_affected"] == 2

    resp = await round_client.get("/api/v1/sheet")
    sheet = resp.json()["data"]
    rows = {r["player"]["id"]: r["total_winnings"] for r in sheet["rows"]}
    assert rows == {"al": 40.0, "bo": -20.0, "cy": -20.0, "di": 0.0}
    assert sheet["violations"] == []

    resp = await round_client.post("/api/v1/round/unpost")
    assert resp.json()["data"]["wagers_affected"] == 2


@pytest.mark.asyncio
async def test_alabama_two_against_four_style(round_client: AsyncClient) -> None:
    await _card(round_client, "al", ["4"] * 18)
    await _card(round_client, "cy", ["5"] * 18)
    resp = await round_client.post(
        "/api/v1/bets/alabama",
        json={"teams": [["al", "bo"], ["cy", "di"]], "front_nine_amount": 10, "back_nine_amount": 10},
    )
    bet_id = resp.json()["data"]["id"]
    await round_client.post("/api/v1/round/post")

    resp = await round_client.get(f"/api/v1/players/al/alabama/{bet_id}")
    matchups = resp.json()["data"]["items"]
    assert matchups[0]["other_team_index"] == 1
    assert matchups[0]["total"] == 20.0

    resp = await round_client.get("/api/v1/players/di/balance")
    assert resp.json()["data"]["total_winnings"] == -20.0


@pytest.mark.asyncio
async def test_invalid_wager_is_422(round_client: AsyncClient) -> None:
    resp = await round_client.post(
        "/api/v1/bets/four-ball",
        json={"team1": ["al"], "team2": ["cy", "di"], "per_hole_amount": 5},
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == 3002


@pytest.mark.asyncio
async def test_unknown_player_in_wager_is_404(round_client: AsyncClient) -> None:
    resp = await round_client.post(
        "/api/v1/bets/skins", json={"amount": 5, "players": ["al", "zz"]}
    )
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_putting_ledger_flow(round_client: AsyncClient) -> None:
    resp = await round_client.post(
        "/api/v1/bets/putting", json={"players": ["al", "bo", "cy"], "amount": 1}
    )
    bet_id = resp.json()["data"]["id"]

    resp = await round_client.post(
        f"/api/v1/bets/putting/{bet_id}/outcomes", json={"winners": ["bo"]}
    )
    assert resp.status_code == 200
    assert resp.json()["data"]["totals"] == {"al": -1.0, "bo": 2.0, "cy": -1.0}

    resp = await round_client.post(
        f"/api/v1/bets/putting/{bet_id}/outcomes", json={"winners": ["zz"]}
    )
    assert resp.status_code == 422
    assert resp.json()["code"] == 3003

    resp = await round_client.get("/api/v1/players/bo/balance")
    data = resp.json()["data"]
    assert data["side_bet_winnings"] == 2.0
    assert data["total_winnings"] == 0.0


@pytest.mark.asyncio
async def test_list_remove_and_clear(round_client: AsyncClient) -> None:
    first = await round_client.post(
        "/api/v1/bets/skins", json={"amount": 5, "players": ["al", "bo"]}
    )
    await round_client.post("/api/v1/bets/circus", json={"players": ["al", "bo"]})

    resp = await round_client.get("/api/v1/bets")
    assert [w["kind"] for w in resp.json()["data"]["items"]] == ["SKINS", "CIRCUS"]

    resp = await round_client.delete(f"/api/v1/bets/{first.json()['data']['id']}")
    assert resp.status_code == 200
    resp = await round_client.delete("/api/v1/bets/missing")
    assert resp.status_code == 404

    resp = await round_client.delete("/api/v1/bets")
    assert resp.status_code == 200
    resp = await round_client.get("/api/v1/bets")
    assert resp.json()["data"]["items"] == []
    resp = await round_client.get("/api/v1/round")
    assert resp.json()["data"]["tee_box_name"] is None
