"""Tests for the shareable score payload."""

from src.gw_scoring.domain.sharing import (
    SharedPlayerScores,
    SharedScoreData,
    decode_shared,
    encode_shared,
)


def _data() -> SharedScoreData:
    return SharedScoreData(
        group_id="1",
        course_id="bayou-desiard",
        course_name="Bayou DeSiard Country Club",
        tee_box_name="Blue",
        players=[
            SharedPlayerScores(
                player_id="a", first_name="Al", last_name="Tester", nickname="Ace",
                scores=["4", "X", ""],
            ),
        ],
    )


class TestSharedPayload:
    def test_decoded_payload_keeps_cards(self) -> None:
        decoded = decode_shared(encode_shared(_data()))
        assert decoded is not None
        assert decoded.tee_box_name == "Blue"
        assert decoded.score_table() == {"a": ["4", "X", ""]}
        assert decoded.players[0].nickname == "Ace"

    def test_garbage_reads_as_none(self) -> None:
        assert decode_shared("not json") is None
        assert decode_shared('{"group_id": "1"}') is None
