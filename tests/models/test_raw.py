from __future__ import annotations

import json

import pytest

from kingdoms_atlas.errors import DecodeError
from kingdoms_atlas.models.raw import coerce_int, decode_snapshot


def test_decode_full_snapshot(snapshot_text: str) -> None:
    data = decode_snapshot(snapshot_text)

    assert data.gameworld.name == "com3"
    assert data.gameworld.start_time == 1600000000
    assert data.map.radius == 10
    assert len(data.kingdoms) == 2
    assert [p.player_id for p in data.players] == [10, 11, 12, 13]
    assert data.players[0].villages[0].population == 250
    assert data.players[1].role == 2
    assert data.players[1].treasures == 0


def test_string_and_number_coordinates_decode_identically(snapshot_text: str) -> None:
    data = decode_snapshot(snapshot_text)
    village = data.players[1].villages[0]

    # x was sent as "-12", y as -12
    assert village.x == -12
    assert village.y == -12
    assert village.x == village.y


def test_landscape_keys_become_integers(snapshot_text: str) -> None:
    data = decode_snapshot(snapshot_text)
    assert data.map.landscapes == {1: "forest", 2: "lake"}


def test_unknown_fields_are_ignored(snapshot_dict: dict) -> None:
    snapshot_dict["response"]["players"][0]["allianceColor"] = "red"
    data = decode_snapshot(json.dumps(snapshot_dict))
    assert data.players[0].name == "alice"


def test_accepts_bytes(snapshot_text: str) -> None:
    data = decode_snapshot(snapshot_text.encode("utf-8"))
    assert data.gameworld.version == "1.0"


@pytest.mark.parametrize(
    "value, expected",
    [(12, 12), (-12, -12), ("12", 12), ("-12", -12), ("+7", 7), ("0", 0)],
)
def test_coerce_int_accepts_numbers_and_numeric_strings(value, expected) -> None:
    assert coerce_int(value) == expected


@pytest.mark.parametrize("value", [True, False, 1.5, 12.0, "12a", "", "1.0", " 12", "10 ", None, [1], {"x": 1}])
def test_coerce_int_rejects_other_types(value) -> None:
    with pytest.raises(ValueError):
        coerce_int(value)


def test_wrong_type_for_id_names_the_field(snapshot_dict: dict) -> None:
    snapshot_dict["response"]["players"][2]["playerId"] = [12]

    with pytest.raises(DecodeError) as excinfo:
        decode_snapshot(json.dumps(snapshot_dict))

    assert excinfo.value.field == "response.players.2.playerId"
    assert "response.players.2.playerId" in str(excinfo.value)


def test_boolean_coordinate_is_rejected(snapshot_dict: dict) -> None:
    snapshot_dict["response"]["map"]["cells"][0]["x"] = True

    with pytest.raises(DecodeError) as excinfo:
        decode_snapshot(json.dumps(snapshot_dict))

    assert excinfo.value.field == "response.map.cells.0.x"


def test_missing_field_is_a_decode_error(snapshot_dict: dict) -> None:
    del snapshot_dict["response"]["players"][0]["villages"][0]["isCity"]

    with pytest.raises(DecodeError) as excinfo:
        decode_snapshot(json.dumps(snapshot_dict))

    assert excinfo.value.field == "response.players.0.villages.0.isCity"


def test_tribe_code_must_be_a_string(snapshot_dict: dict) -> None:
    snapshot_dict["response"]["players"][0]["tribeId"] = 1

    with pytest.raises(DecodeError):
        decode_snapshot(json.dumps(snapshot_dict))


def test_missing_response_wrapper(snapshot_dict: dict) -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_snapshot(json.dumps(snapshot_dict["response"]))

    assert excinfo.value.field == "response"


def test_invalid_json() -> None:
    with pytest.raises(DecodeError) as excinfo:
        decode_snapshot("{not json")

    assert excinfo.value.errors
