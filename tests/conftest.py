from __future__ import annotations

import json

import pytest

from kingdoms_atlas.config import AtlasSettings
from kingdoms_atlas.systems.world_builder import WorldBuilder


def _village(village_id, x, y, name, population=100, main=False, city=False) -> dict:
    return {
        "villageId": village_id,
        "x": x,
        "y": y,
        "population": population,
        "name": name,
        "isMainVillage": main,
        "isCity": city,
    }


def _cell(cell_id, x, y, res_type, oasis, kingdom_id, landscape=1) -> dict:
    return {
        "id": cell_id,
        "x": x,
        "y": y,
        "resType": res_type,
        "oasis": oasis,
        "landscape": landscape,
        "kingdomId": kingdom_id,
    }


def make_snapshot() -> dict:
    """A small export mixing numeric and string-encoded fields.
    
    North (1): alice (1 village), bob (2 villages)
    South (2): carol (1 village)
    dave declares kingdom 99, which does not exist.
    """
    return {
        "response": {
            "gameworld": {
                "name": "com3",
                "startTime": "1600000000",
                "speed": 1,
                "speedTroops": 1,
                "lastUpdateTime": 1600000500,
                "date": 1600000600,
                "version": "1.0",
            },
            "kingdoms": [
                {"kingdomId": "1", "kingdomTag": "North", "creationTime": "100", "victoryPoints": "500"},
                {"kingdomId": 2, "kingdomTag": "South", "creationTime": 200, "victoryPoints": 300},
            ],
            "players": [
                {
                    "playerId": "10", "name": "alice", "tribeId": "1", "kingdomId": "1",
                    "treasures": 5, "role": 1, "externalLoginToken": "a",
                    "villages": [_village(100, 0, 0, "Alicetown", population="250", main=True)],
                },
                {
                    "playerId": 11, "name": "bob", "tribeId": "2", "kingdomId": 1,
                    "treasures": "0", "role": "2", "externalLoginToken": "b",
                    "villages": [
                        _village(101, "-12", -12, "Bobville"),
                        _village("102", 3, "4", "Bobburg", city=True),
                    ],
                },
                {
                    "playerId": 12, "name": "carol", "tribeId": "3", "kingdomId": 2,
                    "treasures": 0, "role": 0, "externalLoginToken": "c",
                    "villages": [_village(103, 5, 5, "Carolcity")],
                },
                {
                    "playerId": 13, "name": "dave", "tribeId": "1", "kingdomId": "99",
                    "treasures": 0, "role": 3, "externalLoginToken": "d",
                    "villages": [_village(104, 7, -7, "Daveham")],
                },
            ],
            "map": {
                "radius": "10",
                "landscapes": {"1": "forest", "2": "lake"},
                "cells": [
                    _cell(1, 0, 0, "3", "0", 1),
                    _cell(2, -12, "-12", "3", "0", 2),
                    _cell(3, 7, -7, "3", "0", 0),
                    _cell(4, 1, 1, "4", "0", 2),
                    _cell(5, 2, 2, "0", "1", 1),
                    _cell(6, 3, 3, "0", "0", "0"),
                    _cell(7, 4, 4, "1", "2", 2, landscape=2),
                    _cell(8, 5, 5, "0", "0", 2),
                ],
            },
        }
    }


@pytest.fixture
def snapshot_dict() -> dict:
    return make_snapshot()


@pytest.fixture
def snapshot_text(snapshot_dict: dict) -> str:
    return json.dumps(snapshot_dict)


@pytest.fixture
def world(snapshot_text: str):
    return WorldBuilder(AtlasSettings()).from_raw_data(snapshot_text)
