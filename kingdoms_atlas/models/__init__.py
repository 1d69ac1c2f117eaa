"""Pydantic data models for the raw snapshot, entities, cells and the game world."""

from .raw import RawMapData, decode_snapshot
from .entities import Tribe, Role, Named, Kingdom, Player, Village
from .cells import Cell, CellKind, Occupant, classify_cell
from .game_world import GameWorld

__all__ = [
    "RawMapData",
    "decode_snapshot",
    "Tribe",
    "Role",
    "Named",
    "Kingdom",
    "Player",
    "Village",
    "Cell",
    "CellKind",
    "Occupant",
    "classify_cell",
    "GameWorld",
]
