"""Normalized entity schemas: kingdoms, players and villages."""

from __future__ import annotations
from enum import Enum
from typing import Optional, Protocol, runtime_checkable

from pydantic import BaseModel, Field

from kingdoms_atlas.errors import UnknownCodeError

Id = int
Coords = tuple[int, int]


class Tribe(str, Enum):
    """Player tribes."""
    ROMAN = "roman"
    TEUTON = "teuton"
    GAUL = "gaul"
    
    @classmethod
    def from_code(cls, code: str) -> "Tribe":
        """Decode the export's tribe id ("1", "2", "3")."""
        try:
            return _TRIBE_CODES[code]
        except KeyError:
            raise UnknownCodeError("tribe", code) from None


class Role(str, Enum):
    """A player's role inside their kingdom."""
    KING = "king"
    VICE = "vice"
    DUKE = "duke"
    GOVERNOR = "governor"
    
    @classmethod
    def from_code(cls, code: int) -> "Role":
        """Decode the export's numeric role."""
        try:
            return _ROLE_CODES[code]
        except KeyError:
            raise UnknownCodeError("role", code) from None


_TRIBE_CODES = {
    "1": Tribe.ROMAN,
    "2": Tribe.TEUTON,
    "3": Tribe.GAUL,
}

_ROLE_CODES = {
    0: Role.GOVERNOR,
    1: Role.KING,
    2: Role.DUKE,
    3: Role.VICE,
}


@runtime_checkable
class Named(Protocol):
    """Anything with a display name can be looked up by it."""
    name: str


class Kingdom(BaseModel):
    """A kingdom and the players it owns, in export order."""
    name: str = Field(description="Kingdom tag")
    victory_points: int = 0
    player_ids: tuple[Id, ...] = ()
    
    model_config = {"frozen": True}


class Player(BaseModel):
    """A player and the villages they own, in export order."""
    name: str
    tribe: Tribe
    role: Role
    treasures: int = 0
    village_ids: tuple[Id, ...] = ()
    
    model_config = {"frozen": True}


class Village(BaseModel):
    """A village at a single grid coordinate."""
    name: str
    population: int = 0
    is_capital: bool = False
    is_city: bool = False
    coords: Coords
    crop_fields: Optional[int] = None  # Not part of the export
    
    model_config = {"frozen": True}
    
    @property
    def x(self) -> int:
        return self.coords[0]
    
    @property
    def y(self) -> int:
        return self.coords[1]
