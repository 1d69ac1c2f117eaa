"""Grid cell schemas and the cell classification rule."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from kingdoms_atlas.models.entities import Id

NO_RESOURCE = "0"
NO_OASIS = "0"


class CellKind(str, Enum):
    """Mutually exclusive cell classifications."""
    OASIS = "oasis"
    EMPTY = "empty"
    OCCUPIED = "occupied"
    OTHER = "other"


@dataclass(frozen=True)
class Occupant:
    """Who holds the village standing on a coordinate."""
    kingdom_id: Optional[Id]
    player_id: Id
    village_id: Id


class Cell(BaseModel):
    """A classified grid cell.
    
    For OCCUPIED cells ``kingdom_id`` is the kingdom of the village owner (None
    when the owner has no kingdom) and ``player_id``/``village_id`` are set.
    For every other kind ``kingdom_id`` is the kingdom influencing the cell and
    the owner fields are None.
    """
    kind: CellKind
    kingdom_id: Optional[Id] = None
    player_id: Optional[Id] = None
    village_id: Optional[Id] = None
    
    model_config = {"frozen": True}
    
    @classmethod
    def occupied(cls, occupant: Occupant) -> "Cell":
        return cls(
            kind=CellKind.OCCUPIED,
            kingdom_id=occupant.kingdom_id,
            player_id=occupant.player_id,
            village_id=occupant.village_id,
        )
    
    @property
    def is_occupied(self) -> bool:
        return self.kind == CellKind.OCCUPIED
    
    @property
    def influenced_by(self) -> Optional[Id]:
        """Influencing kingdom, for cells that carry one."""
        return None if self.is_occupied else self.kingdom_id
    
    @property
    def occupant(self) -> Optional[Occupant]:
        if not self.is_occupied:
            return None
        return Occupant(self.kingdom_id, self.player_id, self.village_id)


def classify_cell(
    res_type: str,
    oasis: str,
    influenced_by: Optional[Id],
    occupant: Optional[Occupant],
) -> Cell:
    """Classify one cell. Order matters: a cell without resources is OTHER even
    when it is flagged as an oasis."""
    if res_type == NO_RESOURCE:
        return Cell(kind=CellKind.OTHER, kingdom_id=influenced_by)
    if oasis != NO_OASIS:
        return Cell(kind=CellKind.OASIS, kingdom_id=influenced_by)
    if occupant is None:
        return Cell(kind=CellKind.EMPTY, kingdom_id=influenced_by)
    return Cell.occupied(occupant)
