"""GameWorld - the normalized, cross-referenced model of one snapshot."""

from __future__ import annotations
from collections import Counter
from typing import Optional

from pydantic import BaseModel, Field

from kingdoms_atlas.models.cells import Cell, CellKind
from kingdoms_atlas.models.entities import Coords, Id, Kingdom, Player, Village


class GameWorld(BaseModel):
    """Kingdom, player, village and cell tables built from one snapshot.
    
    Built once by the WorldBuilder and never modified afterwards, so a single
    instance can be shared between readers.
    """
    name: str = "Unknown world"
    radius: int
    landscapes: dict[int, str] = Field(default_factory=dict)
    
    kingdoms: dict[Id, Kingdom] = Field(default_factory=dict)
    players: dict[Id, Player] = Field(default_factory=dict)
    villages: dict[Id, Village] = Field(default_factory=dict)
    cells: dict[Coords, Cell] = Field(default_factory=dict)
    
    model_config = {"frozen": True}
    
    # ===== Ownership queries =====
    
    def player_villages(self, player_id: Id) -> list[Village]:
        """Villages owned by a player, in the player's order. Empty if unknown."""
        player = self.players.get(player_id)
        if player is None:
            return []
        return [self.villages[vid] for vid in player.village_ids if vid in self.villages]
    
    def kingdom_villages(self, kingdom_id: Id) -> list[Village]:
        """Villages of every player of a kingdom, in player order then village order."""
        kingdom = self.kingdoms.get(kingdom_id)
        if kingdom is None:
            return []
        villages = []
        for pid in kingdom.player_ids:
            villages.extend(self.player_villages(pid))
        return villages
    
    # ===== Cell queries =====
    
    def cell_at(self, x: int, y: int) -> Optional[Cell]:
        return self.cells.get((x, y))
    
    def cells_of_kind(self, kind: CellKind) -> list[Coords]:
        """Coordinates of all cells of the given kind."""
        return [coords for coords, cell in self.cells.items() if cell.kind == kind]
    
    def summary(self) -> str:
        """Generate a text summary of the world."""
        lines = [
            f"=== {self.name} ===",
            f"Radius: {self.radius}",
            "",
            f"  Kingdoms: {len(self.kingdoms)}",
            f"  Players: {len(self.players)}",
            f"  Villages: {len(self.villages)}",
            f"  Cells: {len(self.cells)}",
        ]
        
        if self.cells:
            counts = Counter(cell.kind for cell in self.cells.values())
            lines.append("")
            lines.append("--- Cells ---")
            for kind in CellKind:
                lines.append(f"  {kind.value}: {counts.get(kind, 0)}")
        
        return "\n".join(lines)
