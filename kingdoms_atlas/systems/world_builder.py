"""World builder - normalizes a decoded snapshot into a GameWorld."""

from __future__ import annotations
import logging
from typing import Optional, Union

from kingdoms_atlas.config import AtlasSettings, CollisionPolicy
from kingdoms_atlas.errors import CoordinateCollisionError
from kingdoms_atlas.models.cells import Occupant
from kingdoms_atlas.models.entities import Coords, Id, Kingdom, Player, Role, Tribe, Village
from kingdoms_atlas.models.game_world import GameWorld
from kingdoms_atlas.models.raw import RawMapData, RawPlayer, decode_snapshot
from kingdoms_atlas.systems.cell_classifier import classify_cells

logger = logging.getLogger(__name__)


class WorldBuilder:
    """Builds the entity tables, the occupant index and the cell table.
    
    A build either returns a complete GameWorld or raises; nothing partial is
    ever handed back.
    """
    
    def __init__(self, settings: Optional[AtlasSettings] = None):
        self.settings = settings or AtlasSettings()
    
    def from_raw_data(self, raw_text: Union[str, bytes]) -> GameWorld:
        """Decode raw snapshot text and build it."""
        return self.build(decode_snapshot(raw_text))
    
    def build(self, data: RawMapData) -> GameWorld:
        """Build a GameWorld from an already decoded snapshot."""
        kingdom_players: dict[Id, list[Id]] = {k.kingdom_id: [] for k in data.kingdoms}
        # player id -> kingdom id, filled alongside kingdom_players
        player_kingdom: dict[Id, Id] = {}
        
        players: dict[Id, Player] = {}
        villages: dict[Id, Village] = {}
        for raw_player in data.players:
            self._add_player(raw_player, players, villages, kingdom_players, player_kingdom)
        
        kingdoms = {
            k.kingdom_id: Kingdom(
                name=k.kingdom_tag,
                victory_points=k.victory_points,
                player_ids=tuple(kingdom_players[k.kingdom_id]),
            )
            for k in data.kingdoms
        }
        logger.info("Filled %d kingdoms", len(kingdoms))
        logger.info("Filled %d players", len(players))
        
        occupants = self.index_occupants(players, villages, player_kingdom)
        logger.info("Filled %d villages", len(villages))
        
        cells = classify_cells(data.map.cells, kingdoms, occupants)
        logger.info("Filled %d cells", len(cells))
        
        return GameWorld(
            name=data.gameworld.name,
            radius=data.map.radius,
            landscapes=data.map.landscapes,
            kingdoms=kingdoms,
            players=players,
            villages=villages,
            cells=cells,
        )
    
    def _add_player(
        self,
        raw: RawPlayer,
        players: dict[Id, Player],
        villages: dict[Id, Village],
        kingdom_players: dict[Id, list[Id]],
        player_kingdom: dict[Id, Id],
    ) -> None:
        tribe = Tribe.from_code(raw.tribe_id)
        role = Role.from_code(raw.role)
        
        village_ids = []
        for v in raw.villages:
            villages[v.village_id] = Village(
                name=v.name,
                population=v.population,
                is_capital=v.is_main_village,
                is_city=v.is_city,
                coords=(v.x, v.y),
            )
            village_ids.append(v.village_id)
        
        if raw.player_id in players:
            logger.warning("Player %d appears twice, keeping the later record", raw.player_id)
            previous_kid = player_kingdom.pop(raw.player_id, None)
            if previous_kid is not None:
                kingdom_players[previous_kid].remove(raw.player_id)
        
        players[raw.player_id] = Player(
            name=raw.name,
            tribe=tribe,
            role=role,
            treasures=raw.treasures,
            village_ids=tuple(village_ids),
        )
        
        # Players of unknown kingdoms stay in the player table, unaffiliated
        if raw.kingdom_id in kingdom_players:
            kingdom_players[raw.kingdom_id].append(raw.player_id)
            player_kingdom[raw.player_id] = raw.kingdom_id
    
    def index_occupants(
        self,
        players: dict[Id, Player],
        villages: dict[Id, Village],
        player_kingdom: dict[Id, Id],
    ) -> dict[Coords, Occupant]:
        """Map each village coordinate to its (kingdom, player, village) owners.
        
        Players are walked in table order, so with the overwrite policy the
        last village reported at a coordinate wins.
        """
        occupants: dict[Coords, Occupant] = {}
        for pid, player in players.items():
            kid = player_kingdom.get(pid)
            for vid in player.village_ids:
                village = villages.get(vid)
                if village is None:
                    continue
                
                existing = occupants.get(village.coords)
                if existing is not None and existing.village_id != vid:
                    if self.settings.on_collision == CollisionPolicy.ERROR:
                        raise CoordinateCollisionError(village.coords, existing.village_id, vid)
                    logger.warning(
                        "Village %d replaces village %d at %s",
                        vid, existing.village_id, village.coords,
                    )
                
                occupants[village.coords] = Occupant(kingdom_id=kid, player_id=pid, village_id=vid)
        return occupants
