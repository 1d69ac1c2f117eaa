"""Display plan resolution - turns (name, color) groups into drawable village sets."""

from __future__ import annotations
from typing import Annotated, Iterable, Optional, Union

from pydantic import BaseModel, Field

from kingdoms_atlas.config import AtlasSettings
from kingdoms_atlas.errors import UnknownGroupError
from kingdoms_atlas.models.entities import Coords, Id, Village
from kingdoms_atlas.models.game_world import GameWorld
from kingdoms_atlas.systems.lookup import NameIndex

Channel = Annotated[int, Field(ge=0, le=255)]
RGB = tuple[Channel, Channel, Channel]
Bounds = tuple[tuple[float, float], tuple[float, float]]


def square_bounds(coords: Coords, size: float = 1) -> Bounds:
    """Corners of a square of side ``size`` centred on a grid coordinate."""
    x, y = coords
    half = size / 2
    return ((x - half, y - half), (x + half, y + half))


class DisplayGroup(BaseModel):
    """One entry of a display plan: a kingdom name and the color to draw it in."""
    name: str
    color: RGB
    
    model_config = {"frozen": True}


class RenderGroup(BaseModel):
    """A resolved display group, ready for a renderer."""
    name: str
    color: RGB
    kingdom_id: Id
    villages: list[Village] = Field(default_factory=list)
    
    def bounds(self, size: float = 1) -> list[Bounds]:
        return [square_bounds(v.coords, size) for v in self.villages]


class DisplayPlanResolver:
    """Resolves display plans against one GameWorld."""
    
    def __init__(self, world: GameWorld, settings: Optional[AtlasSettings] = None):
        self.world = world
        self.settings = settings or AtlasSettings()
        self._kingdom_names = NameIndex(world.kingdoms)
    
    def resolve_group(self, group: DisplayGroup) -> RenderGroup:
        kingdom_id = self._kingdom_names.get(group.name)
        if kingdom_id is None:
            suggestion = self._kingdom_names.suggest(group.name, self.settings.suggest_threshold)
            raise UnknownGroupError(group.name, suggestion)
        
        return RenderGroup(
            name=group.name,
            color=group.color,
            kingdom_id=kingdom_id,
            villages=self.world.kingdom_villages(kingdom_id),
        )
    
    def resolve(
        self, plan: Iterable[Union[DisplayGroup, tuple[str, RGB]]]
    ) -> list[RenderGroup]:
        """Resolve every group in plan order. Any unknown name aborts the request."""
        groups = []
        for entry in plan:
            if not isinstance(entry, DisplayGroup):
                name, color = entry
                entry = DisplayGroup(name=name, color=color)
            groups.append(self.resolve_group(entry))
        return groups
