"""Normalized, queryable model of a kingdoms map data snapshot."""

from __future__ import annotations
from typing import Optional, Union

from kingdoms_atlas.config import AtlasSettings
from kingdoms_atlas.models.game_world import GameWorld
from kingdoms_atlas.systems.world_builder import WorldBuilder


def load_world(raw_text: Union[str, bytes], settings: Optional[AtlasSettings] = None) -> GameWorld:
    """Decode and build a snapshot in one call."""
    return WorldBuilder(settings).from_raw_data(raw_text)


__all__ = ["AtlasSettings", "GameWorld", "WorldBuilder", "load_world"]
