"""Systems that build and query a GameWorld."""

from .world_builder import WorldBuilder
from .cell_classifier import classify_cells
from .lookup import find_by_name, suggest_name, NameIndex
from .display_plan import DisplayGroup, RenderGroup, DisplayPlanResolver, square_bounds

__all__ = [
    "WorldBuilder",
    "classify_cells",
    "find_by_name",
    "suggest_name",
    "NameIndex",
    "DisplayGroup",
    "RenderGroup",
    "DisplayPlanResolver",
    "square_bounds",
]
