"""Cell classifier - turns the raw cell list into coordinate-keyed Cells."""

from __future__ import annotations
from typing import Iterable, Mapping

from kingdoms_atlas.models.cells import Cell, Occupant, classify_cell
from kingdoms_atlas.models.entities import Coords, Id, Kingdom
from kingdoms_atlas.models.raw import RawCell


def classify_cells(
    cells: Iterable[RawCell],
    kingdoms: Mapping[Id, Kingdom],
    occupants: Mapping[Coords, Occupant],
) -> dict[Coords, Cell]:
    """Classify every cell against the kingdom table and the occupant index.
    
    A cell's declared kingdom only counts as its influence if that kingdom
    exists. Cells repeated at the same coordinate keep the last one.
    """
    classified: dict[Coords, Cell] = {}
    for raw in cells:
        coords = (raw.x, raw.y)
        influenced_by = raw.kingdom_id if raw.kingdom_id in kingdoms else None
        classified[coords] = classify_cell(
            raw.res_type,
            raw.oasis,
            influenced_by,
            occupants.get(coords),
        )
    return classified
