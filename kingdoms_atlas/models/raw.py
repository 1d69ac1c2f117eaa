"""Raw snapshot schemas - the shape of the map data export, before normalization.

The export is loosely typed: ids, coordinates and counts arrive either as JSON
numbers or as numeric strings. Every integer field below goes through
``CoercedInt`` so both spellings decode to the same ``int``. No business rules
are checked here; the world builder does that.
"""

from __future__ import annotations
import re
from typing import Annotated, Any, Union

from pydantic import BaseModel, BeforeValidator, StrictBool, StrictStr, ValidationError
from pydantic.alias_generators import to_camel

from kingdoms_atlas.errors import DecodeError


_INT_STRING = re.compile(r"[+-]?[0-9]+")


def coerce_int(value: Any) -> int:
    """Accept a JSON integer or a string of digits, reject everything else."""
    # bool is an int subclass, but true/false is never a valid id or count
    if isinstance(value, bool):
        raise ValueError("expected an integer or numeric string, got a boolean")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        if _INT_STRING.fullmatch(value):
            return int(value)
        raise ValueError(f"invalid numeric string {value!r}")
    raise ValueError(f"expected an integer or numeric string, got {type(value).__name__}")


CoercedInt = Annotated[int, BeforeValidator(coerce_int)]


class RawModel(BaseModel):
    """Base for all raw schemas: camelCase keys on the wire, read-only once parsed."""
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "frozen": True,
    }


class RawGameWorld(RawModel):
    """Gameworld metadata block."""
    name: StrictStr
    start_time: CoercedInt
    speed: CoercedInt
    speed_troops: CoercedInt
    last_update_time: CoercedInt
    date: CoercedInt
    version: StrictStr


class RawVillage(RawModel):
    village_id: CoercedInt
    x: CoercedInt
    y: CoercedInt
    population: CoercedInt
    name: StrictStr
    is_main_village: StrictBool
    is_city: StrictBool


class RawPlayer(RawModel):
    """A player record with its villages nested inline."""
    player_id: CoercedInt
    name: StrictStr
    tribe_id: StrictStr
    kingdom_id: CoercedInt
    treasures: CoercedInt
    role: CoercedInt
    external_login_token: StrictStr
    villages: list[RawVillage]


class RawKingdom(RawModel):
    kingdom_id: CoercedInt
    kingdom_tag: StrictStr
    creation_time: CoercedInt
    victory_points: CoercedInt


class RawCell(RawModel):
    """One grid cell. ``res_type`` and ``oasis`` are string codes, "0" meaning none."""
    id: CoercedInt
    x: CoercedInt
    y: CoercedInt
    res_type: StrictStr
    oasis: StrictStr
    landscape: CoercedInt
    kingdom_id: CoercedInt


class RawMap(RawModel):
    radius: CoercedInt
    cells: list[RawCell]
    landscapes: dict[CoercedInt, StrictStr]


class RawMapData(RawModel):
    """Everything under ``response`` in the export."""
    gameworld: RawGameWorld
    players: list[RawPlayer]
    kingdoms: list[RawKingdom]
    map: RawMap


class RawResponse(RawModel):
    response: RawMapData


def _format_loc(loc: tuple) -> str:
    return ".".join(str(part) for part in loc) or "<root>"


def decode_snapshot(raw_text: Union[str, bytes]) -> RawMapData:
    """Parse raw snapshot text into a ``RawMapData``.
    
    Raises DecodeError naming the first offending field on invalid JSON,
    missing fields, wrong shapes, or numeric fields of the wrong type.
    """
    try:
        parsed = RawResponse.model_validate_json(raw_text)
    except ValidationError as e:
        errors = [(_format_loc(err["loc"]), err["msg"]) for err in e.errors()]
        location, message = errors[0]
        extra = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        raise DecodeError(f"Invalid snapshot at {location}: {message}{extra}", errors) from e
    return parsed.response
