"""Name lookups over entity tables."""

from __future__ import annotations
from typing import Generic, Mapping, Optional, TypeVar

from thefuzz import fuzz

from kingdoms_atlas.models.entities import Id, Named

T = TypeVar("T", bound=Named)


def find_by_name(table: Mapping[Id, T], name: str) -> Optional[Id]:
    """Id of the first entity whose display name equals ``name``, or None."""
    for entity_id, entity in table.items():
        if entity.name == name:
            return entity_id
    return None


def suggest_name(names, query: str, threshold: int = 70) -> Optional[str]:
    """Closest name to ``query`` scoring at least ``threshold``, or None."""
    best_match = None
    best_score = 0
    
    for candidate in names:
        score = fuzz.ratio(query.lower(), candidate.lower())
        if score > best_score and score >= threshold:
            best_score = score
            best_match = candidate
    
    return best_match


class NameIndex(Generic[T]):
    """Name -> id mapping built once per table, for repeated lookups.
    
    Agrees with ``find_by_name``: when two entities share a name, the first
    one in table order wins.
    """
    
    def __init__(self, table: Mapping[Id, T]):
        self._ids: dict[str, Id] = {}
        for entity_id, entity in table.items():
            self._ids.setdefault(entity.name, entity_id)
    
    def get(self, name: str) -> Optional[Id]:
        return self._ids.get(name)
    
    def suggest(self, query: str, threshold: int = 70) -> Optional[str]:
        return suggest_name(self._ids, query, threshold)
