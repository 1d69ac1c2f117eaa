"""Error types raised while decoding and building a game world."""

from __future__ import annotations
from typing import Optional


class AtlasError(Exception):
    """Base class for all kingdoms_atlas errors."""


class DecodeError(AtlasError, ValueError):
    """The raw snapshot is not valid JSON or does not have the expected shape."""
    
    def __init__(self, message: str, errors: Optional[list[tuple[str, str]]] = None):
        super().__init__(message)
        self.errors = errors or []
    
    @property
    def field(self) -> Optional[str]:
        """Dotted path of the first offending field, if known."""
        return self.errors[0][0] if self.errors else None


class UnknownCodeError(AtlasError, ValueError):
    """A tribe or role code outside the known set."""
    
    def __init__(self, kind: str, code: object):
        super().__init__(f"Unknown {kind} code {code}")
        self.kind = kind
        self.code = code


class CoordinateCollisionError(AtlasError):
    """Two villages share a coordinate and collisions are configured as errors."""
    
    def __init__(self, coords: tuple[int, int], existing_village_id: int, village_id: int):
        super().__init__(
            f"Villages {existing_village_id} and {village_id} both occupy {coords}"
        )
        self.coords = coords
        self.existing_village_id = existing_village_id
        self.village_id = village_id


class UnknownGroupError(AtlasError, LookupError):
    """A display group name matches no kingdom."""
    
    def __init__(self, name: str, suggestion: Optional[str] = None):
        message = f"{name} kingdom not found"
        if suggestion:
            message += f" (did you mean '{suggestion}'?)"
        super().__init__(message)
        self.name = name
        self.suggestion = suggestion
