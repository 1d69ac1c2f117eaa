"""Runtime settings, read from the environment (and a .env file if present)."""

from __future__ import annotations
import os
from enum import Enum
from typing import Literal

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CollisionPolicy(str, Enum):
    """What to do when two villages report the same coordinate."""
    OVERWRITE = "overwrite"  # Last village wins, a warning is logged
    ERROR = "error"


class AtlasSettings(BaseModel):
    """Settings shared by the builder and the REPL."""
    log_level: LogLevel = Field(default="WARNING", description="Logging level name")
    on_collision: CollisionPolicy = CollisionPolicy.OVERWRITE
    suggest_threshold: int = Field(
        default=70, ge=0, le=100,
        description="Minimum fuzzy ratio for 'did you mean' suggestions",
    )
    
    model_config = {"frozen": True}
    
    @classmethod
    def from_env(cls) -> "AtlasSettings":
        """Build settings from KINGDOMS_ATLAS_* environment variables."""
        values = {}
        
        log_level = os.getenv("KINGDOMS_ATLAS_LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()
        
        on_collision = os.getenv("KINGDOMS_ATLAS_ON_COLLISION")
        if on_collision:
            values["on_collision"] = on_collision.lower()
        
        threshold = os.getenv("KINGDOMS_ATLAS_SUGGEST_THRESHOLD")
        if threshold:
            values["suggest_threshold"] = threshold
        
        return cls(**values)
