from __future__ import annotations

import pytest
from pydantic import ValidationError

from kingdoms_atlas.config import AtlasSettings, CollisionPolicy


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in (
        "KINGDOMS_ATLAS_LOG_LEVEL",
        "KINGDOMS_ATLAS_ON_COLLISION",
        "KINGDOMS_ATLAS_SUGGEST_THRESHOLD",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    settings = AtlasSettings.from_env()

    assert settings.log_level == "WARNING"
    assert settings.on_collision == CollisionPolicy.OVERWRITE
    assert settings.suggest_threshold == 70


def test_from_env(monkeypatch) -> None:
    monkeypatch.setenv("KINGDOMS_ATLAS_LOG_LEVEL", "debug")
    monkeypatch.setenv("KINGDOMS_ATLAS_ON_COLLISION", "ERROR")
    monkeypatch.setenv("KINGDOMS_ATLAS_SUGGEST_THRESHOLD", "85")

    settings = AtlasSettings.from_env()

    assert settings.log_level == "DEBUG"
    assert settings.on_collision == CollisionPolicy.ERROR
    assert settings.suggest_threshold == 85


def test_invalid_collision_policy(monkeypatch) -> None:
    monkeypatch.setenv("KINGDOMS_ATLAS_ON_COLLISION", "ignore")

    with pytest.raises(ValidationError):
        AtlasSettings.from_env()


def test_threshold_out_of_range(monkeypatch) -> None:
    monkeypatch.setenv("KINGDOMS_ATLAS_SUGGEST_THRESHOLD", "150")

    with pytest.raises(ValidationError):
        AtlasSettings.from_env()


def test_unknown_log_level(monkeypatch) -> None:
    monkeypatch.setenv("KINGDOMS_ATLAS_LOG_LEVEL", "verbose")

    with pytest.raises(ValidationError):
        AtlasSettings.from_env()
