"""Settings loaded from config.toml."""
from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from xp_progression.mechanics.level_floor import MAX_EXPERIENCE

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config.toml"


class ProgressionSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    upper_bound: int = Field(default=MAX_EXPERIENCE, ge=1)
    default_formula: str = "linear"
    step: int = Field(default=100, ge=1)


def _load_toml(config_path: Path) -> dict[str, Any]:
    if config_path.exists():
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    logger.debug(f"No config file at {config_path}, using defaults")
    return {}


def load_config(config_path: Path | None = None) -> ProgressionSettings:
    """Load the [progression] table from config.toml (project root by default)."""
    raw = _load_toml(config_path or DEFAULT_CONFIG_PATH)
    return ProgressionSettings.model_validate(raw.get("progression", {}))
