"""Application configuration: difficulty presets, turn pacing, logging.

Values come from dataclass defaults, optionally merged with a TOML file::

    log_level = "DEBUG"

    [search]
    medium_depth = 4

    [game]
    turn_time_limit_s = 90

``DAMA_CONFIG_TOML`` names the file (default ``dama.toml``),
``DAMA_SEARCH_DEPTH`` forces one depth for every difficulty and
``DAMA_LOG_LEVEL`` overrides ``log_level``.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any

_LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "dama.toml"


class Difficulty(Enum):
    """Computer strength, mapped to a search depth by :class:`SearchConfig`."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, name: str) -> Difficulty:
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown difficulty: {name!r}") from None

    def depth(self, config: Config | None = None) -> int:
        return (config or CONFIG).search.depth_for(self)


@dataclass
class SearchConfig:
    easy_depth: int = 2
    medium_depth: int = 5
    hard_depth: int = 7

    def depth_for(self, difficulty: Difficulty) -> int:
        return {
            Difficulty.EASY: self.easy_depth,
            Difficulty.MEDIUM: self.medium_depth,
            Difficulty.HARD: self.hard_depth,
        }[difficulty]


@dataclass
class GameConfig:
    turn_time_limit_s: float = 120.0
    ai_move_delay_ms: int = 500  # pause before the computer's move is shown
    repetition_limit: int = 3
    default_difficulty: str = "medium"


@dataclass
class Config:
    search: SearchConfig = field(default_factory=SearchConfig)
    game: GameConfig = field(default_factory=GameConfig)
    log_level: str = "INFO"

    @staticmethod
    def load_from_toml(path: str = DEFAULT_CONFIG_PATH) -> Config:
        cfg = Config()
        if not os.path.exists(path):
            return cfg
        try:
            with open(path, "rb") as f:
                raw = tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            _LOGGER.warning("Ignoring malformed config %s: %s", path, exc)
            return cfg

        _merge(cfg.search, raw.get("search", {}))
        _merge(cfg.game, raw.get("game", {}))
        if "log_level" in raw:
            cfg.log_level = str(raw["log_level"])
        return cfg

    def apply_env(self, environ: dict[str, str] | None = None) -> Config:
        """Apply ``DAMA_*`` environment overrides in place and return self."""
        env = os.environ if environ is None else environ
        depth = env.get("DAMA_SEARCH_DEPTH")
        if depth:
            try:
                forced = int(depth)
            except ValueError:
                _LOGGER.warning("Ignoring non-integer DAMA_SEARCH_DEPTH=%r", depth)
            else:
                self.search.easy_depth = forced
                self.search.medium_depth = forced
                self.search.hard_depth = forced
        level = env.get("DAMA_LOG_LEVEL")
        if level:
            self.log_level = level
        return self


def _merge(section: Any, values: dict[str, Any]) -> None:
    known = {f.name for f in fields(section)}
    for key, value in values.items():
        if key in known:
            setattr(section, key, value)
        else:
            _LOGGER.warning("Unknown config key %s.%s", type(section).__name__, key)


def configure_logging(level: str | None = None) -> None:
    """Set up root logging at *level* (defaults to the loaded config)."""
    logging.basicConfig(
        level=(level or CONFIG.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# single globally importable config instance
CONFIG = Config.load_from_toml(
    os.environ.get("DAMA_CONFIG_TOML", DEFAULT_CONFIG_PATH)
).apply_env()
