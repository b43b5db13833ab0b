"""Application settings."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, replace

from simplechess.core.enums import Color

_ENV_PREFIX = "SIMPLECHESS_"


@dataclass(frozen=True)
class AppSettings:
    """All user-configurable settings."""

    # General
    language: str = "English"
    log_level: str = "WARNING"

    # Board
    board_theme: str = "Classic"
    show_legal_moves: bool = True

    # Computer opponent
    ai_color: Color = Color.BLACK
    ai_delay_ms: int = 500
    """Pause before the computer moves, purely cosmetic."""

    ai_seed: int | None = None
    """Seed for the move scorer's jitter; ``None`` plays differently each game."""

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``SIMPLECHESS_*`` environment variables."""
        env = os.environ if environ is None else environ
        settings = cls()

        if language := env.get(f"{_ENV_PREFIX}LANGUAGE"):
            settings = replace(settings, language=language)
        if theme := env.get(f"{_ENV_PREFIX}THEME"):
            settings = replace(settings, board_theme=theme)
        if level := env.get(f"{_ENV_PREFIX}LOG_LEVEL"):
            settings = replace(settings, log_level=level.upper())
        if delay := env.get(f"{_ENV_PREFIX}AI_DELAY_MS"):
            delay_ms = _parse_int(f"{_ENV_PREFIX}AI_DELAY_MS", delay)
            if delay_ms < 0:
                raise ValueError(f"{_ENV_PREFIX}AI_DELAY_MS must be >= 0, got {delay_ms}")
            settings = replace(settings, ai_delay_ms=delay_ms)
        if seed := env.get(f"{_ENV_PREFIX}AI_SEED"):
            settings = replace(settings, ai_seed=_parse_int(f"{_ENV_PREFIX}AI_SEED", seed))

        return settings


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
