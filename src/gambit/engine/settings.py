"""Engine configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from gambit.engine.search import Difficulty

ENV_RANDOM_MOVE_RATE = "GAMBIT_RANDOM_MOVE_RATE"
ENV_MAX_DEPTH = "GAMBIT_MAX_DEPTH"


@dataclass(slots=True, frozen=True)
class EngineSettings:
    """Tunables for :func:`gambit.engine.select_move`.

    Args:
        random_move_rate: Chance that an easy opponent skips the search and
            plays a random legal move.
        max_depth: Optional cap applied to every difficulty's depth.
    """

    random_move_rate: float = 0.3
    max_depth: int | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.random_move_rate <= 1.0:
            raise ValueError(
                f"random_move_rate must be within [0, 1], got {self.random_move_rate}"
            )
        if self.max_depth is not None and self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")

    def depth_for(self, difficulty: Difficulty) -> int:
        if self.max_depth is None:
            return difficulty.depth
        return min(difficulty.depth, self.max_depth)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> EngineSettings:
        """Build settings from ``GAMBIT_*`` environment variables."""
        env = os.environ if environ is None else environ
        kwargs: dict[str, float | int] = {}

        rate = env.get(ENV_RANDOM_MOVE_RATE)
        if rate:
            try:
                kwargs["random_move_rate"] = float(rate)
            except ValueError:
                raise ValueError(f"Invalid {ENV_RANDOM_MOVE_RATE}: {rate!r}") from None

        depth = env.get(ENV_MAX_DEPTH)
        if depth:
            try:
                kwargs["max_depth"] = int(depth)
            except ValueError:
                raise ValueError(f"Invalid {ENV_MAX_DEPTH}: {depth!r}") from None

        return cls(**kwargs)  # type: ignore[arg-type]
