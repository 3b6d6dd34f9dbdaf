"""Game management layer: turn order, move history, game-over state.

Quick start::

    from gambit.game import GameState

    game = GameState()
    game.setup()
    game.play_san("e4")
"""

from gambit.game.state import GamePhase, GameState, MoveRecord

__all__ = [
    "GamePhase",
    "GameState",
    "MoveRecord",
]
