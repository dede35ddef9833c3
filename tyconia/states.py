"""Game, in-game and HUD states and their transitions."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

__all__ = [
    "GameState",
    "InGameState",
    "DeveloperMode",
    "EnableHUD",
    "next_game_state",
    "apply_hud_toggles",
]


class GameState(Enum):
    """Top level state of the game; starts in ``LOADING``."""

    LOADING = "loading"
    PLAYING = "playing"
    MENU = "menu"
    QUIT = "quit"


class InGameState(Enum):
    """Sub-state while playing; starts in ``NORMAL``."""

    NORMAL = "normal"
    PAUSED = "paused"


@dataclass(frozen=True)
class DeveloperMode:
    """Whether developer tools are enabled; off by default."""

    enabled: bool = False


@dataclass(frozen=True)
class EnableHUD:
    """Whether the HUD is shown while playing; on by default."""

    enabled: bool = True

    ENABLED: ClassVar[EnableHUD]
    DISABLED: ClassVar[EnableHUD]

    def toggled(self) -> EnableHUD:
        """The opposite HUD state."""
        return EnableHUD(not self.enabled)


EnableHUD.ENABLED = EnableHUD(True)
EnableHUD.DISABLED = EnableHUD(False)


def next_game_state(current: GameState, events: Iterable[GameState]) -> GameState:
    """State after a frame's requested transitions: the last request wins."""
    state = current
    for requested in events:
        state = requested
    return state


def apply_hud_toggles(current: EnableHUD, events: Iterable[EnableHUD]) -> EnableHUD:
    """HUD state after a frame's toggle requests.

    Every request toggles the state as it was at the start of the frame, so
    any number of requests in one frame toggles it once.
    """
    return current.toggled() if any(True for _ in events) else current