"""
Mode interface

Each visualization mode holds its own volatile state and exposes a single
update(tick) -> ModeUpdate contract. A mode never switches modes itself;
it returns the transition it wants and the state machine applies it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import IntEnum
from typing import FrozenSet, Iterable, Optional

from ..data.sensor_data import SensorSample
from ..visualization.frame import Frame


class Mode(IntEnum):
    """Application modes"""
    SPLASH = 0
    MENU = 1
    CUBE = 2
    LEVEL = 3
    GAME = 4
    LAUNCH = 5
    GRAPH = 6
    RAW = 7


# Modes that leave to the menu on an exit key
VISUALIZATION_MODES = frozenset({
    Mode.CUBE, Mode.LEVEL, Mode.GAME, Mode.LAUNCH, Mode.GRAPH, Mode.RAW,
})


class KeySnapshot:
    """Keys held down at the start of a tick"""

    def __init__(self, keys: Iterable[str] = ()):
        self._keys: FrozenSet[str] = frozenset(keys)

    def is_key_down(self, key_id: str) -> bool:
        return key_id in self._keys

    def any_down(self, key_ids: Iterable[str]) -> bool:
        return any(self.is_key_down(k) for k in key_ids)

    def __repr__(self):
        return f"KeySnapshot({sorted(self._keys)!r})"


@dataclass(frozen=True)
class TickInput:
    """Everything a mode may observe during one tick"""
    sample: SensorSample
    keys: KeySnapshot
    now_ms: int


@dataclass(frozen=True)
class ModeUpdate:
    """Result of one tick: the frame to present and an optional transition"""
    frame: Optional[Frame] = None
    transition: Optional[Mode] = None


class ModeBase(ABC):
    """Base class for all modes"""

    mode: Mode

    @abstractmethod
    def update(self, tick: TickInput) -> ModeUpdate:
        """Advance one tick"""
