"""
Tilt game

Steer a ball (or a bubble) onto a goal by tilting the device. Reaching the
goal swaps between the two themes:

- BubbleUnderIce: the bubble rises against gravity (sign +1)
- BallOnTable: the ball rolls downhill (sign -1)

A hit is acknowledged by a short yellow flash during which the game is
paused. The flash is a timed state, so the tick loop keeps running.
"""

import random
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..utils.constants import (
    WHITE, BLACK, RED, YELLOW, DARKGREY, ICE_BLUE, ICE_TEXT, ICE_HOLE, CENTER_X,
    GAME_SPEED, GAME_GOAL_RADIUS, GAME_BALL_START, GAME_BOUNDS,
    GAME_GOAL_ORIGIN, GAME_GOAL_SPAN, GAME_FLASH_MS,
)
from ..utils.utilities import clamp
from ..visualization.frame import Frame
from .base import Mode, ModeBase, ModeUpdate, TickInput


@dataclass
class GameState:
    """Volatile game state, recreated on every entry into the game"""
    ball_pos: Tuple[float, float] = GAME_BALL_START
    goal_pos: Optional[Tuple[int, int]] = None
    bubble_mode: bool = True
    first_run: bool = True
    flash_until_ms: Optional[int] = None


@dataclass
class GameTuning:
    """Feel-tuned constants, configurable per run"""
    speed: float = GAME_SPEED
    goal_radius: float = GAME_GOAL_RADIUS
    flash_ms: int = GAME_FLASH_MS
    bounds: Tuple[float, float, float, float] = field(default=GAME_BOUNDS)


def step_ball(pos, accel_xy, bubble_mode: bool, speed: float, bounds=GAME_BOUNDS):
    """
    Move the ball one tick and clamp it inside bounds

    Args:
        pos: (x, y) current position
        accel_xy: (ax, ay) in G
        bubble_mode: True for BubbleUnderIce, False for BallOnTable
        speed: pixels per G per tick

    Returns:
        tuple: new (x, y)
    """
    sign = 1.0 if bubble_mode else -1.0
    ax, ay = accel_xy
    x = pos[0] + sign * ax * speed
    y = pos[1] + sign * -ay * speed
    min_x, min_y, max_x, max_y = bounds
    return (clamp(x, min_x, max_x), clamp(y, min_y, max_y))


def is_hit(ball, goal, radius: float) -> bool:
    dx = ball[0] - goal[0]
    dy = ball[1] - goal[1]
    return dx * dx + dy * dy < radius * radius


class GameMode(ModeBase):
    mode = Mode.GAME

    def __init__(self, rng: random.Random = None, tuning: GameTuning = None):
        self.rng = rng if rng is not None else random.Random()
        self.tuning = tuning if tuning is not None else GameTuning()
        self.state = GameState()

    def _place_goal(self) -> Tuple[int, int]:
        ox, oy = GAME_GOAL_ORIGIN
        sx, sy = GAME_GOAL_SPAN
        return (ox + self.rng.randrange(sx), oy + self.rng.randrange(sy))

    @property
    def flashing(self) -> bool:
        return self.state.flash_until_ms is not None

    def update(self, tick: TickInput) -> ModeUpdate:
        state = self.state

        if state.flash_until_ms is not None:
            if tick.now_ms < state.flash_until_ms:
                return ModeUpdate(frame=Frame().fill_screen(YELLOW))
            state.flash_until_ms = None

        if state.first_run:
            state.ball_pos = GAME_BALL_START
            state.first_run = False
        if state.goal_pos is None:
            state.goal_pos = self._place_goal()

        state.ball_pos = step_ball(
            state.ball_pos, (tick.sample.ax, tick.sample.ay),
            state.bubble_mode, self.tuning.speed, self.tuning.bounds,
        )

        if is_hit(state.ball_pos, state.goal_pos, self.tuning.goal_radius):
            state.bubble_mode = not state.bubble_mode
            state.goal_pos = None
            state.flash_until_ms = tick.now_ms + self.tuning.flash_ms
            return ModeUpdate(frame=Frame().fill_screen(YELLOW))

        return ModeUpdate(frame=self._draw())

    def _draw(self) -> Frame:
        state = self.state
        px, py = state.ball_pos
        gx, gy = state.goal_pos

        frame = Frame()
        if state.bubble_mode:
            frame.fill_screen(ICE_BLUE)
            frame.text(CENTER_X, 5, "BUBBLE UNDER ICE", ICE_TEXT, align="center")
            frame.fill_circle(gx, gy, 10, WHITE)
            frame.fill_circle(gx, gy, 6, ICE_HOLE)
            frame.fill_circle(px, py, 8, WHITE)
        else:
            frame.fill_screen(WHITE)
            frame.text(CENTER_X, 5, "BALL ON TABLE", DARKGREY, align="center")
            frame.fill_circle(gx, gy, 8, BLACK)
            frame.fill_circle(px, py, 8, RED)
        return frame
