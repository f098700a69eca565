import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

logger = logging.getLogger(__name__)


class Phase(Enum):
    START = "start"
    PLAYING = "playing"
    GAME_OVER = "gameOver"


class SurfaceUnavailable(RuntimeError):
    """The drawing surface (or its context) could not be acquired."""


@dataclass
class Effect:
    # cosmetic color shown until `until` (clock seconds)
    color: Optional[tuple] = None
    until: float = 0.0

    def set(self, color, now, duration):
        self.color = color
        self.until = now + duration

    def clear(self):
        self.color = None
        self.until = 0.0

    def expire(self, now):
        if self.color is not None and now >= self.until:
            self.clear()


@dataclass
class Surface:
    width: float
    height: float


@dataclass
class Ball:
    x: float = 0.0
    y: float = 0.0
    vx: float = 0.0
    vy: float = 0.0
    radius: float = 10.0
    tint: Effect = field(default_factory=Effect)

    @property
    def speed(self):
        return (self.vx ** 2 + self.vy ** 2) ** 0.5


@dataclass
class Paddle:
    y: float = 0.0
    height: float = 100.0

    @property
    def center(self):
        return self.y + self.height / 2

    def clamp(self, surface_h):
        self.y = max(0.0, min(self.y, surface_h - self.height))


@dataclass
class Score:
    player: int = 0
    ai: int = 0

    def reset(self):
        self.player = 0
        self.ai = 0

    @property
    def best(self):
        return max(self.player, self.ai)


@dataclass
class World:
    surface: Surface
    ball: Ball = field(default_factory=Ball)
    player: Paddle = field(default_factory=Paddle)
    ai: Paddle = field(default_factory=Paddle)
    score: Score = field(default_factory=Score)
    flash: Effect = field(default_factory=Effect)


@dataclass(frozen=True)
class Snapshot:
    width: float
    height: float
    phase: Phase
    ball_x: float
    ball_y: float
    ball_radius: float
    ball_color: Tuple[int, int, int]
    paddle_w: float
    player_y: float
    player_h: float
    ai_y: float
    ai_h: float
    player_score: int
    ai_score: int
    flash: Optional[Tuple[int, int, int, int]]
    winner: Optional[str]


# activate: Start -> Playing, GameOver -> Start. Playing ignores it.
ON_ACTIVATE = {
    Phase.START: Phase.PLAYING,
    Phase.GAME_OVER: Phase.START,
}


class PhaseMachine:
    def __init__(self, win_score=5):
        self.win_score = win_score
        self.phase = Phase.START

    @property
    def playing(self):
        return self.phase is Phase.PLAYING

    def activate(self, score: Score):
        """Handle a click/tap. Returns the new phase, or None if ignored."""
        nxt = ON_ACTIVATE.get(self.phase)
        if nxt is None:
            return None
        score.reset()
        self._enter(nxt)
        return nxt

    def check_win(self, score: Score):
        if self.playing and score.best >= self.win_score:
            self._enter(Phase.GAME_OVER)
            return True
        return False

    def _enter(self, phase):
        logger.info("phase %s -> %s", self.phase.value, phase.value)
        self.phase = phase
