"""The simulation context: one object that owns the world and is driven by the host.

The host calls `tick(now)` once per frame, forwards clicks to `activate(now)`,
pointer moves to `set_pointer(y)` and window changes to `resize(now)`, and
draws whatever `snapshot(now)` returns. `now` is the host's clock in seconds;
it only drives effect expiry and the perturbation timer, never movement.

Everything runs on the host's single thread. The pointer field is
last-write-wins and is read once per tick; a multi-threaded host would need
to serialize calls into this object.
"""
import logging

import numpy as np

from . import physics
from .config import BALL_COLOR, Config
from .opponent import move_opponent
from .state import Ball, Paddle, Phase, PhaseMachine, Snapshot, Surface, SurfaceUnavailable, World

logger = logging.getLogger(__name__)


class Perturbator:
    """Every `cfg.perturb_every` seconds of play, resize one thing at random.

    A single draw picks the ball radius, the player paddle or the AI paddle
    with equal odds; the new size is the base size times U(min, max).
    Changes stick until the next ball reset.
    """

    def __init__(self, cfg: Config, rng):
        self.cfg = cfg
        self.rng = rng
        self.next_at = None

    @property
    def running(self):
        return self.next_at is not None

    def start(self, now):
        self.next_at = now + self.cfg.perturb_every

    def stop(self):
        self.next_at = None

    def poll(self, world: World, now):
        if self.next_at is None or now < self.next_at:
            return False
        self.next_at = now + self.cfg.perturb_every
        self.fire(world)
        return True

    def fire(self, world: World):
        cfg = self.cfg
        pick = self.rng.random()
        scale = float(self.rng.uniform(cfg.perturb_min, cfg.perturb_max))
        if pick < 1 / 3:
            world.ball.radius = cfg.ball_radius * scale
            what = "ball"
        elif pick < 2 / 3:
            world.player.height = cfg.paddle_h * scale
            world.player.clamp(world.surface.height)
            what = "player"
        else:
            world.ai.height = cfg.paddle_h * scale
            world.ai.clamp(world.surface.height)
            what = "ai"
        logger.debug("perturbation: %s x%.2f", what, scale)
        return what


def _clamp_inside(value, radius, limit):
    if limit > 2 * radius:
        return max(radius, min(value, limit - radius))
    return limit / 2


class Simulation:
    def __init__(self, surface_provider, cfg=None, rng=None, seed=None):
        self.cfg = cfg or Config()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.surface_provider = surface_provider
        self.machine = PhaseMachine(self.cfg.win_score)
        self.perturbator = Perturbator(self.cfg, self.rng)
        self.world = None
        self.ready = False
        self.pointer_y = None
        self.ticks = 0
        self.initialize()

    # -- surface --------------------------------------------------------
    def _query_surface(self):
        try:
            w, h = self.surface_provider()
        except SurfaceUnavailable as e:
            logger.warning("surface unavailable, simulation idle: %s", e)
            return None
        if w <= 0 or h <= 0:
            logger.warning("surface has no area (%sx%s), simulation idle", w, h)
            return None
        return Surface(float(w), float(h))

    def _go_idle(self):
        self.ready = False
        self.perturbator.stop()

    def initialize(self):
        """Build the world on a fresh surface: ball and paddles centered."""
        surface = self._query_surface()
        if surface is None:
            self._go_idle()
            return False
        cfg = self.cfg
        paddle_y = surface.height / 2 - cfg.paddle_h / 2
        world = World(
            surface=surface,
            ball=Ball(x=surface.width / 2, y=surface.height / 2, radius=cfg.ball_radius),
            player=Paddle(y=paddle_y, height=cfg.paddle_h),
            ai=Paddle(y=paddle_y, height=cfg.paddle_h),
        )
        world.player.clamp(surface.height)
        world.ai.clamp(surface.height)
        self.world = world
        self.ready = True
        return True

    def resize(self, now=0.0):
        """Re-read the surface size and clamp everything into it. Not a phase change."""
        if self.world is None:
            return self.initialize()
        surface = self._query_surface()
        if surface is None:
            self._go_idle()
            return False
        world = self.world
        world.surface = surface
        world.player.clamp(surface.height)
        world.ai.clamp(surface.height)
        # keep the whole ball on court so a resize never hands out a point
        ball = world.ball
        ball.x = _clamp_inside(ball.x, ball.radius, surface.width)
        ball.y = _clamp_inside(ball.y, ball.radius, surface.height)
        logger.debug("resized to %sx%s", surface.width, surface.height)
        if not self.ready and self.machine.playing:
            self.perturbator.start(now)
        self.ready = True
        return True

    # -- input ----------------------------------------------------------
    @property
    def phase(self):
        return self.machine.phase

    def set_pointer(self, y):
        self.pointer_y = y

    def activate(self, now=0.0):
        if not self.ready:
            return None
        nxt = self.machine.activate(self.world.score)
        if nxt is Phase.PLAYING:
            physics.reset_ball(self.world, self.cfg, self.rng)
            self.perturbator.start(now)
        elif nxt is not None:
            self.perturbator.stop()
        return nxt

    # -- loop -----------------------------------------------------------
    def _expire_effects(self, now):
        self.world.ball.tint.expire(now)
        self.world.flash.expire(now)

    def _place_player(self):
        if self.pointer_y is None:
            return
        p = self.world.player
        p.y = self.pointer_y - p.height / 2
        p.clamp(self.world.surface.height)

    def tick(self, now):
        """Advance one frame of play. Returns who scored this tick, if anyone."""
        if not self.ready or not self.machine.playing:
            return None
        world = self.world
        self._expire_effects(now)
        self.perturbator.poll(world, now)
        self._place_player()
        self.ticks += 1
        scorer = physics.step(world, self.cfg, now, self.rng, move_opponent)
        if scorer is not None and self.machine.check_win(world.score):
            self.perturbator.stop()
            logger.info("game over, %s wins %d-%d", self.winner, world.score.player, world.score.ai)
        return scorer

    @property
    def winner(self):
        if self.phase is not Phase.GAME_OVER:
            return None
        return "player" if self.world.score.player >= self.cfg.win_score else "ai"

    def snapshot(self, now):
        if self.world is None:
            return None
        self._expire_effects(now)
        w = self.world
        return Snapshot(
            width=w.surface.width,
            height=w.surface.height,
            phase=self.phase,
            ball_x=w.ball.x,
            ball_y=w.ball.y,
            ball_radius=w.ball.radius,
            ball_color=w.ball.tint.color or BALL_COLOR,
            paddle_w=self.cfg.paddle_w,
            player_y=w.player.y,
            player_h=w.player.height,
            ai_y=w.ai.y,
            ai_h=w.ai.height,
            player_score=w.score.player,
            ai_score=w.score.ai,
            flash=w.flash.color,
            winner=self.winner,
        )
