"""Ball movement, wall and paddle collisions, scoring and serving.

All displacement is per tick: the ball moves by (vx, vy) each call no
matter how much wall-clock time has passed. Collisions only look at the
ball's position after the move, so a very fast ball can tunnel through a
paddle without touching it.
"""
import logging

from .config import AI_HIT_TINT, AI_SCORED_FLASH, PLAYER_HIT_TINT, PLAYER_SCORED_FLASH, Config
from .state import Ball, Paddle, World

logger = logging.getLogger(__name__)


def integrate(ball: Ball):
    ball.x += ball.vx
    ball.y += ball.vy


def bounce_walls(world: World):
    """Push the ball back inside the court and send it away from the wall it crossed."""
    ball = world.ball
    h = world.surface.height
    if ball.y - ball.radius < 0:
        ball.y = ball.radius
        if ball.vy < 0:
            ball.vy = -ball.vy
        return True
    if ball.y + ball.radius > h:
        ball.y = h - ball.radius
        if ball.vy > 0:
            ball.vy = -ball.vy
        return True
    return False


def reflect_ball_from_paddle(ball: Ball, paddle: Paddle, cfg: Config):
    # Speed up only while under the cap; one hit may overshoot it slightly
    if ball.speed < cfg.max_speed:
        ball.vx *= cfg.speedup
        ball.vy *= cfg.speedup
    ball.vx = -ball.vx
    # Angle depends only on where the ball met the paddle
    ball.vy = (ball.y - paddle.center) * cfg.deflection


def _spans(paddle, y):
    return paddle.y <= y <= paddle.y + paddle.height


def collide_paddles(world: World, cfg: Config, now):
    """Bounce the ball off whichever paddle it reached. Returns "player", "ai" or None."""
    ball = world.ball
    if ball.vx < 0 and ball.x - ball.radius < cfg.paddle_w and _spans(world.player, ball.y):
        reflect_ball_from_paddle(ball, world.player, cfg)
        ball.tint.set(PLAYER_HIT_TINT, now, cfg.hit_tint_secs)
        return "player"
    right = world.surface.width - cfg.paddle_w
    if ball.vx > 0 and ball.x + ball.radius > right and _spans(world.ai, ball.y):
        reflect_ball_from_paddle(ball, world.ai, cfg)
        ball.tint.set(AI_HIT_TINT, now, cfg.hit_tint_secs)
        return "ai"
    return None


def reset_ball(world: World, cfg: Config, rng):
    """Re-center the ball, undo perturbations and serve in a random direction.

    Paddle positions are left alone so paddles keep their place across points.
    """
    ball = world.ball
    ball.x = world.surface.width / 2
    ball.y = world.surface.height / 2
    ball.tint.clear()

    ball.radius = cfg.ball_radius
    world.player.height = cfg.paddle_h
    world.ai.height = cfg.paddle_h
    # base heights can be taller than a shrunken surface allows
    world.player.clamp(world.surface.height)
    world.ai.clamp(world.surface.height)

    ball.vx = float(rng.choice([-1, 1])) * cfg.initial_speed
    ball.vy = float(rng.uniform(-cfg.launch_vy, cfg.launch_vy))


def check_score(world: World, cfg: Config, now, rng):
    """Award a point if the ball left the court, then serve again. Returns the scorer."""
    ball = world.ball
    if ball.x < 0:
        world.score.ai += 1
        world.flash.set(AI_SCORED_FLASH, now, cfg.flash_secs)
        scorer = "ai"
    elif ball.x > world.surface.width:
        world.score.player += 1
        world.flash.set(PLAYER_SCORED_FLASH, now, cfg.flash_secs)
        scorer = "player"
    else:
        return None
    logger.debug("%s scores: %d-%d", scorer, world.score.player, world.score.ai)
    reset_ball(world, cfg, rng)
    return scorer


def step(world: World, cfg: Config, now, rng, move_opponent=None):
    """One tick of play. `move_opponent` runs right after the ball moves."""
    integrate(world.ball)
    if move_opponent is not None:
        move_opponent(world, cfg)
    bounce_walls(world)
    collide_paddles(world, cfg, now)
    return check_score(world, cfg, now, rng)
