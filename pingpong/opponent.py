from .config import Config
from .state import Ball, Paddle, World


def cpu_policy(ball: Ball, paddle: Paddle, cfg: Config) -> float:
    # Aim where the ball will be `lookahead` ticks from now, at ball speed
    target_y = ball.y + ball.vy * cfg.lookahead
    speed = abs(ball.vy) * cfg.opponent_gain
    if paddle.center < target_y - cfg.dead_zone:
        return speed
    if paddle.center > target_y + cfg.dead_zone:
        return -speed
    return 0.0


def legacy_policy(ball: Ball, paddle: Paddle, cfg: Config) -> float:
    # Chase the current ball height at a fixed step
    if paddle.center < ball.y - cfg.legacy_dead_zone:
        return cfg.legacy_step
    if paddle.center > ball.y + cfg.legacy_dead_zone:
        return -cfg.legacy_step
    return 0.0


POLICIES = {
    "lookahead": cpu_policy,
    "legacy": legacy_policy,
}


def move_opponent(world: World, cfg: Config):
    policy = POLICIES[cfg.opponent_policy]
    world.ai.y += policy(world.ball, world.ai, cfg)
    world.ai.clamp(world.surface.height)
