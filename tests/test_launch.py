import numpy as np

from pingpong.config import PLAYER_HIT_TINT
from pingpong.physics import reset_ball


def test_serve_from_center(world, cfg):
    rng = np.random.default_rng(3)
    signs = set()
    for _ in range(100):
        world.ball.x, world.ball.y = -40, 17
        reset_ball(world, cfg, rng)
        assert (world.ball.x, world.ball.y) == (400, 300)
        assert abs(world.ball.vx) == 5
        assert -3 <= world.ball.vy <= 3
        signs.add(world.ball.vx > 0)
    assert signs == {True, False}


def test_reset_clears_tint_and_sizes_but_not_paddle_positions(world, cfg, rng):
    world.ball.tint.set(PLAYER_HIT_TINT, 0.0, 0.1)
    world.ball.radius = 4.0
    world.player.height = 140.0
    world.player.y, world.ai.y = 12.0, 333.0
    reset_ball(world, cfg, rng)
    assert world.ball.tint.color is None
    assert world.ball.radius == 10.0
    assert world.player.height == 100.0
    assert (world.player.y, world.ai.y) == (12.0, 333.0)
