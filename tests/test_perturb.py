import numpy as np
import pytest

from pingpong.physics import reset_ball
from pingpong.sim import Perturbator


@pytest.mark.parametrize("pick,what", [(0.1, "ball"), (0.5, "player"), (0.9, "ai")])
def test_one_thing_changes_per_firing(world, cfg, stub_rng, pick, what):
    p = Perturbator(cfg, stub_rng(picks=[pick], uniforms=[1.5]))
    assert p.fire(world) == what
    sizes = {"ball": world.ball.radius, "player": world.player.height, "ai": world.ai.height}
    base = {"ball": 10.0, "player": 100.0, "ai": 100.0}
    for key in sizes:
        expected = base[key] * 1.5 if key == what else base[key]
        assert sizes[key] == pytest.approx(expected)


def test_grown_paddle_stays_on_court(world, cfg, stub_rng):
    world.player.y = 500
    Perturbator(cfg, stub_rng(picks=[0.5], uniforms=[1.5])).fire(world)
    assert world.player.y == 450


def test_timer_fires_every_period(world, cfg, stub_rng):
    p = Perturbator(cfg, stub_rng(picks=[0.1], uniforms=[0.5]))
    assert not p.poll(world, 5.0)
    p.start(2.0)
    assert not p.poll(world, 11.9)
    assert p.poll(world, 12.0)
    assert p.next_at == 22.0
    assert world.ball.radius == 5.0


def test_stopped_timer_never_fires(world, cfg, rng):
    p = Perturbator(cfg, rng)
    p.start(0.0)
    p.stop()
    assert not p.running
    assert not p.poll(world, 100.0)


def test_sizes_persist_until_reset(world, cfg, stub_rng, rng):
    p = Perturbator(cfg, stub_rng(picks=[0.1, 0.9], uniforms=[0.5, 0.7]))
    p.fire(world)
    p.fire(world)
    assert world.ball.radius == pytest.approx(5.0)
    assert world.ai.height == pytest.approx(70.0)
    reset_ball(world, cfg, rng)
    assert world.ball.radius == 10.0
    assert world.ai.height == 100.0


def test_scale_range_with_numpy_generator(world, cfg):
    p = Perturbator(cfg, np.random.default_rng(7))
    for _ in range(200):
        p.fire(world)
        assert 5.0 <= world.ball.radius <= 15.0
        assert 50.0 <= world.player.height <= 150.0
        assert 50.0 <= world.ai.height <= 150.0
