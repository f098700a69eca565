import pytest

from pingpong.config import Config
from pingpong.state import Ball, Paddle, Surface, World


class StubRng:
    """Stands in for numpy's Generator with scripted draws."""

    def __init__(self, picks=(0.0,), uniforms=(), sign=-1):
        self.picks = list(picks)
        self.uniforms = list(uniforms)
        self.sign = sign

    def random(self):
        pick = self.picks.pop(0)
        self.picks.append(pick)
        return pick

    def uniform(self, low, high):
        if self.uniforms:
            return self.uniforms.pop(0)
        return (low + high) / 2

    def choice(self, options):
        return self.sign


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def stub_rng():
    """Factory: stub_rng(picks=..., uniforms=..., sign=...)."""
    return StubRng


@pytest.fixture
def rng():
    return StubRng()


def make_world(width=800, height=600, player_y=250.0, ai_y=250.0):
    return World(
        surface=Surface(width, height),
        ball=Ball(x=width / 2, y=height / 2, radius=10.0),
        player=Paddle(y=player_y, height=100.0),
        ai=Paddle(y=ai_y, height=100.0),
    )


@pytest.fixture
def world():
    return make_world()
