from dataclasses import replace

import numpy as np
import pytest

from pingpong import Simulation
from pingpong.config import AI_COLOR, AI_SCORED_FLASH, BALL_COLOR, PLAYER_COLOR
from pingpong.raster import render_rgb


@pytest.fixture
def snap(rng):
    return Simulation(lambda: (200, 120), rng=rng).snapshot(0.0)


def test_draws_court(snap):
    img = render_rgb(snap)
    assert img.shape == (120, 200, 3)
    assert img.dtype == np.uint8
    assert tuple(img[60, 100]) == BALL_COLOR
    assert tuple(img[int(snap.player_y) + 5, 0]) == PLAYER_COLOR
    assert tuple(img[int(snap.ai_y) + 5, 199]) == AI_COLOR


def test_scale(snap):
    assert render_rgb(snap, scale=2).shape == (240, 400, 3)


def test_flash_tints_whole_court(snap):
    plain = render_rgb(snap)
    flashed = render_rgb(replace(snap, flash=AI_SCORED_FLASH))
    assert not np.array_equal(plain, flashed)
    assert flashed[60, 100, 0] >= flashed[60, 100, 2]
