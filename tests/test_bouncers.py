import random

import pytest

from quadkit.bouncers import Bouncer, spawn_burst
from quadkit.emitter_config import Color
from quadkit.geometry import Vec2

GREY = Color(0.5, 0.5, 0.5, 1.0)


def test_burst_count_and_position():
    origin = Vec2(30.0, 40.0)
    burst = spawn_burst(origin, random.Random(1), 25)
    assert len(burst) == 25
    assert all(b.pos == origin for b in burst)


def test_burst_speed_and_color_ranges():
    for b in spawn_burst(Vec2(0.0, 0.0), random.Random(2), 200):
        assert abs(b.speed.x) <= 250.0 / 60.0
        assert abs(b.speed.y) <= 250.0 / 60.0
        assert 50 / 255.0 <= b.color.r < 240 / 255.0
        assert 80 / 255.0 <= b.color.g < 240 / 255.0
        assert 100 / 255.0 <= b.color.b < 240 / 255.0
        assert b.color.a == 1.0


def test_burst_deterministic_with_seed():
    a = spawn_burst(Vec2(0.0, 0.0), random.Random(5), 10)
    b = spawn_burst(Vec2(0.0, 0.0), random.Random(5), 10)
    assert a == b


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        spawn_burst(Vec2(0.0, 0.0), random.Random(0), -1)


def test_step_moves_by_speed():
    b = Bouncer(Vec2(100.0, 100.0), Vec2(2.0, -3.0), GREY)
    b.step(800.0, 600.0, 10.0, 10.0)
    assert b.pos == Vec2(102.0, 97.0)
    assert b.speed == Vec2(2.0, -3.0)


def test_bounces_off_right_edge():
    b = Bouncer(Vec2(795.0, 100.0), Vec2(2.0, 1.0), GREY)
    b.step(800.0, 600.0, 10.0, 10.0)
    assert b.speed == Vec2(-2.0, 1.0)


def test_bounces_off_top_edge():
    b = Bouncer(Vec2(100.0, -4.0), Vec2(1.0, -2.0), GREY)
    b.step(800.0, 600.0, 10.0, 10.0)
    assert b.speed == Vec2(1.0, 2.0)