"""Ready-made emitter configurations for common effects."""

from __future__ import annotations

import math

from quadkit.emitter_config import AtlasConfig, BlendMode, Curve, EmitterConfig
from quadkit.geometry import Vec2


def explosion() -> EmitterConfig:
    """A one-shot burst, triggered by setting emitting to True."""
    return EmitterConfig(
        one_shot=True,
        emitting=False,
        lifetime=0.3,
        lifetime_randomness=0.7,
        explosiveness=0.95,
        amount=30,
        initial_direction_spread=2.0 * math.pi,
        initial_velocity=200.0,
        size=30.0,
        gravity=Vec2(0.0, -1000.0),
        atlas=AtlasConfig.from_range(4, 4, 8),
        blend_mode=BlendMode.ADDITIVE,
    )


def smoke() -> EmitterConfig:
    """A steady, narrow plume of smoke."""
    return EmitterConfig(
        lifetime=0.8,
        amount=20,
        initial_direction_spread=0.2,
        atlas=AtlasConfig.from_range(4, 4, 0, 8),
    )


def fire() -> EmitterConfig:
    """Fast, short-lived additive flames."""
    return EmitterConfig(
        lifetime=0.4,
        lifetime_randomness=0.1,
        amount=10,
        initial_direction_spread=0.5,
        initial_velocity=300.0,
        atlas=AtlasConfig.from_range(4, 4, 8),
        size=20.0,
        blend_mode=BlendMode.ADDITIVE,
    )


def fountain() -> EmitterConfig:
    """Small particles that grow then shrink over their life."""
    return EmitterConfig(
        lifetime=0.5,
        amount=5,
        initial_direction_spread=0.0,
        initial_velocity=-50.0,
        size=2.0,
        size_curve=Curve(points=[(0.0, 0.5), (0.5, 1.0), (1.0, 0.0)]),
        blend_mode=BlendMode.ADDITIVE,
    )