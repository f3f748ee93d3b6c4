"""Pixel-precise tile and solid collision world for platformer games."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from quadkit.geometry import Rect, Vec2


class Tile(enum.Enum):
    EMPTY = "empty"
    SOLID = "solid"
    JUMP_THROUGH = "jump_through"
    COLLIDER = "collider"

    def combine(self, other: Tile) -> Tile:
        """Merge two collision results; anything but empty/jump-through is solid."""
        soft = {Tile.EMPTY, Tile.JUMP_THROUGH}
        if self in soft and other in soft:
            if Tile.JUMP_THROUGH in (self, other):
                return Tile.JUMP_THROUGH
            return Tile.EMPTY
        return Tile.SOLID


@dataclass(frozen=True)
class Actor:
    """Handle of a moving actor in a World."""

    index: int


@dataclass(frozen=True)
class Solid:
    """Handle of a moving solid in a World."""

    index: int


@dataclass
class _StaticTiledLayer:
    static_colliders: list[Tile]
    tile_width: float
    tile_height: float
    width: int
    tag: int


@dataclass
class _Collider:
    pos: Vec2
    width: int
    height: int
    collidable: bool = True
    squished: bool = False
    x_remainder: float = 0.0
    y_remainder: float = 0.0
    squishers: set[Solid] = field(default_factory=set)
    descent: bool = False
    seen_wood: bool = False

    def rect(self) -> Rect:
        return Rect(self.pos.x, self.pos.y, float(self.width), float(self.height))


def _round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class World:
    """Static tile layers plus moving actors and solids."""

    def __init__(self) -> None:
        self._layers: list[_StaticTiledLayer] = []
        self._solids: list[_Collider] = []
        self._actors: list[_Collider] = []

    def add_static_tiled_layer(
        self,
        static_colliders,
        tile_width: float,
        tile_height: float,
        width: int,
        tag: int,
    ) -> None:
        if width <= 0:
            raise ValueError("layer width must be positive")
        self._layers.append(
            _StaticTiledLayer(list(static_colliders), tile_width, tile_height, width, tag)
        )

    def add_actor(self, pos: Vec2, width: int, height: int) -> Actor:
        actor = Actor(len(self._actors))
        inside_wood = self.collide_solids(pos, width, height) == Tile.JUMP_THROUGH
        self._actors.append(
            _Collider(pos, width, height, descent=inside_wood, seen_wood=inside_wood)
        )
        return actor

    def add_solid(self, pos: Vec2, width: int, height: int) -> Solid:
        solid = Solid(len(self._solids))
        self._solids.append(_Collider(pos, width, height))
        return solid

    def set_actor_position(self, actor: Actor, pos: Vec2) -> None:
        collider = self._actors[actor.index]
        collider.x_remainder = 0.0
        collider.y_remainder = 0.0
        collider.pos = pos

    def descent(self, actor: Actor) -> None:
        """Let the actor fall through jump-through tiles."""
        self._actors[actor.index].descent = True

    def move_v(self, actor: Actor, dy: float) -> bool:
        """Move vertically pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.y_remainder += dy

        move = _round(collider.y_remainder)
        if move != 0:
            collider.y_remainder -= move
            sign = _sign(move)
            while move != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(0.0, float(sign)), collider.width, collider.height
                )
                if tile == Tile.JUMP_THROUGH and collider.descent:
                    collider.seen_wood = True
                if tile == Tile.JUMP_THROUGH and sign < 0:
                    collider.seen_wood = True
                    collider.descent = True
                if tile == Tile.EMPTY or (tile == Tile.JUMP_THROUGH and collider.descent):
                    collider.pos = Vec2(collider.pos.x, collider.pos.y + sign)
                    move -= sign
                else:
                    return False

        if self.collide_solids(collider.pos, collider.width, collider.height) != Tile.JUMP_THROUGH:
            collider.seen_wood = False
            collider.descent = False
        return True

    def move_h(self, actor: Actor, dx: float) -> bool:
        """Move horizontally pixel by pixel; False if blocked."""
        collider = self._actors[actor.index]
        collider.x_remainder += dx

        move = _round(collider.x_remainder)
        if move != 0:
            collider.x_remainder -= move
            sign = _sign(move)
            while move != 0:
                tile = self.collide_solids(
                    collider.pos + Vec2(float(sign), 0.0), collider.width, collider.height
                )
                if tile == Tile.JUMP_THROUGH:
                    collider.descent = True
                    collider.seen_wood = True
                if tile in (Tile.EMPTY, Tile.JUMP_THROUGH):
                    collider.pos = Vec2(collider.pos.x + sign, collider.pos.y)
                    move -= sign
                else:
                    return False
        return True

    def solid_move(self, solid: Solid, dx: float, dy: float) -> None:
        """Move a solid, carrying riders and pushing (or squishing) actors."""
        collider = self._solids[solid.index]
        collider.x_remainder += dx
        collider.y_remainder += dy
        move_x = _round(collider.x_remainder)
        move_y = _round(collider.y_remainder)

        riding_rect = Rect(collider.pos.x, collider.pos.y - 1.0, float(collider.width), 1.0)
        pushing_rect = Rect(
            collider.pos.x + move_x,
            collider.pos.y,
            float(collider.width),
            float(collider.height),
        )

        riding: list[Actor] = []
        pushing: list[Actor] = []
        for index, actor_collider in enumerate(self._actors):
            rider_rect = Rect(
                actor_collider.pos.x,
                actor_collider.pos.y + actor_collider.height - 1.0,
                float(actor_collider.width),
                1.0,
            )
            overlaps_push = pushing_rect.overlaps(actor_collider.rect())
            if riding_rect.overlaps(rider_rect):
                riding.append(Actor(index))
            elif overlaps_push and not actor_collider.squished:
                pushing.append(Actor(index))

            if not overlaps_push:
                actor_collider.squishers.discard(solid)
                if not actor_collider.squishers:
                    actor_collider.squished = False

        collider.collidable = False
        for actor in riding:
            self.move_h(actor, float(move_x))
        for actor in pushing:
            if not self.move_h(actor, float(move_x)):
                pushed = self._actors[actor.index]
                pushed.squished = True
                pushed.squishers.add(solid)
        collider.collidable = True

        if move_x != 0:
            collider.x_remainder -= move_x
            collider.pos = Vec2(collider.pos.x + move_x, collider.pos.y)
        if move_y != 0:
            collider.y_remainder -= move_y
            collider.pos = Vec2(collider.pos.x, collider.pos.y + move_y)

    def solid_at(self, pos: Vec2) -> bool:
        return self.tag_at(pos, 1)

    def tag_at(self, pos: Vec2, tag: int) -> bool:
        """True if the first non-empty tile at pos carries the tag, or a solid covers pos."""
        for layer in self._layers:
            y = int(pos.y / layer.tile_width)
            x = int(pos.x / layer.tile_height)
            ix = y * layer.width + x
            if 0 <= ix < len(layer.static_colliders) and layer.static_colliders[ix] != Tile.EMPTY:
                return layer.tag == tag

        return any(c.collidable and c.rect().contains(pos) for c in self._solids)

    def collide_solids(self, pos: Vec2, width: int, height: int) -> Tile:
        tile = self.collide_tag(1, pos, width, height)
        if tile != Tile.EMPTY:
            return tile

        area = Rect(pos.x, pos.y, float(width), float(height))
        if any(c.collidable and c.rect().overlaps(area) for c in self._solids):
            return Tile.COLLIDER
        return Tile.EMPTY

    def collide_tag(self, tag: int, pos: Vec2, width: int, height: int) -> Tile:
        for layer in self._layers:
            colliders = layer.static_colliders
            layer_height = len(colliders) // layer.width + 1

            def check(p: Vec2, layer=layer, colliders=colliders, layer_height=layer_height) -> Tile:
                y = int(p.y / layer.tile_width)
                x = int(p.x / layer.tile_height)
                ix = y * layer.width + x
                if (
                    0 <= y < layer_height
                    and 0 <= x < layer.width
                    and 0 <= ix < len(colliders)
                    and layer.tag == tag
                    and colliders[ix] != Tile.EMPTY
                ):
                    return colliders[ix]
                return Tile.EMPTY

            tile = (
                check(pos)
                .combine(check(pos + Vec2(width - 1.0, 0.0)))
                .combine(check(pos + Vec2(width - 1.0, height - 1.0)))
                .combine(check(pos + Vec2(0.0, height - 1.0)))
            )
            if tile != Tile.EMPTY:
                return tile

            if width > int(layer.tile_width):
                x = pos.x + layer.tile_width
                while x < pos.x + width - 1.0:
                    tile = check(Vec2(x, pos.y)).combine(check(Vec2(x, pos.y + height - 1.0)))
                    if tile != Tile.EMPTY:
                        return tile
                    x += layer.tile_width

            if height > int(layer.tile_height):
                y = pos.y + layer.tile_height
                while y < pos.y + height - 1.0:
                    tile = check(Vec2(pos.x, y)).combine(check(Vec2(pos.x + width - 1.0, y)))
                    if tile != Tile.EMPTY:
                        return tile
                    y += layer.tile_height

        return Tile.EMPTY

    def squished(self, actor: Actor) -> bool:
        return self._actors[actor.index].squished

    def actor_pos(self, actor: Actor) -> Vec2:
        return self._actors[actor.index].pos

    def solid_pos(self, solid: Solid) -> Vec2:
        return self._solids[solid.index].pos

    def collide_check(self, actor: Actor, pos: Vec2) -> bool:
        """True if the actor placed at pos would hit something it cannot pass."""
        collider = self._actors[actor.index]
        tile = self.collide_solids(pos, collider.width, collider.height)
        if collider.descent:
            return tile in (Tile.SOLID, Tile.COLLIDER)
        return tile in (Tile.SOLID, Tile.COLLIDER, Tile.JUMP_THROUGH)