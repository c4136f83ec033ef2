"""Game objects of a level and the per-frame updates that move them."""

from __future__ import annotations

import itertools
import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_MONSTER_SPEED = 50.0
_MONSTER_STOP_DISTANCE = 50.0
_DEFAULT_RADIUS = 20.0
_DEFAULT_HEIGHT = 56.0


class MonsterType(Enum):
    IMP = "imp"
    DEMON = "demon"
    CACODEMON = "cacodemon"
    BARON_OF_HELL = "baron_of_hell"


class WeaponType(Enum):
    FIST = "fist"
    CHAINSAW = "chainsaw"
    PISTOL = "pistol"
    SHOTGUN = "shotgun"
    CHAINGUN = "chaingun"
    ROCKET_LAUNCHER = "rocket_launcher"
    PLASMA_RIFLE = "plasma_rifle"
    BFG9000 = "bfg9000"


class AmmoType(Enum):
    BULLETS = "bullets"
    SHELLS = "shells"
    ROCKETS = "rockets"
    CELLS = "cells"


class KeyType(Enum):
    BLUE = "blue"
    YELLOW = "yellow"
    RED = "red"


_ITEM_VARIANTS: dict[str, type | None] = {
    "health": None,
    "armor": None,
    "weapon": WeaponType,
    "ammo": AmmoType,
    "key": KeyType,
}


@dataclass(frozen=True)
class ItemType:
    """What a pickup is: health, armor, or a particular weapon, ammo or key."""

    category: str
    variant: WeaponType | AmmoType | KeyType | None = None

    def __post_init__(self) -> None:
        if self.category not in _ITEM_VARIANTS:
            raise ValueError(f"Unknown item category: {self.category!r}")
        expected = _ITEM_VARIANTS[self.category]
        if expected is None:
            if self.variant is not None:
                raise ValueError(f"{self.category} items take no variant")
        elif not isinstance(self.variant, expected):
            raise ValueError(
                f"{self.category} items need a {expected.__name__} variant"
            )

    @classmethod
    def health(cls) -> ItemType:
        return cls("health")

    @classmethod
    def armor(cls) -> ItemType:
        return cls("armor")

    @classmethod
    def weapon(cls, weapon: WeaponType) -> ItemType:
        return cls("weapon", weapon)

    @classmethod
    def ammo(cls, ammo: AmmoType) -> ItemType:
        return cls("ammo", ammo)

    @classmethod
    def key(cls, key: KeyType) -> ItemType:
        return cls("key", key)


@dataclass
class Monster:
    health: int
    monster_type: MonsterType


@dataclass
class Item:
    item_type: ItemType
    respawn_time: float | None = None


@dataclass
class Projectile:
    damage: int
    velocity: tuple[float, float]


@dataclass
class Decoration:
    pass


EntityType = Union[Monster, Item, Projectile, Decoration]


@dataclass
class Transform:
    x: float
    y: float
    z: float = 0.0
    angle: float = 0.0


@dataclass
class Collider:
    radius: float = _DEFAULT_RADIUS
    height: float = _DEFAULT_HEIGHT


@dataclass
class Sprite:
    name: str


@dataclass
class Entity:
    """One object in the world with its position, shape and appearance."""

    id: int
    kind: EntityType
    transform: Transform
    collider: Collider = field(default_factory=Collider)
    sprite: Sprite = field(default_factory=lambda: Sprite(""))
    active: bool = True


class World:
    """The entities of a level, keyed by id in spawn order."""

    def __init__(self) -> None:
        self.entities: dict[int, Entity] = {}
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self.entities)

    def __iter__(self):
        return iter(self.entities.values())

    def spawn_entity(
        self, x: float, y: float, entity_type: EntityType, sprite_name: str
    ) -> Entity:
        """Create an active entity at (x, y) with the default collider."""
        entity = Entity(
            id=next(self._ids),
            kind=entity_type,
            transform=Transform(x, y),
            collider=Collider(),
            sprite=Sprite(sprite_name),
        )
        self.entities[entity.id] = entity
        return entity

    def _active(self, kind: type):
        return (e for e in self.entities.values() if e.active and isinstance(e.kind, kind))

    def update_monsters(self, player_transform: Transform | None, dt: float) -> None:
        """Move active monsters towards the player until they are close."""
        if player_transform is None:
            return
        for monster in self._active(Monster):
            transform = monster.transform
            dx = player_transform.x - transform.x
            dy = player_transform.y - transform.y
            distance = math.hypot(dx, dy)
            if distance > _MONSTER_STOP_DISTANCE:
                transform.x += dx / distance * _MONSTER_SPEED * dt
                transform.y += dy / distance * _MONSTER_SPEED * dt
                transform.angle = math.atan2(dy, dx)

    def update_projectiles(self, dt: float) -> None:
        """Advance active projectiles along their velocity."""
        for projectile in self._active(Projectile):
            vx, vy = projectile.kind.velocity
            projectile.transform.x += vx * dt
            projectile.transform.y += vy * dt

    def update(self, player_transform: Transform | None, dt: float) -> None:
        """Run one frame of monster and projectile movement."""
        self.update_monsters(player_transform, dt)
        self.update_projectiles(dt)