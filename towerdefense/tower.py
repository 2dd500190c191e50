"""Defensive towers that shoot at enemies within their range."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from towerdefense.geometry import Vec2, distance

if TYPE_CHECKING:
    from towerdefense.enemy import Enemy

TOWER_MAX_HEALTH = 100
POISON_SPLASH_RANGE_FACTOR = 0.6
POISON_SPLASH_DAMAGE_FACTOR = 0.5


class TowerType(enum.Enum):
    BASIC = "basic"
    LASER = "laser"
    POISON = "poison"


_COSTS = {
    TowerType.BASIC: 100,
    TowerType.LASER: 150,
    TowerType.POISON: 200,
}

# range, damage, seconds between shots
_SPECS = {
    TowerType.BASIC: (80.0, 10.0, 1.0),
    TowerType.LASER: (100.0, 5.0, 0.2),
    TowerType.POISON: (70.0, 2.0, 1.5),
}


@dataclass(eq=False)
class Tower:
    """A tower placed on the map."""

    position: Vec2
    range: float
    damage: float
    fire_rate: float
    type: TowerType = TowerType.BASIC
    fire_timer: float = 0.0
    destroyed: bool = False
    health: int = TOWER_MAX_HEALTH
    cost: int = field(init=False)

    def __post_init__(self) -> None:
        self.cost = _COSTS[self.type]

    def update(self, delta_time: float, enemies: Iterable[Enemy]) -> None:
        """Advance the fire timer and shoot the closest living enemy in range."""
        if self.destroyed:
            return
        self.fire_timer -= delta_time
        if self.fire_timer > 0.0:
            return

        enemies = list(enemies)
        in_range = [
            (d, enemy)
            for enemy in enemies
            if enemy.alive
            for d in (distance(self.position, enemy.position),)
            if d < self.range
        ]
        if not in_range:
            return

        _, target = min(in_range, key=lambda pair: pair[0])
        target.health -= self.damage
        self.fire_timer = self.fire_rate

        if self.type is TowerType.POISON:
            splash_range = self.range * POISON_SPLASH_RANGE_FACTOR
            for enemy in enemies:
                if enemy.alive and distance(self.position, enemy.position) < splash_range:
                    enemy.health -= self.damage * POISON_SPLASH_DAMAGE_FACTOR

    def take_damage(self, dmg: int) -> None:
        """Reduce health; the tower is destroyed once health reaches zero."""
        self.health -= dmg
        if self.health <= 0:
            self.destroyed = True


def build_tower(tower_type: TowerType, position: Vec2 = Vec2()) -> Tower:
    """Create a tower of the given type with its standard statistics."""
    tower_range, damage, fire_rate = _SPECS[tower_type]
    return Tower(position, tower_range, damage, fire_rate, tower_type)