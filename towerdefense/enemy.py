"""Enemies that walk along the path and, for some types, attack towers."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

from towerdefense.geometry import Vec2, distance

if TYPE_CHECKING:
    from towerdefense.tower import Tower

WAYPOINT_TOLERANCE = 5.0
ATTACK_RANGE = 70.0
ATTACK_DAMAGE = 20
LASER_FLASH_TIME = 0.1


class EnemyType(enum.Enum):
    NORMAL = "normal"
    ATTACK = "attack"
    BOSS = "boss"


@dataclass(eq=False)
class Enemy:
    """A walking enemy; ``health`` is also its starting maximum."""

    position: Vec2
    health: float
    type: EnemyType = EnemyType.NORMAL
    speed: float = 100.0
    cooldown: float = 1.0
    cooldown_timer: float = 0.0
    alive: bool = True
    current_waypoint: int = 0
    attack_laser_timer: float = 0.0
    last_attack_tower_index: Optional[int] = None
    max_health: float = field(init=False)

    def __post_init__(self) -> None:
        self.max_health = self.health

    def update(self, delta_time: float, path: Sequence[Vec2], towers: Sequence[Tower]) -> None:
        """Move toward the next waypoint and, for attackers, strike a nearby tower."""
        if not self.alive:
            return

        if self.current_waypoint < len(path):
            target = path[self.current_waypoint]
            offset = target - self.position
            dist = offset.length()
            if dist < WAYPOINT_TOLERANCE:
                self.current_waypoint += 1
            else:
                step = self.speed * delta_time / dist
                self.position = self.position + offset * step

        if self.type is EnemyType.ATTACK:
            self._attack(delta_time, towers)

    def _attack(self, delta_time: float, towers: Sequence[Tower]) -> None:
        self.last_attack_tower_index = None
        self.cooldown_timer -= delta_time
        if self.cooldown_timer <= 0.0:
            for index, tower in enumerate(towers):
                if tower.destroyed:
                    continue
                if distance(tower.position, self.position) < ATTACK_RANGE:
                    tower.take_damage(ATTACK_DAMAGE)
                    self.last_attack_tower_index = index
                    self.attack_laser_timer = LASER_FLASH_TIME
                    self.cooldown_timer = self.cooldown
                    break
        else:
            self.attack_laser_timer = max(0.0, self.attack_laser_timer - delta_time)
            self.last_attack_tower_index = None