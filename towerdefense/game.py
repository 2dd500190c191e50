"""Game state machine: spawning waves, placing towers and tracking lives."""

from __future__ import annotations

import copy
import enum
import random
from dataclasses import dataclass, field
from typing import NamedTuple, Optional

from towerdefense.enemy import Enemy, EnemyType
from towerdefense.geometry import Vec2, is_near_path
from towerdefense.tower import Tower, TowerType, build_tower

STARTING_MONEY = 3000
RESET_MONEY = 1200
STARTING_LIVES = 10
KILL_REWARD = 100
SPAWN_INTERVAL = 2.0
PATH_CLEARANCE = 50 / 2

# Starting health of each enemy type when spawned.
ENEMY_HEALTH = {
    EnemyType.NORMAL: 80.0,
    EnemyType.ATTACK: 50.0,
    EnemyType.BOSS: 200.0,
}


class _Rect(NamedTuple):
    x: float
    y: float
    width: float
    height: float

    def contains(self, point: Vec2) -> bool:
        return (
            self.x <= point.x < self.x + self.width
            and self.y <= point.y < self.y + self.height
        )


BUILD_BUTTON = _Rect(700, 10, 80, 30)
TOWER_BUTTONS = {
    TowerType.BASIC: _Rect(700, 50, 80, 30),
    TowerType.LASER: _Rect(700, 90, 80, 30),
    TowerType.POISON: _Rect(700, 130, 80, 30),
}


class GameState(enum.Enum):
    TITLE_SCREEN = "title_screen"
    GAMEPLAY = "gameplay"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class InputState:
    """What the player did during one frame."""

    mouse_pos: Vec2 = field(default_factory=Vec2)
    left_pressed: bool = False
    left_down: bool = False
    right_pressed: bool = False
    space_pressed: bool = False
    escape_pressed: bool = False


def default_path(width: float, height: float) -> list[Vec2]:
    """The waypoints enemies follow across a screen of the given size."""
    mid = height / 2
    return [
        Vec2(0.0, mid),
        Vec2(200.0, mid),
        Vec2(200.0, 150.0),
        Vec2(400.0, 150.0),
        Vec2(400.0, 450.0),
        Vec2(600.0, 450.0),
        Vec2(600.0, mid),
        Vec2(float(width), mid),
    ]


def _pick_enemy_type(roll: int) -> EnemyType:
    if roll < 6:
        return EnemyType.NORMAL
    if roll < 9:
        return EnemyType.ATTACK
    return EnemyType.BOSS


class Game:
    """The whole game: screens, economy, enemies and towers."""

    def __init__(self, width: int, height: int, rng: Optional[random.Random] = None) -> None:
        self.screen_width = width
        self.screen_height = height
        self.rng = rng if rng is not None else random.Random()
        self.path = default_path(width, height)
        self.state = GameState.TITLE_SCREEN
        self.money = STARTING_MONEY
        self.lives = STARTING_LIVES
        self.enemy_spawn_timer = 0.0
        self.enemy_spawn_interval = SPAWN_INTERVAL
        self.placing_tower = False
        self.game_over = False
        self.waiting_for_mouse_release = False
        self.show_tower_menu = False
        self.tower_type_to_build = TowerType.BASIC
        self.enemies: list[Enemy] = []
        self.towers: list[Tower] = []
        self.temp_tower = build_tower(TowerType.BASIC)

    def reset(self) -> None:
        """Start a fresh round."""
        self.money = RESET_MONEY
        self.lives = STARTING_LIVES
        self.enemies.clear()
        self.towers.clear()
        self.placing_tower = False
        self.enemy_spawn_timer = 0.0
        self.game_over = False
        self.show_tower_menu = False
        self.waiting_for_mouse_release = False

    def process_input(self, inp: InputState) -> None:
        """Handle keyboard and the build button for the current screen."""
        if self.state in (GameState.TITLE_SCREEN, GameState.GAME_OVER):
            if inp.space_pressed:
                self.reset()
                self.state = GameState.GAMEPLAY
            return

        if inp.escape_pressed:
            self.placing_tower = False
            self.waiting_for_mouse_release = False
        if inp.left_pressed and BUILD_BUTTON.contains(inp.mouse_pos):
            self.show_tower_menu = True
            self.placing_tower = False
            self.waiting_for_mouse_release = False

    def update(self, delta_time: float, inp: Optional[InputState] = None) -> None:
        """Advance the simulation by ``delta_time`` seconds."""
        if self.state is not GameState.GAMEPLAY:
            return
        if inp is None:
            inp = InputState()
        if self.game_over:
            self.state = GameState.GAME_OVER
            return

        self._spawn(delta_time)
        self._update_enemies(delta_time)
        for tower in self.towers:
            if not tower.destroyed:
                tower.update(delta_time, self.enemies)

        if self.placing_tower and not self._handle_placement(inp):
            return
        if self.show_tower_menu:
            self._handle_menu(inp)

    def is_on_path(self, point: Vec2) -> bool:
        """True if a tower at ``point`` would block the enemies' path."""
        return is_near_path(point, self.path, PATH_CLEARANCE)

    def _spawn(self, delta_time: float) -> None:
        self.enemy_spawn_timer += delta_time
        if self.enemy_spawn_timer < self.enemy_spawn_interval:
            return
        enemy_type = _pick_enemy_type(self.rng.randint(0, 9))
        self.enemies.append(Enemy(self.path[0], ENEMY_HEALTH[enemy_type], enemy_type))
        self.enemy_spawn_timer = 0.0

    def _update_enemies(self, delta_time: float) -> None:
        for enemy in self.enemies:
            enemy.update(delta_time, self.path, self.towers)
            if enemy.alive and enemy.health <= 0:
                enemy.alive = False
                self.money += KILL_REWARD
            if enemy.alive and enemy.current_waypoint >= len(self.path):
                self.lives -= 1
                enemy.alive = False
                if self.lives <= 0:
                    self.game_over = True
        self.enemies = [enemy for enemy in self.enemies if enemy.alive]

    def _handle_placement(self, inp: InputState) -> bool:
        """Move and drop the ghost tower; False ends this frame's update."""
        self.temp_tower.position = inp.mouse_pos
        if self.waiting_for_mouse_release:
            if not inp.left_down:
                self.waiting_for_mouse_release = False
            return False

        if inp.left_pressed:
            tower = self.temp_tower
            if self.money >= tower.cost and not self.is_on_path(tower.position):
                self.towers.append(copy.copy(tower))
                self.money -= tower.cost
            self.placing_tower = False
        if inp.right_pressed:
            self.placing_tower = False
        return True

    def _handle_menu(self, inp: InputState) -> None:
        if not inp.left_pressed:
            return
        for tower_type, button in TOWER_BUTTONS.items():
            if button.contains(inp.mouse_pos):
                self.tower_type_to_build = tower_type
                self.placing_tower = True
                self.waiting_for_mouse_release = True
                self.temp_tower = build_tower(tower_type)
                self.show_tower_menu = False