"""Drawing of the game screens onto a pygame surface."""

from __future__ import annotations

from typing import Optional

import pygame

from towerdefense.enemy import Enemy, EnemyType
from towerdefense.game import BUILD_BUTTON, TOWER_BUTTONS, Game, GameState
from towerdefense.tower import TOWER_MAX_HEALTH, Tower, TowerType

Color = tuple[int, int, int]

WHITE: Color = (255, 255, 255)
BLACK: Color = (0, 0, 0)
RED: Color = (230, 41, 55)
ORANGE: Color = (255, 161, 0)
PURPLE: Color = (200, 122, 255)
GRAY: Color = (130, 130, 130)
DARKGRAY: Color = (80, 80, 80)
LIGHTGRAY: Color = (200, 200, 200)
GREEN: Color = (0, 228, 48)
YELLOW: Color = (253, 249, 0)
BLUE: Color = (0, 121, 241)
SKYBLUE: Color = (102, 191, 255)
LIME: Color = (0, 158, 47)
DARKBLUE: Color = (0, 82, 172)

BACKGROUND = DARKGRAY

ENEMY_COLORS = {
    EnemyType.NORMAL: RED,
    EnemyType.ATTACK: ORANGE,
    EnemyType.BOSS: PURPLE,
}

TOWER_COLORS = {
    TowerType.BASIC: BLUE,
    TowerType.LASER: SKYBLUE,
    TowerType.POISON: LIME,
}

TOWER_LABELS = {
    TowerType.BASIC: "Basic",
    TowerType.LASER: "Laser",
    TowerType.POISON: "Poison",
}

ENEMY_RADIUS = 20
TOWER_RADIUS = 25
GHOST_ALPHA = 150
GHOST_RANGE_ALPHA = round(0.1 * 255)
RANGE_OUTLINE_ALPHA = round(0.3 * 255)


def _point(x: float, y: float) -> tuple[int, int]:
    return int(x), int(y)


class Renderer:
    """Draws a :class:`Game` onto a surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        pygame.font.init()
        self._fonts: dict[int, pygame.font.Font] = {}

    def _font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font

    def _text(self, text: str, x: float, y: float, size: int, color: Color) -> None:
        image = self._font(size).render(text, True, color)
        self.surface.blit(image, _point(x, y))

    def _text_centered(self, text: str, y: float, size: int, color: Color) -> None:
        width = self._font(size).size(text)[0]
        x = self.surface.get_width() / 2 - width / 2
        self._text(text, x, y, size, color)

    def _rect(self, x: float, y: float, width: float, height: float, color: Color) -> None:
        if width <= 0 or height <= 0:
            return
        pygame.draw.rect(self.surface, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def _translucent_circle(
        self,
        color: Color,
        alpha: int,
        center: tuple[int, int],
        radius: int,
        width: int = 0,
    ) -> None:
        side = radius * 2 + 2
        layer = pygame.Surface((side, side), pygame.SRCALPHA)
        pygame.draw.circle(layer, (*color, alpha), (radius + 1, radius + 1), radius, width)
        self.surface.blit(layer, (center[0] - radius - 1, center[1] - radius - 1))

    def draw(self, game: Game) -> None:
        """Draw the screen that matches the game's current state."""
        self.surface.fill(BACKGROUND)
        if game.state is GameState.TITLE_SCREEN:
            self._draw_title_screen()
        elif game.state is GameState.GAME_OVER:
            self._draw_game_over_screen(game)
        else:
            self._draw_gameplay(game)

    def _draw_title_screen(self) -> None:
        self.surface.fill(DARKBLUE)
        height = self.surface.get_height()
        half_w = self.surface.get_width() / 2
        self._text_centered("TOWER DEFENSE", height / 4, 50, WHITE)
        self._text_centered("Defend your base against enemy waves", height / 2 - 60, 30, WHITE)
        self._text("Tower Types:", half_w - 100, height / 2, 25, YELLOW)
        self._text("- Basic: Standard tower", half_w - 150, height / 2 + 30, 20, LIGHTGRAY)
        self._text("- Laser: Fast attacks", half_w - 150, height / 2 + 60, 20, LIGHTGRAY)
        self._text("- Poison: Area damage", half_w - 150, height / 2 + 90, 20, LIGHTGRAY)
        self._text_centered("Press SPACE to Start", height * 3 / 4, 30, GREEN)

    def _draw_game_over_screen(self, game: Game) -> None:
        self.surface.fill(BLACK)
        height = self.surface.get_height()
        self._text_centered("GAME OVER", height / 3, 50, RED)
        self._text_centered(f"Final Score: {game.money}", height / 2, 30, WHITE)
        self._text_centered("Press SPACE to Play Again", height * 2 / 3, 30, GREEN)

    def _draw_gameplay(self, game: Game) -> None:
        for a, b in zip(game.path, game.path[1:]):
            pygame.draw.line(self.surface, YELLOW, _point(a.x, a.y), _point(b.x, b.y))

        for enemy in game.enemies:
            self.draw_enemy(enemy)
        for tower in game.towers:
            if not tower.destroyed:
                self.draw_tower(tower)
        if game.placing_tower:
            self.draw_tower(game.temp_tower, ghost=True)

        self._text(f"Money: {game.money}", 10, 10, 20, WHITE)
        self._text(f"Lives: {game.lives}", 10, 40, 20, WHITE)

        self._rect(*BUILD_BUTTON, GREEN)
        self._text("Build Tower", BUILD_BUTTON.x + 5, BUILD_BUTTON.y + 5, 12, BLACK)

        if game.show_tower_menu:
            for tower_type, button in TOWER_BUTTONS.items():
                self._rect(*button, LIGHTGRAY)
                self._text(TOWER_LABELS[tower_type], button.x + 5, button.y + 5, 12, BLACK)

        for enemy in game.enemies:
            tower = self._attacked_tower(game, enemy)
            if tower is not None and not tower.destroyed:
                pygame.draw.line(
                    self.surface,
                    RED,
                    _point(enemy.position.x, enemy.position.y),
                    _point(tower.position.x, tower.position.y),
                    4,
                )

    @staticmethod
    def _attacked_tower(game: Game, enemy: Enemy) -> Optional[Tower]:
        index = enemy.last_attack_tower_index
        if (
            enemy.type is not EnemyType.ATTACK
            or index is None
            or enemy.attack_laser_timer <= 0.0
            or not 0 <= index < len(game.towers)
        ):
            return None
        return game.towers[index]

    def draw_enemy(self, enemy: Enemy) -> None:
        """Draw an enemy body with its health bar."""
        center = _point(enemy.position.x, enemy.position.y)
        pygame.draw.circle(self.surface, ENEMY_COLORS[enemy.type], center, ENEMY_RADIUS)
        pygame.draw.circle(self.surface, BLACK, center, ENEMY_RADIUS, 1)

        x, y = enemy.position.x, enemy.position.y
        self._rect(x - 20, y - 30, 40, 5, GRAY)
        ratio = enemy.health / enemy.max_health if enemy.max_health else 0.0
        self._rect(x - 20, y - 30, 40 * ratio, 5, GREEN)

    def draw_tower(self, tower: Tower, ghost: bool = False) -> None:
        """Draw a tower; a ghost is translucent and shows its range as a filled area."""
        if tower.destroyed and not ghost:
            return
        color = TOWER_COLORS[tower.type]
        center = _point(tower.position.x, tower.position.y)
        tower_range = int(tower.range)

        if ghost:
            self._translucent_circle(color, GHOST_RANGE_ALPHA, center, tower_range)
            self._translucent_circle(color, GHOST_ALPHA, center, TOWER_RADIUS)
        else:
            pygame.draw.circle(self.surface, color, center, TOWER_RADIUS)
        pygame.draw.circle(self.surface, BLACK, center, TOWER_RADIUS, 1)

        x, y = tower.position.x, tower.position.y
        ratio = tower.health / TOWER_MAX_HEALTH
        self._rect(x - 20, y - 28, 40, 5, DARKGRAY)
        self._rect(x - 20, y - 28, 40 * ratio, 5, GREEN)

        if not ghost:
            self._translucent_circle(color, RANGE_OUTLINE_ALPHA, center, tower_range, 1)