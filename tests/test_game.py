import pytest

from towerdefense.enemy import Enemy, EnemyType
from towerdefense.game import (
    BUILD_BUTTON,
    RESET_MONEY,
    STARTING_LIVES,
    STARTING_MONEY,
    TOWER_BUTTONS,
    Game,
    GameState,
    InputState,
    default_path,
)
from towerdefense.geometry import Vec2
from towerdefense.tower import TowerType, build_tower

OFF_PATH = Vec2(100.0, 100.0)
ON_PATH = Vec2(100.0, 300.0)


class _FixedRng:
    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value


def _center(rect):
    return Vec2(rect.x + rect.width / 2, rect.y + rect.height / 2)


def _playing(roll=0):
    game = Game(800, 600, rng=_FixedRng(roll))
    game.process_input(InputState(space_pressed=True))
    return game


def _start_placing(game, tower_type):
    game.process_input(InputState(mouse_pos=_center(BUILD_BUTTON), left_pressed=True))
    game.update(0.0, InputState(mouse_pos=_center(TOWER_BUTTONS[tower_type]), left_pressed=True))


def test_default_path_endpoints():
    path = default_path(800, 600)
    assert len(path) == 8
    assert path[0] == Vec2(0.0, 300.0)
    assert path[-1] == Vec2(800.0, 300.0)
    assert path[3] == Vec2(400.0, 150.0)


def test_initial_state():
    game = Game(800, 600)
    assert game.state is GameState.TITLE_SCREEN
    assert game.money == STARTING_MONEY
    assert game.lives == STARTING_LIVES


def test_space_starts_game_and_resets_money():
    game = Game(800, 600)
    game.process_input(InputState(space_pressed=True))
    assert game.state is GameState.GAMEPLAY
    assert game.money == RESET_MONEY


def test_title_ignores_updates():
    game = Game(800, 600, rng=_FixedRng(0))
    game.update(10.0)
    assert game.enemies == []


@pytest.mark.parametrize(
    "roll, enemy_type, health",
    [(0, EnemyType.NORMAL, 80.0), (7, EnemyType.ATTACK, 50.0), (9, EnemyType.BOSS, 200.0)],
)
def test_spawn_picks_type(roll, enemy_type, health):
    game = _playing(roll)
    game.update(2.0)
    assert len(game.enemies) == 1
    enemy = game.enemies[0]
    assert enemy.type is enemy_type
    assert enemy.health == health
    assert enemy.position == game.path[0]
    assert game.enemy_spawn_timer == 0.0


def test_no_spawn_before_interval():
    game = _playing()
    game.update(1.0)
    assert game.enemies == []
    assert game.enemy_spawn_timer == 1.0


def test_enemy_reaching_end_costs_a_life():
    game = _playing()
    enemy = Enemy(game.path[-1], 80.0)
    enemy.current_waypoint = len(game.path)
    game.enemies.append(enemy)
    game.update(0.0)
    assert game.lives == STARTING_LIVES - 1
    assert game.enemies == []
    assert not enemy.alive


def test_last_life_ends_game():
    game = _playing()
    game.lives = 1
    enemy = Enemy(game.path[-1], 80.0)
    enemy.current_waypoint = len(game.path)
    game.enemies.append(enemy)
    game.update(0.0)
    assert game.game_over
    game.update(0.0)
    assert game.state is GameState.GAME_OVER
    game.process_input(InputState(space_pressed=True))
    assert game.state is GameState.GAMEPLAY
    assert game.lives == STARTING_LIVES
    assert not game.game_over


def test_killed_enemy_pays_reward():
    game = _playing()
    enemy = Enemy(game.path[0], 80.0)
    enemy.health = 0
    game.enemies.append(enemy)
    game.update(0.0)
    assert game.money == RESET_MONEY + 100
    assert game.enemies == []


def test_build_button_opens_menu():
    game = _playing()
    game.process_input(InputState(mouse_pos=_center(BUILD_BUTTON), left_pressed=True))
    assert game.show_tower_menu


def test_menu_choice_starts_placement():
    game = _playing()
    _start_placing(game, TowerType.LASER)
    assert game.placing_tower
    assert game.waiting_for_mouse_release
    assert not game.show_tower_menu
    assert game.tower_type_to_build is TowerType.LASER
    assert game.temp_tower.cost == 150


def test_place_tower_off_path():
    game = _playing()
    _start_placing(game, TowerType.BASIC)
    game.update(0.0, InputState(mouse_pos=OFF_PATH, left_down=True))
    assert game.waiting_for_mouse_release
    game.update(0.0, InputState(mouse_pos=OFF_PATH))
    assert not game.waiting_for_mouse_release
    game.update(0.0, InputState(mouse_pos=OFF_PATH, left_pressed=True))
    assert len(game.towers) == 1
    assert game.towers[0].position == OFF_PATH
    assert game.towers[0].type is TowerType.BASIC
    assert game.money == RESET_MONEY - game.towers[0].cost
    assert not game.placing_tower


def test_place_tower_on_path_rejected():
    game = _playing()
    _start_placing(game, TowerType.BASIC)
    game.update(0.0, InputState(mouse_pos=ON_PATH))
    game.update(0.0, InputState(mouse_pos=ON_PATH, left_pressed=True))
    assert game.towers == []
    assert game.money == RESET_MONEY
    assert not game.placing_tower


def test_place_tower_without_money_rejected():
    game = _playing()
    _start_placing(game, TowerType.POISON)
    game.money = 50
    game.update(0.0, InputState(mouse_pos=OFF_PATH))
    game.update(0.0, InputState(mouse_pos=OFF_PATH, left_pressed=True))
    assert game.towers == []
    assert game.money == 50


def test_right_click_cancels_placement():
    game = _playing()
    _start_placing(game, TowerType.BASIC)
    game.update(0.0, InputState(mouse_pos=OFF_PATH))
    game.update(0.0, InputState(mouse_pos=OFF_PATH, right_pressed=True))
    assert not game.placing_tower
    assert game.towers == []


def test_escape_cancels_placement():
    game = _playing()
    _start_placing(game, TowerType.BASIC)
    game.process_input(InputState(escape_pressed=True))
    assert not game.placing_tower
    assert not game.waiting_for_mouse_release


def test_is_on_path():
    game = Game(800, 600)
    assert game.is_on_path(ON_PATH)
    assert not game.is_on_path(OFF_PATH)


def test_towers_shoot_during_update():
    game = _playing()
    tower = build_tower(TowerType.BASIC, OFF_PATH)
    game.towers.append(tower)
    enemy = Enemy(Vec2(110.0, 100.0), 80.0)
    game.enemies.append(enemy)
    game.update(0.0)
    assert enemy.health < enemy.max_health
    assert tower.fire_timer == tower.fire_rate


def test_destroyed_tower_does_not_shoot():
    game = _playing()
    tower = build_tower(TowerType.BASIC, OFF_PATH)
    tower.destroyed = True
    game.towers.append(tower)
    enemy = Enemy(Vec2(110.0, 100.0), 80.0)
    game.enemies.append(enemy)
    game.update(0.0)
    assert enemy.health == enemy.max_health