# towerdefense

A small real-time tower defense game. Enemies walk a fixed path across an
800×600 field. Build towers beside the path to stop them before they reach
the far edge.

## Installing

```
pip install .
```

This also installs `pygame`, which the game uses for the window, input and
drawing.

## Playing

```
towerdefense
```

- Press **Space** on the title screen to start a round. You start with 1200
  money and 10 lives. After a game over, press **Space** again to play another
  round.
- Click **Build Tower** in the top-right corner and pick **Basic**, **Laser**
  or **Poison**. Release the mouse button. Then left-click on the field to
  place the tower. Right-click cancels the placement.
- The tower is placed only if you have enough money and the spot is not on
  the path. Either way, the click ends the placement.
- A new enemy appears at the start of the path every 2 seconds.
- You get 100 money for each enemy you destroy. You lose a life for each enemy
  that reaches the end of the path. When your lives run out the game is over,
  and your remaining money is shown as the final score.
- **Escape** or closing the window quits the game.

### Towers

| Type   | Cost | Range | Damage | Reload (s) | Notes                                                  |
|--------|------|-------|--------|------------|--------------------------------------------------------|
| Basic  | 100  | 80    | 10     | 1.0        | Shoots the closest enemy in range                      |
| Laser  | 150  | 100   | 5      | 0.2        | Fast attacks                                           |
| Poison | 200  | 70    | 2      | 1.5        | Also deals half damage to enemies within 60% of range  |

Every tower has 100 health. A tower that loses all its health is destroyed.

### Enemies

Each new enemy is Normal 60% of the time, Attack 30% and Boss 10%.

- **Normal** (red): 80 health.
- **Attack** (orange): 50 health. Once per second it hits the first standing
  tower within 70 units for 20 damage.
- **Boss** (purple): 200 health.

## Using the game logic in code

The simulation does not need a window. You can drive it directly:

```python
import random

from towerdefense.game import Game, GameState, InputState
from towerdefense.geometry import Vec2

game = Game(800, 600, rng=random.Random(1))
game.process_input(InputState(space_pressed=True))   # leave the title screen
assert game.state is GameState.GAMEPLAY

for _ in range(120):
    game.update(1 / 60, InputState())

print(game.money, game.lives, len(game.enemies))
print(game.is_on_path(Vec2(100, 300)))   # True: the path runs along y = 300
```

Other pieces:

- `towerdefense.game.default_path(width, height)` returns the waypoints enemies
  follow.
- `towerdefense.tower.build_tower(tower_type, position)` creates a `Tower` of a
  given `TowerType` with its standard statistics. `Tower.update` fires at
  enemies, and `Tower.take_damage` reduces the tower's health.
- `towerdefense.enemy.Enemy` walks a path with `Enemy.update(delta_time, path,
  towers)`. Its kind is an `EnemyType`.
- `towerdefense.geometry` provides `Vec2`, `distance(a, b)` and
  `is_near_path(point, path, radius)`.
- `towerdefense.render.Renderer` draws a `Game` onto a pygame surface.
  `towerdefense.app.input_from_events(events, mouse_pos, left_down)` turns
  pygame events into an `InputState`.

## What it does not do

There is a single fixed map and no levels or scaling waves. Towers cannot be
upgraded, sold or repaired. Scores are not saved between runs, and the game
plays no sound.

## Running the tests

```
pip install ".[test]"
pytest
```