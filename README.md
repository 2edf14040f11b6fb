# Aggressive Squares

A side-scrolling zombie shooter. Walk right through a horde of wandering and
spitting zombies, collect the ammunition and hearts they drop, and reach the
end of the level to face the boss.

## Installing

```
pip install .
```

## Playing

```
aggressive-squares
```

Options:

- `--assets DIR` — directory holding the game's files (default: the current
  directory).
- `--blank` — open an empty 320×320 black window and wait for it to be closed.

The game needs these files in the assets directory: `fundo.png`, `font.ttf`,
`HP_sprites.png`, `caveira.png`, `sprite_dave.png`, `sprites_ze.png`,
`sprites_z1.png`, `sprites_z2.png` and `sprites_z3.png`. If one of them cannot
be loaded the command prints an error and exits with status 1. These are used
when present and skipped otherwise: `boss.png`, `municao.jpeg`, `vida.png`,
`tiro.png`, `cuspe.png`, and the sounds `dano_personagem.wav`,
`dano_zumbi.wav`, `reload.wav`, `tiro.wav` and `breathe.wav`.

The main menu offers **JOGAR** (play), **INSTRUCOES** (instructions),
**CONFIGURACOES** (volume settings) and **SAIR** (quit). Use the UP and DOWN
arrow keys and ENTER; ESC leaves the menu. On the settings screen LEFT and
RIGHT change the volume in steps of 10 %.

### Controls

| Key   | Action                                      |
|-------|---------------------------------------------|
| A / D | walk left / right                           |
| W     | jump                                        |
| SPACE | shoot (hold W/S/A/D to aim)                 |
| C     | sprint while walking (uses stamina)         |
| R     | pick up an item you are standing on         |
| P     | pause and resume                            |
| ESC   | leave the match                             |

You start with 8 hearts and 300 rounds. An ammunition pickup gives 18 more
rounds and a heart pickup one more heart; pickups vanish after ten seconds.
Every hit you take makes you slower. Sprinting doubles your speed for eight
seconds. After that you are tired for four seconds and move at a third of your
speed, then you must wait eight more seconds before you can sprint again.

When you reach the last screen of the level the camera locks and the boss
fight begins. The match ends in victory once the boss has finished dying, or
with a game-over screen showing how many zombies you defeated two seconds
after your last heart is gone.

Tip for the boss: aim for the head.

## Using the game logic

The simulation runs without a window. `aggressive_squares.world.World` holds a
match:

```python
from aggressive_squares.config import Key
from aggressive_squares.world import World

world = World(world_width=4000)
world.handle_key_down(Key.D)
for _ in range(60):
    outcome = world.tick()
world.handle_key_up(Key.D)
print(world.player.x, world.kills, outcome)
```

`tick()` advances one frame (the game runs at 60 per second) and returns an
`Outcome` (`GAME_OVER`, `VICTORY`, `QUIT`) once the match is decided.
Things a front end may react to, such as shots fired or pickups collected,
are collected in `world.events` as `GameEvent` values. The menu state lives in
`aggressive_squares.menu.Menu`, and the volume setting in
`aggressive_squares.config.Settings`.

## What it does not do

- The images, font and sounds are not included; they have to be supplied in
  the assets directory.
- The volume setting is kept only while the program runs; nothing is saved.

## Running the tests

```
pip install .[test]
pytest
```