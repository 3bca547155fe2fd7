# mazechase

A maze chase arcade game built on pygame. You steer around a walled maze,
collect stars for points and pick up fruit for special effects. Six ghosts
wander the maze on fixed patterns. A seventh, the smart ghost, heads straight
for you.

## Installing

```
pip install .
```

## Playing

```
mazechase
```

Options:

- `--records PATH` is the file that holds the high scores. The default is
  `records.txt` in the current directory.
- `--resources DIR` is a directory of sound files. These files are used if
  they are present: `Theme.mp3` as looping music, `select.mp3` when the menu
  selection moves, `dead.mp3` on ghost contact, `Lose.mp3` when a run ends,
  `star.wav` for a star, `goal.wav` when a new set of stars appears, and
  `mive1.mp3` for a fruit. Without this option the game has no sound.

### Main menu

- **Up / Down** move between START, SCORES, RECORD and EXIT. The selection
  wraps around.
- Typed characters are added to the player name, up to 49 characters.
  **Backspace** deletes the last one. The name starts as `player`.
- **Enter** picks the selected item. START begins a run, SCORES shows the
  high-score table and EXIT closes the game. RECORD does nothing.

### In the maze

- **Arrow keys** move. Walls stop you.
- **Space** pauses the game and **Enter** resumes it.
- **L** gives up the current run.

You start with 5 lives. Every star is worth 10 points. There are ten stars at
a time, and when all of them are eaten, a new set of ten appears. Each fruit
appears once per run:

| Fruit    | Effect                                          |
|----------|-------------------------------------------------|
| Apple    | one extra life                                  |
| Pepper   | faster movement                                 |
| Mushroom | costs a life, or ends the run on your last life |
| Cherry   | your next ghost contact eats the ghost          |

Two fruit effects cannot take hold within 0.1 seconds of each other. An eaten
ghost comes back at its home spot 6 seconds later. From the third second on,
a "!" marks the spot where it will return. Contact with a wandering ghost
costs a life at most once every 1.2 seconds. Contact with the smart ghost
costs a life at most once every 2 seconds.

### After a run

When your lives run out, your name and score are shown. Press **Enter** to
append them to the records file and go back to the menu. SCORES on the menu
shows the ten best results from that file, highest first. Press **Space**
there to go back.

## Using the pieces

The game logic does not need a window:

- `mazechase.maze` has `Rect`, the `WALLS` of the maze and
  `collides_with_map()`.
- `mazechase.game.GameState` runs one round. `update(directions, dt)` moves
  everything by one frame and returns a list of `GameEvent` values.
  `move_pacman()`, `give_up()` and `reset()` are also available.
- `mazechase.ghosts.GhostPack`, `mazechase.smart.SmartGhost` and
  `mazechase.pickups.Pickups` hold the ghosts, the chasing ghost and the
  stars and fruit.
- `mazechase.scores` has `read_scores()` and `append_score()` for the
  records file. It holds one `name score` pair per line.
- `mazechase.menu.Menu` holds the menu selection and the player name.
- `mazechase.app.App` ties the screens together.

## What it does not do

The game draws everything with plain shapes: circles for Pac-Man, stars and
fruit, and ellipses for ghosts. It ships no pictures, fonts or sounds, and it
loads none apart from the optional sound files described above. The RECORD
menu item has no screen behind it.

## Development

```
pip install -e ".[test]"
pytest
```