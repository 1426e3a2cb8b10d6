# Sparrow in Kyiv

An arcade game in which a sparrow flaps its way past Kyiv landmarks. Pick a
difficulty, press SPACE to start, and keep the bird off the ground, off the top
of the screen and away from the buildings. Each pair of obstacles you pass
scores one point.

## Installing

```
pip install .
```

The game uses `pygame` for its window, drawing and input.

## Playing

```
sparrow [--assets DIR] [--scores FILE]
```

- `--assets` is the directory that holds the game's images and fonts
  (default: the current directory).
- `--scores` is the leaderboard file (default: `statistics.txt`).

The assets directory must contain `button.png` and the fonts
`brushed.ttf` and `alphabetized cassette tapes.ttf`; without them the game
stops with `RuntimeError`. The backgrounds (`menu.png`, `board.png`,
`game.png`, `startScreen.png`, `endScreen.png`), the bird frames (`birdF.png`,
`bird.png`, `birdF1.png`) and the landmark pictures (for example `veza.png` and
`vezaTop.png`) are optional: a missing one is reported on standard error and
the game goes on without drawing it, treating missing bird or landmark
pictures as solid blocks for collisions.

- **Menu**: click the box on the right and type your name, then choose
  *Easy*, *Medium* or *Hard*. *Leaderboard* shows the best scores; *Back*
  returns to the menu.
- **Game**: press SPACE on the start screen, then SPACE to flap.
- **End screen**: your score is saved; choose *Menu*, *Restart* or *Exit*.

Scores are written as one `name score` pair per line. Only a player's best
score is kept, and the leaderboard shows the top ten, highest first. A blank
name is stored as `Noname`.

## Using the pieces

The game logic runs without a window:

```python
from sparrow.game import Game

game = Game()
game.set_difficulty(2)
game.start()
while game.game_running:
    game.update()
print(game.score.value)
```

- `sparrow.game.Game` advances a round frame by frame; `Game.bird`,
  `Game.pipes` and `Game.score` hold its state.
- `sparrow.bird.Bird` applies gravity and flapping; `sparrow.pipe.Pipe` and
  `sparrow.pipe_pool.PipePool` provide the scrolling obstacles for levels 1–3.
- `sparrow.leaderboard.LeaderBoard` reads and writes the score file.
- `sparrow.textfield.TextField` handles name input.
- `sparrow.screens.Menu` and `sparrow.screens.EndScreen` hold the buttons of
  each screen and react to clicks through a shared `sparrow.state.Session`.
- `sparrow.sprite.pixel_perfect_collision` checks whether two sprites touch
  on pixels that are opaque in both; `sparrow.sprite.Mask.from_rows` builds a
  mask from strings, where a space or a dot is transparent.
- `sparrow.renderer.Renderer` draws every screen with pygame, and
  `sparrow.renderer.load_mask` turns an image file into a mask.

## Tests

```
pip install .[test]
pytest
```