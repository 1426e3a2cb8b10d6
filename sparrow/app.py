"""The game's entry point and main loop."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from .bird import Bird
from .game import Game
from .leaderboard import DEFAULT_PATH, LeaderBoard
from .pipe_pool import PipePool
from .renderer import Renderer, load_mask
from .screens import EndScreen, Menu
from .sprite import Mask
from .state import GameState, Session

TITLE = "Sparrow in Kyiv"
WINDOW_WIDTH = 600
WINDOW_HEIGHT = 800
BIRD_FRAMES = ("birdF.png", "bird.png", "birdF1.png")


def _try_load(path: Path) -> Optional[Mask]:
    try:
        return load_mask(path)
    except (FileNotFoundError, pygame.error):
        return None


def _bird_masks(assets: Path) -> list[Mask]:
    masks = []
    for name in BIRD_FRAMES:
        mask = _try_load(assets / name)
        if mask is None:
            print(f"Failed to load texture: {name}", file=sys.stderr)
            mask = Mask.from_rows(["#"])
        masks.append(mask)
    return masks


def _pipe_loader(assets: Path):
    def load(kind: str, is_top: bool) -> Optional[Mask]:
        name = f"{kind}Top.png" if is_top else f"{kind}.png"
        mask = _try_load(assets / name)
        if mask is None:
            side = "top" if is_top else "bottom"
            print(f"No texture loaded for {kind} {side} pipe.", file=sys.stderr)
        return mask

    return load


def _parse(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="sparrow", description=TITLE)
    parser.add_argument("--assets", default=".", help="directory holding images and fonts")
    parser.add_argument("--scores", default=DEFAULT_PATH, help="leaderboard file")
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game until its window is closed."""
    args = _parse(argv)
    assets = Path(args.assets)
    session = Session()
    board = LeaderBoard(session, args.scores)
    menu = Menu(session)
    end_screen = EndScreen(session)

    with Renderer(WINDOW_WIDTH, WINDOW_HEIGHT, TITLE, assets) as renderer:
        game = Game(pipe_pool=PipePool(loader=_pipe_loader(assets)), bird=Bird(_bird_masks(assets)))
        score_submitted = False
        game_started = False

        while renderer.is_open():
            for event in renderer.poll_events():
                if event.type == pygame.QUIT:
                    renderer.close()
                    game.game_running = False

                if session.state is GameState.MENU:
                    renderer.render_menu(menu.buttons, menu.name_field)
                    renderer.handle_events_menu(event, menu.buttons, menu.name_field)
                elif session.state is GameState.LEADER_BOARD:
                    renderer.render_leaderboard(board, board.button)
                    renderer.handle_events_leaderboard(event, board.button)
                elif session.state is GameState.GAME:
                    score_submitted = False
                    if not game.game_running:
                        renderer.clear()
                        game.set_difficulty(session.difficulty)
                        game.start()
                        while not game_started and renderer.is_open():
                            for waiting in renderer.poll_events():
                                if waiting.type == pygame.QUIT:
                                    renderer.close()
                                    game.game_running = False
                                    return 0
                                if waiting.type == pygame.KEYDOWN and waiting.key == pygame.K_SPACE:
                                    game_started = True
                                    break
                            renderer.clear()
                            renderer.render_start_screen()

                    while game.game_running:
                        for playing in renderer.poll_events():
                            renderer.handle_events_game(playing, game.bird)
                            if playing.type == pygame.QUIT:
                                renderer.close()
                                game.game_running = False
                        game.update()
                        renderer.render_game(game.bird, game.pipes, game.score)
                    session.switch(GameState.END_SCREEN)
                elif session.state is GameState.END_SCREEN:
                    game_started = False
                    if not score_submitted:
                        board.add(menu.name_field.text, game.score.value)
                        score_submitted = True
                    renderer.handle_events_end_screen(event, end_screen.buttons)
                    renderer.render_end_screen(game.score.value, end_screen.buttons)
    return 0


if __name__ == "__main__":
    sys.exit(main())