"""The game window: drawing each screen and routing input events."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Iterable, Optional, Sequence, Union

import pygame

from .bird import Bird
from .buttons import BUTTON_HEIGHT, BUTTON_WIDTH, Button
from .leaderboard import LeaderBoard
from .pipe import Pipe
from .score import Score
from .sprite import Mask, Sprite
from .textfield import BACKSPACE, OUTLINE_THICKNESS, TextField

FRAME_RATE = 70
LIST_FONT_FILE = "alphabetized cassette tapes.ttf"
TITLE_FONT_FILE = "brushed.ttf"
BUTTON_IMAGE = "button.png"

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BROWN = (51, 25, 0)

PathLike = Union[str, Path]
Color = tuple[int, int, int]

# Images behind masks made by load_mask, keyed by the mask's identity.
_IMAGES: dict[int, tuple[Mask, pygame.Surface]] = {}


def _image_bytes(image: pygame.Surface) -> bytes:
    if hasattr(pygame.image, "tobytes"):
        return pygame.image.tobytes(image, "RGBA")
    return pygame.image.tostring(image, "RGBA")


def load_mask(path: PathLike) -> Mask:
    """Load an image file as an alpha mask; the renderer draws the image itself."""
    image = pygame.image.load(str(path))
    width, _ = image.get_size()
    alphas = _image_bytes(image)[3::4]
    rows = tuple(
        tuple(alphas[start:start + width]) for start in range(0, len(alphas), width)
    )
    mask = Mask(rows)
    _IMAGES[id(mask)] = (mask, image)
    return mask


class Renderer:
    """Owns the window, its fonts and backgrounds, and draws every screen."""

    def __init__(self, width: int, height: int, title: str, assets_dir: PathLike = ".") -> None:
        self.assets = Path(assets_dir)
        pygame.display.init()
        pygame.font.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.size = (width, height)
        self._clock = pygame.time.Clock()
        self._open = True
        self._fonts: dict[tuple[str, int], pygame.font.Font] = {}
        self._scaled: dict[tuple[int, int, int], pygame.Surface] = {}

        self._font(LIST_FONT_FILE, 40)
        self._font(TITLE_FONT_FILE, 24)

        try:
            button = pygame.image.load(str(self.assets / BUTTON_IMAGE))
        except (FileNotFoundError, pygame.error) as err:
            self.close()
            raise RuntimeError("Failed to load texture") from err
        self._button_image = pygame.transform.scale(button, (BUTTON_WIDTH, BUTTON_HEIGHT))

        self._menu_background = self._background("menu.png", "No menu")
        self._board_background = self._background("board.png", "No menu")
        self._game_background = self._background("game.png", "Failed to load background image")
        self._start_background = self._background(
            "startScreen.png", "Failed to load background image"
        )
        self._end_background = self._background(
            "endScreen.png", "Failed to load background image"
        )

    def __enter__(self) -> Renderer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _font(self, name: str, size: int) -> pygame.font.Font:
        key = (name, size)
        if key not in self._fonts:
            path = self.assets / name
            if not path.is_file():
                self.close()
                raise RuntimeError("Failed to load font")
            try:
                self._fonts[key] = pygame.font.Font(str(path), size)
            except (OSError, pygame.error) as err:
                self.close()
                raise RuntimeError("Failed to load font") from err
        return self._fonts[key]

    def _background(self, name: str, warning: str) -> Optional[pygame.Surface]:
        try:
            image = pygame.image.load(str(self.assets / name))
        except (FileNotFoundError, pygame.error):
            print(warning, file=sys.stderr)
            return None
        return pygame.transform.scale(image, self.size)

    def _draw_text(
        self, text: str, font_name: str, size: int, color: Color, position: tuple[float, float]
    ) -> None:
        font = self._font(font_name, size)
        x, y = position
        for line in text.split("\n"):
            self.surface.blit(font.render(line, True, color), (x, y))
            y += font.get_linesize()

    def _draw_background(self, background: Optional[pygame.Surface]) -> None:
        if background is not None:
            self.surface.blit(background, (0, 0))

    def _draw_sprite(self, sprite: Sprite) -> None:
        entry = _IMAGES.get(id(sprite.mask))
        if entry is None:
            return
        _, image = entry
        size = (int(sprite.width), int(sprite.height))
        key = (id(sprite.mask), *size)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.scale(image, size)
        self.surface.blit(self._scaled[key], (sprite.x, sprite.y))

    def _draw_buttons(self, buttons: Iterable[Button]) -> None:
        font = self._font(TITLE_FONT_FILE, 24)
        for button in buttons:
            self.surface.blit(self._button_image, (button.rect.left, button.rect.top))
            label = font.render(button.label, True, BLACK)
            cx, cy = button.center
            self.surface.blit(label, (cx - label.get_width() / 2, cy - label.get_height() / 2))

    def _present(self) -> None:
        pygame.display.flip()
        self._clock.tick(FRAME_RATE)

    def clear(self) -> None:
        if self._open:
            self.surface.fill(BLACK)

    def handle_events_menu(
        self, event: pygame.event.Event, buttons: Sequence[Button], name_field: TextField
    ) -> None:
        """Focus the name field, press buttons and feed typed text to the field."""
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == 1:
                x, y = event.pos
                name_field.is_active = name_field.contains(x, y)
                for button in buttons:
                    if button.contains(x, y):
                        button.on_click()
        elif event.type == pygame.TEXTINPUT and name_field.is_active:
            for char in event.text:
                name_field.handle_input(char)
        elif (
            event.type == pygame.KEYDOWN
            and name_field.is_active
            and event.key == pygame.K_BACKSPACE
        ):
            name_field.handle_input(BACKSPACE)

    def handle_events_leaderboard(self, event: pygame.event.Event, button: Button) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if button.contains(*event.pos):
                button.on_click()

    def handle_events_game(self, event: pygame.event.Event, bird: Bird) -> None:
        if event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
            bird.flap()

    def handle_events_end_screen(self, event: pygame.event.Event, buttons: Sequence[Button]) -> None:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            x, y = event.pos
            for button in buttons:
                if button.contains(x, y):
                    button.on_click()

    def render_menu(self, buttons: Sequence[Button], name_field: TextField) -> None:
        if not self._open:
            return
        self.clear()
        self._draw_background(self._menu_background)
        self._draw_buttons(buttons)
        x, y = name_field.position
        width, height = name_field.size
        pygame.draw.rect(
            self.surface,
            BROWN,
            pygame.Rect(
                x - OUTLINE_THICKNESS,
                y - OUTLINE_THICKNESS,
                width + 2 * OUTLINE_THICKNESS,
                height + 2 * OUTLINE_THICKNESS,
            ),
        )
        pygame.draw.rect(self.surface, WHITE, pygame.Rect(x, y, width, height))
        if name_field.text:
            self._draw_text(name_field.text, LIST_FONT_FILE, 50, BLACK, (x + 5, y - 6))
        self._present()

    def render_leaderboard(self, board: LeaderBoard, button: Button) -> None:
        if not self._open:
            return
        self.clear()
        self._draw_background(self._board_background)
        self._draw_text("Our leaders:", TITLE_FONT_FILE, 60, WHITE, (130, 60))
        for place, (name, score) in enumerate(board.display()):
            self._draw_text(f"{name}: {score}", LIST_FONT_FILE, 40, WHITE, (200, 160 + place * 50))
        self._draw_buttons([button])
        self._present()

    def render_game(self, bird: Bird, pipes: Sequence[Pipe], score: Score) -> None:
        if not self._open:
            return
        self.clear()
        self._draw_background(self._game_background)
        bird.set_sprite()
        self._draw_sprite(bird.sprite)
        for pipe in pipes:
            self._draw_sprite(pipe.sprite)
        self._draw_text(f"Score: {score.value}", TITLE_FONT_FILE, 24, BLACK, (10, 10))
        self._present()

    def render_end_screen(self, score: int, buttons: Sequence[Button]) -> None:
        if not self._open:
            return
        self.clear()
        self._draw_background(self._end_background)
        self._draw_text(f"Your score:\n\n     {score}", TITLE_FONT_FILE, 73, BLACK, (110, 210))
        self._draw_buttons(buttons)
        self._present()

    def render_start_screen(self) -> None:
        if not self._open:
            return
        self.clear()
        self._draw_background(self._start_background)
        self._draw_text(
            "Please, press SPACE\n    to start", TITLE_FONT_FILE, 40, BLACK, (130, 320)
        )
        self._present()

    def poll_events(self) -> list[pygame.event.Event]:
        """Pending window events; none once the window is closed."""
        if not self._open:
            return []
        return pygame.event.get()

    def is_open(self) -> bool:
        return self._open

    def close(self) -> None:
        if self._open:
            self._open = False
            pygame.display.quit()