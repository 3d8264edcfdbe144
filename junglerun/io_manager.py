"""Screen, image loading, text output and typed-string input."""

from __future__ import annotations

import pygame


class IOManager:
    """Owns the screen and font and draws text on the screen."""

    def __init__(self, gdata, screen: pygame.Surface, font: pygame.font.Font | None = None) -> None:
        self.view_width = gdata.get_int("view/width")
        self.view_height = gdata.get_int("view/height")
        self.max_string_size = gdata.get_int("maxStringSize")
        self.screen = screen
        self.font = font
        self.color = pygame.Color(
            gdata.get_int("font/red"),
            gdata.get_int("font/green"),
            gdata.get_int("font/blue"),
        )
        self._input = ""

    @classmethod
    def from_gamedata(cls, gdata) -> IOManager:
        """Open the display and load the configured font."""
        size = (gdata.get_int("view/width"), gdata.get_int("view/height"))
        try:
            screen = pygame.display.set_mode(size, pygame.DOUBLEBUF, 32)
        except pygame.error as exc:
            raise RuntimeError(f"Unable to set video mode: {exc}") from exc
        try:
            pygame.font.init()
            font = pygame.font.Font(gdata.get_str("font/file"), gdata.get_int("font/size"))
        except (pygame.error, OSError) as exc:
            raise RuntimeError(f"Unable to open font: {exc}") from exc
        return cls(gdata, screen, font)

    def load_and_set(self, filename: str, colorkey: bool) -> pygame.Surface:
        """Load an image, optionally keying out magenta, in display format if possible."""
        try:
            loaded = pygame.image.load(filename)
        except (pygame.error, OSError) as exc:
            raise OSError(f"Unable to load bitmap {filename}") from exc
        if colorkey:
            loaded.set_colorkey(loaded.map_rgb((255, 0, 255)), pygame.RLEACCEL)
        try:
            return loaded.convert_alpha()
        except pygame.error:
            return loaded

    def _render(self, msg: str) -> pygame.Surface:
        if self.font is None:
            raise RuntimeError("No font loaded for text output")
        try:
            return self.font.render(msg, True, self.color)
        except pygame.error as exc:
            raise RuntimeError(f"Couldn't render text: {exc}") from exc

    def print_message_at(self, msg: str, x: int, y: int) -> None:
        """Draw ``msg`` with its top-left corner at (x, y)."""
        self.screen.blit(self._render(msg), (int(x), int(y)))

    def print_message_centered_at(self, msg: str, y: int) -> None:
        """Draw ``msg`` centred horizontally in the view at height ``y``."""
        text = self._render(msg)
        x = int((self.view_width - text.get_width()) / 2)
        self.screen.blit(text, (x, int(y)))

    def print_message_value_at(self, msg: str, value, x: int, y: int) -> None:
        """Draw ``msg`` followed by ``value``."""
        shown = f"{value:g}" if isinstance(value, float) else str(value)
        self.print_message_at(msg + shown, x, y)

    def print_string_after_message(self, msg: str, x: int, y: int) -> None:
        """Draw ``msg`` followed by the typed input string."""
        self.print_message_at(msg + self._input, x, y)

    def build_string(self, event) -> None:
        """Add a typed letter, digit or space; backspace removes the last character."""
        if len(self._input) <= self.max_string_size:
            key = event.key
            if 0 <= key < 128:
                ch = chr(key)
                if ch.isalpha() or ch.isdigit() or ch == " ":
                    self._input += event.unicode[:1]
        if event.key == pygame.K_BACKSPACE and self._input:
            self._input = self._input[:-1]

    def clear_string(self) -> None:
        """Forget the typed input."""
        self._input = ""

    @property
    def input_string(self) -> str:
        return self._input