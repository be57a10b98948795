"""Pygame GUI frontend.

Menu, playing grid, and win/lose overlay with a restart button.  Images,
music and the font come from the assets directory; anything missing is
logged once and drawn with a plain fill instead.
"""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from backend.config import SYMBOL_COUNT, GameConfig
from backend.engine.gameplay import GameSnapshot, MemoryGame
from backend.engine.gamestate import Phase
from backend.engine.scoring import format_remaining, is_low_time
from backend.models.highscore import HighScoreStore
from backend.models.layout import Layout, Rect

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Palette
# ---------------------------------------------------------------------------
COL_WHITE = (255, 255, 255)
COL_BLACK = (0, 0, 0)
COL_RED = (255, 0, 0)
COL_BACK = (128, 128, 128)
COL_MENU_BG = (30, 30, 46)
COL_WIN_BG = (40, 110, 60)
COL_LOSE_BG = (120, 40, 50)
COL_BUTTON = (137, 180, 250)

# Fallback face colours, one per symbol.
COL_SYMBOLS = {
    1: (243, 139, 168),
    2: (250, 179, 135),
    3: (249, 226, 175),
    4: (166, 227, 161),
    5: (148, 226, 213),
    6: (137, 180, 250),
    7: (203, 166, 247),
    8: (245, 194, 231),
}

FPS = 60
FONT_SIZE = 24
RESULT_FONT_SIZE = 28

_TEXTURE_FILES = {
    **{str(i): f"{i}.png" for i in range(1, SYMBOL_COUNT + 1)},
    "back": "back.png",
    "menu": "menu.png",
    "win": "win.png",
    "lose": "lose.png",
    "start_button": "start_button.png",
    "restart_button": "restart_button.png",
}
_MUSIC_FILE = "background_music.mp3"
_FONT_FILE = "font.ttf"


# ---------------------------------------------------------------------------
# Presenter: pygame-backed drawing and audio
# ---------------------------------------------------------------------------
class PygamePresenter:
    """Owns every pygame asset handle for the lifetime of the window."""

    def __init__(self, surf: pygame.Surface, assets_dir: Path) -> None:
        self._surf = surf
        self._assets_dir = assets_dir
        self._textures: dict[str, pygame.Surface] = {}
        self._scaled: dict[tuple[str, int, int], pygame.Surface] = {}
        self._music_loaded = False
        self._fonts: dict[int, pygame.font.Font] = {}

    # ── loading ─────────────────────────────────────────────────────────────

    def load(self) -> None:
        for name, filename in _TEXTURE_FILES.items():
            path = self._assets_dir / filename
            try:
                self._textures[name] = pygame.image.load(str(path)).convert_alpha()
            except (pygame.error, FileNotFoundError) as exc:
                logger.warning("Failed to load texture %s: %s", path, exc)

        music = self._assets_dir / _MUSIC_FILE
        try:
            pygame.mixer.music.load(str(music))
            self._music_loaded = True
        except (pygame.error, FileNotFoundError) as exc:
            logger.warning("Failed to load background music %s: %s", music, exc)

    def font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            path = self._assets_dir / _FONT_FILE
            try:
                self._fonts[size] = pygame.font.Font(str(path), size)
            except (pygame.error, FileNotFoundError, OSError) as exc:
                logger.warning("Failed to load font %s: %s", path, exc)
                self._fonts[size] = pygame.font.Font(None, size)
        return self._fonts[size]

    def has_texture(self, name: str) -> bool:
        return name in self._textures

    def close(self) -> None:
        self._textures.clear()
        self._scaled.clear()
        self._fonts.clear()
        self._music_loaded = False

    # ── Presenter ───────────────────────────────────────────────────────────

    def play_music(self) -> None:
        if self._music_loaded and pygame.mixer.get_init():
            pygame.mixer.music.play(-1)

    def stop_music(self) -> None:
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()

    def fill_rect(self, rect: Rect, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self._surf, color, pygame.Rect(rect.as_tuple()))

    def draw_texture(self, name: str, rect: Rect) -> None:
        """Blit texture *name* scaled to *rect*; no-op if it failed to load."""
        tex = self._textures.get(name)
        if tex is None:
            return
        key = (name, rect.w, rect.h)
        if key not in self._scaled:
            self._scaled[key] = pygame.transform.smoothscale(tex, (rect.w, rect.h))
        self._surf.blit(self._scaled[key], (rect.x, rect.y))

    def draw_text(
        self,
        text: str,
        pos: tuple[int, int],
        color: tuple[int, int, int],
        size: int = FONT_SIZE,
    ) -> None:
        lbl = self.font(size).render(text, True, color)
        self._surf.blit(lbl, pos)

    def draw_text_centered(
        self, text: str, y: int, color: tuple[int, int, int], size: int
    ) -> None:
        lbl = self.font(size).render(text, True, color)
        self._surf.blit(lbl, ((self._surf.get_width() - lbl.get_width()) // 2, y))

    def draw_label(
        self, text: str, rect: Rect, color: tuple[int, int, int], size: int
    ) -> None:
        """Draw *text* centred inside *rect*."""
        lbl = self.font(size).render(text, True, color)
        cx, cy = rect.center
        self._surf.blit(lbl, (cx - lbl.get_width() // 2, cy - lbl.get_height() // 2))

    def draw_outline(self, rect: Rect, color: tuple[int, int, int]) -> None:
        pygame.draw.rect(self._surf, color, pygame.Rect(rect.as_tuple()), width=1)


# ---------------------------------------------------------------------------
# Main application
# ---------------------------------------------------------------------------
class PygameApp:
    def __init__(
        self,
        data_dir: Path,
        assets_dir: Path,
        config: GameConfig,
        layout: Layout | None = None,
    ) -> None:
        self._layout = layout or Layout()
        self._store = HighScoreStore(data_dir / "highscore.txt")
        self._config = config
        self._assets_dir = assets_dir

    # ── drawing ─────────────────────────────────────────────────────────────

    def _draw_button(self, p: PygamePresenter, texture: str, rect: Rect, label: str) -> None:
        if p.has_texture(texture):
            p.draw_texture(texture, rect)
            return
        p.fill_rect(rect, COL_BUTTON)
        p.draw_label(label, rect, COL_BLACK, FONT_SIZE)

    def _draw_background(self, p: PygamePresenter, texture: str, fallback: tuple) -> None:
        full = Rect(0, 0, self._layout.width, self._layout.height)
        if p.has_texture(texture):
            p.draw_texture(texture, full)
        else:
            p.fill_rect(full, fallback)

    def _draw_menu(self, p: PygamePresenter, snap: GameSnapshot) -> None:
        self._draw_background(p, "menu", COL_MENU_BG)
        if not p.has_texture("menu"):
            p.draw_text_centered("MEMORY  MATCH", 140, COL_WHITE, 40)
        p.draw_text_centered(f"High Score: {snap.high_score}", 360, COL_WHITE, FONT_SIZE)
        self._draw_button(p, "start_button", self._layout.start_button, "START")

    def _draw_grid(self, p: PygamePresenter, snap: GameSnapshot) -> None:
        for row in snap.cells:
            for cell in row:
                rect = self._layout.cell_rect(cell.row, cell.col)
                if cell.face_up:
                    name = str(cell.symbol)
                    if p.has_texture(name):
                        p.draw_texture(name, rect)
                    else:
                        p.fill_rect(rect, COL_SYMBOLS[cell.symbol])
                        p.draw_label(name, rect, COL_BLACK, 48)
                elif p.has_texture("back"):
                    p.draw_texture("back", rect)
                else:
                    p.fill_rect(rect, COL_BACK)
                p.draw_outline(rect, COL_BLACK)

        grid_bottom = self._layout.tile_size * len(snap.cells)
        p.draw_text(f"Score: {snap.score}", (10, grid_bottom + 10), COL_BLACK)
        color = COL_RED if is_low_time(snap.remaining_ms) else COL_BLACK
        p.draw_text(format_remaining(snap.remaining_ms), (10, grid_bottom + 50), color)

    def _draw_result(self, p: PygamePresenter, snap: GameSnapshot) -> None:
        won = snap.phase is Phase.WON
        if won:
            self._draw_background(p, "win", COL_WIN_BG)
        else:
            self._draw_background(p, "lose", COL_LOSE_BG)

        mid = self._layout.height // 2
        p.draw_text_centered(f"Score: {snap.score}", mid - 50, COL_WHITE, RESULT_FONT_SIZE)
        if won:
            p.draw_text_centered(f"Flips: {snap.flips}", mid, COL_WHITE, RESULT_FONT_SIZE)
        else:
            p.draw_text_centered("Time's up!", mid, COL_WHITE, RESULT_FONT_SIZE)
        label = "New High Score" if snap.new_record else "High Score"
        p.draw_text_centered(f"{label}: {snap.high_score}", mid + 50, COL_WHITE, FONT_SIZE)
        self._draw_button(p, "restart_button", self._layout.restart_button, "RESTART")

    # ── main loop ───────────────────────────────────────────────────────────

    def run_loop(self) -> None:
        pygame.init()
        try:
            surf = pygame.display.set_mode((self._layout.width, self._layout.height))
            pygame.display.set_caption("Memory Match")
            if not pygame.mixer.get_init():
                logger.warning("Audio mixer unavailable; running without sound")
            presenter = PygamePresenter(surf, self._assets_dir)
            presenter.load()
            try:
                self._loop(surf, presenter)
            finally:
                presenter.stop_music()
                presenter.close()
        finally:
            pygame.quit()

    def _loop(self, surf: pygame.Surface, presenter: PygamePresenter) -> None:
        game = MemoryGame(
            self._store,
            config=self._config,
            layout=self._layout,
            presenter=presenter,
        )
        clock = pygame.time.Clock()
        _draw = {
            Phase.MENU: self._draw_menu,
            Phase.PLAYING: self._draw_grid,
            Phase.WON: self._draw_result,
            Phase.LOST: self._draw_result,
        }

        running = True
        while running:
            for ev in pygame.event.get():
                if ev.type == pygame.QUIT:
                    running = False
                    break
                if ev.type == pygame.KEYDOWN and ev.key == pygame.K_ESCAPE:
                    running = False
                    break
                if ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                    game.on_pointer_down(*ev.pos)

            game.tick()

            surf.fill(COL_WHITE)
            snap = game.snapshot()
            _draw[snap.phase](presenter, snap)
            pygame.display.flip()
            clock.tick(FPS)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------
def run(
    data_dir: Path = Path("data"),
    assets_dir: Path = Path("assets"),
    config: GameConfig | None = None,
) -> None:
    """Launch the Pygame GUI (opens on the menu)."""
    app = PygameApp(data_dir, assets_dir, config or GameConfig())
    app.run_loop()
