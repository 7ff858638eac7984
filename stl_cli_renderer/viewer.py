#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/viewer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging
import math
import time
from enum import Enum

from .config import RenderConfig
from .phrases import MAX_WORDS, generate_art, is_valid_prompt, word_count
from .renderer import Renderer

logger = logging.getLogger(__name__)

TITLE = "STL CLI Renderer - 3D Object Viewer"
TICK_INTERVAL = 0.05      # seconds between auto-rotate steps
ROTATION_STEP = 0.1       # radians per manual key press
INPUT_LIMIT = 50

KEY_ESC = 27
KEY_CTRL_C = 3
ENTER_KEYS = (curses.KEY_ENTER, 10, 13)
BACKSPACE_KEYS = (curses.KEY_BACKSPACE, 127, 8)


class Mode(Enum):
    INPUT = "input"
    DISPLAY = "display"
    MESH_VIEW = "mesh_view"


def _clamp(v, lo, hi):
    return max(lo, min(hi, v))


def render_size(term_w, term_h):
    """Grid size handed to the renderer for a terminal of term_w x term_h."""
    # Header, status, control lines and margins take 12 rows
    render_h = _clamp(term_h - 12, 20, 150)
    render_w = _clamp(term_w - 4, 40, 300)
    return render_w - 4, render_h - 2


class ViewerApp:
    """
    Interactive viewer: a phrase prompt, a canned-art display and an
    auto-rotating mesh view, switched with the keys listed in the footer.

    Rendering is delegated to Renderer; this class only tracks the menu
    mode, the rotation angles and the animation tick.
    """

    def __init__(self, stdscr, mesh=None, config: RenderConfig = None,
                 keyword: str = "pikachu", rotation_speed: float = 0.03,
                 attrs=None):
        self.stdscr = stdscr
        self.running = True
        self.config = config if config is not None else RenderConfig()
        self.renderer = Renderer(self.config)
        self.attrs = attrs or {}

        self.mesh = mesh if self._mesh_usable(mesh) else None
        self.keyword = keyword.lower()
        self.rotation_speed = rotation_speed

        self.mode = Mode.INPUT
        self.text = ""
        self.prompt = ""
        self.art = ""
        self.style = self.config.style
        self.rot_x = self.rot_y = self.rot_z = 0.0
        self.auto_rotate = True
        self.last_tick = time.monotonic()

    @staticmethod
    def _mesh_usable(mesh) -> bool:
        if mesh is None:
            return False
        if mesh.is_empty or not math.isfinite(mesh.max_extent) or mesh.max_extent <= 0:
            logger.warning(f"Mesh '{mesh.name}' has no renderable geometry; mesh view disabled")
            return False
        return True

    # ────────────────────────────────────────────────────────────────────
    # State transitions
    # ────────────────────────────────────────────────────────────────────
    def reset_rotation(self):
        self.rot_x = self.rot_y = self.rot_z = 0.0
        self.auto_rotate = True
        self.last_tick = time.monotonic()

    def enter_input(self):
        self.mode = Mode.INPUT
        self.auto_rotate = False

    def submit(self):
        value = self.text
        if self.mesh is not None and value.strip().lower() == self.keyword:
            self.prompt = value
            self.mode = Mode.MESH_VIEW
            self.reset_rotation()
            self.text = ""
            logger.info(f"Viewing mesh '{self.mesh.name}'")
        elif is_valid_prompt(value):
            self.prompt = value
            self.art = generate_art(value)
            self.mode = Mode.DISPLAY
            self.text = ""

    def tick(self, now=None):
        """Advance the auto-rotation if a tick interval has elapsed."""
        now = time.monotonic() if now is None else now
        if self.mode is not Mode.MESH_VIEW or not self.auto_rotate:
            self.last_tick = now
            return False
        if now < self.last_tick + TICK_INTERVAL:
            return False
        self.rot_y += self.rotation_speed
        self.last_tick = now
        return True

    # ────────────────────────────────────────────────────────────────────
    # Input
    # ────────────────────────────────────────────────────────────────────
    def handle_key(self, key):
        if key == -1:
            return
        if self.mode is Mode.INPUT:
            self._handle_input_key(key)
        elif self.mode is Mode.DISPLAY:
            self._handle_display_key(key)
        else:
            self._handle_mesh_key(key)

    def _handle_input_key(self, key):
        if key in ENTER_KEYS:
            self.submit()
        elif key in (KEY_ESC, KEY_CTRL_C):
            self.running = False
        elif key in BACKSPACE_KEYS:
            self.text = self.text[:-1]
        elif 32 <= key < 127 and len(self.text) < INPUT_LIMIT:
            self.text += chr(key)

    def _handle_display_key(self, key):
        if key in (ord('m'), ord('M')):
            self.enter_input()
        elif key in (ord('t'), ord('T')) or key in ENTER_KEYS:
            if is_valid_prompt(self.prompt):
                self.art = generate_art(self.prompt)
        elif key in (ord('q'), KEY_CTRL_C, KEY_ESC):
            self.running = False

    def _handle_mesh_key(self, key):
        manual = {
            curses.KEY_LEFT: ('rot_y', ROTATION_STEP),
            ord('a'): ('rot_y', ROTATION_STEP),
            curses.KEY_RIGHT: ('rot_y', -ROTATION_STEP),
            ord('d'): ('rot_y', -ROTATION_STEP),
            curses.KEY_UP: ('rot_x', ROTATION_STEP),
            ord('w'): ('rot_x', ROTATION_STEP),
            curses.KEY_DOWN: ('rot_x', -ROTATION_STEP),
            ord('s'): ('rot_x', -ROTATION_STEP),
            ord('q'): ('rot_z', ROTATION_STEP),
            ord('Q'): ('rot_z', ROTATION_STEP),
            ord('e'): ('rot_z', -ROTATION_STEP),
            ord('E'): ('rot_z', -ROTATION_STEP),
        }
        if key in manual:
            attr, delta = manual[key]
            self.auto_rotate = False
            setattr(self, attr, getattr(self, attr) + delta)
        elif key == ord(' '):
            self.auto_rotate = not self.auto_rotate
            self.last_tick = time.monotonic()
        elif key in (ord('r'), ord('R'), ord('t'), ord('T')) or key in ENTER_KEYS:
            self.reset_rotation()
        elif key in (ord('v'), ord('V')):
            self.style = self.style.toggled()
        elif key in (ord('m'), ord('M')):
            self.enter_input()
        elif key in (KEY_CTRL_C, KEY_ESC):
            self.running = False

    # ────────────────────────────────────────────────────────────────────
    # Drawing
    # ────────────────────────────────────────────────────────────────────
    def _attr(self, role):
        return self.attrs.get(role, curses.A_NORMAL)

    def _input_lines(self):
        count = word_count(self.text)
        status = f"Words: {count}/{MAX_WORDS}"
        if count < 2 and self.text and self.text.strip().lower() != self.keyword:
            status += " (minimum 2 words)"
        hint = f"Describe an object (2-{MAX_WORDS} words)"
        if self.mesh is not None:
            hint += f" or type '{self.keyword}'"
        box_w = INPUT_LIMIT + 4
        return [
            (TITLE, "title"),
            ("", None),
            (hint + ":", "prompt"),
            ("+" + "-" * box_w + "+", "border"),
            ("| > " + self.text.ljust(INPUT_LIMIT) + " |", "border"),
            ("+" + "-" * box_w + "+", "border"),
            ("", None),
            (status, "help"),
            ("Press Enter to generate - Esc to quit", "help"),
        ]

    def _display_lines(self):
        lines = [(TITLE, "title"), ("", None), (f"Generated: {self.prompt}", "prompt")]
        lines += [(row, "border") for row in self.art.split("\n")]
        lines += [
            ("", None),
            ("[M] Make a new   [T] Try again", "highlight"),
            ("", None),
            ("Press M to make a new - T to try again - Esc to quit", "help"),
        ]
        return lines

    def _mesh_lines(self, term_w, term_h):
        grid_w, grid_h = render_size(term_w, term_h)
        rows = self.renderer.render(self.mesh, self.rot_x, self.rot_y, self.rot_z,
                                    self.style, grid_w, grid_h)
        rotation_status = "Auto-rotating" if self.auto_rotate else "Manual control"
        if self.config.use_unicode:
            tl, tr, bl, br, hz, vt = "╔", "╗", "╚", "╝", "═", "║"
        else:
            tl, tr, bl, br, hz, vt = "+", "+", "+", "+", "-", "|"

        lines = [
            (TITLE, "title"),
            (f"3D Model: {self.mesh.name}", "prompt"),
            (f"Mode: {self.style.value} | {rotation_status} | "
             f"X:{self.rot_x:.1f} Y:{self.rot_y:.1f} Z:{self.rot_z:.1f}", "help"),
            (tl + hz * grid_w + tr, "border"),
        ]
        lines += [(vt + row + vt, "border") for row in rows]
        lines += [
            (bl + hz * grid_w + br, "border"),
            ("Controls:", "help"),
            ("SPACE: Pause/Resume rotation | Arrow keys: Manual rotate", "help"),
            ("R: Reset & auto-rotate | V: Toggle solid/wireframe", "help"),
            ("M: Make a new | T: Reset rotation | Esc: Quit", "help"),
        ]
        return lines

    def build_lines(self):
        th, tw = self.stdscr.getmaxyx()
        if self.mode is Mode.INPUT:
            return self._input_lines()
        if self.mode is Mode.DISPLAY:
            return self._display_lines()
        return self._mesh_lines(tw, th)

    def draw(self):
        th, tw = self.stdscr.getmaxyx()
        lines = self.build_lines()

        block_w = max(len(text) for text, _ in lines)
        x0 = max(0, (tw - block_w) // 2)
        y0 = max(0, (th - len(lines)) // 2)

        self.stdscr.erase()
        for i, (text, role) in enumerate(lines):
            y = y0 + i
            if y >= th:
                break
            if not text:
                continue
            # Lines wider than the terminal are clipped on the right
            text = text[:max(0, tw - x0 - 1)]
            try:
                self.stdscr.addstr(y, x0, text, self._attr(role))
            except curses.error:
                pass
        self.stdscr.refresh()

    # ────────────────────────────────────────────────────────────────────
    # Main loop
    # ────────────────────────────────────────────────────────────────────
    def setup_screen(self):
        try:
            curses.curs_set(0)
        except curses.error:
            pass
        self.stdscr.keypad(True)
        # getch() blocks at most one tick, which paces the loop
        self.stdscr.timeout(int(TICK_INTERVAL * 1000))

    def run(self):
        self.setup_screen()
        while self.running:
            self.draw()
            self.handle_key(self.stdscr.getch())
            self.tick()


def main(stdscr, mesh=None, config: RenderConfig = None, keyword: str = "pikachu",
         rotation_speed: float = 0.03, use_color: bool = True):
    """Entry point called from curses.wrapper."""
    from .color import init_ui_colors
    attrs = init_ui_colors(use_color)
    app = ViewerApp(stdscr, mesh, config, keyword, rotation_speed, attrs)
    app.run()
