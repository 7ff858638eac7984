#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/color.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import curses
import logging

logger = logging.getLogger(__name__)

# UI roles -> (foreground hex, background hex or None for terminal default)
UI_PALETTE = {
    "title": ("#FF79C6", None),
    "prompt": ("#8BE9FD", None),
    "border": ("#50FA7B", None),
    "help": ("#6272A4", None),
    "highlight": ("#282A36", "#FF79C6"),
}

# Extra attributes per role, applied even in mono mode
_ROLE_ATTRS = {
    "title": curses.A_BOLD,
    "highlight": curses.A_BOLD,
}

# First color slot we redefine, past the 16 ANSI colors
_BASE_SLOT = 16


def parse_hex_color(hex_str):
    """
    Parse a hex color string to an (r, g, b) tuple.
    Accepts: '#RRGGBB' or 'RRGGBB' (case-insensitive).
    Returns: (r, g, b) tuple with values 0-255, or None on failure.
    """
    if hex_str is None:
        return None
    val = str(hex_str).strip().lstrip('#')
    if len(val) != 6:
        return None
    try:
        r = int(val[0:2], 16)
        g = int(val[2:4], 16)
        b = int(val[4:6], 16)
        return (r, g, b)
    except ValueError:
        return None

# The 6x6x6 color cube occupies xterm indices 16-231.
_CUBE_VALUES = [0, 95, 135, 175, 215, 255]

# ANSI 0-7 approximate RGB values
_ANSI8 = [
    (0, 0, 0),       # 0  black
    (128, 0, 0),     # 1  red
    (0, 128, 0),     # 2  green
    (128, 128, 0),   # 3  yellow
    (0, 0, 128),     # 4  blue
    (128, 0, 128),   # 5  magenta
    (0, 128, 128),   # 6  cyan
    (192, 192, 192), # 7  white
]


def _nearest_cube_val(v):
    """Index of the nearest value on one 6-level cube axis."""
    return min(range(6), key=lambda i: abs(v - _CUBE_VALUES[i]))


def rgb_to_nearest_xterm(r, g, b):
    """Find the nearest xterm-256 index for an (r, g, b) color.
    Searches the 6x6x6 cube and the grayscale ramp for best match."""
    ri = _nearest_cube_val(r)
    gi = _nearest_cube_val(g)
    bi = _nearest_cube_val(b)
    cube_idx = 16 + ri * 36 + gi * 6 + bi
    cr, cg, cb = _CUBE_VALUES[ri], _CUBE_VALUES[gi], _CUBE_VALUES[bi]
    cube_dist = (r - cr) ** 2 + (g - cg) ** 2 + (b - cb) ** 2

    # Grayscale ramp 232-255: 8, 18, ..., 238
    gray_avg = (r + g + b) // 3
    gray_step = max(0, min(23, (gray_avg - 8 + 5) // 10))
    gray_idx = 232 + gray_step
    gv = 8 + gray_step * 10
    gray_dist = (r - gv) ** 2 + (g - gv) ** 2 + (b - gv) ** 2

    return gray_idx if gray_dist < cube_dist else cube_idx


def rgb_to_nearest_ansi8(r, g, b):
    """Find the nearest basic ANSI color index (0-7) for an (r, g, b) color."""
    return min(range(8), key=lambda i: (r - _ANSI8[i][0]) ** 2 +
                                       (g - _ANSI8[i][1]) ** 2 +
                                       (b - _ANSI8[i][2]) ** 2)


def _resolve_slot(rgb, mode, slot_counter):
    """Return a curses color number for rgb under the given palette mode."""
    if rgb is None:
        return -1
    r, g, b = rgb
    if mode == "truecolor":
        slot = next(slot_counter)
        try:
            curses.init_color(slot, r * 1000 // 255, g * 1000 // 255, b * 1000 // 255)
            return slot
        except curses.error:
            return rgb_to_nearest_xterm(r, g, b)
    if mode == "xterm256":
        return rgb_to_nearest_xterm(r, g, b)
    return rgb_to_nearest_ansi8(r, g, b)


def _palette_mode():
    num_colors = getattr(curses, 'COLORS', 8)
    if num_colors >= 256 and curses.can_change_color():
        return "truecolor"
    if num_colors >= 256:
        return "xterm256"
    if num_colors >= 8:
        return "ansi8"
    return None


def init_ui_colors(use_color: bool = True, palette=None):
    """
    Set up curses color pairs for the viewer's UI roles.
    Color mode cascade:
      1. True color  - can_change_color(): init_color() with exact RGB
      2. xterm-256   - nearest xterm-256 index
      3. 8-color     - basic ANSI palette approximation
      4. Mono        - attributes only
    Call once after curses.wrapper init. Returns {role: curses attr}.
    """
    palette = palette or UI_PALETTE
    attrs = {role: _ROLE_ATTRS.get(role, curses.A_NORMAL) for role in palette}
    if not use_color:
        return attrs

    try:
        if not curses.has_colors():
            return attrs
        curses.start_color()
        try:
            curses.use_default_colors()
            default_bg = -1
        except curses.error:
            default_bg = curses.COLOR_BLACK

        mode = _palette_mode()
        if mode is None:
            return attrs

        slot_counter = iter(range(_BASE_SLOT, _BASE_SLOT + 2 * len(palette)))
        for pair_id, (role, (fg_hex, bg_hex)) in enumerate(palette.items(), start=1):
            fg = _resolve_slot(parse_hex_color(fg_hex), mode, slot_counter)
            bg = _resolve_slot(parse_hex_color(bg_hex), mode, slot_counter)
            if bg == -1:
                bg = default_bg
            try:
                curses.init_pair(pair_id, fg, bg)
                attrs[role] |= curses.color_pair(pair_id)
            except curses.error:
                logger.debug(f"Could not allocate color pair for '{role}'")
    except curses.error as e:
        logger.warning(f"Color setup failed, falling back to mono: {e}")
    logger.debug(f"UI colors initialised ({len(attrs)} roles)")
    return attrs
