#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/canvas.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import math

BLANK = ' '
EMPTY_DEPTH = -math.inf


class Canvas:
    """
    Character frame buffer with a parallel depth buffer, one cell per
    output character.

    depths[y][x] holds the view-depth of the write that last won the depth
    test at that cell (EMPTY_DEPTH if untouched); cells[y][x] holds the glyph
    written at that depth.
    """
    __slots__ = ['w', 'h', 'cells', 'depths']

    def __init__(self, w, h):
        self.w, self.h = w, h
        self.cells = []
        self.depths = []
        self.clear()

    def clear(self):
        self.cells = [[BLANK] * self.w for _ in range(self.h)]
        self.depths = [[EMPTY_DEPTH] * self.w for _ in range(self.h)]

    def in_bounds(self, x, y) -> bool:
        return 0 <= x < self.w and 0 <= y < self.h

    def set_cell(self, x, y, z, glyph) -> bool:
        """Write glyph if z is strictly greater than the stored depth."""
        if not self.in_bounds(x, y): return False

        if z > self.depths[y][x]:
            self.depths[y][x] = z
            self.cells[y][x] = glyph
            return True
        return False

    def rows(self):
        return [''.join(row) for row in self.cells]

    def to_text(self) -> str:
        return '\n'.join(self.rows())
