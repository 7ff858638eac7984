#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/rasterizer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .canvas import Canvas


def _edge_sign(p1, p2, p3):
    return (p1[0] - p3[0]) * (p2[1] - p3[1]) - (p2[0] - p3[0]) * (p1[1] - p3[1])


def point_in_triangle(px, py, v1, v2, v3) -> bool:
    """
    Same-sign half-plane test. Points on an edge or vertex count as inside.
    v1, v2, v3 are (x, y, ...) sequences; only x and y are used.
    """
    p = (px, py)
    d1 = _edge_sign(p, v1, v2)
    d2 = _edge_sign(p, v2, v3)
    d3 = _edge_sign(p, v3, v1)

    has_neg = d1 < 0 or d2 < 0 or d3 < 0
    has_pos = d1 > 0 or d2 > 0 or d3 > 0

    return not (has_neg and has_pos)


def ramp_glyph(depth: float, ramp: str, depth_offset: float = 100.0,
               depth_range: float = 200.0) -> str:
    """Map a view-depth onto the ramp, clamped to its first and last glyph."""
    rel = (depth + depth_offset) / depth_range
    idx = int(rel * (len(ramp) - 1))
    if idx < 0: idx = 0
    if idx >= len(ramp): idx = len(ramp) - 1
    return ramp[idx]


def draw_line_bresenham(canvas: Canvas, p1, p2, glyph: str):
    """
    Draws a line with integer Bresenham stepping and per-pixel depth test.
    p1, p2 are (x, y, z) in screen space; every pixel uses the mean z of the
    two endpoints. Off-canvas pixels are skipped, stepping continues.
    """
    x0, y0 = int(p1[0]), int(p1[1])
    x1, y1 = int(p2[0]), int(p2[1])
    z = (p1[2] + p2[2]) / 2

    dx = abs(x1 - x0)
    dy = abs(y1 - y0)
    sx = 1 if x0 <= x1 else -1
    sy = 1 if y0 <= y1 else -1
    err = dx - dy

    while True:
        canvas.set_cell(x0, y0, z, glyph)

        if x0 == x1 and y0 == y1:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x0 += sx
        if e2 < dx:
            err += dx
            y0 += sy


def fill_triangle(canvas: Canvas, p1, p2, p3, ramp: str,
                  depth_offset: float = 100.0, depth_range: float = 200.0):
    """
    Fills a triangle at its mean depth, shading with a ramp glyph.
    p1, p2, p3 are (x, y, z) in screen space. Pixels are tested at integer
    coordinates inside the triangle's bounding box clipped to the canvas.
    """
    xs = (p1[0], p2[0], p3[0])
    ys = (p1[1], p2[1], p3[1])
    min_x = int(max(0, min(xs)))
    max_x = int(min(canvas.w - 1, max(xs)))
    min_y = int(max(0, min(ys)))
    max_y = int(min(canvas.h - 1, max(ys)))

    # Flat depth: one glyph for the whole triangle
    z = (p1[2] + p2[2] + p3[2]) / 3
    glyph = ramp_glyph(z, ramp, depth_offset, depth_range)

    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            if point_in_triangle(x, y, p1, p2, p3):
                canvas.set_cell(x, y, z, glyph)
