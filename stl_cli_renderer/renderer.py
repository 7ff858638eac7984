#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/renderer.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import logging
import math

from .canvas import Canvas
from .config import RenderConfig, RenderStyle
from .math_utils import Mat3, Vec3
from .mesh import Mesh
from .rasterizer import draw_line_bresenham, fill_triangle
from .stl import parse_stl

logger = logging.getLogger(__name__)


class RenderError(ValueError):
    """Raised when a render is requested with degenerate inputs."""


class Renderer:
    """
    Orthographic text renderer.

    render(mesh, rot_x, rot_y, rot_z) returns one frame as a list of rows.

    Pipeline per frame:
      1. Validate inputs, clear (or reallocate) the canvas
      2. Centre on the bounding box, scale the largest extent to fill_ratio
         of the smaller grid side
      3. Rotate by Rz @ Ry @ Rx and project (Y flipped, z kept as depth)
      4. Per triangle: depth-shaded fill or three depth-tested edges

    The depth test keeps the LARGER view-depth.

    Holds no state between calls except the reusable canvas, which is cleared
    before every frame.
    """

    def __init__(self, config: RenderConfig = None):
        self.config = config if config is not None else RenderConfig()
        self.canvas = None

    def _canvas_for(self, width, height) -> Canvas:
        canv = self.canvas
        if canv is None or canv.w != width or canv.h != height:
            canv = Canvas(width, height)
            self.canvas = canv
        else:
            canv.clear()
        return canv

    @staticmethod
    def _check_inputs(mesh: Mesh, width, height):
        if not isinstance(width, int) or not isinstance(height, int) or width <= 0 or height <= 0:
            raise RenderError(f"Render size must be positive integers, got {width!r}x{height!r}")
        if mesh is None or mesh.is_empty:
            raise RenderError("Cannot render a mesh with no triangles")
        max_extent = mesh.max_extent
        if not math.isfinite(max_extent) or max_extent <= 0:
            raise RenderError(f"Mesh '{mesh.name}' has no usable extent ({max_extent})")
        return max_extent

    @staticmethod
    def project_vertex(v: Vec3, center: Vec3, rotation: Mat3, scale: float,
                       width: int, height: int) -> Vec3:
        """Model space -> (column, row, view-depth)."""
        rotated = rotation.mul_vec3(v - center)
        return Vec3(
            rotated.x * scale + width / 2.0,
            -rotated.y * scale + height / 2.0,
            rotated.z,
        )

    def render(self, mesh: Mesh, rot_x: float, rot_y: float, rot_z: float,
               style=None, width: int = None, height: int = None):
        config = self.config
        width = config.width if width is None else width
        height = config.height if height is None else height
        try:
            style = config.style if style is None else RenderStyle.parse(style)
        except ValueError as e:
            raise RenderError(f"Unknown render style {style!r}") from e

        max_extent = self._check_inputs(mesh, width, height)
        canv = self._canvas_for(width, height)

        center = mesh.center
        scale = min(width, height) * config.fill_ratio / max_extent
        rotation = Mat3.rotation_xyz(rot_x, rot_y, rot_z)
        ramp = config.ramp_for(style)
        depth_offset = config.depth_offset
        depth_range = config.depth_range

        for tri in mesh.triangles:
            p1 = self.project_vertex(tri.v1, center, rotation, scale, width, height)
            p2 = self.project_vertex(tri.v2, center, rotation, scale, width, height)
            p3 = self.project_vertex(tri.v3, center, rotation, scale, width, height)
            if not all(math.isfinite(c) for p in (p1, p2, p3) for c in p):
                raise RenderError(f"Mesh '{mesh.name}' has a non-finite vertex")

            if style is RenderStyle.WIREFRAME:
                edge = ramp[0]
                draw_line_bresenham(canv, p1, p2, edge)
                draw_line_bresenham(canv, p2, p3, edge)
                draw_line_bresenham(canv, p3, p1, edge)
            else:
                fill_triangle(canv, p1, p2, p3, ramp, depth_offset, depth_range)

        return canv.rows()

    def render_text(self, mesh: Mesh, rot_x: float, rot_y: float, rot_z: float,
                    style=None, width: int = None, height: int = None) -> str:
        """Same as render(), rows joined with newlines (none trailing)."""
        return '\n'.join(self.render(mesh, rot_x, rot_y, rot_z, style, width, height))


def load_and_render(filename, width: int, height: int, rot_x: float = 0.0,
                    rot_y: float = 0.0, rot_z: float = 0.0, style="solid",
                    config: RenderConfig = None) -> str:
    """Parse an STL file and render a single frame of it as text."""
    mesh = parse_stl(filename)
    logger.debug(f"Rendering '{mesh.name}' at {width}x{height} ({style})")
    return Renderer(config).render_text(mesh, rot_x, rot_y, rot_z, style, width, height)
