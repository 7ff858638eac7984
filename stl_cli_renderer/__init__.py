#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

from .math_utils import Vec3, Mat3
from .mesh import Mesh, Triangle
from .stl import parse_stl, parse_stl_lines
from .config import RenderConfig, RenderStyle
from .canvas import Canvas
from .rasterizer import point_in_triangle, draw_line_bresenham, fill_triangle
from .renderer import Renderer, RenderError, load_and_render
from .phrases import generate_art
from .logging_config import setup_logging
