#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/stl.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""
Streaming ASCII STL reader.

Best effort: malformed numbers read as 0.0, unknown tags are skipped and
facets that do not end with exactly three vertices are dropped. Only a
failure to open the source is raised.
"""

import logging
import math
import os

from .math_utils import Vec3
from .mesh import Mesh, Triangle

logger = logging.getLogger(__name__)

IDLE = "idle"
COLLECTING = "collecting"


def parse_float(token: str) -> float:
    # nan and inf spellings are not usable coordinates either
    try:
        value = float(token)
    except ValueError:
        return 0.0
    return value if math.isfinite(value) else 0.0


def _parse_vec3(tokens) -> Vec3:
    return Vec3(*(parse_float(t) for t in tokens[:3]))


class _ParserState:
    """Accumulator for the facet being read: IDLE or COLLECTING(count)."""
    __slots__ = ('mode', 'count', 'normal', 'slots', 'dropped')

    def __init__(self):
        self.dropped = 0
        self.reset()

    def reset(self):
        self.mode = IDLE
        self.count = 0
        self.normal = Vec3(0, 0, 0)
        self.slots = [None, None, None]

    def begin(self, normal: Vec3):
        self.mode = COLLECTING
        self.count = 0
        self.normal = normal
        self.slots = [None, None, None]

    def add_vertex(self, v: Vec3):
        # A vertex seen while IDLE opens an implicit facet with a zero normal
        self.mode = COLLECTING
        if self.count < 3:
            self.slots[self.count] = v
        # Extra vertices have no slot but still count, so the facet is dropped
        self.count += 1

    def finish(self):
        """Return the completed Triangle, or None if the facet is discarded."""
        tri = None
        if self.mode == COLLECTING and self.count == 3:
            tri = Triangle(self.slots[0], self.slots[1], self.slots[2], self.normal)
        self.reset()
        return tri


def _feed(mesh: Mesh, state: _ParserState, tokens, lineno: int):
    tag = tokens[0]

    if tag == "solid":
        if len(tokens) > 1:
            mesh.name = " ".join(tokens[1:]).strip('"')

    elif tag == "facet":
        # Needs all three normal components, otherwise the line is ignored
        if len(tokens) >= 5 and tokens[1] == "normal":
            state.begin(_parse_vec3(tokens[2:]))

    elif tag == "vertex":
        if len(tokens) >= 4:
            v = _parse_vec3(tokens[1:])
            mesh.include_point(v)
            state.add_vertex(v)

    elif tag == "endfacet":
        count = state.count
        tri = state.finish()
        if tri is not None:
            mesh.add_triangle(tri)
        else:
            state.dropped += 1
            logger.debug(f"Dropped facet ending on line {lineno} ({count} vertices)")


def parse_stl_lines(lines, name: str = "") -> Mesh:
    """Build a Mesh from an iterable of text lines."""
    mesh = Mesh(name)
    state = _ParserState()

    for lineno, line in enumerate(lines, start=1):
        tokens = line.split()
        if not tokens:
            continue
        _feed(mesh, state, tokens, lineno)

    logger.info(f"Parsed mesh '{mesh.name}': {len(mesh.triangles)} triangles, "
                f"{state.dropped} facets dropped")
    return mesh


def parse_stl(source) -> Mesh:
    """
    Parse an ASCII STL file.

    Args:
        source: Path to the file, or an already-open text stream / iterable
            of lines.

    Raises:
        OSError: If a path is given and the file cannot be opened.
    """
    if isinstance(source, (str, bytes, os.PathLike)):
        logger.debug(f"Reading STL from {source!r}")
        with open(source, 'r', encoding='utf-8', errors='replace') as f:
            return parse_stl_lines(f)
    return parse_stl_lines(source)
