#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/config.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import os
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class RenderStyle(Enum):
    SOLID = "solid"
    WIREFRAME = "wireframe"

    @classmethod
    def parse(cls, value) -> 'RenderStyle':
        """Accept a RenderStyle or its string value (case-insensitive)."""
        if isinstance(value, cls):
            return value
        return cls(str(value).strip().lower())

    def toggled(self) -> 'RenderStyle':
        return RenderStyle.WIREFRAME if self is RenderStyle.SOLID else RenderStyle.SOLID


# Glyph ramps, heaviest first. Wireframe edges only ever use index 0.
UNICODE_RAMPS = {
    RenderStyle.SOLID: "█▓▒░▐▌· ",
    RenderStyle.WIREFRAME: "#+*o.· ",
}

ASCII_RAMPS = {
    RenderStyle.SOLID: "@%#*+=-. ",
    RenderStyle.WIREFRAME: "#+*o.: ",
}


@dataclass
class RenderConfig:
    """Configuration for the rendering pipeline."""
    width: int = 80
    height: int = 40
    style: RenderStyle = RenderStyle.SOLID
    use_unicode: bool = True
    fill_ratio: float = 0.9
    # Solid shading maps (depth + depth_offset) / depth_range onto the ramp
    depth_offset: float = 100.0
    depth_range: float = 200.0

    ramps: Optional[Dict[RenderStyle, str]] = field(default=None, repr=False)

    def __post_init__(self):
        self.style = RenderStyle.parse(self.style)
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Grid size must be positive, got {self.width}x{self.height}")
        if self.fill_ratio <= 0:
            raise ValueError("fill_ratio must be positive")
        if self.depth_range == 0:
            raise ValueError("depth_range must be non-zero")
        if self.ramps is None:
            self.ramps = dict(UNICODE_RAMPS if self.use_unicode else ASCII_RAMPS)
        for style in RenderStyle:
            if not self.ramps.get(style):
                raise ValueError(f"Missing glyph ramp for style '{style.value}'")

    def ramp_for(self, style) -> str:
        return self.ramps[RenderStyle.parse(style)]

    @classmethod
    def detect_terminal(cls, **overrides) -> 'RenderConfig':
        """
        Guess whether the terminal can show the unicode ramps.
        Checks TERM and LANG environment variables.
        """
        term = os.environ.get('TERM', '').lower()
        lang = os.environ.get('LANG', '').lower()

        is_dumb = term in ('dumb', 'unknown')
        # Linux console font often lacks the block glyphs
        is_linux_console = term == 'linux'
        supports_utf8 = 'utf-8' in lang or 'utf8' in lang

        overrides.setdefault('use_unicode', supports_utf8 and not (is_dumb or is_linux_console))
        return cls(**overrides)
