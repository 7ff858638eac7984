#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/cli.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import curses
import logging
import os
import sys

from .config import RenderConfig, RenderStyle
from .logging_config import setup_logging
from .renderer import Renderer, RenderError
from .stl import parse_stl

logger = logging.getLogger(__name__)

DEFAULT_KEYWORD = "pikachu"
DEFAULT_MODEL = "pikachu.stl"


def build_parser() -> argparse.ArgumentParser:
    """CLI argument parser for the viewer and the one-shot renderer."""
    epilog = """\
examples:
  %(prog)s                                       Loads ./pikachu.stl if present
  %(prog)s pikachu.stl                           Type 'pikachu' to view the model
  %(prog)s part.stl --keyword part --style wireframe
  %(prog)s part.stl --once --width 60 --height 30 --rot-y 0.8
  %(prog)s part.stl --ascii --no-color           Plain ASCII glyphs, monochrome
"""
    parser = argparse.ArgumentParser(
        description="Text-mode STL mesh viewer",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("model", nargs='?', help="Path to an ASCII .stl file")
    parser.add_argument("--keyword",
                        help="Phrase that opens the mesh view (default: model file name)")
    parser.add_argument("--style", choices=[s.value for s in RenderStyle],
                        default=RenderStyle.SOLID.value,
                        help="Initial render style (default: solid)")
    parser.add_argument("--speed", type=float, default=0.03,
                        help="Auto-rotate step in radians per tick (default: 0.03)")
    parser.add_argument("--ascii", action="store_true",
                        help="Use ASCII glyph ramps instead of unicode blocks")
    parser.add_argument("--no-color", action="store_true",
                        help="Disable color output")
    parser.add_argument("--once", action="store_true",
                        help="Print a single frame to stdout and exit")
    parser.add_argument("--width", type=int, default=80,
                        help="Frame width for --once (default: 80)")
    parser.add_argument("--height", type=int, default=40,
                        help="Frame height for --once (default: 40)")
    parser.add_argument("--rot-x", type=float, default=0.0,
                        help="Rotation about X in radians for --once")
    parser.add_argument("--rot-y", type=float, default=0.0,
                        help="Rotation about Y in radians for --once")
    parser.add_argument("--rot-z", type=float, default=0.0,
                        help="Rotation about Z in radians for --once")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: WARNING)")
    parser.add_argument("--log-file", help="Also write log records to this file")
    return parser


def default_keyword(model_path) -> str:
    if not model_path:
        return DEFAULT_KEYWORD
    return os.path.splitext(os.path.basename(model_path))[0].lower() or DEFAULT_KEYWORD


def resolve_model(model_path):
    """The model to load: the given path, else pikachu.stl if the working directory has one."""
    if model_path:
        return model_path
    if os.path.isfile(DEFAULT_MODEL):
        logger.info(f"No model given, using ./{DEFAULT_MODEL}")
        return DEFAULT_MODEL
    return None


def render_once(args, config: RenderConfig) -> int:
    if not args.model:
        logger.error("--once needs a model file")
        return 2
    try:
        mesh = parse_stl(args.model)
        text = Renderer(config).render_text(
            mesh, args.rot_x, args.rot_y, args.rot_z,
            width=args.width, height=args.height)
    except OSError as e:
        logger.error(f"Could not open '{args.model}': {e}")
        return 1
    except RenderError as e:
        logger.error(f"Cannot render '{args.model}': {e}")
        return 1
    print(text)
    return 0


def run_viewer(args, config: RenderConfig) -> int:
    from .viewer import main as viewer_main

    model = resolve_model(args.model)
    mesh = None
    if model:
        try:
            mesh = parse_stl(model)
        except OSError as e:
            # Phrase mode still works without a model
            logger.error(f"Could not open '{model}': {e}")

    keyword = args.keyword or default_keyword(model)
    try:
        curses.wrapper(viewer_main, mesh, config, keyword, args.speed,
                       not args.no_color)
    except KeyboardInterrupt:
        pass
    return 0


def run(argv=None) -> int:
    args = build_parser().parse_args(argv)

    # Console logging would draw over the curses screen
    setup_logging(getattr(logging, args.log_level), args.log_file,
                  console=args.once)

    if args.ascii:
        config = RenderConfig(style=args.style, use_unicode=False)
    else:
        config = RenderConfig.detect_terminal(style=args.style)

    if args.once:
        return render_once(args, config)
    return run_viewer(args, config)


def main():
    sys.exit(run())
