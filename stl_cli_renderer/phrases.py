#
# PROJECT: stl-cli-renderer
# MODULE: stl_cli_renderer/phrases.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

"""Canned ASCII art for the phrase mode of the viewer."""

# Checked in this order; the first key found in the prompt wins.
ART = {
    "duck": r"""
       __
     <(o )___
      ( ._> /
       '---'""",
    "car": r"""
       ______
      /|_||_\'.__
     (   _    _ _\
     ='-(_)--(_)-'""",
    "flower": r"""
       .--.---.
      /  (   ) \
      \  '---' /
       '--\_/--'
          |
        __|__""",
    "house": r"""
         /\
        /  \
       /    \
      |  __  |
      | |  | |
      |_|__|_|""",
    "tree": r"""
        /\
       /|\
      / | \
     /  |  \
        |
       _|_""",
    "cat": r"""
      /\_/\
     ( o.o )
      > ^ <
     /|   |\
    (_|   |_)""",
    "star": r"""
        *
       / \
      /   \
     |  *  |
      \   /
       \ /""",
}

MIN_WORDS = 2
MAX_WORDS = 5


def word_count(text: str) -> int:
    return len(text.split())


def is_valid_prompt(text: str) -> bool:
    return MIN_WORDS <= word_count(text) <= MAX_WORDS


def placeholder_art(prompt: str) -> str:
    label = prompt[:8].upper()
    return "\n".join([
        "",
        "    +------------+",
        "    |            |",
        f"    |  {label:<8}  |",
        "    |            |",
        "    |    [3D]    |",
        "    |            |",
        "    +------------+",
        "      Processing...",
    ])


def generate_art(prompt: str) -> str:
    """Return the art for the first known object named in prompt."""
    lowered = prompt.lower()
    for key, art in ART.items():
        if key in lowered:
            return art
    return placeholder_art(prompt)
