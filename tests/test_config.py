import unittest
from unittest import mock

from stl_cli_renderer.config import (ASCII_RAMPS, UNICODE_RAMPS, RenderConfig,
                                     RenderStyle)


class RenderStyleTests(unittest.TestCase):
    def test_parse(self) -> None:
        self.assertIs(RenderStyle.parse("solid"), RenderStyle.SOLID)
        self.assertIs(RenderStyle.parse(" Wireframe "), RenderStyle.WIREFRAME)
        self.assertIs(RenderStyle.parse(RenderStyle.SOLID), RenderStyle.SOLID)
        with self.assertRaises(ValueError):
            RenderStyle.parse("points")

    def test_toggled(self) -> None:
        self.assertIs(RenderStyle.SOLID.toggled(), RenderStyle.WIREFRAME)
        self.assertIs(RenderStyle.WIREFRAME.toggled(), RenderStyle.SOLID)


class RenderConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = RenderConfig()
        self.assertEqual((config.width, config.height), (80, 40))
        self.assertIs(config.style, RenderStyle.SOLID)
        self.assertEqual(config.ramp_for("solid"), "█▓▒░▐▌· ")
        self.assertEqual(config.ramp_for(RenderStyle.WIREFRAME)[0], "#")

    def test_ascii_ramps(self) -> None:
        config = RenderConfig(use_unicode=False)
        self.assertEqual(config.ramps, ASCII_RAMPS)
        self.assertTrue(all(ord(c) < 128 for ramp in config.ramps.values() for c in ramp))

    def test_ramps_are_copied(self) -> None:
        config = RenderConfig()
        config.ramps[RenderStyle.SOLID] = "xy"
        self.assertEqual(UNICODE_RAMPS[RenderStyle.SOLID], "█▓▒░▐▌· ")

    def test_style_string_is_normalised(self) -> None:
        self.assertIs(RenderConfig(style="wireframe").style, RenderStyle.WIREFRAME)

    def test_rejects_bad_values(self) -> None:
        with self.assertRaises(ValueError):
            RenderConfig(width=0)
        with self.assertRaises(ValueError):
            RenderConfig(height=-1)
        with self.assertRaises(ValueError):
            RenderConfig(depth_range=0.0)
        with self.assertRaises(ValueError):
            RenderConfig(fill_ratio=0.0)
        with self.assertRaises(ValueError):
            RenderConfig(ramps={RenderStyle.SOLID: "ab"})

    def test_detect_terminal_utf8(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "xterm-256color", "LANG": "en_US.UTF-8"}):
            self.assertTrue(RenderConfig.detect_terminal().use_unicode)

    def test_detect_terminal_plain(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "xterm", "LANG": "C"}):
            self.assertFalse(RenderConfig.detect_terminal().use_unicode)
        with mock.patch.dict("os.environ", {"TERM": "linux", "LANG": "en_US.UTF-8"}):
            self.assertFalse(RenderConfig.detect_terminal().use_unicode)

    def test_detect_terminal_overrides(self) -> None:
        with mock.patch.dict("os.environ", {"TERM": "xterm", "LANG": "C"}):
            config = RenderConfig.detect_terminal(style="wireframe", use_unicode=True)
        self.assertIs(config.style, RenderStyle.WIREFRAME)
        self.assertTrue(config.use_unicode)


if __name__ == "__main__":
    unittest.main()
