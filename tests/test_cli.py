import contextlib
import io
import logging
import os
import tempfile
import unittest
from unittest import mock

from stl_cli_renderer.cli import DEFAULT_MODEL, build_parser, default_keyword, resolve_model, run
from stl_cli_renderer.logging_config import PACKAGE_LOGGER

TRIANGLE_STL = """\
solid tri
facet normal 0 0 1
outer loop
vertex 0 0 0
vertex 1 0 0
vertex 0 1 0
endloop
endfacet
endsolid tri
"""


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.tmp = tempfile.TemporaryDirectory()
        self.path = os.path.join(self.tmp.name, "tri.stl")
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(TRIANGLE_STL)

    def tearDown(self) -> None:
        logging.getLogger(PACKAGE_LOGGER).handlers.clear()
        self.tmp.cleanup()

    def _run(self, *argv):
        out, err = io.StringIO(), io.StringIO()
        with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
            code = run(list(argv))
        return code, out.getvalue(), err.getvalue()

    def test_once_prints_a_frame(self) -> None:
        code, out, _ = self._run(self.path, "--once", "--ascii",
                                 "--width", "10", "--height", "10")
        self.assertEqual(code, 0)
        rows = out.rstrip("\n").split("\n")
        self.assertEqual(len(rows), 10)
        self.assertTrue(all(len(row) == 10 for row in rows))
        # ASCII solid ramp, depth 0 -> index 4
        self.assertEqual(rows[9], " " + "+" * 9)

    def test_once_missing_file(self) -> None:
        code, out, _ = self._run(os.path.join(self.tmp.name, "nope.stl"), "--once")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")

    def test_once_without_model(self) -> None:
        code, _, _ = self._run("--once")
        self.assertEqual(code, 2)

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        self.assertIsNone(args.model)
        self.assertEqual(args.style, "solid")
        self.assertAlmostEqual(args.speed, 0.03)
        self.assertFalse(args.once)

    def test_default_keyword(self) -> None:
        self.assertEqual(default_keyword(None), "pikachu")
        self.assertEqual(default_keyword("/models/Bunny.stl"), "bunny")

    def _in_tmp_dir(self):
        cwd = os.getcwd()
        os.chdir(self.tmp.name)
        self.addCleanup(os.chdir, cwd)

    def test_resolve_model_prefers_given_path(self) -> None:
        self._in_tmp_dir()
        self.assertIsNone(resolve_model(None))
        self.assertEqual(resolve_model("other.stl"), "other.stl")

    def test_viewer_picks_up_pikachu_from_working_dir(self) -> None:
        self._in_tmp_dir()
        with open(DEFAULT_MODEL, "w", encoding="utf-8") as f:
            f.write(TRIANGLE_STL)
        self.assertEqual(resolve_model(None), DEFAULT_MODEL)
        with mock.patch("stl_cli_renderer.cli.curses.wrapper") as wrapper:
            code, _, _ = self._run()
        self.assertEqual(code, 0)
        _, mesh, _, keyword, _, _ = wrapper.call_args.args
        self.assertEqual(mesh.name, "tri")
        self.assertEqual(len(mesh), 1)
        self.assertEqual(keyword, "pikachu")


if __name__ == "__main__":
    unittest.main()
