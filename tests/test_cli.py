import os
import shutil
import tempfile
import unittest
from io import StringIO
from unittest.mock import mock_open, patch

from dotdsl import __version__
from dotdsl.cli import run


class CliTest(unittest.TestCase):
    def setUp(self):
        self.dir = tempfile.mkdtemp()
        self.test_file = os.path.join(self.dir, "sample.py")
        self.test_content = """
graph.set_graph_attributes(label="example")
graph.node("alpha") >> graph.node("beta") >> graph.node("gamma")
graph.rank(Atom("same"), [graph.node("beta"), graph.node("gamma")])
"""
        with open(self.test_file, "w", encoding="utf-8") as f:
            f.write(self.test_content)

    def tearDown(self):
        shutil.rmtree(self.dir, ignore_errors=True)

    def test_run_with_output(self):
        output = os.path.join(self.dir, "out.dot")
        with patch("sys.argv", ["dotdsl", self.test_file, "-o", output, "-T", "dot"]):
            self.assertEqual(run(), 0)
        with open(output, encoding="utf-8") as f:
            self.assertEqual(
                f.read(),
                "digraph sample {\n"
                '  graph [label = "example"];\n'
                "  alpha -> beta -> gamma;\n"
                "  {rank = same; beta; gamma;};\n"
                "}\n",
            )

    def test_run_with_default_output(self):
        cwd = os.getcwd()
        os.chdir(self.dir)
        try:
            with patch("sys.argv", ["dotdsl", self.test_file, "-Tdot"]):
                self.assertEqual(run(), 0)
            self.assertTrue(os.path.exists(os.path.join(self.dir, "sample.dot")))
        finally:
            os.chdir(cwd)

    def test_run_with_image_format(self):
        output = os.path.join(self.dir, "out.svg")
        with patch("dotdsl.renderer.render", return_value=b"<svg/>") as render:
            with patch("sys.argv", ["dotdsl", self.test_file, "-o", output, "-T", "svg", "-K", "circo"]):
                self.assertEqual(run(), 0)
        self.assertEqual(render.call_args.kwargs["engine"], "circo")
        with open(output, "rb") as f:
            self.assertEqual(f.read(), b"<svg/>")

    def test_run_with_no_arguments(self):
        with patch("sys.argv", ["dotdsl"]):
            with patch("sys.stderr", new=StringIO()) as fake_stderr:
                with self.assertRaises(SystemExit):
                    run()
                self.assertIn("the following arguments are required: path", fake_stderr.getvalue())

    def test_version(self):
        with patch("sys.argv", ["dotdsl", "--version"]):
            with patch("sys.stdout", new=StringIO()) as fake_stdout:
                with self.assertRaises(SystemExit) as cm:
                    run()
        self.assertEqual(cm.exception.code, 0)
        self.assertIn(__version__, fake_stdout.getvalue())

    def test_run_with_nonexistent_file(self):
        with patch("sys.argv", ["dotdsl", os.path.join(self.dir, "nonexistent.py")]):
            with self.assertRaises(FileNotFoundError):
                run()

    def test_run_with_invalid_python_code(self):
        invalid_content = "this is not valid python code"
        with patch("builtins.open", mock_open(read_data=invalid_content)):
            with patch("sys.argv", ["dotdsl", self.test_file]):
                with self.assertRaises(SyntaxError):
                    run()
