import unittest
import sys, os
import io
import tempfile
from contextlib import redirect_stdout
from unittest import mock

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "../")))  # Use local statusflow lib
from statusflow import cli, reset_config, get_config
from statusflow.render import GraphvizRasterizer

def fake_rasterize(self, dot_file, image_file):
    with open(image_file, "wb") as f:
        f.write(b"\x89PNG")

class TestCli(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()
        reset_config()

    def run_main(self, argv, stdin=""):
        out = io.StringIO()
        with redirect_stdout(out):
            code = cli.main(argv, stdin=io.StringIO(stdin))
        return code, out.getvalue()

    def test_defaults(self):
        args = cli.parse_args([])
        self.assertEqual((args.path, args.name, args.static, args.dot, args.dot_only), (".", "status_flow", False, None, False))

    def test_static(self):
        with mock.patch.object(GraphvizRasterizer, "rasterize", fake_rasterize):
            code, out = self.run_main(["--static", "--path", self.path, "--name", "sample"])
        image = os.path.join(self.path, "sample.png")
        self.assertEqual(code, 0)
        self.assertEqual(out, f"Status flow image generated: {image}\n")
        with open(os.path.join(self.path, "sample.dot")) as f:
            self.assertEqual(f.read().count("->"), 3)

    def test_stdin(self):
        with mock.patch.object(GraphvizRasterizer, "rasterize", fake_rasterize):
            code, _ = self.run_main(["--path", self.path], '[{"Name":"A","NextStatus":["B"]}]')
        self.assertEqual(code, 0)
        self.assertTrue(os.path.isfile(os.path.join(self.path, "status_flow.png")))

    def test_malformed_input(self):
        with self.assertLogs(level="CRITICAL") as logs:
            code, out = self.run_main(["--path", self.path], "[{not json")
        self.assertEqual(code, 1)
        self.assertEqual(out, "")
        self.assertIn("decode_input", logs.output[0])
        self.assertEqual(os.listdir(self.path), [])

    def test_invalid_utf8_input(self):
        with self.assertLogs(level="CRITICAL") as logs:
            out = io.StringIO()
            with redirect_stdout(out):
                code = cli.main(["--path", self.path], stdin=io.BytesIO(b'[{"Name":"\xff","NextStatus":[]}]'))
        self.assertEqual(code, 1)
        self.assertEqual(out.getvalue(), "")
        self.assertIn("decode_input", logs.output[0])
        self.assertEqual(os.listdir(self.path), [])

    def test_missing_rasterizer(self):
        with self.assertLogs(level="CRITICAL") as logs:
            code, out = self.run_main(["--static", "--path", self.path, "--dot", "statusflow-missing-dot-command"])
        self.assertEqual(code, 1)
        self.assertIn("generate_graph_image", logs.output[0])
        self.assertEqual(os.listdir(self.path), ["status_flow.dot"])
        self.assertEqual(get_config()["dot"], "statusflow-missing-dot-command")

    def test_dot_only(self):
        code, out = self.run_main(["--static", "--dot-only", "--path", self.path])
        self.assertEqual(code, 0)
        self.assertEqual(os.listdir(self.path), ["status_flow.dot"])
        self.assertIn("status_flow.dot", out)


if __name__ == '__main__':
    unittest.main()
