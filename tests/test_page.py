import os
import tempfile
import unittest
from dataclasses import replace
from datetime import datetime
from unittest import mock

from PySectorChart.api.page import render_benchmark_page, render_demo_page
from PySectorChart.cli import build_parser, main
from PySectorChart.config import ChartConfig, DemoConfig
from PySectorChart.core.records import BenchmarkRecord
from PySectorChart.utils.preview import viewer_command


def records_for(benchmarks, languages):
    out = []
    for b in benchmarks:
        for i, lang in enumerate(languages):
            out.append(BenchmarkRecord(lang, b, float(i + 1)))
    return out


class BenchmarkPageTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def assertPdf(self, path):
        with open(path, "rb") as f:
            self.assertEqual(f.read(4), b"%PDF")

    def test_page_written(self):
        cfg = replace(ChartConfig(), out_path=os.path.join(self.tmp, "out", "page.pdf"), preview=False)
        recs = records_for(["fib", "sort", "mandel"], ["c", "julia", "octave", "python"])
        recs.append(BenchmarkRecord("c", "lonely", 1.0))
        out = render_benchmark_page(recs, cfg, now=datetime(2020, 1, 2, 3, 4))
        self.assertEqual(out, cfg.out_path)
        self.assertPdf(out)

    def test_auto_grid_and_overflow(self):
        cfg = replace(ChartConfig(), out_path=os.path.join(self.tmp, "grid.pdf"), rows=None, columns=None)
        recs = records_for([f"b{i}" for i in range(5)], ["c", "go"])
        self.assertPdf(render_benchmark_page(recs, cfg))
        cfg = replace(cfg, rows=1, columns=2)
        with self.assertLogs("PySectorChart.api.page", level="WARNING"):
            render_benchmark_page(recs, cfg)

    def test_too_many_languages_for_palette(self):
        cfg = replace(ChartConfig(), out_path=os.path.join(self.tmp, "x.pdf"), palette=("red",))
        with self.assertRaises(ValueError):
            render_benchmark_page(records_for(["fib"], ["c", "go"]), cfg)

    def test_everything_excluded(self):
        cfg = replace(ChartConfig(), out_path=os.path.join(self.tmp, "x.pdf"))
        with self.assertRaises(ValueError):
            render_benchmark_page(records_for(["fib"], ["octave"]), cfg)
        self.assertFalse(os.path.exists(cfg.out_path))

    def test_demo_page(self):
        cfg = replace(DemoConfig(), out_path=os.path.join(self.tmp, "demo.pdf"))
        self.assertPdf(render_demo_page(cfg))


class CliTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.csv, ChartConfig().csv_path)
        self.assertIsNone(args.exclude)
        self.assertFalse(args.demo)

    def test_main_renders_without_preview(self):
        csv_path = os.path.join(self.tmp, "b.csv")
        with open(csv_path, "w", newline="") as f:
            f.write("c,fib,1\ngo,fib,2\nc,sort,3\ngo,sort,4\n")
        out = os.path.join(self.tmp, "b.pdf")
        with mock.patch("PySectorChart.cli.preview") as pv:
            rc = main(["--csv", csv_path, "--out", out, "--no-preview", "--exclude", "rust"])
        self.assertEqual(rc, 0)
        self.assertTrue(os.path.isfile(out))
        pv.assert_not_called()

    def test_main_previews_by_default(self):
        out = os.path.join(self.tmp, "demo.pdf")
        with mock.patch("PySectorChart.cli.preview") as pv:
            rc = main(["--demo", "--out", out])
        self.assertEqual(rc, 0)
        pv.assert_called_once_with(out)

    def test_main_missing_csv(self):
        rc = main(["--csv", os.path.join(self.tmp, "missing.csv"), "--out", os.path.join(self.tmp, "x.pdf")])
        self.assertEqual(rc, 1)

    def test_main_logs_failure_under_cli_logger(self):
        with self.assertLogs("PySectorChart.cli", level="ERROR") as cm:
            rc = main(["--csv", os.path.join(self.tmp, "missing.csv"), "--out", os.path.join(self.tmp, "x.pdf")])
        self.assertEqual(rc, 1)
        self.assertIn("missing.csv", cm.output[0])

    def test_viewer_command(self):
        self.assertEqual(viewer_command("a.pdf", "darwin"), ["open", "a.pdf"])
        self.assertEqual(viewer_command("a.pdf", "linux"), ["xdg-open", "a.pdf"])
        self.assertIsNone(viewer_command("a.pdf", "win32"))


if __name__ == "__main__":
    unittest.main()
