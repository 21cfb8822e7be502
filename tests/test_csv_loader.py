import os
import tempfile
import unittest

from PySectorChart.core.palette import build_color_map
from PySectorChart.core.records import group_by_benchmark, languages_of
from PySectorChart.io.csv_loader import load_benchmarks


def write_csv(dirname, text, name="bench.csv"):
    path = os.path.join(dirname, name)
    with open(path, "w", newline="") as f:
        f.write(text)
    return path


class CsvLoaderTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = self._tmp.name

    def tearDown(self):
        self._tmp.cleanup()

    def test_rows_and_exclusion(self):
        path = write_csv(self.tmp, "c,fib,1.0\noctave,fib,900\npython,fib,70.5\n\nc,sort,2\n")
        recs = load_benchmarks(path, exclude=["octave"])
        self.assertEqual([(r.language, r.benchmark, r.time) for r in recs],
                         [("c", "fib", 1.0), ("python", "fib", 70.5), ("c", "sort", 2.0)])

    def test_header_row_skipped(self):
        path = write_csv(self.tmp, "language,test,timetaken\nc,fib,1.5\n")
        recs = load_benchmarks(path)
        self.assertEqual(len(recs), 1)
        self.assertEqual(recs[0].time, 1.5)

    def test_bad_time_after_data_rejected(self):
        path = write_csv(self.tmp, "c,fib,1.5\nc,sort,fast\n")
        with self.assertRaises(ValueError):
            load_benchmarks(path)

    def test_wrong_field_count_rejected(self):
        path = write_csv(self.tmp, "c,fib\n")
        with self.assertRaises(ValueError):
            load_benchmarks(path)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_benchmarks(os.path.join(self.tmp, "nope.csv"))

    def test_grouping_and_colors_follow_first_seen_order(self):
        path = write_csv(self.tmp, "go,b1,1\njava,b1,2\ngo,b2,3\nlua,b2,4\n")
        recs = load_benchmarks(path)
        groups = group_by_benchmark(recs)
        self.assertEqual(list(groups), ["b1", "b2"])
        self.assertEqual(groups["b2"], ([3.0, 4.0], ["go", "lua"]))
        colors = build_color_map(languages_of(recs))
        self.assertEqual(list(colors), ["go", "java", "lua"])

    def test_palette_too_short(self):
        with self.assertRaises(ValueError):
            build_color_map(["a", "b", "c"], palette=("red", "blue"))


if __name__ == "__main__":
    unittest.main()
