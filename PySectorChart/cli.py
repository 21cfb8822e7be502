import sys
import logging
import argparse
from dataclasses import replace

from .config import ChartConfig, DemoConfig
from .io.csv_loader import load_benchmarks
from .api.page import render_benchmark_page, render_demo_page
from .utils.log import setup_logger
from .utils.preview import preview

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = ChartConfig()
    p = argparse.ArgumentParser(prog="sector-chart", description="Render benchmark timings as sector charts.")
    p.add_argument("--csv", type=str, default=defaults.csv_path, help="language,benchmark,time CSV")
    p.add_argument("--out", type=str, default=None, help="output PDF path")
    p.add_argument("--width", type=int, default=None)
    p.add_argument("--height", type=int, default=None)
    p.add_argument("--exclude", action="append", default=None, metavar="LANGUAGE",
                   help="language to leave out (repeatable, default: octave)")
    p.add_argument("--auto-grid", action="store_true", help="size the grid from the benchmark count")
    p.add_argument("--demo", action="store_true", help="draw the single-chart test page instead")
    p.add_argument("--no-preview", action="store_true")
    p.add_argument("--verbose", action="store_true")
    p.add_argument("--log-file", type=str, default=None)
    return p


def _overrides(args):
    out = {}
    if args.out is not None:
        out["out_path"] = args.out
    if args.width is not None:
        out["width"] = args.width
    if args.height is not None:
        out["height"] = args.height
    if args.no_preview:
        out["preview"] = False
    return out


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logger(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        if args.demo:
            cfg = replace(DemoConfig(), **_overrides(args))
            out = render_demo_page(cfg)
        else:
            cfg = replace(ChartConfig(), csv_path=args.csv, **_overrides(args))
            if args.exclude is not None:
                cfg = replace(cfg, excluded_languages=tuple(args.exclude))
            if args.auto_grid:
                cfg = replace(cfg, rows=None, columns=None)
            records = load_benchmarks(cfg.csv_path, cfg.excluded_languages)
            out = render_benchmark_page(records, cfg)
    except (OSError, ValueError, KeyError) as e:
        logger.error("%s", e)
        return 1

    print(f"finished: output in {out}")
    if cfg.preview:
        preview(out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
