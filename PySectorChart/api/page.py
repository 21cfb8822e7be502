import os
import math
import logging
from datetime import datetime
from typing import List, Optional

from ..config import ChartConfig, DemoConfig
from ..core.layout import Tiler, how_many_rows_columns
from ..core.palette import DEMO_PALETTE, build_color_map
from ..core.records import BenchmarkRecord, exclude_languages, group_by_benchmark, languages_of
from ..visualization.context import DrawingContext
from ..visualization.sector_chart import sector_chart

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%a, %d %b %Y %H:%M"


def _grid_shape(config: ChartConfig, n_charts: int):
    if config.rows and config.columns:
        return config.rows, config.columns
    return how_many_rows_columns(n_charts)


def _draw_heading(ctx: DrawingContext, config: ChartConfig):
    with ctx.saved():
        ctx.set_hue("black")
        ctx.set_font_face("Impact")
        ctx.set_font_size(40)
        ctx.translate(0, -config.height / 2 + 100)
        ctx.text(config.heading, halign="center")


def _draw_footnotes(ctx: DrawingContext, config: ChartConfig, now: datetime):
    with ctx.saved():
        ctx.set_hue("black")
        ctx.set_font_face("Monaco", "DejaVu Sans Mono")
        ctx.set_font_size(8)
        ctx.translate(0, config.height / 2 - 50)
        for i, line in enumerate(config.footnotes):
            if i == 0:
                line = f"{now.strftime(TIMESTAMP_FORMAT)} {line}"
            ctx.text(line, halign="center")
            ctx.translate(0, 20)


def _draw_legend(ctx: DrawingContext, config: ChartConfig, languages: List[str], colors):
    with ctx.saved():
        ctx.set_font_size(14)
        ctx.set_font_face("Helvetica")
        x, y = config.width / 2 - 150, config.height / 2 - 350
        for language in languages:
            ctx.set_hue("black")
            ctx.text(language, x - 55, y, halign="right")
            ctx.set_hue(colors[language])
            ctx.rounded_box(x, y - 5, 50, 10, rounding=6)
            y += 25


def render_benchmark_page(records: List[BenchmarkRecord], config: ChartConfig, now: Optional[datetime] = None) -> str:
    """Draw one sector chart per benchmark on a single page and write it to `config.out_path`."""
    records = exclude_languages(records, config.excluded_languages)
    if not records:
        raise ValueError("no benchmark records left to plot")
    languages = languages_of(records)
    colors = build_color_map(languages, config.palette)
    groups = group_by_benchmark(records)

    nrows, ncols = _grid_shape(config, len(groups))
    tiles = Tiler(config.width, config.height - config.top_bottom_margins, nrows, ncols, margin=config.tile_margin)
    if len(groups) > len(tiles):
        logger.warning("%d benchmarks but only %d tiles; dropping %s",
                       len(groups), len(tiles), ", ".join(list(groups)[len(tiles):]))

    ctx = DrawingContext(config.width, config.height, background=config.background)
    try:
        names = list(groups)
        for center, i in tiles:
            if i >= len(names):
                continue
            values, labels = groups[names[i]]
            if len(values) < 2:
                logger.info("skipping %s: only %d value(s)", names[i], len(values))
                continue
            sector_chart(ctx, center, config.inner_radius, tiles.tile_width, tiles.tile_height,
                         values, labels, colors, names[i], gap=math.radians(config.gap_degrees))

        _draw_heading(ctx, config)
        _draw_footnotes(ctx, config, now or datetime.now())
        _draw_legend(ctx, config, languages, colors)
    except Exception:
        ctx.close()
        raise

    out_dir = os.path.dirname(config.out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    ctx.finish(config.out_path)
    logger.info("wrote %s (%d charts)", config.out_path, min(len(groups), len(tiles)))
    return config.out_path


def render_demo_page(config: DemoConfig) -> str:
    """A single chart of the values 1..6, handy for eyeballing the geometry."""
    values = [1, 2, 3, 4, 5, 6]
    labels = [str(v) for v in values]
    colors = build_color_map(labels, DEMO_PALETTE)
    ctx = DrawingContext(config.width, config.height, background=config.background)
    try:
        sector_chart(ctx, (0.0, 0.0), config.inner_radius, config.tile_size, config.tile_size,
                     values, labels, colors, "test")
    except Exception:
        ctx.close()
        raise
    out_dir = os.path.dirname(config.out_path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)
    ctx.finish(config.out_path)
    logger.info("wrote %s", config.out_path)
    return config.out_path
