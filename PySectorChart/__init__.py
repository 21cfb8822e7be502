from .core.records import BenchmarkRecord
from .core.geometry import area_of_sector, outer_radius_given_area
from .core.layout import Tiler, how_many_rows_columns
from .io.csv_loader import load_benchmarks
from .visualization.context import DrawingContext
from .visualization.sector_chart import sector_chart, layout_sectors
from .api.page import render_benchmark_page, render_demo_page
from .config import ChartConfig

__all__ = [
    "BenchmarkRecord",
    "area_of_sector",
    "outer_radius_given_area",
    "Tiler",
    "how_many_rows_columns",
    "load_benchmarks",
    "DrawingContext",
    "sector_chart",
    "layout_sectors",
    "render_benchmark_page",
    "render_demo_page",
    "ChartConfig",
]
