from dataclasses import dataclass
from typing import Optional, Tuple

from .core.palette import DEFAULT_PALETTE


@dataclass
class ChartConfig:
    csv_path: str = "examples/benchmarks-julia.csv"
    out_path: str = "/tmp/sector-chart.pdf"
    width: int = 1064
    height: int = 1064
    # None on either axis means derive a near-square grid from the benchmark count
    rows: Optional[int] = 3
    columns: Optional[int] = 3
    top_bottom_margins: float = 200.0
    tile_margin: float = 50.0
    inner_radius: float = 50.0
    gap_degrees: float = 2.0
    # too many outliers
    excluded_languages: Tuple[str, ...] = ("octave",)
    palette: Tuple[str, ...] = DEFAULT_PALETTE
    background: str = "ivory"
    heading: str = "Julia Benchmark Comparisons"
    footnotes: Tuple[str, ...] = (
        "Bigger sectors are slower. Humans are bad at comparing areas. "
        "Benchmarks are taken from the http://julialang.org web site.",
        "Terms and conditions apply. Objects appear smaller than they actually are. "
        "The value of investments may go up as well as down.",
    )
    preview: bool = True


@dataclass
class DemoConfig:
    out_path: str = "/tmp/sector-test.pdf"
    width: int = 1920
    height: int = 1068
    inner_radius: float = 100.0
    tile_size: float = 600.0
    background: str = "ivory"
    preview: bool = True
