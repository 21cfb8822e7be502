import math
import logging
from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

import numpy as np

from ..core.geometry import outer_radius_given_area, rescale, sector_angles
from ..utils.validation import ensure_colors
from .context import DrawingContext

logger = logging.getLogger(__name__)

LABEL_FONT_SIZE = 4
LABEL_OFFSET = 5
VALUE_OFFSET = 10
TITLE_FONT_SIZE = 24
TITLE_FONT = "Impact"
TITLE_DROP = 30


@dataclass
class Sector:
    label: str
    value: float
    start_angle: float
    end_angle: float
    outer_radius: float

    @property
    def mid_angle(self) -> float:
        return self.start_angle + (self.end_angle - self.start_angle) / 2.0


def layout_sectors(
    raw_values: Sequence[float],
    labels: Sequence[str],
    inner_radius: float,
    tile_width: float,
    tile_height: float,
    gap: float = math.radians(2),
) -> List[Sector]:
    """
    Geometry of a sector chart. Each raw value is read as an area, turned into the
    outer radius that would enclose it. The length of each sector beyond the
    inner radius is then rescaled from [0, longest] so the radii span
    [inner_radius, half the smaller tile side].
    """
    if len(raw_values) != len(labels):
        raise ValueError(f"{len(raw_values)} values but {len(labels)} labels")
    values = np.asarray(raw_values, float)
    starts, ends = sector_angles(len(values), gap)
    radii = outer_radius_given_area(values, inner_radius, starts, ends)
    bound = min(tile_width / 2.0, tile_height / 2.0)
    high = float(np.max(radii))
    if high > inner_radius:
        # rescale the length beyond the hole
        scaled = rescale(radii, inner_radius, high, inner_radius, bound)
    else:
        scaled = np.full_like(radii, float(inner_radius))
    return [
        Sector(str(lab), float(v), float(a0), float(a1), float(r))
        for lab, v, a0, a1, r in zip(labels, values, starts, ends, scaled)
    ]


def format_value(value: float) -> str:
    return str(round(float(value), 2))


def _draw_label(ctx: DrawingContext, sector: Sector, inner_radius: float):
    ctx.set_font_size(LABEL_FONT_SIZE)
    ctx.set_hue("black")
    radius = inner_radius - LABEL_OFFSET
    if radius <= 0:
        return
    half = ctx.text_width(sector.label) / 2.0
    shift = math.asin(min(1.0, half / inner_radius))
    ctx.text_curve(sector.label, sector.mid_angle - shift, radius)


def _draw_value(ctx: DrawingContext, sector: Sector):
    r = sector.outer_radius + VALUE_OFFSET
    x = r * math.cos(sector.mid_angle)
    y = r * math.sin(sector.mid_angle)
    angle = math.atan2(y, x)
    ctx.translate(x, y)
    left_half = angle > math.pi / 2 or angle < -math.pi / 2
    ctx.text(format_value(sector.value), halign="right" if left_half else "left")


def sector_chart(
    ctx: DrawingContext,
    center: Tuple[float, float],
    inner_radius: float,
    tile_width: float,
    tile_height: float,
    raw_values: Sequence[float],
    labels: Sequence[str],
    colors: Dict[str, str],
    title: str,
    gap: float = math.radians(2),
) -> List[Sector]:
    """
    Draw a sector chart centred at `center`. Sector areas follow the raw values;
    the raw values themselves are printed next to each sector.
    """
    ensure_colors(labels, colors)
    sectors = layout_sectors(raw_values, labels, inner_radius, tile_width, tile_height, gap)
    with ctx.saved():
        ctx.translate(*center)
        for s in sectors:
            logger.debug("%s: %s=%g r=%.2f [%.3f, %.3f]", title, s.label, s.value, s.outer_radius, s.start_angle, s.end_angle)
            ctx.set_hue(colors[s.label])
            ctx.sector(inner_radius, s.outer_radius, s.start_angle, s.end_angle)
            with ctx.saved():
                _draw_label(ctx, s, inner_radius)
                _draw_value(ctx, s)
        with ctx.saved():
            ctx.set_font_size(TITLE_FONT_SIZE)
            ctx.set_font_face(TITLE_FONT)
            ctx.set_hue("black")
            ctx.text(title, 0.0, min(tile_width / 2.0, tile_height / 2.0) - TITLE_DROP, halign="center")
    return sectors
