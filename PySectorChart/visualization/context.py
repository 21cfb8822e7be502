import math
from contextlib import contextmanager
from dataclasses import dataclass, replace
from typing import List, Tuple

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.font_manager import FontProperties
from matplotlib.patches import FancyBboxPatch, Wedge
from matplotlib.textpath import text_to_path


@dataclass(frozen=True)
class GraphicsState:
    origin: Tuple[float, float] = (0.0, 0.0)
    hue: str = "black"
    font_size: float = 10.0
    font_face: Tuple[str, ...] = ("DejaVu Sans",)


class DrawingContext:
    """
    Page-sized matplotlib canvas with the origin at the page centre and y pointing
    down. One data unit is one point, so font sizes and lengths share a scale.
    Angles are radians, measured clockwise from +x as seen on the page.
    """

    def __init__(self, width: float, height: float, background: str = "white"):
        self.width = float(width)
        self.height = float(height)
        self.fig = plt.figure(figsize=(self.width / 72.0, self.height / 72.0), dpi=72)
        self.fig.patch.set_facecolor(background)
        self.ax = self.fig.add_axes([0.0, 0.0, 1.0, 1.0])
        self.ax.set_xlim(-self.width / 2.0, self.width / 2.0)
        self.ax.set_ylim(self.height / 2.0, -self.height / 2.0)
        self.ax.set_aspect("equal")
        self.ax.axis("off")
        self.state = GraphicsState()
        self._stack: List[GraphicsState] = []

    @contextmanager
    def saved(self):
        self._stack.append(self.state)
        try:
            yield self
        finally:
            self.state = self._stack.pop()

    @property
    def depth(self) -> int:
        return len(self._stack)

    def translate(self, dx: float, dy: float):
        ox, oy = self.state.origin
        self.state = replace(self.state, origin=(ox + dx, oy + dy))

    def set_hue(self, color: str):
        self.state = replace(self.state, hue=color)

    def set_font_size(self, size: float):
        self.state = replace(self.state, font_size=float(size))

    def set_font_face(self, *names: str):
        self.state = replace(self.state, font_face=tuple(names) + ("DejaVu Sans",))

    def _to_page(self, x: float, y: float) -> Tuple[float, float]:
        ox, oy = self.state.origin
        return ox + x, oy + y

    def _font(self) -> FontProperties:
        return FontProperties(family=list(self.state.font_face), size=self.state.font_size)

    def sector(self, inner_radius: float, outer_radius: float, start_angle: float, end_angle: float):
        patch = Wedge(
            self._to_page(0.0, 0.0),
            outer_radius,
            math.degrees(start_angle),
            math.degrees(end_angle),
            width=outer_radius - inner_radius,
            facecolor=self.state.hue,
            edgecolor="none",
        )
        self.ax.add_patch(patch)
        return patch

    def rounded_box(self, x: float, y: float, half_width: float, half_height: float, rounding: float):
        px, py = self._to_page(x, y)
        patch = FancyBboxPatch(
            (px - half_width, py - half_height),
            2.0 * half_width,
            2.0 * half_height,
            boxstyle=f"round,pad=0,rounding_size={rounding}",
            facecolor=self.state.hue,
            edgecolor="none",
        )
        self.ax.add_patch(patch)
        return patch

    def text(self, s: str, x: float = 0.0, y: float = 0.0, halign: str = "left", rotation: float = 0.0):
        px, py = self._to_page(x, y)
        return self.ax.text(
            px, py, s,
            ha=halign,
            va="baseline",
            rotation=rotation,
            rotation_mode="anchor",
            color=self.state.hue,
            fontproperties=self._font(),
        )

    def text_width(self, s: str) -> float:
        if not s:
            return 0.0
        w, _h, _d = text_to_path.get_text_width_height_descent(s, self._font(), ismath=False)
        return w

    def text_curve(self, s: str, start_angle: float, radius: float):
        """Lay `s` clockwise along a circle of `radius`, glyph tops facing outward."""
        artists = []
        for i, ch in enumerate(s):
            angle = start_angle + self.text_width(s[:i]) / radius
            x = radius * math.cos(angle)
            y = radius * math.sin(angle)
            # screen rotation is counter-clockwise, page angles run clockwise
            rot = -math.degrees(angle + math.pi / 2.0)
            artists.append(self.text(ch, x, y, halign="left", rotation=rot))
        return artists

    def finish(self, path: str):
        self.fig.savefig(path, facecolor=self.fig.get_facecolor())
        plt.close(self.fig)
        return path

    def close(self):
        plt.close(self.fig)
