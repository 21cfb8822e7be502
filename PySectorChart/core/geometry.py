import math
import numpy as np


def _span(start_angle, end_angle):
    theta = np.asarray(end_angle, float) - np.asarray(start_angle, float)
    if np.any(theta <= 0):
        raise ValueError("sector span must be positive")
    return theta


def area_of_sector(inner_radius, outer_radius, start_angle, end_angle):
    """Area of the annular sector between two radii over [start_angle, end_angle]."""
    theta = _span(start_angle, end_angle)
    r0 = np.asarray(inner_radius, float)
    r1 = np.asarray(outer_radius, float)
    area = (theta / 2.0) * r1 ** 2 - (theta / 2.0) * r0 ** 2
    return float(area) if np.ndim(area) == 0 else area


def outer_radius_given_area(area, inner_radius, start_angle, end_angle):
    """Outer radius a sector must have to cover `area` beyond `inner_radius`."""
    theta = _span(start_angle, end_angle)
    a = np.asarray(area, float)
    if np.any(a < 0):
        raise ValueError("area must be non-negative")
    r0 = np.asarray(inner_radius, float)
    r1 = np.sqrt((a + (theta / 2.0) * r0 ** 2) / (theta / 2.0))
    return float(r1) if np.ndim(r1) == 0 else r1


def rescale(value, old_low, old_high, new_low, new_high):
    v = np.asarray(value, float)
    out = (v - old_low) / (old_high - old_low) * (new_high - new_low) + new_low
    return float(out) if np.ndim(out) == 0 else out


def sector_angles(n: int, gap: float = math.radians(2)):
    """Start/end angles of n equal slices, each opened by `gap` at its start."""
    if n <= 0:
        raise ValueError("need at least one sector")
    theta = 2.0 * math.pi / n
    starts = np.arange(n, dtype=float) * theta + gap
    ends = starts + theta - gap
    return starts, ends
