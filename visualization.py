import numpy as np
from matplotlib.axes import Axes

from geometry import Point
from settings import AppSettings


def fit_to_box(img_w: float, img_h: float, box_w: float, box_h: float) -> tuple[float, float, float, float]:
    """
    Extent (left, right, bottom, top) that scales an image to fit inside
    the box, keeping its aspect ratio, centered. Bottom > top for a y-down axis.
    """
    scale = min(box_w / img_w, box_h / img_h)
    w, h = img_w * scale, img_h * scale
    left = (box_w - w) / 2
    top = (box_h - h) / 2
    return left, left + w, top + h, top


def setup_canvas_axes(ax: Axes, settings: AppSettings):
    ax.set_xlim(0, settings.canvas_width)
    ax.set_ylim(settings.canvas_height, 0)
    ax.set_aspect('equal')
    ax.set_xticks([])
    ax.set_yticks([])


def plot_background(ax: Axes, image: np.ndarray | None, settings: AppSettings):
    if image is None:
        return
    img_h, img_w = image.shape[:2]
    extent = fit_to_box(img_w, img_h, settings.canvas_width, settings.canvas_height)
    cmap = "gray" if image.ndim == 2 else None
    ax.imshow(image, extent=extent, cmap=cmap, zorder=0)


def plot_markers(points: list[Point], ax: Axes, settings: AppSettings):
    if not points:
        return
    x = [p.x for p in points]
    y = [p.y for p in points]
    c = [p.color for p in points]
    # scatter sizes are points^2, the radius is in canvas pixels
    diameter_pt = 2 * settings.marker_radius * 72 / ax.figure.dpi
    ax.scatter(x, y, c=c, s=diameter_pt ** 2, zorder=3)
    for p in points:
        ax.annotate(
            str(p.id),
            (p.x, p.y),
            xytext=(8, 8),
            textcoords='offset points',
            fontsize=10,
            fontweight='bold',
            bbox=dict(boxstyle='round,pad=0.2', fc='white', ec='black'),
            zorder=4,
        )


def plot_trace(points: list[Point], ax: Axes):
    """
    Dashed path through points in display order, closed for 3+ points.
    """
    if len(points) < 2:
        return
    trace = list(points)
    if len(trace) > 2:
        trace.append(trace[0])
    ax.plot([p.x for p in trace], [p.y for p in trace], '--', c='gray', linewidth=1, zorder=2)
