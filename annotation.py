import logging
import os

import numpy as np
import matplotlib.image as mpimg

from dataclasses import dataclass, field

from geometry import COLORS, Point, renumber_points, sort_points
from settings import AppSettings

logger = logging.getLogger(__name__)


@dataclass
class AnnotationState:
    """
    Everything the annotator shows: the ordered points, the color used for
    new points and the reference image behind them.
    """
    settings: AppSettings = field(default_factory=AppSettings)
    points: list[Point] = field(default_factory=list)
    selected_color: str | None = None
    background_image: np.ndarray | None = None
    image_name: str | None = None

    def __post_init__(self):
        if self.selected_color is None:
            self.selected_color = self.settings.default_color
        if self.selected_color not in COLORS:
            raise ValueError(f"Unsupported color: {self.selected_color!r}")

    def within_canvas(self, x: float, y: float) -> bool:
        return 0 <= x <= self.settings.canvas_width and 0 <= y <= self.settings.canvas_height

    def add_point(self, x: float, y: float) -> Point:
        """
        Create a point with the selected color and re-order the whole collection.
        """
        point = Point(len(self.points) + 1, float(x), float(y), self.selected_color)
        self.points = sort_points(self.points + [point])
        logger.debug("Added point %s, %d points total", point, len(self.points))
        return point

    def remove_point(self, point_id: int) -> bool:
        """
        Drop the point with ``point_id`` and compact the ids of the rest.
        Survivors keep their current order.
        """
        remaining = [p for p in self.points if p.id != point_id]
        if len(remaining) == len(self.points):
            logger.debug("No point with id %s", point_id)
            return False
        self.points = renumber_points(remaining)
        logger.debug("Removed point %s, %d points left", point_id, len(self.points))
        return True

    def clear_points(self):
        self.points = []
        logger.debug("Cleared all points")

    def select_color(self, color: str):
        if color not in COLORS:
            raise ValueError(f"Unsupported color: {color!r}")
        self.selected_color = color

    def set_background_image(self, image: np.ndarray | None, name: str | None = None):
        if image is None:
            logger.warning("Empty image payload ignored")
            return
        self.background_image = image
        self.image_name = name
        logger.info("Background image set: %s %s", name or "<unnamed>", image.shape)

    def load_background_image(self, path: str | None) -> bool:
        if not path:
            return False
        try:
            image = mpimg.imread(path)
        except (OSError, SyntaxError, ValueError) as e:
            logger.warning("Could not read image %s: %s", path, e)
            return False
        self.set_background_image(image, os.path.basename(path))
        return True

    def load_dropped_image(self, paths) -> bool:
        """
        Load the first of the dropped files; an empty drop changes nothing.
        """
        if not paths:
            return False
        return self.load_background_image(paths[0])

    def remove_background_image(self):
        # points are placed relative to the image, so they go with it
        self.background_image = None
        self.image_name = None
        self.clear_points()

    def hit_test(self, x: float, y: float) -> Point | None:
        """
        Marker under the canvas position (x, y); the topmost drawn marker wins.
        """
        r = self.settings.marker_radius
        for p in reversed(self.points):
            if (p.x - x) ** 2 + (p.y - y) ** 2 <= r * r:
                return p
        return None

    def rows(self) -> list[tuple[int, str, str]]:
        return [p.row() for p in self.points]
