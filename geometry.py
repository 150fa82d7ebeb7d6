import math
import numpy as np

from dataclasses import dataclass, replace


COLORS = ("red", "blue", "green", "yellow", "purple")


@dataclass(frozen=True)
class Point:
    id: int
    x: float
    y: float
    color: str = COLORS[0]

    def row(self) -> tuple[int, str, str]:
        return self.id, f"{self.x:.2f}", f"{self.y:.2f}"

    def label(self) -> str:
        return f"ID: {self.id}  Position: ({self.x:.2f}, {self.y:.2f})"


def find_pivot(points: list[Point]) -> int:
    """
    Index of the point with the smallest y, ties broken by the smallest x.
    A later point only wins when strictly smaller, so among
    coordinate-identical candidates the first one in input order is taken.
    """
    pivot_idx = 0
    for i in range(1, len(points)):
        p, best = points[i], points[pivot_idx]
        if p.y < best.y or (p.y == best.y and p.x < best.x):
            pivot_idx = i
    return pivot_idx


def polar_angle(pivot: Point, p: Point) -> float:
    """
    Angle of the vector pivot -> p in (-pi, pi], 0 along +x.
    """
    return float(np.arctan2(p.y - pivot.y, p.x - pivot.x))


def sort_points(points: list[Point], break_ties: bool = False) -> list[Point]:
    """
    Order points by angular sweep around the topmost-then-leftmost point.

    The pivot goes first, the rest follow by descending polar angle, which on
    a y-down canvas traces them clockwise. Points at equal angles keep their
    input order unless ``break_ties`` is set, in which case the nearer point
    goes first. The input list is left untouched.
    """
    if len(points) < 2:
        return list(points)

    pivot_idx = find_pivot(points)
    pivot = points[pivot_idx]
    rest = [p for i, p in enumerate(points) if i != pivot_idx]

    if break_ties:
        def sort_key(p: Point):
            return -polar_angle(pivot, p), math.hypot(p.x - pivot.x, p.y - pivot.y)
    else:
        def sort_key(p: Point):
            return -polar_angle(pivot, p)

    return [pivot] + sorted(rest, key=sort_key)


def renumber_points(points: list[Point]) -> list[Point]:
    """
    Reassign ids 1..N in the stored order without reordering.
    """
    return [replace(p, id=i + 1) for i, p in enumerate(points)]
