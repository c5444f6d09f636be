"""
Line intersections between horizontal and vertical Hough lines.

Lines are held in an arena and referred to by integer handle (their index
in the pruned line list), so the map never hashes floating-point line
parameters. Both directions are stored: a horizontal line's crossings are
listed in vertical-line order, a vertical line's in horizontal-line order.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
import math

from ..models.geometry import Cartesian, PolarLine
from ..models.grid import SampleGrid
import config


@dataclass
class IntersectionMap:
    """Crossing points of every line with every line of the other orientation."""
    lines:      List[PolarLine]
    horizontal: Dict[int, List[Cartesian]] = field(default_factory=dict)
    vertical:   Dict[int, List[Cartesian]] = field(default_factory=dict)
    parallel_pairs: int = 0

    def intersections(self, handle: int) -> List[Cartesian]:
        if handle in self.horizontal:
            return self.horizontal[handle]
        return self.vertical[handle]

    def all_points(self) -> List[Cartesian]:
        pts: List[Cartesian] = []
        for group in (self.horizontal, self.vertical):
            for crossings in group.values():
                pts.extend(crossings)
        return pts

    def copy(self) -> "IntersectionMap":
        return IntersectionMap(
            lines=list(self.lines),
            horizontal={h: list(p) for h, p in self.horizontal.items()},
            vertical={h: list(p) for h, p in self.vertical.items()},
            parallel_pairs=self.parallel_pairs,
        )


def partition(lines: List[PolarLine]) -> Tuple[List[int], List[int]]:
    """Split line handles into (horizontal, vertical), keeping input order."""
    horizontal, vertical = [], []
    for handle, line in enumerate(lines):
        (vertical if line.is_vertical else horizontal).append(handle)
    return horizontal, vertical


def intersect(a: PolarLine, b: PolarLine) -> Optional[Cartesian]:
    """
    Crossing point of two polar lines, truncated to integer pixels.

    Returns None for (near-)parallel lines. Coordinates are taken as absolute
    values, which assumes every crossing of interest lies in the image
    quadrant; the formula is antisymmetric in (a, b), so swapping the
    arguments gives a bit-identical point.
    """
    ta, tb = a.theta, b.theta
    ct1, st1 = math.cos(ta), math.sin(ta)
    ct2, st2 = math.cos(tb), math.sin(tb)
    d = ct1 * st2 - st1 * ct2
    if abs(d) < config.PARALLEL_EPSILON:
        return None
    x = abs((st2 * a.distance - st1 * b.distance) / d)
    y = abs((-ct2 * a.distance + ct1 * b.distance) / d)
    return Cartesian(_truncate(x), _truncate(y))


def _truncate(v: float) -> int:
    # sin(pi) and cos(pi/2) are not exactly 0: 99.99999999999998 must give 100
    return int(v + config.TRUNCATION_SNAP)


def pairwise_intersect(
    lines: List[PolarLine], debug: bool = False,
) -> IntersectionMap:
    """Intersect every horizontal line with every vertical line, both ways."""
    h_handles, v_handles = partition(lines)
    imap = IntersectionMap(lines=list(lines))

    for h in h_handles:
        crossings = []
        for v in v_handles:
            pt = intersect(lines[h], lines[v])
            if pt is None:
                imap.parallel_pairs += 1
                continue
            crossings.append(pt)
        imap.horizontal[h] = crossings

    for v in v_handles:
        imap.vertical[v] = [pt for pt in
                            (intersect(lines[v], lines[h]) for h in h_handles)
                            if pt is not None]

    if debug:
        print(f"  [Intersections] {len(h_handles)}H x {len(v_handles)}V"
              f"  parallel={imap.parallel_pairs}")
    return imap


def remove_false_horizontal_intersections(
    imap: IntersectionMap,
    grid: SampleGrid,
    block_w: int = config.FALSE_INTERSECTION_BLOCK_W,
    block_h: int = config.FALSE_INTERSECTION_BLOCK_H,
    min_count: int = config.FALSE_INTERSECTION_MIN_COUNT,
    debug: bool = False,
) -> int:
    """
    Drop outer crossings of horizontal lines that stop short of them.

    Hough lines are infinite, so a service line also "crosses" the doubles
    sidelines. Halfway between the two outermost crossings on each side the
    painted line either continues (real crossing) or the image is empty
    there (false crossing, removed). Returns the number of points removed.
    """
    removed = 0
    for handle, pts in imap.horizontal.items():
        if len(pts) < min_count:
            continue
        avg_l = pts[0].midpoint(pts[1])
        avg_r = pts[-1].midpoint(pts[-2])

        if not grid.block_contains_samples_at(avg_l, block_w, block_h):
            pts.pop(0)
            removed += 1
        if not grid.block_contains_samples_at(avg_r, block_w, block_h):
            pts.pop()
            removed += 1

    if debug:
        print(f"  [Intersections] removed {removed} false crossings")
    return removed
