"""
Court line classifier: assigns roles from intersection topology.

Horizontal lines are classified by how many vertical lines they cross:
  - base line    crosses both doubles sidelines, both singles sidelines and
                 the (extended) centre service line → 5
  - service line only spans the singles court       → 3 (after the false
                 crossings with the doubles sidelines are removed)

Vertical lines are then classified by which horizontal anchor point they
pass through, and extended to the top of the image since the image holds
no clear end point for them.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

from ..models.geometry import Cartesian
from ..models.segment import (AnchorTable, ClassifiedSegment, CourtLines,
                              LineClass)
from .intersection import IntersectionMap
import config


@dataclass(frozen=True)
class _VerticalRule:
    match_class:  LineClass     # horizontal segment whose endpoint is hit
    match_end:    str           # "origin" | "destination"
    emit_class:   LineClass
    anchor_class: LineClass     # segment supplying the emitted origin
    anchor_end:   str


# First matching rule wins.
_VERTICAL_RULES = (
    _VerticalRule(LineClass.SERVICE_LINE, "origin",
                  LineClass.SINGLES_SIDELINE, LineClass.INNER_BASE_LINE, "origin"),
    _VerticalRule(LineClass.SERVICE_LINE, "destination",
                  LineClass.SINGLES_SIDELINE, LineClass.INNER_BASE_LINE, "destination"),
    _VerticalRule(LineClass.BASE_LINE, "origin",
                  LineClass.DOUBLES_SIDELINE, LineClass.BASE_LINE, "origin"),
    _VerticalRule(LineClass.BASE_LINE, "destination",
                  LineClass.DOUBLES_SIDELINE, LineClass.BASE_LINE, "destination"),
    _VerticalRule(LineClass.SERVICE_LINE_HALF, "origin",
                  LineClass.CENTRE_SERVICE_LINE, LineClass.SERVICE_LINE_HALF, "origin"),
)


def classify_lines(imap: IntersectionMap, debug: bool = False) -> CourtLines:
    """Horizontal pass, then vertical pass anchored on its output."""
    horizontal = classify_horizontal(imap)
    result = CourtLines(segments=classify_vertical(imap, horizontal, debug))
    if debug:
        print(f"  [Classifier] Classification:\n{result.summary()}")
    return result


def classify_horizontal(imap: IntersectionMap) -> List[ClassifiedSegment]:
    """
    Base and service lines, each with the shorter internal segment the
    vertical pass anchors on.

    The map is left untouched; the vertical pass only walks
    `imap.vertical`, so classified horizontal lines take no further part.
    """
    segments: List[ClassifiedSegment] = []
    for pts in imap.horizontal.values():
        n = len(pts)
        if n == config.BASE_LINE_INTERSECTIONS:
            segments.append(ClassifiedSegment(
                LineClass.BASE_LINE, pts[0], pts[-1]))
            # Between the two singles sidelines
            segments.append(ClassifiedSegment(
                LineClass.INNER_BASE_LINE, pts[1], pts[n - 2]))
        elif n == config.SERVICE_LINE_INTERSECTIONS:
            segments.append(ClassifiedSegment(
                LineClass.SERVICE_LINE, pts[0], pts[-1]))
            # From the centre line crossing back to the service line origin
            segments.append(ClassifiedSegment(
                LineClass.SERVICE_LINE_HALF, pts[1], pts[n - 3]))
    return segments


def classify_vertical(
    imap: IntersectionMap,
    horizontal: List[ClassifiedSegment],
    debug: bool = False,
) -> List[ClassifiedSegment]:
    """
    Sidelines and centre service line, appended to the horizontal segments.

    A vertical crossing matches a rule when it equals the rule's horizontal
    endpoint exactly; both points come from the same truncating formula.
    Rules whose anchors were never classified are disabled.
    """
    anchors = AnchorTable(horizontal)
    rules = [r for r in _VERTICAL_RULES
             if r.match_class in anchors and r.anchor_class in anchors]
    if debug:
        missing = anchors.missing(LineClass.BASE_LINE, LineClass.INNER_BASE_LINE,
                                  LineClass.SERVICE_LINE,
                                  LineClass.SERVICE_LINE_HALF)
        if missing:
            print(f"  [Classifier] no anchor for: "
                  f"{', '.join(c.name for c in missing)}")

    segments = list(horizontal)
    for handle, pts in imap.vertical.items():
        for point in pts:
            rule = _match(rules, anchors, point)
            if rule is None:
                continue
            top = (upper_image_intercept(pts[0], pts[1])
                   if len(pts) >= 2 else None)
            if top is None:
                if debug:
                    print(f"  [Classifier] line {handle}: no upper intercept,"
                          f" {rule.emit_class.name} skipped")
                continue
            origin = getattr(anchors.get(rule.anchor_class), rule.anchor_end)
            segments.append(ClassifiedSegment(rule.emit_class, origin, top))
    return segments


def _match(
    rules: List[_VerticalRule], anchors: AnchorTable, point: Cartesian,
) -> Optional[_VerticalRule]:
    for rule in rules:
        if point == getattr(anchors.get(rule.match_class), rule.match_end):
            return rule
    return None


def upper_image_intercept(p1: Cartesian, p2: Cartesian) -> Optional[Cartesian]:
    """
    Where the line through p1 and p2 reaches y = 0, from y = mx + c.

    The run carries a +1 so a perfectly vertical line still has a finite
    slope. Returns None when the slope is zero or the run is still zero.
    """
    run = p2.x - p1.x + 1
    if run == 0:
        return None
    m = (p2.y - p1.y) / run
    if m == 0:
        return None
    c = p1.y - m * p1.x
    return Cartesian(int((0 - c) / m), 0)
