"""
Classified line segments and the aggregate classification result.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional

from .geometry import Cartesian


class LineClass(Enum):
    UNKNOWN             = "unknown"
    BASE_LINE           = "base_line"
    INNER_BASE_LINE     = "inner_base_line"     # base line between singles sidelines
    SERVICE_LINE        = "service_line"
    SERVICE_LINE_HALF   = "service_line_half"   # service line up to the centre line
    CENTRE_SERVICE_LINE = "centre_service_line"
    SINGLES_SIDELINE    = "singles_sideline"
    DOUBLES_SIDELINE    = "doubles_sideline"

    @property
    def is_internal(self) -> bool:
        return self in _INTERNAL_CLASSES


_INTERNAL_CLASSES = frozenset({
    LineClass.UNKNOWN, LineClass.INNER_BASE_LINE, LineClass.SERVICE_LINE_HALF,
})


@dataclass(frozen=True)
class ClassifiedSegment:
    """A line segment between two image points with its court role."""
    line_class: LineClass
    origin: Cartesian
    destination: Cartesian

    @property
    def midpoint(self) -> Cartesian:
        return self.origin.midpoint(self.destination)

    def to_row(self) -> List:
        return [self.line_class.name,
                self.origin.x, self.origin.y,
                self.destination.x, self.destination.y]

    def to_dict(self) -> dict:
        return {
            "class": self.line_class.name,
            "origin": [self.origin.x, self.origin.y],
            "destination": [self.destination.x, self.destination.y],
        }


class AnchorTable:
    """
    Horizontal segments indexed by class, used to classify vertical lines.

    The first segment seen for a class wins. A class that was never
    classified has no anchor: `get` returns None rather than a zero segment.
    """

    def __init__(self, segments: List[ClassifiedSegment]):
        self._by_class: Dict[LineClass, ClassifiedSegment] = {}
        for seg in segments:
            self._by_class.setdefault(seg.line_class, seg)

    def get(self, line_class: LineClass) -> Optional[ClassifiedSegment]:
        return self._by_class.get(line_class)

    def __contains__(self, line_class: LineClass) -> bool:
        return line_class in self._by_class

    def missing(self, *classes: LineClass) -> List[LineClass]:
        return [c for c in classes if c not in self._by_class]


@dataclass
class CourtLines:
    """Every segment produced by one classification pass."""
    segments: List[ClassifiedSegment] = field(default_factory=list)

    def final(self) -> List[ClassifiedSegment]:
        """Segments with a user-facing class only."""
        return [s for s in self.segments if not s.line_class.is_internal]

    def of_class(self, line_class: LineClass) -> List[ClassifiedSegment]:
        return [s for s in self.segments if s.line_class == line_class]

    def counts(self) -> Dict[str, int]:
        out: Dict[str, int] = {}
        for s in self.segments:
            out[s.line_class.name] = out.get(s.line_class.name, 0) + 1
        return out

    def summary(self) -> str:
        parts = []
        for seg in self.segments:
            parts.append(f"  {seg.line_class.name:<20}"
                         f" ({seg.origin.x}, {seg.origin.y})"
                         f" -> ({seg.destination.x}, {seg.destination.y})")
        return "\n".join(parts) if parts else "  (no lines classified)"

    def __len__(self) -> int:
        return len(self.segments)

    def to_dict(self) -> dict:
        return {
            "segments": [s.to_dict() for s in self.final()],
            "counts": {k: v for k, v in self.counts().items()
                       if not LineClass[k].is_internal},
        }
