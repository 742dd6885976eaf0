"""Path commands as a closed family of immutable value types.

Every command kind is its own class. A point field exists only on the
kinds for which it is meaningful, so asking a line for its control point
raises AttributeError instead of returning stale data.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import ClassVar, Dict, Iterable, Tuple, Type

from avpath.common import COMMAND_INFO, CommandKind
from avpath.geom import AvVec2

###############################################################################
# AvCommand
###############################################################################


@dataclass(frozen=True)
class AvCommand:
    """Base class of all path commands.

    Subclasses declare their points as dataclass fields in flattening order
    (control points first, endpoint last).
    """

    kind: ClassVar[CommandKind]

    @property
    def arity(self) -> int:
        """Number of points this command carries."""
        return COMMAND_INFO[self.kind].consumes_points

    @property
    def points(self) -> Tuple[AvVec2, ...]:
        """The points of this command in flattening order."""
        return tuple(getattr(self, f.name) for f in fields(self))

    @classmethod
    def from_points(cls, points: Iterable[AvVec2]) -> AvCommand:
        """Create a command of this kind from its points in flattening order.

        Args:
            points: control point(s) followed by the endpoint.

        Raises:
            ValueError: If the number of points does not match the command kind.
        """
        points = tuple(points)
        expected = COMMAND_INFO[cls.kind].consumes_points
        if len(points) != expected:
            raise ValueError(f"{cls.kind.name} command needs {expected} point(s), got {len(points)}")
        return cls(*points)


@dataclass(frozen=True)
class AvMoveTo(AvCommand):
    """Start the path at _endpoint_."""

    kind: ClassVar[CommandKind] = CommandKind.MOVE

    endpoint: AvVec2


@dataclass(frozen=True)
class AvLineTo(AvCommand):
    """Straight line from the current point to _endpoint_."""

    kind: ClassVar[CommandKind] = CommandKind.LINE

    endpoint: AvVec2


@dataclass(frozen=True)
class AvQuadraticTo(AvCommand):
    """Quadratic Bezier curve from the current point to _endpoint_."""

    kind: ClassVar[CommandKind] = CommandKind.QUADRATIC

    control: AvVec2
    endpoint: AvVec2

    @property
    def control1(self) -> AvVec2:
        """Alias of _control_, shared accessor name with AvCubicTo."""
        return self.control


@dataclass(frozen=True)
class AvCubicTo(AvCommand):
    """Cubic Bezier curve from the current point to _endpoint_."""

    kind: ClassVar[CommandKind] = CommandKind.CUBIC

    control1: AvVec2
    control2: AvVec2
    endpoint: AvVec2


@dataclass(frozen=True)
class AvClose(AvCommand):
    """Close the path with a line back to its first point."""

    kind: ClassVar[CommandKind] = CommandKind.CLOSE


_COMMAND_TYPES: Dict[CommandKind, Type[AvCommand]] = {
    cls.kind: cls for cls in (AvMoveTo, AvLineTo, AvQuadraticTo, AvCubicTo, AvClose)
}


def make_command(kind: CommandKind, *points: AvVec2) -> AvCommand:
    """Create the command of the given _kind_ from its points.

    Example:
        make_command(CommandKind.CUBIC, c1, c2, p) == AvCubicTo(c1, c2, p)

    Raises:
        ValueError: If the number of points does not match _kind_.
    """
    return _COMMAND_TYPES[kind].from_points(points)
