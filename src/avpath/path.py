"""2D path built from drawing commands, with bounds, winding direction and reversal."""

from __future__ import annotations

import copy
import logging
from typing import ClassVar, Generic, Iterable, Iterator, List, Optional, Union

import numpy as np

from avpath.command import (
    AvClose,
    AvCommand,
    AvCubicTo,
    AvLineTo,
    AvMoveTo,
    AvQuadraticTo,
    make_command,
)
from avpath.common import COMMAND_INFO, MIN_DIRECTION_COMMANDS, CommandKind, Direction, Scalar, T
from avpath.errors import EmptyPathError, InvalidCommandSequenceError
from avpath.geom import AvRect, AvVec2

logger = logging.getLogger(__name__)

# A point argument: AvVec2 or any (x, y) pair
PointLike = Union[AvVec2, Iterable[Scalar]]


###############################################################################
# AvPath2
###############################################################################


class AvPath2(Generic[T]):
    """Single 2D subpath represented by an ordered list of commands.

    The path is built with move_to / line_to / quadratic_to / cubic_to / close,
    which keep the following structure:
        - a non-empty path starts with a MOVE command,
        - move_to starts over, i.e. there is exactly one subpath,
        - a segment ending at the first point closes the path automatically,
        - a CLOSE command is never followed by another CLOSE.

    A path created from an explicit command list (constructor or set()) is
    taken verbatim without any validation; use validate() to check it.

    Coordinates passed to the building methods are converted to the numeric
    type given by the class attribute _dtype_.
    """

    dtype: ClassVar[np.dtype] = np.dtype(np.float64)

    def __init__(self, commands: Optional[Iterable[AvCommand]] = None):
        """
        Initialize an AvPath2, either empty or from the given commands.

        Args:
            commands: Commands to store as they are.
        """
        self._commands: List[AvCommand] = [] if commands is None else list(commands)

    ###########################################################################
    # Mutators
    ###########################################################################

    def set(self, commands: Iterable[AvCommand]) -> None:
        """Replace all commands by the given ones (no validation)."""
        self._commands[:] = list(commands)

    def reset(self) -> None:
        """Remove all commands."""
        self._commands.clear()

    ###########################################################################
    # Attributes
    ###########################################################################

    @property
    def commands(self) -> List[AvCommand]:
        """
        The commands of this path.

        This is the live list, changes to it change the path.
        """
        return self._commands

    @property
    def empty(self) -> bool:
        """True if the path has no commands."""
        return not self._commands

    @property
    def size(self) -> int:
        """Number of commands."""
        return len(self._commands)

    @property
    def is_closed(self) -> bool:
        """True if the last command is a CLOSE command."""
        return bool(self._commands) and self._commands[-1].kind is CommandKind.CLOSE

    @property
    def first_point(self) -> AvVec2:
        """The endpoint of the first command, i.e. the start of the path."""
        return self.front().endpoint

    def points(self) -> List[AvVec2]:
        """
        Return all points of all commands in drawing order.

        MOVE and LINE contribute their endpoint, QUADRATIC its control point
        and endpoint, CUBIC both control points and endpoint, CLOSE nothing.
        """
        return [point for command in self._commands for point in command.points]

    def bounds(self) -> AvRect:
        """
        Return the axis-aligned rectangle around all points of the path.

        Control points of curves are included, so for curved paths the result
        may be larger than the tightest box around the drawn outline.
        A path without any point gives a rectangle of size 0 at the origin.
        """
        points = self.points()

        # No points, so bounding box is set to size 0.
        if not points:
            zero = self.dtype.type(0)
            return AvRect(AvVec2(zero, zero), AvVec2(zero, zero))

        coords = np.array([tuple(point) for point in points], dtype=self.dtype)
        x_min, y_min = coords.min(axis=0)
        x_max, y_max = coords.max(axis=0)
        return AvRect(AvVec2(x_min, y_min), AvVec2(x_max, y_max))

    ###########################################################################
    # Adding commands
    ###########################################################################

    def close(self) -> None:
        """
        Close the path unless it is closed already.

        Raises:
            EmptyPathError: If the path has no commands.
        """
        if not self._commands:
            raise EmptyPathError("Cannot close an empty path")
        if self._commands[-1].kind is not CommandKind.CLOSE:
            self._commands.append(AvClose())

    def move_to(self, *args: Union[PointLike, Scalar]) -> None:
        """
        Start the path at the given point, dropping all existing commands.

        Accepts move_to(point) or move_to(x, y).
        """
        (point,) = self._parse_points(1, args, "move_to")
        self._move_to(point)

    def line_to(self, *args: Union[PointLike, Scalar]) -> None:
        """
        Draw a line to the given point.

        Accepts line_to(point) or line_to(x, y).
        On an empty path this is a move_to.
        """
        (point,) = self._parse_points(1, args, "line_to")
        if not self._commands:
            self._move_to(point)
        else:
            self._append_segment(AvLineTo(point))

    def quadratic_to(self, *args: Union[PointLike, Scalar]) -> None:
        """
        Draw a quadratic Bezier curve to the given point.

        Accepts quadratic_to(control, point) or quadratic_to(cx, cy, x, y).
        On an empty path this is a move_to(point) and the control point is dropped.
        """
        control, point = self._parse_points(2, args, "quadratic_to")
        if not self._commands:
            logger.debug("quadratic_to on an empty path, moving to %s and dropping control %s", point, control)
            self._move_to(point)
        else:
            self._append_segment(AvQuadraticTo(control, point))

    def cubic_to(self, *args: Union[PointLike, Scalar]) -> None:
        """
        Draw a cubic Bezier curve to the given point.

        Accepts cubic_to(control1, control2, point) or cubic_to(cx1, cy1, cx2, cy2, x, y).
        On an empty path this is a move_to(point) and both control points are dropped.
        """
        control1, control2, point = self._parse_points(3, args, "cubic_to")
        if not self._commands:
            logger.debug(
                "cubic_to on an empty path, moving to %s and dropping controls %s, %s", point, control1, control2
            )
            self._move_to(point)
        else:
            self._append_segment(AvCubicTo(control1, control2, point))

    def _move_to(self, point: AvVec2) -> None:
        if self._commands:
            logger.debug("move_to discards %d existing command(s)", len(self._commands))
        self._commands.clear()
        self._commands.append(AvMoveTo(point))

    def _append_segment(self, command: AvCommand) -> None:
        """Append a drawing command and close the path if it returns to the start."""
        self._commands.append(command)
        if command.endpoint == getattr(self._commands[0], "endpoint", None):
            self.close()

    def _parse_points(self, count: int, args: tuple, name: str) -> List[AvVec2]:
        """Convert _args_ into _count_ points of this path's numeric type.

        _args_ is either _count_ point-likes or 2 * _count_ scalar coordinates.
        """
        scalar = self.dtype.type
        if len(args) == count:
            pairs = [tuple(arg) for arg in args]
        elif len(args) == 2 * count:
            pairs = [(args[2 * i], args[2 * i + 1]) for i in range(count)]
        else:
            raise TypeError(f"{name}() takes {count} point(s) or {2 * count} coordinates, got {len(args)} argument(s)")

        points = []
        for pair in pairs:
            if len(pair) != 2:
                raise TypeError(f"{name}() expects (x, y) pairs, got {pair!r}")
            points.append(AvVec2(scalar(pair[0]), scalar(pair[1])))
        return points

    ###########################################################################
    # Direction
    ###########################################################################

    def direction(self) -> Direction:
        """
        Return the winding direction of the path.

        The signed area is summed over the anchor points of all commands.
        Curves count as the straight line between their anchors, CLOSE as
        the line back to the first point. A negative sum is counter-clockwise,
        everything else (degenerate paths included) clockwise. In a y-down
        (screen) coordinate system this matches the visual orientation.

        Returns:
            Direction: UNDEFINED for paths with less than 3 commands.

        Raises:
            InvalidCommandSequenceError: If a MOVE command follows the first
                command, or if a needed anchor point is missing.
        """
        if len(self._commands) < MIN_DIRECTION_COMMANDS:
            return Direction.UNDEFINED

        starts = []
        ends = []
        for index in range(1, len(self._commands)):
            kind = self._commands[index].kind
            if kind in (CommandKind.LINE, CommandKind.QUADRATIC, CommandKind.CUBIC):
                end = self._commands[index].endpoint
            elif kind is CommandKind.CLOSE:
                end = self._anchor(0)
            else:
                raise InvalidCommandSequenceError(f"Unexpected {kind.name} command at index {index}")
            starts.append(tuple(self._anchor(index - 1)))
            ends.append(tuple(end))

        start_coords = np.array(starts, dtype=self.dtype)
        end_coords = np.array(ends, dtype=self.dtype)
        cross = start_coords[:, 0] * end_coords[:, 1] - start_coords[:, 1] * end_coords[:, 0]
        if cross.sum() < 0:
            return Direction.COUNTER_CLOCKWISE
        return Direction.CLOCKWISE

    def _anchor(self, index: int) -> AvVec2:
        """Return the endpoint of the command at _index_."""
        command = self._commands[index]
        if not COMMAND_INFO[command.kind].has_endpoint:
            raise InvalidCommandSequenceError(f"{command.kind.name} command at index {index} has no anchor point")
        return command.endpoint

    ###########################################################################
    # Reversal
    ###########################################################################

    def reverse(self) -> AvPath2[T]:
        """Reverse the drawing direction of this path in place.

        The same outline is traced backwards: the path still starts with its
        MOVE command and, if it was closed, still ends with CLOSE. Curves keep
        their shape as their control points are swapped accordingly.

        Returns:
            AvPath2: this path

        Raises:
            InvalidCommandSequenceError: If a command carries a number of
                points different from what its kind requires.
        """
        if not self._commands:
            logger.debug("reverse on an empty path, nothing to do")
            return self

        stream = self.points()
        kinds = [command.kind for command in self._commands]

        # Keep the leading MOVE (and a trailing CLOSE) in place
        stop = len(kinds) - 1 if kinds[-1] is CommandKind.CLOSE else len(kinds)
        kinds[1:stop] = kinds[1:stop][::-1]
        stream.reverse()

        commands = []
        consumed = 0
        for index, kind in enumerate(kinds):
            arity = COMMAND_INFO[kind].consumes_points
            chunk = stream[consumed : consumed + arity]
            if len(chunk) != arity:
                raise InvalidCommandSequenceError(
                    f"{kind.name} command at index {index} needs {arity} point(s), "
                    f"only {len(chunk)} left of {len(stream)}"
                )
            commands.append(make_command(kind, *chunk))
            consumed += arity

        if consumed != len(stream):
            raise InvalidCommandSequenceError(
                f"Number of points ({len(stream)}) does not match commands (requires {consumed} points)"
            )

        self._commands[:] = commands
        return self

    def reversed(self) -> AvPath2[T]:
        """Return a reversed copy of this path, leaving this path unchanged."""
        return self.copy().reverse()

    ###########################################################################
    # Validation
    ###########################################################################

    def validate(self) -> None:
        """Check the structure the building methods guarantee.

        Raises:
            InvalidCommandSequenceError: If the path does not start with MOVE,
                contains a further MOVE, has CLOSE before its last command, or
                a command carries the wrong number of points.
        """
        last = len(self._commands) - 1
        for index, command in enumerate(self._commands):
            kind = command.kind
            if index == 0 and kind is not CommandKind.MOVE:
                raise InvalidCommandSequenceError(f"Path must start with MOVE, got {kind.name}")
            if index > 0 and kind is CommandKind.MOVE:
                raise InvalidCommandSequenceError(f"Only one subpath is supported (found MOVE at index {index})")
            if kind is CommandKind.CLOSE and index != last:
                raise InvalidCommandSequenceError(f"CLOSE must terminate the path (found CLOSE at index {index})")
            if len(command.points) != COMMAND_INFO[kind].consumes_points:
                raise InvalidCommandSequenceError(
                    f"{kind.name} command at index {index} carries {len(command.points)} point(s), "
                    f"expected {COMMAND_INFO[kind].consumes_points}"
                )

    ###########################################################################
    # Element access and iteration
    ###########################################################################

    def at(self, index: int) -> AvCommand:
        """Return the command at _index_ (IndexError if out of range)."""
        return self._commands[index]

    def front(self) -> AvCommand:
        """Return the first command."""
        if not self._commands:
            raise EmptyPathError("Empty path has no first command")
        return self._commands[0]

    def back(self) -> AvCommand:
        """Return the last command."""
        if not self._commands:
            raise EmptyPathError("Empty path has no last command")
        return self._commands[-1]

    def __getitem__(self, index: int) -> AvCommand:
        return self._commands[index]

    def __setitem__(self, index: int, command: AvCommand) -> None:
        self._commands[index] = command

    def __iter__(self) -> Iterator[AvCommand]:
        return iter(self._commands)

    def __reversed__(self) -> Iterator[AvCommand]:
        return reversed(self._commands)

    def __len__(self) -> int:
        return len(self._commands)

    def __bool__(self) -> bool:
        return bool(self._commands)

    ###########################################################################
    # Comparison and copying
    ###########################################################################

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvPath2):
            return NotImplemented
        return self._commands == other._commands

    __hash__ = None  # mutable

    def copy(self) -> AvPath2[T]:
        """Return a copy with its own command list."""
        return type(self)(self._commands)

    def __copy__(self) -> AvPath2[T]:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> AvPath2[T]:
        return type(self)(copy.deepcopy(self._commands, memo))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._commands!r})"


class AvPath2i(AvPath2[np.int64]):
    """AvPath2 with integer coordinates."""

    dtype: ClassVar[np.dtype] = np.dtype(np.int64)


class AvPath2f(AvPath2[np.float32]):
    """AvPath2 with single precision coordinates."""

    dtype: ClassVar[np.dtype] = np.dtype(np.float32)


class AvPath2d(AvPath2[np.float64]):
    """AvPath2 with double precision coordinates."""

    dtype: ClassVar[np.dtype] = np.dtype(np.float64)
