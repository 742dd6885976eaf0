"""Central module containing constants and definitions for 2D path handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, TypeVar, Union

import numpy as np

###############################################################################
# Types
###############################################################################


# Numeric coordinate type of points and paths (int, float32 or float64)
T = TypeVar("T", int, float, np.integer, np.floating)

Scalar = Union[int, float, np.integer, np.floating]


###############################################################################
# Enums and Consts
###############################################################################


class CommandKind(Enum):
    """Enum to define the kind of a path command."""

    # MoveTo (1 point) - start the path at point
    MOVE = auto()
    # LineTo (1 point) - straight line from the current point to point
    LINE = auto()
    # Quadratic Bezier To (2 points) - one control point and an endpoint
    QUADRATIC = auto()
    # Cubic Bezier To (3 points) - two control points and an endpoint
    CUBIC = auto()
    # ClosePath (0 points) - line back to the start point
    CLOSE = auto()


class Direction(Enum):
    """Enum to define the winding direction of a path."""

    UNDEFINED = auto()
    CLOCKWISE = auto()
    COUNTER_CLOCKWISE = auto()


@dataclass(frozen=True)
class CommandInfo:
    """Metadata for path commands.

    Attributes:
        consumes_points: Number of points this command carries
        is_curve: Whether this command represents a curve
        has_endpoint: Whether this command ends in an anchor point
    """

    consumes_points: int
    is_curve: bool
    has_endpoint: bool = True


# Command registry with metadata
COMMAND_INFO: Dict[CommandKind, CommandInfo] = {
    CommandKind.MOVE: CommandInfo(1, False),
    CommandKind.LINE: CommandInfo(1, False),
    CommandKind.QUADRATIC: CommandInfo(2, True),
    CommandKind.CUBIC: CommandInfo(3, True),
    CommandKind.CLOSE: CommandInfo(0, False, False),
}

# Fewer commands than this cannot enclose an area
MIN_DIRECTION_COMMANDS: int = 3
