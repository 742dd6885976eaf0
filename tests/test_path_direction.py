"""Test winding direction of AvPath2."""

import pytest

from avpath.command import AvClose, AvLineTo, AvMoveTo
from avpath.common import Direction
from avpath.errors import InvalidCommandSequenceError
from avpath.geom import AvVec2
from avpath.path import AvPath2, AvPath2f, AvPath2i


def make_polyline(path_cls, coords, close=False):
    """Build a path through the given coordinates."""
    path = path_cls()
    for coord in coords:
        path.line_to(coord)
    if close:
        path.close()
    return path


class TestAvPath2Direction:
    """Test direction() on lines, curves and degenerate paths."""

    def test_square_clockwise(self):
        """(0,0)->(10,0)->(10,10)->(0,10)->(0,0) is clockwise (y down)."""
        path = make_polyline(AvPath2, [(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)])

        assert path.size == 6
        assert path.direction() is Direction.CLOCKWISE

    def test_square_counter_clockwise(self):
        """(0,0)->(0,10)->(10,10)->(10,0)->(0,0) is counter-clockwise."""
        path = make_polyline(AvPath2, [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)])

        assert path.direction() is Direction.COUNTER_CLOCKWISE

    @pytest.mark.parametrize("path_cls", [AvPath2, AvPath2i, AvPath2f])
    def test_direction_for_all_numeric_types(self, path_cls):
        """Direction does not depend on the coordinate type."""
        triangle = [(1, 1), (9, 2), (4, 8)]
        path = make_polyline(path_cls, triangle, close=True)

        assert path.direction() is Direction.CLOCKWISE
        assert path.reversed().direction() is Direction.COUNTER_CLOCKWISE

    def test_empty_path_undefined(self):
        """An empty path has no direction."""
        assert AvPath2().direction() is Direction.UNDEFINED

    def test_single_move_undefined(self):
        """A single MOVE has no direction."""
        path = AvPath2()
        path.move_to(3, 3)

        assert path.direction() is Direction.UNDEFINED

    def test_two_commands_undefined(self):
        """Fewer than 3 commands have no direction."""
        path = make_polyline(AvPath2, [(0, 0), (5, 5)])

        assert path.direction() is Direction.UNDEFINED

    def test_collinear_is_clockwise(self):
        """A zero area sum counts as clockwise."""
        path = make_polyline(AvPath2, [(0, 0), (5, 5), (10, 10)])

        assert path.direction() is Direction.CLOCKWISE

    def test_open_path_uses_anchor_chain_only(self):
        """Without CLOSE no closing edge is added."""
        path = make_polyline(AvPath2, [(0, 0), (0, 10), (10, 10)])

        # (0,0)x(0,10) = 0, (0,10)x(10,10) = -100
        assert path.direction() is Direction.COUNTER_CLOCKWISE

    def test_close_uses_previous_anchor_and_first_point(self):
        """The CLOSE pair crosses the last anchor with the first point."""
        path = make_polyline(AvPath2, [(1, 0), (3, 0), (2, 2)], close=True)

        # (1,0)x(3,0)=0, (3,0)x(2,2)=6, (2,2)x(1,0)=-2 -> 4
        assert path.direction() is Direction.CLOCKWISE

    def test_curves_use_chords(self):
        """Control points are ignored, only curve endpoints count."""
        path = AvPath2()
        path.move_to(0, 0)
        # control points far on the other side do not flip the result
        path.quadratic_to(100, -500, 10, 0)
        path.cubic_to(-400, 300, 500, 900, 10, 10)
        path.line_to(0, 10)
        path.close()

        assert path.direction() is Direction.CLOCKWISE

    def test_move_after_first_command_raises(self):
        """A MOVE in the middle of a path is a broken sequence."""
        path = AvPath2([AvMoveTo(AvVec2(0, 0)), AvLineTo(AvVec2(1, 0)), AvMoveTo(AvVec2(1, 1))])

        with pytest.raises(InvalidCommandSequenceError, match="Unexpected MOVE command at index 2"):
            path.direction()

    def test_close_after_close_raises(self):
        """A CLOSE has no anchor point to continue from."""
        path = AvPath2([AvMoveTo(AvVec2(0, 0)), AvClose(), AvClose()])

        with pytest.raises(InvalidCommandSequenceError, match="has no anchor point"):
            path.direction()

    def test_direction_does_not_modify_path(self):
        """direction() is a pure query."""
        path = make_polyline(AvPath2, [(0, 0), (10, 0), (10, 10)], close=True)
        before = path.copy()
        path.direction()

        assert path == before


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
