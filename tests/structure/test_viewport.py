"""
Tests for cursor navigation and scrolling.

The cursor always moves first; the offset follows only as far as needed to
keep the cursor inside [offset, offset + height).
"""

from schematree.structure import ViewportCursor


def assert_cursor_visible(viewport: ViewportCursor, total: int) -> None:
    assert 0 <= viewport.cursor < total
    if viewport.height > 0:
        assert viewport.offset <= viewport.cursor < viewport.offset + viewport.height


class TestLineMovement:
    """Test single-step movement."""

    def test_move_down_scrolls_minimally(self):
        viewport = ViewportCursor(height=3)
        for _ in range(4):
            viewport.move_down(10)

        assert viewport.cursor == 4
        assert viewport.offset == 2

    def test_move_down_stops_at_last_node(self):
        viewport = ViewportCursor(height=3)
        for _ in range(20):
            viewport.move_down(5)

        assert viewport.cursor == 4
        assert viewport.offset == 2

    def test_move_up_stops_at_first_node(self):
        viewport = ViewportCursor(height=3, cursor=1)
        viewport.move_up(10)
        viewport.move_up(10)

        assert viewport.cursor == 0
        assert viewport.offset == 0

    def test_move_up_scrolls_when_leaving_window(self):
        viewport = ViewportCursor(height=3, cursor=5, offset=5)
        viewport.move_up(10)

        assert viewport.cursor == 4
        assert viewport.offset == 4

    def test_move_up_inside_window_keeps_offset(self):
        viewport = ViewportCursor(height=3, cursor=6, offset=4)
        viewport.move_up(10)

        assert viewport.cursor == 5
        assert viewport.offset == 4

    def test_movement_on_empty_tree_is_noop(self):
        viewport = ViewportCursor(height=3)
        viewport.move_down(0)
        viewport.move_up(0)

        assert (viewport.cursor, viewport.offset) == (0, 0)

    def test_unbounded_height_never_scrolls(self):
        viewport = ViewportCursor(height=0)
        for _ in range(7):
            viewport.move_down(10)

        assert viewport.cursor == 7
        assert viewport.offset == 0


class TestPageMovement:
    """Test page-wise movement."""

    def test_page_down_lands_at_bottom_of_window(self):
        viewport = ViewportCursor(height=4)
        viewport.move_page_down(20)

        assert viewport.cursor == 4
        assert viewport.offset == 1
        assert_cursor_visible(viewport, 20)

    def test_page_down_clamps_to_last_node(self):
        viewport = ViewportCursor(height=4, cursor=8, offset=5)
        viewport.move_page_down(10)

        assert viewport.cursor == 9
        assert viewport.offset == 6

    def test_page_up_lands_at_top_of_window(self):
        viewport = ViewportCursor(height=4, cursor=9, offset=6)
        viewport.move_page_up(10)

        assert viewport.cursor == 5
        assert viewport.offset == 5

    def test_page_up_clamps_to_first_node(self):
        viewport = ViewportCursor(height=4, cursor=2, offset=0)
        viewport.move_page_up(10)

        assert viewport.cursor == 0
        assert viewport.offset == 0

    def test_page_moves_fall_back_to_single_steps_without_height(self):
        viewport = ViewportCursor(height=0)
        viewport.move_page_down(10)
        assert viewport.cursor == 1

        viewport.move_page_up(10)
        assert viewport.cursor == 0


class TestClamp:
    """Test normalization after the content or window size changed."""

    def test_clamp_after_content_shrinks(self):
        viewport = ViewportCursor(height=3, cursor=9, offset=7)
        viewport.clamp(5)

        assert viewport.cursor == 4
        assert viewport.offset == 2
        assert_cursor_visible(viewport, 5)

    def test_clamp_after_window_shrinks(self):
        viewport = ViewportCursor(height=10, cursor=8, offset=0)
        viewport.set_height(3)
        viewport.clamp(20)

        assert viewport.offset == 6
        assert_cursor_visible(viewport, 20)

    def test_clamp_pulls_offset_back_to_last_full_window(self):
        viewport = ViewportCursor(height=3, cursor=9, offset=9)
        viewport.clamp(10)

        assert viewport.offset == 7
        assert viewport.cursor == 9

    def test_clamp_fixes_negative_values(self):
        viewport = ViewportCursor(height=3, cursor=-2, offset=-1)
        viewport.clamp(10)

        assert (viewport.cursor, viewport.offset) == (0, 0)

    def test_clamp_empty_resets(self):
        viewport = ViewportCursor(height=3, cursor=4, offset=2)
        viewport.clamp(0)

        assert (viewport.cursor, viewport.offset) == (0, 0)

    def test_negative_height_is_treated_as_zero(self):
        viewport = ViewportCursor(height=-4)
        assert viewport.height == 0

        viewport.set_height(-1)
        assert viewport.height == 0

    def test_every_sequence_keeps_cursor_visible(self):
        viewport = ViewportCursor(height=4)
        moves = ["down"] * 7 + ["page_down", "up", "page_up", "page_down"] * 3
        for move in moves:
            if move == "down":
                viewport.move_down(15)
            elif move == "up":
                viewport.move_up(15)
            elif move == "page_down":
                viewport.move_page_down(15)
            else:
                viewport.move_page_up(15)
            assert_cursor_visible(viewport, 15)
